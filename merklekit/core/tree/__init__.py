"""Merkle tree engine: level reduction, tree building, inclusion proofs"""
from merklekit.core.tree.errors import (
    MerkleError,
    EmptyInputError,
    InvalidProofError,
    UnknownAlgorithmError,
)
from merklekit.core.tree.reducer import pad_level, reduce_level
from merklekit.core.tree.builder import build_root, build_tree
from merklekit.core.tree.proof import (
    Direction,
    ProofNode,
    Proof,
    generate_proof,
    verify_proof,
    check_proof,
    proof_to_dicts,
    proof_from_dicts,
)
from merklekit.core.tree.merkle import MerkleTree

__all__ = [
    "MerkleError",
    "EmptyInputError",
    "InvalidProofError",
    "UnknownAlgorithmError",
    "pad_level",
    "reduce_level",
    "build_root",
    "build_tree",
    "Direction",
    "ProofNode",
    "Proof",
    "generate_proof",
    "verify_proof",
    "check_proof",
    "proof_to_dicts",
    "proof_from_dicts",
    "MerkleTree",
]
