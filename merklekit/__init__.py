"""
MerkleKit

A small Merkle tree engine over hex-encoded digests:
- Deterministic tree construction with duplicate-last padding
- Inclusion proof generation for a chosen leaf
- Proof verification without rebuilding the tree
- Address allowlist helper and CLI built on top of the engine
"""

from merklekit.core.tree import (
    Direction,
    ProofNode,
    MerkleTree,
    EmptyInputError,
    build_root,
    build_tree,
    generate_proof,
    verify_proof,
    check_proof,
)

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "ProofNode",
    "MerkleTree",
    "EmptyInputError",
    "build_root",
    "build_tree",
    "generate_proof",
    "verify_proof",
    "check_proof",
]
