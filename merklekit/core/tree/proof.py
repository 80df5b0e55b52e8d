"""
Inclusion proofs: generation from a leaf list, verification from the proof alone.

Proof Layout:
-------------
A proof is an ordered list of ProofNode from the target leaf up to (but not
including) the root:

    [(target, own_role), (sibling_0, dir_0), (sibling_1, dir_1), ...]

The first node carries the target digest and records whether the target sits
on the LEFT (even index) or RIGHT (odd index) of its pair. That direction is
informational only. For every later node the direction says where the
sibling goes when hashing:

    RIGHT -> H(acc + sibling)
    LEFT  -> H(sibling + acc)

Verification folds those nodes left to right and never needs the tree, so
it costs O(log n) hashes.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Sequence

from merklekit.core.tree.builder import build_tree
from merklekit.core.tree.errors import InvalidProofError
from merklekit.crypto import DigestFunction, hash_pair, sha256_hex
from merklekit.utils.logger import get_logger

logger = get_logger("proof")


# =============================================================================
# Types
# =============================================================================


class Direction(str, Enum):
    """Side a digest occupies when concatenated for hashing."""
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class ProofNode:
    """
    One step of an inclusion proof.

    Attributes:
        digest: Hex digest (the target leaf for the first node, a sibling after)
        direction: Side of the digest in the concatenation
    """
    digest: str
    direction: Direction

    def to_dict(self) -> dict:
        return {"digest": self.digest, "direction": self.direction.value}

    @classmethod
    def from_dict(cls, data: Any) -> "ProofNode":
        """
        Parse a {"digest": ..., "direction": "left"|"right"} mapping.

        Raises:
            InvalidProofError: On missing keys or bad values
        """
        if not isinstance(data, dict):
            raise InvalidProofError(f"Proof node must be an object, got {type(data).__name__}")
        if "digest" not in data or "direction" not in data:
            raise InvalidProofError("Proof node requires 'digest' and 'direction'")

        digest = data["digest"]
        if not isinstance(digest, str) or not digest:
            raise InvalidProofError("Proof node digest must be a non-empty string")

        try:
            direction = Direction(data["direction"])
        except ValueError:
            raise InvalidProofError(
                f"Proof node direction must be 'left' or 'right', got {data['direction']!r}"
            ) from None

        return cls(digest=digest, direction=direction)


Proof = List[ProofNode]


# =============================================================================
# Generation
# =============================================================================


def generate_proof(
    target: Optional[str],
    leaves: Sequence[str],
    digest_fn: DigestFunction = sha256_hex,
) -> Optional[Proof]:
    """
    Build the inclusion proof for a leaf.

    If the target appears more than once, the proof is for its first
    occurrence. Comparison is exact (no case normalization).

    Args:
        target: Leaf digest to prove
        leaves: Ordered leaf digests
        digest_fn: Digest function used for pair hashing

    Returns:
        The proof, or None if target is empty, leaves is empty, or the
        target is not one of the leaves
    """
    if not target or len(leaves) == 0:
        return None

    try:
        index = list(leaves).index(target)
    except ValueError:
        logger.debug(f"Target {target[:16]} not among {len(leaves)} leaves")
        return None

    tree = build_tree(leaves, digest_fn)

    proof: Proof = [
        ProofNode(target, Direction.LEFT if index % 2 == 0 else Direction.RIGHT)
    ]

    for level in tree[:-1]:
        if index % 2 == 0:
            sibling_index = index + 1
            direction = Direction.RIGHT
        else:
            sibling_index = index - 1
            direction = Direction.LEFT

        # Stored levels are padded, so the sibling slot always exists
        proof.append(ProofNode(level[sibling_index], direction))
        index //= 2

    return proof


# =============================================================================
# Verification
# =============================================================================


def verify_proof(proof: Optional[Sequence[ProofNode]], digest_fn: DigestFunction = sha256_hex) -> str:
    """
    Recompute the root committed to by a proof.

    Args:
        proof: Proof as produced by generate_proof
        digest_fn: Digest function used for pair hashing

    Returns:
        Recomputed root digest, or "" for an empty/missing proof
    """
    if not proof:
        return ""

    current = proof[0].digest
    for node in proof[1:]:
        if node.direction == Direction.RIGHT:
            current = hash_pair(current, node.digest, digest_fn)
        else:
            current = hash_pair(node.digest, current, digest_fn)

    return current


def check_proof(
    proof: Optional[Sequence[ProofNode]],
    expected_root: str,
    digest_fn: DigestFunction = sha256_hex,
) -> bool:
    """Return True if the proof is non-empty and recomputes expected_root exactly."""
    if not proof or not expected_root:
        return False
    return verify_proof(proof, digest_fn) == expected_root


# =============================================================================
# Serialization
# =============================================================================


def proof_to_dicts(proof: Sequence[ProofNode]) -> List[dict]:
    """Convert a proof to a JSON-friendly list of {digest, direction}."""
    return [node.to_dict() for node in proof]


def proof_from_dicts(items: Iterable[Any]) -> Proof:
    """
    Parse a list of {digest, direction} mappings into a proof.

    Raises:
        InvalidProofError: If the input is not a list or any entry is malformed
    """
    if not isinstance(items, (list, tuple)):
        raise InvalidProofError(f"Proof must be a list, got {type(items).__name__}")
    return [ProofNode.from_dict(item) for item in items]


__all__ = [
    "Direction",
    "ProofNode",
    "Proof",
    "generate_proof",
    "verify_proof",
    "check_proof",
    "proof_to_dicts",
    "proof_from_dicts",
]
