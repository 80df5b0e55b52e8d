"""
MerkleTree - object wrapper around the functional tree engine.

Conceptual Background:
---------------------
A Merkle tree commits to an ordered list of digests with a single hash (the
root), while allowing compact proofs that a given digest is one of the leaves.

This class pins a leaf list and a digest function together so callers don't
have to thread them through every call:
- Leaves are fixed at construction (stored as a tuple)
- Levels are computed lazily and cached per instance
- Proofs are plain values; verifying one never touches the cached levels

Properties:
----------
- Build: O(n)
- Root: O(1) after the first build (cached)
- Prove: O(n) (builds the tree), proof size O(log n)
- Verify: O(log n)
"""

from typing import Iterable, List, Optional, Sequence

from merklekit.core.tree.builder import build_root, build_tree
from merklekit.core.tree.proof import Proof, ProofNode, check_proof, generate_proof
from merklekit.crypto import DigestFunction, hash_leaf, sha256_hex


# =============================================================================
# Merkle Tree
# =============================================================================


class MerkleTree:
    """
    Immutable binary Merkle tree over hex digests.

    Attributes:
        leaves: Tuple of leaf digests
        digest_fn: Digest function used for pair hashing
    """

    def __init__(self, leaves: Iterable[str] = (), digest_fn: DigestFunction = sha256_hex):
        self.leaves = tuple(leaves)
        self.digest_fn = digest_fn
        self._levels: Optional[List[List[str]]] = None

    @classmethod
    def from_values(
        cls,
        values: Iterable[str],
        normalize: bool = False,
        digest_fn: DigestFunction = sha256_hex,
    ) -> "MerkleTree":
        """
        Build a tree whose leaves are the digests of raw values.

        Args:
            values: Raw text values (e.g. addresses)
            normalize: Lowercase each value before hashing
            digest_fn: Digest function for both leaves and nodes
        """
        leaves = [hash_leaf(v, normalize=normalize, digest_fn=digest_fn) for v in values]
        return cls(leaves, digest_fn=digest_fn)

    @property
    def levels(self) -> List[List[str]]:
        """All levels, leaves first. Returns copies; the cache stays private."""
        if self._levels is None:
            self._levels = build_tree(self.leaves, self.digest_fn)
        return [list(level) for level in self._levels]

    @property
    def depth(self) -> int:
        """Number of hashing steps from a leaf to the root (0 when empty)."""
        return max(len(self.levels) - 1, 0)

    def root(self) -> str:
        """
        Get the Merkle root.

        Raises:
            EmptyInputError: If the tree has no leaves
        """
        if self._levels:
            return self._levels[-1][0]
        return build_root(self.leaves, self.digest_fn)

    def prove(self, target: str) -> Optional[Proof]:
        """Generate an inclusion proof for target, or None if it isn't a leaf."""
        return generate_proof(target, self.leaves, self.digest_fn)

    def verify(self, proof: Sequence[ProofNode]) -> bool:
        """Check a proof against this tree's root."""
        if not self.leaves:
            return False
        return check_proof(proof, self.root(), self.digest_fn)

    def leaf_index(self, target: str) -> Optional[int]:
        """Index of the first occurrence of target, or None."""
        try:
            return self.leaves.index(target)
        except ValueError:
            return None

    def get_leaf(self, index: int) -> str:
        """Get leaf at index."""
        return self.leaves[index]

    def __len__(self) -> int:
        return len(self.leaves)

    def __contains__(self, leaf: str) -> bool:
        return leaf in self.leaves
