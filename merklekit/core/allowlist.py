"""
Address allowlist backed by a Merkle tree.

Each address is hashed into a leaf (lowercased first by default, so
"0xABC..." and "0xabc..." map to the same leaf). Membership, proofs and
roots are then answered by the engine, which itself compares digests
exactly.
"""

from typing import Iterable, Optional, Sequence

from merklekit.core.tree.merkle import MerkleTree
from merklekit.core.tree.proof import Proof, ProofNode, check_proof
from merklekit.crypto import DigestFunction, hash_leaf, sha256_hex
from merklekit.utils.logger import get_logger

logger = get_logger("allowlist")


class AddressAllowlist:
    """
    Set of addresses committed to by a single Merkle root.

    Attributes:
        tree: Underlying MerkleTree over hashed addresses
        normalize: Whether addresses are lowercased before hashing
    """

    def __init__(
        self,
        addresses: Iterable[str],
        normalize: bool = True,
        digest_fn: DigestFunction = sha256_hex,
    ):
        self.normalize = normalize
        self.digest_fn = digest_fn
        self.tree = MerkleTree.from_values(addresses, normalize=normalize, digest_fn=digest_fn)
        logger.debug(f"Allowlist built with {len(self.tree)} addresses")

    @classmethod
    def from_hashed(
        cls,
        hashed_leaves: Iterable[str],
        normalize: bool = True,
        digest_fn: DigestFunction = sha256_hex,
    ) -> "AddressAllowlist":
        """Wrap an already-hashed leaf list (e.g. one published alongside a root)."""
        allowlist = cls([], normalize=normalize, digest_fn=digest_fn)
        allowlist.tree = MerkleTree(hashed_leaves, digest_fn=digest_fn)
        return allowlist

    @property
    def root(self) -> str:
        """Merkle root of the allowlist. Raises EmptyInputError when empty."""
        return self.tree.root()

    def leaf_for(self, address: str) -> str:
        """Leaf digest an address maps to."""
        return hash_leaf(address, normalize=self.normalize, digest_fn=self.digest_fn)

    def is_member(self, address: str) -> bool:
        return self.leaf_for(address) in self.tree

    def proof_for(self, address: str) -> Optional[Proof]:
        """Inclusion proof for an address, or None if it isn't listed."""
        return self.tree.prove(self.leaf_for(address))

    def verify_member(
        self,
        address: str,
        proof: Sequence[ProofNode],
        root: Optional[str] = None,
    ) -> bool:
        """
        Check that a proof shows address is committed to by root.

        Args:
            address: Raw address
            proof: Proof whose first node must be the address leaf
            root: Expected root; defaults to this allowlist's root

        Returns:
            True if the proof starts at the address leaf and recomputes root
        """
        if not proof or proof[0].digest != self.leaf_for(address):
            return False
        if root is None:
            if len(self.tree) == 0:
                return False
            root = self.root
        return check_proof(proof, root, self.digest_fn)

    def __len__(self) -> int:
        return len(self.tree)

    def __contains__(self, address: str) -> bool:
        return self.is_member(address)
