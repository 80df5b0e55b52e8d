"""
Hashing primitives for MerkleKit.

This module provides:
- Raw hashing functions (SHA-256, double SHA-256, Keccak-256)
- Hex digest variants used by the tree engine
- Pair and leaf hashing helpers
- Address format check

Design Notes:
-------------
Tree nodes are hex strings, and a parent is the digest of the *string*
concatenation of its two children (left first), encoded as UTF-8. We never
decode the children back to bytes before hashing, so a tree built here matches
one built by any caller that hashes "left + right" text.

SHA-256 is the default. Keccak-256 is offered for EVM-style address lists,
double SHA-256 for Bitcoin-style conventions.
"""

import hashlib
from typing import Callable, Dict

from Crypto.Hash import keccak

from merklekit.core.tree.errors import UnknownAlgorithmError


# Signature of every digest function the engine accepts
DigestFunction = Callable[[bytes], str]


# =============================================================================
# Hashing
# =============================================================================


def sha256(data: bytes) -> bytes:
    """
    Compute SHA-256 hash.

    Used for: leaf hashing, Merkle nodes (default algorithm).
    """
    return hashlib.sha256(data).digest()


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash (Ethereum-style).

    Used for: trees whose leaves come from EVM tooling.
    """
    k = keccak.new(digest_bits=256)
    k.update(data)
    return k.digest()


def double_sha256(data: bytes) -> bytes:
    """
    Compute SHA-256(SHA-256(data)).

    Used for: Bitcoin-style trees.
    """
    return sha256(sha256(data))


def sha256_hex(data: bytes) -> str:
    """SHA-256 as a lowercase hex digest."""
    return sha256(data).hex()


def keccak256_hex(data: bytes) -> str:
    """Keccak-256 as a lowercase hex digest."""
    return keccak256(data).hex()


def double_sha256_hex(data: bytes) -> str:
    """Double SHA-256 as a lowercase hex digest."""
    return double_sha256(data).hex()


DIGEST_FUNCTIONS: Dict[str, DigestFunction] = {
    "sha256": sha256_hex,
    "double_sha256": double_sha256_hex,
    "keccak256": keccak256_hex,
}


def get_digest_function(name: str) -> DigestFunction:
    """
    Look up a hex digest function by algorithm name.

    Args:
        name: One of the keys of DIGEST_FUNCTIONS

    Returns:
        The digest function

    Raises:
        UnknownAlgorithmError: If the name is not registered
    """
    try:
        return DIGEST_FUNCTIONS[name]
    except KeyError:
        raise UnknownAlgorithmError(
            f"Unknown hash algorithm '{name}', expected one of {sorted(DIGEST_FUNCTIONS)}"
        ) from None


# =============================================================================
# Node Hashing
# =============================================================================


def hash_pair(left: str, right: str, digest_fn: DigestFunction = sha256_hex) -> str:
    """
    Hash two hex digests into their parent digest.

    The children are concatenated as text (left first) and hashed as UTF-8.
    Order matters: hash_pair(a, b) != hash_pair(b, a) in general.
    """
    return digest_fn((left + right).encode("utf-8"))


def hash_leaf(value: str, normalize: bool = False, digest_fn: DigestFunction = sha256_hex) -> str:
    """
    Hash a raw value (e.g. an address) into a leaf digest.

    Args:
        value: Raw text value
        normalize: Lowercase the value before hashing
        digest_fn: Digest function to use

    Returns:
        Hex digest of the UTF-8 encoded value
    """
    if normalize:
        value = value.lower()
    return digest_fn(value.encode("utf-8"))


# =============================================================================
# Utility Functions
# =============================================================================


def is_valid_address(address: str) -> bool:
    """Check if string is a valid address format."""
    if not address.startswith("0x"):
        return False
    if len(address) != 42:  # 0x + 40 hex chars
        return False
    try:
        int(address, 16)
        return True
    except ValueError:
        return False


__all__ = [
    "DigestFunction",
    "sha256",
    "keccak256",
    "double_sha256",
    "sha256_hex",
    "keccak256_hex",
    "double_sha256_hex",
    "DIGEST_FUNCTIONS",
    "get_digest_function",
    "hash_pair",
    "hash_leaf",
    "is_valid_address",
]
