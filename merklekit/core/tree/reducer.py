"""
Level reduction: one tree level in, its parent level out.

Padding policy: an odd-length level is paired by duplicating its last
digest (duplicate-last, never zero-fill). Padding always happens on a copy.
"""

from typing import List, Sequence

from merklekit.crypto import DigestFunction, hash_pair, sha256_hex


def pad_level(level: Sequence[str]) -> List[str]:
    """
    Return a copy of the level padded to an even length.

    An odd-length level gets its last digest appended once. Even-length
    and empty levels are copied unchanged.
    """
    padded = list(level)
    if len(padded) % 2 == 1:
        padded.append(padded[-1])
    return padded


def reduce_level(level: Sequence[str], digest_fn: DigestFunction = sha256_hex) -> List[str]:
    """
    Compute the parent level of a tree level.

    Args:
        level: Ordered digests of one level
        digest_fn: Digest function used for pair hashing

    Returns:
        One digest per adjacent pair, in pair order. A level of length 1
        is terminal and is returned unchanged (as a new list).
    """
    if len(level) <= 1:
        return list(level)

    padded = pad_level(level)
    return [
        hash_pair(padded[i], padded[i + 1], digest_fn)
        for i in range(0, len(padded), 2)
    ]


__all__ = ["pad_level", "reduce_level"]
