"""
Tree construction from an ordered list of leaf digests.

Two variants of the same operation, differing only in their empty-input
policy:
- build_root: strict, raises EmptyInputError on zero leaves
- build_tree: lenient, returns [] on zero leaves

Both are iterative (depth is ceil(log2(n)), one loop pass per level) and
always agree on the root for non-empty input.
"""

from typing import List, Sequence

from merklekit.core.tree.errors import EmptyInputError
from merklekit.core.tree.reducer import pad_level, reduce_level
from merklekit.crypto import DigestFunction, sha256_hex
from merklekit.utils.logger import get_logger

logger = get_logger("tree")


def build_root(leaves: Sequence[str], digest_fn: DigestFunction = sha256_hex) -> str:
    """
    Compute the Merkle root of a leaf list.

    Args:
        leaves: Ordered leaf digests
        digest_fn: Digest function used for pair hashing

    Returns:
        Root digest. A single leaf is its own root.

    Raises:
        EmptyInputError: If leaves is empty
    """
    if len(leaves) == 0:
        raise EmptyInputError("Empty list of leaves")

    level = list(leaves)
    while len(level) > 1:
        level = reduce_level(level, digest_fn)

    return level[0]


def build_tree(leaves: Sequence[str], digest_fn: DigestFunction = sha256_hex) -> List[List[str]]:
    """
    Compute every level of the Merkle tree, leaves first.

    Non-terminal levels are stored padded (odd levels carry the duplicated
    last digest), so level[i][sibling] always exists during proof walks.
    Each stored level is a fresh list; the caller's sequence is never touched.

    Args:
        leaves: Ordered leaf digests
        digest_fn: Digest function used for pair hashing

    Returns:
        List of levels; the last one holds only the root. [] for no leaves.
    """
    if len(leaves) == 0:
        return []

    tree: List[List[str]] = []
    level = list(leaves)
    while len(level) > 1:
        tree.append(pad_level(level))
        level = reduce_level(level, digest_fn)
    tree.append(level)

    logger.debug(f"Built tree: {len(leaves)} leaves, depth {len(tree) - 1}")
    return tree


__all__ = ["build_root", "build_tree"]
