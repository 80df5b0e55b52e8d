"""
Unit tests for tree construction.

Tests cover:
1. Strict root building (empty input raises)
2. Lenient full-tree building (empty input gives [])
3. Agreement between the two variants
4. Level shapes and padding
5. Caller data is never mutated
"""

import hashlib
import secrets

import pytest

from merklekit.core.tree import EmptyInputError, build_root, build_tree
from merklekit.crypto import double_sha256_hex


def h(text: str) -> str:
    return hashlib.sha256(text.encode()).hexdigest()


def random_leaves(n):
    return [secrets.token_hex(32) for _ in range(n)]


class TestBuildRoot:
    """Tests for build_root."""

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            build_root([])

    def test_empty_error_is_value_error(self):
        with pytest.raises(ValueError):
            build_root(())

    def test_single_leaf_is_root(self):
        leaf = secrets.token_hex(32)
        assert build_root([leaf]) == leaf

    def test_two_leaves(self):
        assert build_root(["a1", "b2"]) == h("a1b2")

    def test_three_leaves(self):
        assert build_root(["a1", "b2", "c3"]) == h(h("a1b2") + h("c3c3"))

    def test_five_leaves_duplicate_padding(self):
        """Leaf 4 pairs with itself; the odd level above pads again."""
        leaves = ["01", "02", "03", "04", "05"]
        level1 = [h("0102"), h("0304"), h("0505")]
        level2 = [h(level1[0] + level1[1]), h(level1[2] + level1[2])]
        assert build_root(leaves) == h(level2[0] + level2[1])

    def test_deterministic(self):
        leaves = random_leaves(7)
        assert build_root(leaves) == build_root(list(leaves))

    def test_order_matters(self):
        leaves = random_leaves(3)
        assert build_root(leaves) != build_root(list(reversed(leaves)))

    def test_custom_digest_function(self):
        assert build_root(["a1", "b2"], double_sha256_hex) == double_sha256_hex(b"a1b2")

    def test_does_not_mutate_input(self):
        leaves = ["a1", "b2", "c3"]
        build_root(leaves)
        assert leaves == ["a1", "b2", "c3"]

    def test_large_input_is_iterative(self):
        """Thousands of leaves should not hit recursion limits."""
        leaves = [f"{i:08x}" for i in range(5000)]
        assert len(build_root(leaves)) == 64


class TestBuildTree:
    """Tests for build_tree."""

    def test_empty_returns_empty(self):
        assert build_tree([]) == []

    def test_single_leaf(self):
        assert build_tree(["a1"]) == [["a1"]]

    def test_three_leaf_levels(self):
        """Stored levels include the padding duplicate."""
        tree = build_tree(["a1", "b2", "c3"])
        assert tree == [
            ["a1", "b2", "c3", "c3"],
            [h("a1b2"), h("c3c3")],
            [h(h("a1b2") + h("c3c3"))],
        ]

    def test_last_level_has_one_digest(self):
        for n in range(1, 40):
            tree = build_tree(random_leaves(n))
            assert len(tree[-1]) == 1

    def test_level_sizes_halve(self):
        for n in range(2, 40):
            tree = build_tree(random_leaves(n))
            for i in range(len(tree) - 1):
                assert len(tree[i]) % 2 == 0
                parents = len(tree[i]) // 2
                # Non-terminal parent levels are stored padded as well
                expected = parents if parents == 1 else parents + parents % 2
                assert len(tree[i + 1]) == expected

    def test_depth_is_ceil_log2(self):
        for n, depth in [(1, 0), (2, 1), (3, 2), (4, 2), (5, 3), (8, 3), (9, 4)]:
            assert len(build_tree(random_leaves(n))) - 1 == depth

    def test_does_not_mutate_input(self):
        leaves = ["a1", "b2", "c3"]
        tree = build_tree(leaves)
        assert leaves == ["a1", "b2", "c3"]
        assert tree[0] is not leaves

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6, 7, 8, 13, 32, 33])
    def test_agrees_with_build_root(self, n):
        leaves = random_leaves(n)
        assert build_tree(leaves)[-1][0] == build_root(leaves)
