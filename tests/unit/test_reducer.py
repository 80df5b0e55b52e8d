"""
Unit tests for level reduction and padding.
"""

import hashlib

from merklekit.core.tree import pad_level, reduce_level
from merklekit.crypto import keccak256_hex


def h(text: str) -> str:
    return hashlib.sha256(text.encode()).hexdigest()


class TestPadLevel:
    """Tests for duplicate-last padding."""

    def test_odd_level_duplicates_last(self):
        assert pad_level(["a1", "b2", "c3"]) == ["a1", "b2", "c3", "c3"]

    def test_even_level_unchanged(self):
        assert pad_level(["a1", "b2"]) == ["a1", "b2"]

    def test_single_element_padded(self):
        assert pad_level(["a1"]) == ["a1", "a1"]

    def test_empty_level(self):
        assert pad_level([]) == []

    def test_does_not_mutate_input(self):
        level = ["a1", "b2", "c3"]
        padded = pad_level(level)
        assert level == ["a1", "b2", "c3"]
        assert padded is not level

    def test_accepts_tuple(self):
        assert pad_level(("a1",)) == ["a1", "a1"]


class TestReduceLevel:
    """Tests for producing a parent level."""

    def test_even_level(self):
        assert reduce_level(["a1", "b2", "c3", "d4"]) == [h("a1b2"), h("c3d4")]

    def test_odd_level_pads_with_duplicate(self):
        """Last digest pairs with itself, not with zeros."""
        assert reduce_level(["a1", "b2", "c3"]) == [h("a1b2"), h("c3c3")]

    def test_five_leaves(self):
        leaves = ["01", "02", "03", "04", "05"]
        assert reduce_level(leaves) == [h("0102"), h("0304"), h("0505")]

    def test_output_length_is_half_rounded_up(self):
        for n in range(2, 20):
            level = [f"{i:02x}" for i in range(n)]
            assert len(reduce_level(level)) == (n + 1) // 2

    def test_single_element_returned_unchanged(self):
        level = ["a1"]
        result = reduce_level(level)
        assert result == ["a1"]
        assert result is not level

    def test_empty_level(self):
        assert reduce_level([]) == []

    def test_does_not_mutate_input(self):
        level = ["a1", "b2", "c3"]
        reduce_level(level)
        assert level == ["a1", "b2", "c3"]

    def test_custom_digest_function(self):
        assert reduce_level(["a1", "b2"], keccak256_hex) == [keccak256_hex(b"a1b2")]
