"""
Unit tests for the address allowlist.
"""

import hashlib

import pytest

from merklekit.core.allowlist import AddressAllowlist
from merklekit.core.tree import EmptyInputError, build_root


ADDRESSES = [
    "0x5AaFeCeFED7c58f0eA7a1783b3a579D7e5fDC489",
    "0x1aF4b0d4162733F942f06e1b75c2278A5034e2aA",
    "0xEf5d34B2BBBEdc6019b9771b6b30F86a28e91e2F",
]


@pytest.fixture
def allowlist():
    return AddressAllowlist(ADDRESSES)


class TestAddressAllowlist:
    """Tests for membership, proofs and roots."""

    def test_leaves_are_lowercased_hashes(self, allowlist):
        expected = [hashlib.sha256(a.lower().encode()).hexdigest() for a in ADDRESSES]
        assert list(allowlist.tree.leaves) == expected
        assert allowlist.root == build_root(expected)

    def test_member_any_case(self, allowlist):
        assert allowlist.is_member(ADDRESSES[0])
        assert allowlist.is_member(ADDRESSES[0].lower())
        assert allowlist.is_member(ADDRESSES[0].upper().replace("0X", "0x"))
        assert ADDRESSES[1] in allowlist

    def test_non_member(self, allowlist):
        assert not allowlist.is_member("0x" + "00" * 20)

    def test_without_normalization_case_matters(self):
        allowlist = AddressAllowlist(ADDRESSES, normalize=False)
        assert allowlist.is_member(ADDRESSES[0])
        assert not allowlist.is_member(ADDRESSES[0].lower())

    def test_proof_for_member(self, allowlist):
        proof = allowlist.proof_for(ADDRESSES[2])
        assert proof[0].digest == allowlist.leaf_for(ADDRESSES[2])
        assert allowlist.verify_member(ADDRESSES[2], proof)

    def test_proof_for_non_member(self, allowlist):
        assert allowlist.proof_for("0x" + "00" * 20) is None

    def test_verify_member_rejects_other_address(self, allowlist):
        proof = allowlist.proof_for(ADDRESSES[0])
        assert not allowlist.verify_member(ADDRESSES[1], proof)

    def test_verify_member_against_external_root(self, allowlist):
        proof = allowlist.proof_for(ADDRESSES[1])
        assert allowlist.verify_member(ADDRESSES[1], proof, root=allowlist.root)
        assert not allowlist.verify_member(ADDRESSES[1], proof, root="00" * 32)

    def test_verify_member_empty_proof(self, allowlist):
        assert not allowlist.verify_member(ADDRESSES[0], [])

    def test_from_hashed(self, allowlist):
        hashed = AddressAllowlist.from_hashed(list(allowlist.tree.leaves))
        assert hashed.root == allowlist.root
        assert hashed.is_member(ADDRESSES[0])

    def test_empty_allowlist(self):
        allowlist = AddressAllowlist([])
        assert len(allowlist) == 0
        assert not allowlist.is_member(ADDRESSES[0])
        with pytest.raises(EmptyInputError):
            allowlist.root
