"""
Input Validation - checks for leaf lists and proofs coming from outside.

The engine itself accepts any strings; these helpers are for callers (the
CLI, services) that want to reject malformed input before hashing:
- Non-hex or odd-length digests
- Oversized leaf lists
- Malformed serialized proofs
"""

import re
from typing import Any, Optional, Tuple

# =============================================================================
# Constants
# =============================================================================

MAX_LEAVES = 1_000_000
MAX_DIGEST_LENGTH = 128  # hex chars (64 bytes)
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


# =============================================================================
# Validation Functions
# =============================================================================


def validate_hex_string(value: Any, name: str, expected_bytes: Optional[int] = None) -> Tuple[bool, str]:
    """
    Validate a hex string (with or without 0x prefix).

    Args:
        value: Value to validate
        name: Field name
        expected_bytes: Expected byte length when decoded

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(value, str):
        return False, f"{name} must be str, got {type(value).__name__}"

    hex_str = value[2:] if value.startswith("0x") else value

    if len(hex_str) % 2 != 0:
        return False, f"{name} has odd length, invalid hex"

    if not HEX_PATTERN.match(hex_str):
        return False, f"{name} contains invalid hex characters"

    if expected_bytes is not None:
        actual_bytes = len(hex_str) // 2
        if actual_bytes != expected_bytes:
            return False, f"{name} must be {expected_bytes} bytes, got {actual_bytes}"

    return True, ""


def validate_digest(value: Any, name: str = "digest") -> Tuple[bool, str]:
    """Validate a single tree digest: non-empty hex, bounded length."""
    valid, err = validate_hex_string(value, name)
    if not valid:
        return False, err

    if not value:
        return False, f"{name} must not be empty"

    if len(value) > MAX_DIGEST_LENGTH:
        return False, f"{name} exceeds max length {MAX_DIGEST_LENGTH}"

    return True, ""


def validate_leaves(
    leaves: Any,
    max_leaves: int = MAX_LEAVES,
    require_uniform_length: bool = True,
) -> Tuple[bool, str]:
    """
    Validate a leaf list.

    Args:
        leaves: List/tuple of digests
        max_leaves: Maximum allowed number of leaves
        require_uniform_length: All digests must share one length

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(leaves, (list, tuple)):
        return False, f"leaves must be list/tuple, got {type(leaves).__name__}"

    if len(leaves) > max_leaves:
        return False, f"leaves exceeds max length {max_leaves}, got {len(leaves)}"

    for i, leaf in enumerate(leaves):
        valid, err = validate_digest(leaf, f"leaves[{i}]")
        if not valid:
            return False, err

    if require_uniform_length and len({len(leaf) for leaf in leaves}) > 1:
        return False, "leaves must all have the same digest length"

    return True, ""


def validate_proof_dicts(items: Any) -> Tuple[bool, str]:
    """
    Validate a serialized proof: a list of {"digest", "direction"} objects.

    Returns:
        (is_valid, error_message)
    """
    if not isinstance(items, list):
        return False, f"proof must be list, got {type(items).__name__}"

    for i, item in enumerate(items):
        if not isinstance(item, dict):
            return False, f"proof[{i}] must be an object"

        for field in ("digest", "direction"):
            if field not in item:
                return False, f"proof[{i}] missing required field: {field}"

        valid, err = validate_digest(item["digest"], f"proof[{i}].digest")
        if not valid:
            return False, err

        if item["direction"] not in ("left", "right"):
            return False, f"proof[{i}].direction must be 'left' or 'right'"

    return True, ""


# =============================================================================
# Module Exports
# =============================================================================

__all__ = [
    "validate_hex_string",
    "validate_digest",
    "validate_leaves",
    "validate_proof_dicts",
    "MAX_LEAVES",
    "MAX_DIGEST_LENGTH",
]
