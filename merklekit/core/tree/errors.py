"""
Error taxonomy for the Merkle engine.

Only the strict root builder raises on empty input. Every other engine
operation answers with an empty result ([] or "") or None for "not found".
"""


class MerkleError(Exception):
    """Base class for all MerkleKit errors."""


class EmptyInputError(MerkleError, ValueError):
    """Raised when a root is required but the leaf list is empty."""


class InvalidProofError(MerkleError, ValueError):
    """Raised when a serialized proof cannot be parsed."""


class UnknownAlgorithmError(MerkleError, ValueError):
    """Raised when a digest algorithm name is not registered."""


__all__ = [
    "MerkleError",
    "EmptyInputError",
    "InvalidProofError",
    "UnknownAlgorithmError",
]
