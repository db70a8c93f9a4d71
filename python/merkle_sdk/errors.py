"""
errors.py — Exceptions raised by merkle_sdk
"""

from typing import Optional


class MerkleError(Exception):
    """Base class for merkle_sdk errors."""


class MalformedInputError(MerkleError, ValueError):
    """
    Input cannot be reduced to a single root.

    Raised for an empty sequence, or when some reduction level holds an odd
    number of entries. `level` is the level index (0 = leaves) and `count`
    the number of entries found there.
    """

    def __init__(self, message: str, level: Optional[int] = None, count: Optional[int] = None):
        super().__init__(message)
        self.level = level
        self.count = count


class DigestLengthError(MerkleError, ValueError):
    """A hasher returned digests of different lengths."""


class UnknownHasherError(MerkleError, KeyError):
    """Hasher name not present in the registry."""

    def __str__(self) -> str:
        # KeyError repr()s its message
        return str(self.args[0]) if self.args else ""
