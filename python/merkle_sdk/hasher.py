"""
hasher.py — Digest functions for Merkle trees

A hasher is any pure function `bytes -> bytes` with a fixed output length.
Tree code never calls an algorithm directly; it receives a hasher and threads
it through every leaf and node it builds.

Shipped algorithms:
    blake2b  = BLAKE2b-512 (64 bytes), the default
    sha256   = SHA-256 (32 bytes)

The default can be switched with the MERKLE_SDK_HASHER environment variable.
"""

from __future__ import annotations

import hashlib
import logging
import os
from typing import Callable, Dict, Optional

from .errors import DigestLengthError, UnknownHasherError

logger = logging.getLogger(__name__)

Hasher = Callable[[bytes], bytes]

HASHER_ENV_VAR = "MERKLE_SDK_HASHER"
DEFAULT_HASHER_NAME = "blake2b"


def calculate_hash(data: bytes) -> bytes:
    """BLAKE2b-512 digest of `data`."""
    return hashlib.blake2b(data).digest()


def sha256_hash(data: bytes) -> bytes:
    """SHA-256 digest of `data`."""
    return hashlib.sha256(data).digest()


HASHERS: Dict[str, Hasher] = {
    "blake2b": calculate_hash,
    "sha256": sha256_hash,
}


def get_hasher(name: Optional[str] = None) -> Hasher:
    """
    Resolve a registered hasher.

    Args:
        name: Registry key. When omitted, MERKLE_SDK_HASHER is consulted,
              then DEFAULT_HASHER_NAME.

    Raises:
        UnknownHasherError: name is not registered.
    """
    if name is None:
        name = os.environ.get(HASHER_ENV_VAR, DEFAULT_HASHER_NAME)
        logger.debug(f"Default hasher: {name}")
    key = name.strip().lower()
    try:
        return HASHERS[key]
    except KeyError:
        raise UnknownHasherError(
            f"Unknown hasher '{name}'. Available: {', '.join(sorted(HASHERS))}"
        ) from None


def fixed_length(hasher: Hasher, size: Optional[int] = None) -> Hasher:
    """
    Wrap `hasher` so every digest must have the same length.

    The expected length is `size` if given, otherwise the length of the
    first digest produced.
    """
    expected = size

    def checked(data: bytes) -> bytes:
        nonlocal expected
        digest = hasher(data)
        if expected is None:
            expected = len(digest)
        elif len(digest) != expected:
            raise DigestLengthError(
                f"Digest length {len(digest)} != expected {expected}"
            )
        return digest

    checked.__name__ = f"fixed_length({getattr(hasher, '__name__', 'hasher')})"
    return checked
