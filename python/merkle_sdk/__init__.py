"""
Merkle SDK
==========

Binary Merkle hash trees over byte-representable items:
  - pluggable digest function (BLAKE2b-512 by default)
  - deterministic pairwise reduction of a sequence to a single root
  - tree equality by root digest

Example:
    >>> from merkle_sdk import MerkleTree
    >>> MerkleTree.from_sequence(["a", "b", "c", "d"]) == MerkleTree.from_sequence(["a", "b", "c", "d"])
    True
"""

from .errors import (
    MerkleError,
    MalformedInputError,
    DigestLengthError,
    UnknownHasherError,
)
from .hasher import (
    Hasher,
    HASHERS,
    calculate_hash,
    sha256_hash,
    get_hasher,
    fixed_length,
)
from .types import Entry, EntryKind, Leaf, Node, bytes_of, make_node
from .merkle import MerkleTree, reduce_level

__version__ = "0.1.0"
__all__ = [
    # Tree
    "MerkleTree",
    "Leaf",
    "Node",
    "Entry",
    "EntryKind",
    "make_node",
    "reduce_level",
    "bytes_of",
    # Hashers
    "Hasher",
    "HASHERS",
    "calculate_hash",
    "sha256_hash",
    "get_hasher",
    "fixed_length",
    # Errors
    "MerkleError",
    "MalformedInputError",
    "DigestLengthError",
    "UnknownHasherError",
]
