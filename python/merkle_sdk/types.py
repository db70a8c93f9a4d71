"""
types.py — Tree entries: Leaf, Node and the Entry union

Entries are built bottom-up and never mutated afterwards:
    Leaf.digest = H(bytes_of(data))
    Node.digest = H(left.digest || right.digest)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .hasher import Hasher, get_hasher


class EntryKind(Enum):
    LEAF = "leaf"
    NODE = "node"


def bytes_of(item: Any) -> bytes:
    """
    Byte view of an item, hashed as-is (no prefix, no delimiter).

    str is UTF-8 encoded; bytes-like objects and anything defining
    __bytes__ are passed through bytes().
    """
    if isinstance(item, bytes):
        return item
    if isinstance(item, str):
        return item.encode("utf-8")
    if isinstance(item, (bytearray, memoryview)) or hasattr(type(item), "__bytes__"):
        return bytes(item)
    raise TypeError(f"Cannot convert {type(item).__name__} to bytes")


@dataclass(frozen=True)
class Leaf:
    """Original data item plus its digest."""
    data: Any
    digest: bytes = field(repr=False)

    kind = EntryKind.LEAF

    @classmethod
    def from_item(cls, item: Any, hasher: Optional[Hasher] = None) -> "Leaf":
        if hasher is None:
            hasher = get_hasher()
        return cls(data=item, digest=hasher(bytes_of(item)))

    @property
    def is_leaf(self) -> bool:
        return True

    def hexdigest(self) -> str:
        return self.digest.hex()


@dataclass(frozen=True)
class Node:
    """Branch over exactly two child entries."""
    left: "Entry"
    right: "Entry"
    digest: bytes = field(repr=False)

    kind = EntryKind.NODE

    @classmethod
    def from_children(cls, left: "Entry", right: "Entry", hasher: Optional[Hasher] = None) -> "Node":
        """Combine two entries; order matters (left digest first)."""
        if hasher is None:
            hasher = get_hasher()
        return cls(left=left, right=right, digest=hasher(left.digest + right.digest))

    @property
    def is_leaf(self) -> bool:
        return False

    def hexdigest(self) -> str:
        return self.digest.hex()


Entry = Union[Leaf, Node]


def make_node(hasher: Optional[Hasher], left: Entry, right: Entry) -> Node:
    return Node.from_children(left, right, hasher)

