"""
merkle.py — Binary Merkle tree construction and comparison

Build (per level, left to right):
    level 0      = [Leaf(x) for x in items]
    level ℓ+1    = [Node(level[2i], level[2i+1]) for i in ...]
    root         = the single entry left

Every intermediate level must hold an even number of entries. Anything else
(including empty input) raises MalformedInputError; nothing is padded,
duplicated or dropped.

Two trees are equal iff their root digests are equal. Leaf data and inner
nodes are not compared: under a collision-resistant hasher the root digest
stands for the whole content.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from .errors import MalformedInputError
from .hasher import Hasher, get_hasher
from .types import Entry, Leaf, Node

logger = logging.getLogger(__name__)


def reduce_level(level: List[Entry], hasher: Hasher, index: int = 0) -> List[Node]:
    """
    Pair `level` into the next level up.

    Args:
        level: Entries at level `index`, in order.
        hasher: Digest function for the new nodes.
        index: Level number, only used in error messages.

    Raises:
        MalformedInputError: odd number of entries.
    """
    if len(level) % 2:
        raise MalformedInputError(
            f"Level {index} has {len(level)} entries; an even count is required",
            level=index,
            count=len(level),
        )

    next_level = []
    for j in range(0, len(level), 2):
        next_level.append(Node.from_children(level[j], level[j + 1], hasher))
    return next_level


@dataclass(frozen=True, eq=False)
class MerkleTree:
    """Merkle tree owning a single root entry."""
    root: Entry

    @classmethod
    def from_sequence(cls, items: Iterable[Any], hasher: Optional[Hasher] = None) -> "MerkleTree":
        """
        Build a tree from an ordered sequence of byte-convertible items.

        A single item gives a Leaf root. Otherwise the item count must halve
        evenly down to one (2, 4, 8, ...).

        Raises:
            MalformedInputError: empty input or odd intermediate level.
            TypeError: an item has no byte view.
        """
        if hasher is None:
            hasher = get_hasher()

        items = list(items)
        if not items:
            raise MalformedInputError("Cannot build a Merkle tree from no items", level=0, count=0)

        current_level: List[Entry] = [Leaf.from_item(item, hasher) for item in items]

        level = 0
        while len(current_level) > 1:
            logger.debug(f"Reducing level {level}: {len(current_level)} entries")
            current_level = reduce_level(current_level, hasher, level)
            level += 1

        tree = cls(root=current_level[0])
        logger.debug(
            f"Built Merkle tree: {len(items)} leaves, height {level}, "
            f"root {tree.hexdigest()[:16]}"
        )
        return tree

    @property
    def root_hash(self) -> bytes:
        return self.root.digest

    def hexdigest(self) -> str:
        return self.root.digest.hex()

    @property
    def height(self) -> int:
        """Number of reduction levels above the leaves."""
        h = 0
        entry = self.root
        while isinstance(entry, Node):
            entry = entry.left
            h += 1
        return h

    def leaves(self) -> List[Leaf]:
        """Leaves in input order."""
        result: List[Leaf] = []
        stack: List[Entry] = [self.root]
        while stack:
            entry = stack.pop()
            if isinstance(entry, Leaf):
                result.append(entry)
            else:
                stack.append(entry.right)
                stack.append(entry.left)
        return result

    def __len__(self) -> int:
        return len(self.leaves())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleTree):
            return NotImplemented
        return self.root.digest == other.root.digest

    def __hash__(self) -> int:
        return hash(self.root.digest)
