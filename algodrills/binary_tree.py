"""A simple binary tree node with in-order traversal."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass
class BTreeNode:
    """Binary tree node holding a value and optional subtrees."""

    data: int
    left: Optional[BTreeNode] = None
    right: Optional[BTreeNode] = None

    def inorder(self) -> Iterator[int]:
        """Yield the values of this subtree: left, self, right."""
        yield from inorder(self.left)
        yield self.data
        yield from inorder(self.right)


def inorder(node: Optional[BTreeNode]) -> Iterator[int]:
    """Yield the values of a possibly empty tree in in-order sequence."""
    if node is None:
        return
    yield from node.inorder()