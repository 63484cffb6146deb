"""A self-balancing red-black tree."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from enum import IntEnum
from typing import Any


class Color(IntEnum):
    BLACK = 0
    RED = 1


class RBNode:
    """A node of a red-black tree."""

    __slots__ = ("key", "color", "left", "right", "parent")

    def __init__(self, key: Any, color: Color = Color.RED) -> None:
        self.key = key
        self.color = color
        self.left: RBNode | None = None
        self.right: RBNode | None = None
        self.parent: RBNode | None = None

    def __repr__(self) -> str:
        return f"RBNode({self.key!r}, {self.color.name})"


class RBTree:
    """Red-black tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self._nil = RBNode(None, Color.BLACK)
        self._root = self._nil

    def insert(self, value: Any) -> None:
        """Add ``value`` and rebalance."""
        node = RBNode(value)
        parent = self._nil
        current = self._root
        while current is not self._nil:
            parent = current
            current = current.left if value < current.key else current.right
        node.parent = parent
        if parent is self._nil:
            self._root = node
        elif value < parent.key:
            parent.left = node
        else:
            parent.right = node
        node.left = node.right = self._nil
        self._insert_fixup(node)

    def __contains__(self, value: Any) -> bool:
        return self._find(value) is not self._nil

    def remove(self, value: Any) -> bool:
        """Remove one node holding ``value``; return whether one was found."""
        node = self._find(value)
        if node is self._nil:
            return False
        self._delete(node)
        return True

    def is_empty(self) -> bool:
        return self._root is self._nil

    def minimum(self) -> Any:
        """Return the smallest key, or None if the tree is empty."""
        if self.is_empty():
            return None
        return self._leftmost(self._root).key

    def maximum(self) -> Any:
        """Return the largest key, or None if the tree is empty."""
        if self.is_empty():
            return None
        node = self._root
        while node.right is not self._nil:
            node = node.right
        return node.key

    def preorder(self) -> Iterator[tuple[Any, Color]]:
        """Yield ``(key, color)`` pairs node first, then left, then right."""
        stack = [] if self.is_empty() else [self._root]
        while stack:
            node = stack.pop()
            yield node.key, node.color
            if node.right is not self._nil:
                stack.append(node.right)
            if node.left is not self._nil:
                stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        """Yield keys in ascending order."""
        stack: list[RBNode] = []
        current = self._root
        while stack or current is not self._nil:
            while current is not self._nil:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.key
            current = node.right

    def black_height(self) -> int:
        """Check the red-black properties and return the number of black nodes on every root-to-leaf path."""
        if self._root.color is not Color.BLACK:
            raise RuntimeError("root is red")
        return self._check(self._root)

    def _check(self, node: RBNode) -> int:
        if node is self._nil:
            return 0
        if node.color is Color.RED and Color.RED in (node.left.color, node.right.color):
            raise RuntimeError(f"red node {node.key!r} has a red child")
        left = self._check(node.left)
        right = self._check(node.right)
        if left != right:
            raise RuntimeError(f"unequal black heights below {node.key!r}")
        return left + (1 if node.color is Color.BLACK else 0)

    def _find(self, value: Any) -> RBNode:
        node = self._root
        while node is not self._nil and node.key != value:
            node = node.left if value < node.key else node.right
        return node

    def _leftmost(self, node: RBNode) -> RBNode:
        while node.left is not self._nil:
            node = node.left
        return node

    def _rotate_left(self, x: RBNode) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _rotate_right(self, x: RBNode) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self._nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self._nil:
            self._root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fixup(self, node: RBNode) -> None:
        while node.parent.color is Color.RED:
            grandparent = node.parent.parent
            if node.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is Color.RED:
                    node.parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._rotate_left(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color is Color.RED:
                    node.parent.color = uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._rotate_right(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)
        self._root.color = Color.BLACK

    def _transplant(self, old: RBNode, new: RBNode) -> None:
        if old.parent is self._nil:
            self._root = new
        elif old is old.parent.left:
            old.parent.left = new
        else:
            old.parent.right = new
        new.parent = old.parent

    def _delete(self, node: RBNode) -> None:
        moved = node
        original_color = moved.color
        if node.left is self._nil:
            child = node.right
            self._transplant(node, node.right)
        elif node.right is self._nil:
            child = node.left
            self._transplant(node, node.left)
        else:
            moved = self._leftmost(node.right)
            original_color = moved.color
            child = moved.right
            if moved.parent is node:
                child.parent = moved
            else:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.color = node.color
        node.left = node.right = node.parent = None
        if original_color is Color.BLACK:
            self._delete_fixup(child)

    def _delete_fixup(self, node: RBNode) -> None:
        while node is not self._root and node.color is Color.BLACK:
            parent = node.parent
            if node is parent.left:
                sibling = parent.right
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_left(parent)
                    sibling = parent.right
                if sibling.left.color is Color.BLACK and sibling.right.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                else:
                    if sibling.right.color is Color.BLACK:
                        sibling.left.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_right(sibling)
                        sibling = parent.right
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.right.color = Color.BLACK
                    self._rotate_left(parent)
                    node = self._root
            else:
                sibling = parent.left
                if sibling.color is Color.RED:
                    sibling.color = Color.BLACK
                    parent.color = Color.RED
                    self._rotate_right(parent)
                    sibling = parent.left
                if sibling.right.color is Color.BLACK and sibling.left.color is Color.BLACK:
                    sibling.color = Color.RED
                    node = parent
                else:
                    if sibling.left.color is Color.BLACK:
                        sibling.right.color = Color.BLACK
                        sibling.color = Color.RED
                        self._rotate_left(sibling)
                        sibling = parent.left
                    sibling.color = parent.color
                    parent.color = Color.BLACK
                    sibling.left.color = Color.BLACK
                    self._rotate_right(parent)
                    node = self._root
        node.color = Color.BLACK


DEMO_KEYS = (50, 30, 70, 20, 40, 37, 44, 10, 17, 60, 90, 38)


def main(argv: Sequence[str] | None = None) -> int:
    """Build a sample tree and print each key with its colour in preorder."""
    tree = RBTree()
    for key in DEMO_KEYS:
        tree.insert(key)
    for key, color in tree.preorder():
        print(f"{key} {color.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))