"""An unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A node of a binary search tree."""

    key: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


class BST:
    """Binary search tree; equal keys are placed in the right subtree."""

    def __init__(self) -> None:
        self.root: TreeNode | None = None

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = TreeNode(value)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if value < current.key:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __contains__(self, value: Any) -> bool:
        current = self.root
        while current is not None:
            if current.key == value:
                return True
            current = current.left if value < current.key else current.right
        return False

    def delete(self, value: Any) -> bool:
        """Remove one node holding ``value``; return whether one was found."""
        parent: TreeNode | None = None
        is_left = True
        current = self.root
        while current is not None and current.key != value:
            parent = current
            is_left = value < current.key
            current = current.left if is_left else current.right
        if current is None:
            return False

        if current.left is None and current.right is None:
            replacement = None
        elif current.right is None:
            replacement = current.left
        elif current.left is None:
            replacement = current.right
        else:
            replacement = self._detach_successor(current)
            replacement.left = current.left

        if parent is None:
            self.root = replacement
        elif is_left:
            parent.left = replacement
        else:
            parent.right = replacement
        current.left = current.right = None
        return True

    def is_empty(self) -> bool:
        return self.root is None

    def minimum(self) -> Any:
        """Return the smallest key, or None if the tree is empty."""
        if self.root is None:
            return None
        current = self.root
        while current.left is not None:
            current = current.left
        return current.key

    def maximum(self) -> Any:
        """Return the largest key, or None if the tree is empty."""
        if self.root is None:
            return None
        current = self.root
        while current.right is not None:
            current = current.right
        return current.key

    def preorder(self) -> Iterator[Any]:
        """Yield keys node first, then left subtree, then right subtree."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.key
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self) -> Iterator[Any]:
        """Yield keys in ascending order."""
        stack: list[TreeNode] = []
        current = self.root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            yield node.key
            current = node.right

    @staticmethod
    def _detach_successor(doomed: TreeNode) -> TreeNode:
        """Unhook the in-order successor of ``doomed`` and give it ``doomed``'s right subtree."""
        successor_parent = doomed
        successor = doomed
        current = doomed.right
        while current is not None:
            successor_parent = successor
            successor = current
            current = current.left
        if successor is not doomed.right:
            successor_parent.left = successor.right
            successor.right = doomed.right
        return successor