"""A doubly linked list that can be walked in both directions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

EMPTY_MESSAGE = "The list is empty"


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node | None = None
        self.prev: _Node | None = None


class DoublyLinkedList:
    """Doubly linked list with O(1) insertion and removal at both ends."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._front: _Node | None = None
        self._back: _Node | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.insert_back(item)

    def insert_front(self, value: Any) -> None:
        """Add ``value`` before the first element."""
        node = _Node(value)
        if self._front is None:
            self._back = node
        else:
            node.next = self._front
            self._front.prev = node
        self._front = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        node = _Node(value)
        if self._back is None:
            self._front = node
        else:
            node.prev = self._back
            self._back.next = node
        self._back = node
        self._size += 1

    def remove_front(self) -> Any:
        """Remove and return the first element."""
        if self._front is None:
            raise IndexError("list is empty")
        return self._unlink(self._front)

    def remove_back(self) -> Any:
        """Remove and return the last element."""
        if self._back is None:
            raise IndexError("list is empty")
        return self._unlink(self._back)

    def remove(self, value: Any) -> Any:
        """Remove the first element equal to ``value`` and return it."""
        node = self._front
        while node is not None:
            if node.value == value:
                return self._unlink(node)
            node = node.next
        raise ValueError(f"{value!r} is not in the list")

    def find(self, value: Any) -> int:
        """Return the position of the first element equal to ``value``, or -1."""
        for position, item in enumerate(self):
            if item == value:
                return position
        return -1

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._back
        while node is not None:
            yield node.value
            node = node.prev

    def __str__(self) -> str:
        if self.is_empty():
            return EMPTY_MESSAGE
        parts = []
        node = self._front
        while node is not None:
            if node is self._front:
                label = "{FRONT}: "
            elif node is self._back:
                label = "{REAR}: "
            else:
                label = ""
            parts.append(f"{label}[ {node.value} ]")
            node = node.next
        return " ==> ".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _unlink(self, node: _Node) -> Any:
        if node.prev is None:
            self._front = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._back = node.prev
        else:
            node.next.prev = node.prev
        node.next = node.prev = None
        self._size -= 1
        return node.value