"""A singly linked list with O(1) insertion at both ends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

EMPTY_MESSAGE = "The list is empty"


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next: _Node | None = None) -> None:
        self.value = value
        self.next = next


class SinglyLinkedList:
    """Singly linked list that tracks both its front and its back node."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self._front: _Node | None = None
        self._back: _Node | None = None
        self._size = 0
        if items is not None:
            for item in items:
                self.insert_back(item)

    def insert_front(self, value: Any) -> None:
        """Add ``value`` before the first element."""
        node = _Node(value, self._front)
        if self._front is None:
            self._back = node
        self._front = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Add ``value`` after the last element."""
        node = _Node(value)
        if self._back is None:
            self._front = node
        else:
            self._back.next = node
        self._back = node
        self._size += 1

    def find(self, value: Any) -> int:
        """Return the position of the first element equal to ``value``, or -1."""
        for position, item in enumerate(self):
            if item == value:
                return position
        return -1

    def at(self, index: int) -> Any:
        """Return the element at ``index``."""
        self._check_index(index)
        node = self._front
        for _ in range(index):
            node = node.next
        return node.value

    def remove_front(self) -> Any:
        """Remove and return the first element."""
        if self._front is None:
            raise IndexError("list is empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._back = None
        node.next = None
        self._size -= 1
        return node.value

    def remove_back(self) -> Any:
        """Remove and return the last element."""
        if self._back is None:
            raise IndexError("list is empty")
        if self._front is self._back:
            return self.remove_front()
        prev = self._front
        while prev.next is not self._back:
            prev = prev.next
        value = self._back.value
        prev.next = None
        self._back = prev
        self._size -= 1
        return value

    def delete_at(self, position: int) -> Any:
        """Remove and return the element at ``position``."""
        self._check_index(position)
        if position == 0:
            return self.remove_front()
        prev = self._front
        for _ in range(position - 1):
            prev = prev.next
        return self._unlink_after(prev)

    def delete_value(self, value: Any) -> int:
        """Remove the first element equal to ``value`` and return its former position."""
        prev: _Node | None = None
        node = self._front
        position = 0
        while node is not None:
            if node.value == value:
                if prev is None:
                    self.remove_front()
                else:
                    self._unlink_after(prev)
                return position
            prev, node = node, node.next
            position += 1
        raise ValueError(f"{value!r} is not in the list")

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if self.is_empty():
            return EMPTY_MESSAGE
        return " ==> ".join(f"[ {item} ]" for item in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._size:
            raise IndexError(f"index {index} out of range for list of size {self._size}")

    def _unlink_after(self, prev: _Node) -> Any:
        node = prev.next
        prev.next = node.next
        if node is self._back:
            self._back = prev
        node.next = None
        self._size -= 1
        return node.value