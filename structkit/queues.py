"""Fixed-capacity circular and linked queues."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from structkit.singly_linked_list import SinglyLinkedList

DEFAULT_CAPACITY = 128


class QueueFullError(RuntimeError):
    """Raised when adding to a queue that has no room left."""


class QueueEmptyError(RuntimeError):
    """Raised when reading from a queue that holds nothing."""


class ArrayQueue:
    """Queue backed by a fixed-size circular array."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._items: list[Any] = [None] * capacity
        self._front = 0
        self._count = 0

    @property
    def capacity(self) -> int:
        """The largest number of elements the queue can hold."""
        return len(self._items)

    def _slot(self, offset: int) -> int:
        return (self._front + offset) % len(self._items)

    def insert(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._items[self._slot(self._count)] = value
        self._count += 1

    def enqueue(self, value: Any) -> None:
        """Add ``value`` in priority order: before the first larger element."""
        if self.is_full():
            raise QueueFullError("priority queue is full")
        offset = self._count - 1
        while offset >= 0 and value < self._items[self._slot(offset)]:
            self._items[self._slot(offset + 1)] = self._items[self._slot(offset)]
            offset -= 1
        self._items[self._slot(offset + 1)] = value
        self._count += 1

    def remove(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._items[self._front]
        self._items[self._front] = None
        self._front = self._slot(1)
        self._count -= 1
        return value

    def peek(self) -> Any:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        return self._items[self._front]

    def is_full(self) -> bool:
        return self._count == len(self._items)

    def is_empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._count):
            yield self._items[self._slot(offset)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


class LinkedQueue:
    """Unbounded queue backed by a singly linked list."""

    def __init__(self) -> None:
        self._list = SinglyLinkedList()

    def insert(self, value: Any) -> None:
        """Add ``value`` at the rear of the queue."""
        self._list.insert_back(value)

    def remove(self) -> Any:
        """Remove and return the element at the front."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        return self._list.remove_front()

    def peek(self) -> Any:
        """Return the element at the front without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        return self._list.at(0)

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._list)!r})"