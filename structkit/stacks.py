"""Fixed-capacity and linked stacks."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import Any

from structkit.singly_linked_list import SinglyLinkedList

DEFAULT_CAPACITY = 64


class StackFullError(RuntimeError):
    """Raised when pushing onto a stack that has no room left."""


class StackEmptyError(RuntimeError):
    """Raised when reading from a stack that holds nothing."""


class ArrayStack:
    """Stack backed by a fixed-size array."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._items: list[Any] = [None] * capacity
        self._top = -1

    @property
    def capacity(self) -> int:
        """The largest number of elements the stack can hold."""
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        if self.is_full():
            raise StackFullError("stack is full")
        self._top += 1
        self._items[self._top] = value

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        value = self._items[self._top]
        self._items[self._top] = None
        self._top -= 1
        return value

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackEmptyError("stack is empty")
        return self._items[self._top]

    def is_full(self) -> bool:
        return self._top == len(self._items) - 1

    def is_empty(self) -> bool:
        return self._top == -1

    def __len__(self) -> int:
        return self._top + 1

    def __repr__(self) -> str:
        items = self._items[: self._top + 1]
        return f"{type(self).__name__}({items!r}, capacity={self.capacity})"


class LinkedStack:
    """Unbounded stack backed by a singly linked list."""

    def __init__(self) -> None:
        self._list = SinglyLinkedList()

    def push(self, value: Any) -> None:
        """Put ``value`` on top of the stack."""
        self._list.insert_front(value)

    def pop(self) -> Any:
        """Remove and return the top element."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty")
        return self._list.remove_front()

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if self.is_empty():
            raise StackEmptyError("Stack is empty")
        return self._list.at(0)

    def is_empty(self) -> bool:
        return self._list.is_empty()

    def __len__(self) -> int:
        return len(self._list)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._list)!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Exercise an array stack of characters and report each step."""
    stack = ArrayStack()
    try:
        for offset in range(1, 9):
            stack.push(chr(ord("r") + offset))

        print(f"PEEK: {stack.peek()}")
        print(f"POP: {stack.pop()}")
        print(f"PEEK: {stack.peek()}")

        while not stack.is_empty():
            print(f"POPPING: {stack.pop()}")

        print(f"SIZE: {stack.capacity}")
        print(f"POP: {stack.pop()}")
    except StackEmptyError as error:
        print(error)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))