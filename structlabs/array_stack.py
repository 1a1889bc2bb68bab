"""Bounded stack kept in a contiguous array."""

from __future__ import annotations

from collections.abc import Iterator

MAX_ARR_SIZE = 500


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackEmptyError(IndexError):
    """Raised when reading from an empty stack."""


class ArrayStack:
    """A stack of integers with a fixed maximum size."""

    def __init__(self, max_size: int) -> None:
        if not 0 <= max_size <= MAX_ARR_SIZE:
            raise ValueError(f"max_size must be between 0 and {MAX_ARR_SIZE}")
        self.max_size = max_size
        self._items: list[int] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.max_size

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._items.append(value)

    def pop(self) -> int:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> int:
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items[-1]

    def format(self) -> str:
        """Values from top to bottom, each followed by a space, then a newline."""
        return "".join(f"{value} " for value in self) + "\n"