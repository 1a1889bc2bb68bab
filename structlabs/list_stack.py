"""Stack built on a singly linked list that records freed node addresses."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass

from .array_stack import StackEmptyError, StackOverflowError


@dataclass(eq=False)
class _Node:
    value: int
    next: _Node | None


class ListStack:
    """A stack of integers on linked nodes with a list of freed addresses."""

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._top: _Node | None = None
        self._size = 0
        self._freed: deque[int] = deque()

    def _walk(self) -> Iterator[_Node]:
        node = self._top
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        """Iterate from the top of the stack to the bottom."""
        return (node.value for node in self._walk())

    def is_empty(self) -> bool:
        return self._top is None

    def is_full(self) -> bool:
        return self._size >= self.max_size

    def push(self, value: int) -> None:
        if self.is_full():
            raise StackOverflowError("stack is full")
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> int:
        node = self._top
        if node is None:
            raise StackEmptyError("stack is empty")
        self._freed.appendleft(id(node))
        self._top = node.next
        self._size -= 1
        return node.value

    def peek(self) -> int:
        if self._top is None:
            raise StackEmptyError("stack is empty")
        return self._top.value

    def nodes(self) -> list[tuple[int, int]]:
        """Pairs of (address, value) from top to bottom."""
        return [(id(node), node.value) for node in self._walk()]

    def freed_addresses(self) -> list[int]:
        """Addresses of popped nodes, most recently freed first."""
        return list(self._freed)

    def format(self) -> str:
        lines = "".join(
            f"Адресс элемента - {address:#x}, значение элемента - {value}\n"
            for address, value in self.nodes()
        )
        return lines + "\n"

    def format_free_list(self) -> str:
        lines = "".join(
            f"Освобожденная область памяти: {address:#x}\n" for address in self._freed
        )
        return "Список свободных областей:\n" + lines

    def clear(self) -> None:
        """Release all nodes and forget the freed addresses."""
        self._top = None
        self._size = 0
        self._freed.clear()