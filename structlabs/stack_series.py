"""Decreasing series of a stack's sequence, read from the top down."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .array_stack import StackEmptyError

HEADER = "Убывающие серии последовательности в обратном порядке:\n"


def _runs(values: list[int]) -> list[tuple[tuple[int, ...], bool]]:
    """Rising runs (top to bottom) of length two or more, with whether each was closed."""
    runs: list[tuple[tuple[int, ...], bool]] = []
    current: list[int] = []
    previous = values[0]
    for value in values[1:]:
        if previous < value:
            if current:
                current.append(value)
            else:
                current = [previous, value]
        elif current:
            runs.append((tuple(current), True))
            current = []
        previous = value
    if current:
        runs.append((tuple(current), False))
    return runs


def _values(stack: Iterable[int]) -> list[int]:
    values = list(stack)
    if not values:
        raise StackEmptyError("stack is empty")
    return values


def decreasing_series(stack: Iterable[int]) -> list[tuple[int, ...]]:
    """Decreasing series of the pushed sequence, each listed in reverse order."""
    values = _values(stack)
    if len(values) == 1:
        return [(values[0],)]
    return [run for run, _ in _runs(values)]


def format_series(stack: Iterable[int]) -> str:
    """The series report as printed by the menu."""
    values = _values(stack)
    if len(values) == 1:
        return f"{HEADER}{values[0]}\n"
    body = "".join(
        "".join(f"{value} " for value in run) + ("\n" if closed else "")
        for run, closed in _runs(values)
    )
    return HEADER + body


def print_sequence(file: TextIO, stack: Iterable[int]) -> None:
    """Write the series report to ``file``."""
    file.write(format_series(stack))