"""Timing and memory comparison of the array and linked-list stacks."""

from __future__ import annotations

import io
import random
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Callable, TextIO

from .array_stack import MAX_ARR_SIZE, ArrayStack
from .input_tools import microseconds_now
from .list_stack import ListStack
from .stack_series import print_sequence

NUM_OF_ITERATIONS = 50
SEQ_LENGTHS = (1, 10, 50, 100, 130, 500)
INT_SIZE = 4
NODE_SIZE = 16

_RULE = (
    "|----------------|-----------------|-----------------|-----------------|"
    "-----------------|-----------------|-----------------|-----------------|"
    "-----------------|\n"
)


@dataclass(frozen=True)
class StackTiming:
    """Average times in microseconds and memory in bytes for one sequence length."""

    seq_len: int
    arr_series: float
    list_series: float
    arr_push: float
    list_push: float
    arr_pop: float
    list_pop: float
    arr_memory: int
    list_memory: int


def _average(action: Callable[[], None], iterations: int, setup: Callable[[], None] | None = None) -> float:
    total = 0
    for _ in range(iterations):
        if setup is not None:
            setup()
        begin = microseconds_now()
        action()
        total += microseconds_now() - begin
    return total / iterations


def measure(seq: Sequence[int], iterations: int = NUM_OF_ITERATIONS) -> StackTiming:
    """Time series search, push and pop on both stack kinds for ``seq``."""
    if not seq:
        raise ValueError("sequence must not be empty")
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    size = len(seq)

    array_stack = ArrayStack(size)
    list_stack = ListStack(size)
    for value in seq:
        array_stack.push(value)
        list_stack.push(value)

    sink = io.StringIO()
    arr_series = _average(lambda: print_sequence(sink, array_stack), iterations)
    list_series = _average(lambda: print_sequence(sink, list_stack), iterations)
    list_memory = NODE_SIZE * len(list_stack)

    holder: dict[str, ArrayStack | ListStack] = {}

    def fresh_array() -> None:
        holder["stack"] = ArrayStack(size)

    def fresh_list() -> None:
        holder["stack"] = ListStack(size)

    def filled_array() -> None:
        fresh_array()
        for value in seq:
            holder["stack"].push(value)

    def filled_list() -> None:
        fresh_list()
        for value in seq:
            holder["stack"].push(value)

    def push_all() -> None:
        stack = holder["stack"]
        for value in seq:
            stack.push(value)

    def pop_all() -> None:
        stack = holder["stack"]
        for _ in seq:
            stack.pop()

    return StackTiming(
        seq_len=size,
        arr_series=arr_series,
        list_series=list_series,
        arr_push=_average(push_all, iterations, fresh_array),
        list_push=_average(push_all, iterations, fresh_list),
        arr_pop=_average(pop_all, iterations, filled_array),
        list_pop=_average(pop_all, iterations, filled_list),
        arr_memory=INT_SIZE * MAX_ARR_SIZE,
        list_memory=list_memory,
    )


def measurements(
    lengths: Iterable[int] = SEQ_LENGTHS,
    iterations: int = NUM_OF_ITERATIONS,
    rng: random.Random | None = None,
) -> list[StackTiming]:
    """Measure random sequences of values 0..99 for each length."""
    rng = rng or random.Random()
    return [
        measure([rng.randrange(100) for _ in range(length)], iterations)
        for length in lengths
    ]


def _header() -> str:
    return (
        f"| {'Seq length':<15}| {'Arr stack time':<16}| {'List stack time':<16}"
        f"| {'Arr stack push':<16}| {'List stack push':<16}| {'Arr stack pop':<16}"
        f"| {'List stack pop':<16}| {'Arr stack memory':<16}|{'List stack memory':<16}|\n"
        + _RULE
    )


def _row(timing: StackTiming) -> str:
    return (
        f"| {timing.seq_len:<15}| {timing.arr_series:<16.6f}| {timing.list_series:<16.6f}"
        f"| {timing.arr_push:<16.6f}| {timing.list_push:<16.6f}| {timing.arr_pop:<16.6f}"
        f"| {timing.list_pop:<16.6f}| {timing.arr_memory:<16}| {timing.list_memory:<16}|\n"
        + _RULE
    )


def print_measurements(
    file: TextIO | None = None,
    lengths: Iterable[int] = SEQ_LENGTHS,
    iterations: int = NUM_OF_ITERATIONS,
    rng: random.Random | None = None,
) -> None:
    """Write the measurement table to ``file`` (standard output by default)."""
    out = file if file is not None else sys.stdout
    out.write(_header())
    for timing in measurements(lengths, iterations, rng):
        out.write(_row(timing))
    out.write("\n")