"""Timing and memory comparison of dense and CSR matrix-by-vector products."""

from __future__ import annotations

import random
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TextIO

from .input_tools import microseconds_now
from .matrix import DenseMatrix
from .mv_operations import matrix_mul_vector, sparse_matrix_mul_vector
from .vector import SparseVector

NUM_OF_ITERATIONS = 100
SIZES = (10, 50, 100, 500)
PERCENTS = (10, 25, 35, 50, 75, 100)
INT_SIZE = 4
SIZE_T_SIZE = 8

_RULE = (
    "|----------------|-----------------------|-------------|----------------|"
    "----------------|-------------------|\n"
)


@dataclass(frozen=True)
class SparseTiming:
    """Average product times in microseconds and storage sizes in bytes."""

    rows: int
    percentage: int
    std_time: float
    sparse_time: float
    std_memory: int
    sparse_memory: int


def _average(action: Callable[[], object], iterations: int) -> float:
    total = 0
    for _ in range(iterations):
        begin = microseconds_now()
        action()
        total += microseconds_now() - begin
    return total / iterations


def measure(
    rows: int,
    percentage: int,
    iterations: int = NUM_OF_ITERATIONS,
    rng: random.Random | None = None,
) -> SparseTiming:
    """Time both products for a square matrix filled to ``percentage`` percent."""
    if rows <= 0:
        raise ValueError("rows must be positive")
    if not 0 <= percentage <= 100:
        raise ValueError("percentage must be between 0 and 100")
    if iterations <= 0:
        raise ValueError("iterations must be positive")
    rng = rng or random.Random()

    matrix_count = rows * rows * percentage // 100
    vector_count = rows * percentage // 100

    vector = SparseVector(rows)
    vector.fill_random(vector_count, rng)
    matrix = DenseMatrix(rows, rows)
    matrix.fill_random(matrix_count, rng)
    sparse = matrix.to_sparse()

    std_time = _average(lambda: matrix_mul_vector(matrix, vector), iterations)
    sparse_time = _average(lambda: sparse_matrix_mul_vector(sparse, vector), iterations)

    std_memory = matrix.rows * matrix.cols * INT_SIZE
    sparse_memory = (
        sparse.num_non_zeros * (INT_SIZE + SIZE_T_SIZE) + (sparse.rows + 1) * SIZE_T_SIZE
    )
    return SparseTiming(rows, percentage, std_time, sparse_time, std_memory, sparse_memory)


def _header() -> str:
    return (
        f"| {'Matrix size':<15}| {'Percentage of filling':<22}| {'Std time':<12}"
        f"| {'Sparse time':<15}| {'Memory of std':<15}| {'Memory of sparse':<18}|\n"
        + _RULE
    )


def _row(timing: SparseTiming) -> str:
    return (
        f"| {timing.rows:<15}| {timing.percentage:<22}| {timing.std_time:<12.2f}"
        f"| {timing.sparse_time:<15.2f}| {timing.std_memory:<15}"
        f"| {timing.sparse_memory:<18}|\n"
        + _RULE
    )


def print_measurements(
    file: TextIO | None = None,
    sizes: Iterable[int] = SIZES,
    percents: Iterable[int] = PERCENTS,
    iterations: int = NUM_OF_ITERATIONS,
    rng: random.Random | None = None,
) -> None:
    """Write one table per matrix size to ``file`` (standard output by default)."""
    out = file if file is not None else sys.stdout
    rng = rng or random.Random()
    percents = tuple(percents)
    for rows in sizes:
        out.write(_header())
        for percentage in percents:
            out.write(_row(measure(rows, percentage, iterations, rng)))
        out.write("\n")