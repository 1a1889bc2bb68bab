"""Sparse column vector stored as non-zero values and their indices."""

from __future__ import annotations

import random
from dataclasses import dataclass, field

from .input_tools import Prompter


@dataclass
class SparseVector:
    """A column of ``rows`` entries of which only ``values`` at ``indices`` are set."""

    rows: int
    values: list[int] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows <= 0:
            raise ValueError("vector length must be positive")
        if len(self.values) != len(self.indices):
            raise ValueError("values and indices must have equal length")
        if any(not 0 <= index < self.rows for index in self.indices):
            raise ValueError("index out of range")

    @property
    def num_non_zeros(self) -> int:
        return len(self.values)

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Replace the contents with ``count`` values 1..50 at distinct random indices."""
        if not 0 <= count <= self.rows:
            raise ValueError(f"cannot place {count} elements into {self.rows} rows")
        rng = rng or random.Random()
        values: list[int] = []
        indices: list[int] = []
        for _ in range(count):
            values.append(rng.randrange(50) + 1)
            index = rng.randrange(self.rows)
            while index in indices:
                index = rng.randrange(self.rows)
            indices.append(index)
        self.values = values
        self.indices = indices

    def to_dense(self) -> list[int]:
        """All ``rows`` entries, zeros included."""
        dense = [0] * self.rows
        for value, index in zip(self.values, self.indices):
            dense[index] = value
        return dense

    def get(self, index: int) -> int:
        """The value stored first for ``index``, or 0."""
        return next(
            (value for value, at in zip(self.values, self.indices) if at == index), 0
        )

    def without_zeros(self) -> SparseVector:
        """A copy with zero entries dropped."""
        pairs = [(v, i) for v, i in zip(self.values, self.indices) if v != 0]
        return SparseVector(
            self.rows, [v for v, _ in pairs], [i for _, i in pairs]
        )

    def format_dense(self) -> str:
        return "Полный вектор:\n" + "".join(f"{value}\n" for value in self.to_dense())

    def format_sparse(self) -> str:
        return (
            "Ненулевые значения вектора:\n"
            + "".join(f"{value} " for value in self.values)
            + "\nИндексы ненулевых значений:\n"
            + "".join(f"{index} " for index in self.indices)
        )


def read_vector_sizes(prompter: Prompter, matrix_cols: int | None = None) -> tuple[int, int]:
    """Ask for the vector length and its number of non-zeros.

    When a matrix is already known its column count fixes the length.
    """
    if matrix_cols is None:
        rows = prompter.ask_int(
            "Введите максимальное количество элементов вектора-столбца: ",
            "Количество элементов введено неверно.",
            lambda n: n > 0,
        )
    else:
        prompter.say(
            "Кол-во строк вектора-столбца равно кол-ву столбцов матрицы = "
            f"{matrix_cols}.\n"
        )
        rows = matrix_cols
    count = prompter.ask_int(
        "Введите количество ненулевых элементов вектора: ",
        "Введено неверное количество ненулевых элементов.",
        lambda n: 0 <= n <= rows,
    )
    return rows, count


def read_vector(prompter: Prompter, rows: int, count: int) -> SparseVector:
    """Ask for ``count`` index/value pairs of a vector of length ``rows``."""
    values: list[int] = []
    indices: list[int] = []
    for _ in range(count):
        index = prompter.ask_int(
            "Введите индекс вектора-столбца: ",
            "Ошибка ввода индекса вектора-столбца",
            lambda n: 0 <= n < rows,
        )
        value = prompter.ask_int(
            f"Введите ненулевое значение вектора-столбца с индексом {index}: ",
            "Ошибка ввода значения вектора-столбца",
            lambda n: n != 0,
        )
        values.append(value)
        indices.append(index)
    return SparseVector(rows, values, indices)