"""Dense matrices and their compressed sparse row (CSR) form."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from itertools import pairwise

from .input_tools import Prompter


def _joined_line(items: list[int]) -> str:
    """Items separated by spaces and ended by a newline; nothing when empty."""
    return " ".join(str(item) for item in items) + "\n" if items else ""


class DenseMatrix:
    """A rows × cols matrix of integers stored in full."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, rows: int, cols: int) -> None:
        if rows <= 0 or cols <= 0:
            raise ValueError("matrix dimensions must be positive")
        self.rows = rows
        self.cols = cols
        self.data: list[list[int]] = [[0] * cols for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: list[list[int]]) -> DenseMatrix:
        """Build a matrix from a list of equally long rows."""
        if not rows or not rows[0]:
            raise ValueError("matrix dimensions must be positive")
        width = len(rows[0])
        if any(len(row) != width for row in rows):
            raise ValueError("rows must have equal length")
        matrix = cls(len(rows), width)
        matrix.data = [list(row) for row in rows]
        return matrix

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = position
        return self.data[row][col]

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        row, col = position
        self.data[row][col] = value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseMatrix):
            return NotImplemented
        return self.rows == other.rows and self.cols == other.cols and self.data == other.data

    def __repr__(self) -> str:
        return f"DenseMatrix.from_rows({self.data!r})"

    @property
    def num_non_zeros(self) -> int:
        return sum(1 for row in self.data for value in row if value)

    def fill_random(self, count: int, rng: random.Random | None = None) -> None:
        """Put ``count`` values 1..10 into randomly chosen zero cells."""
        free = self.rows * self.cols - self.num_non_zeros
        if not 0 <= count <= free:
            raise ValueError(f"cannot place {count} elements into {free} free cells")
        rng = rng or random.Random()
        placed = 0
        while placed < count:
            row = rng.randrange(self.rows)
            col = rng.randrange(self.cols)
            if self.data[row][col] == 0:
                self.data[row][col] = rng.randrange(10) + 1
                placed += 1

    def to_sparse(self) -> SparseMatrix:
        """Convert to CSR form."""
        values: list[int] = []
        columns: list[int] = []
        row_starts: list[int] = []
        for row in self.data:
            row_starts.append(len(values))
            for col, value in enumerate(row):
                if value:
                    values.append(value)
                    columns.append(col)
        row_starts.append(len(values))
        return SparseMatrix(self.rows, self.cols, values, columns, row_starts)

    def format(self) -> str:
        body = "".join(" ".join(str(value) for value in row) + "\n" for row in self.data)
        return f"Матрица размером {self.rows} на {self.cols}:\n" + body


@dataclass
class SparseMatrix:
    """CSR matrix: non-zero values, their columns and the start of each row."""

    rows: int
    cols: int
    values: list[int] = field(default_factory=list)
    columns: list[int] = field(default_factory=list)
    row_starts: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.values) != len(self.columns):
            raise ValueError("values and columns must have equal length")
        if not self.row_starts:
            self.row_starts = [0] * (self.rows + 1)
        if len(self.row_starts) != self.rows + 1:
            raise ValueError("row_starts must have rows + 1 entries")

    @property
    def num_non_zeros(self) -> int:
        return len(self.values)

    def to_dense(self) -> DenseMatrix:
        """Expand to a full matrix."""
        matrix = DenseMatrix(self.rows, self.cols)
        for row, (start, end) in enumerate(pairwise(self.row_starts)):
            for value, col in zip(self.values[start:end], self.columns[start:end]):
                matrix.data[row][col] = value
        return matrix

    def format(self) -> str:
        return (
            "Вектор А, который содержит значения ненулевых элементов:\n"
            + _joined_line(self.values)
            + "Вектор JA, который содержит номера столбцов, для элеметнов вектора А:\n"
            + _joined_line(self.columns)
            + "Вектор IA, который содержит индекс вектора JA, с которой начинается "
            "строка матрицы A:\n"
            + _joined_line(self.row_starts)
        )


def read_matrix_size(prompter: Prompter, vector_rows: int | None = None) -> tuple[int, int, int]:
    """Ask for rows, columns and the number of non-zeros.

    When a vector is already known its length fixes the number of columns.
    """
    rows = prompter.ask_int(
        "Введите количество строк матрицы: ",
        "Количество строк введено неверно. Введите еще раз",
        lambda n: n > 0,
    )
    if vector_rows is None:
        cols = prompter.ask_int(
            "Введите количество столбцов матрицы: ",
            "Количество столбцов введено неверно. Введите еще раз",
            lambda n: n > 0,
        )
    else:
        prompter.say(
            "Количество столбцов матрицы равно кол-ву строк вектора столбца = "
            f"{vector_rows}.\n"
        )
        cols = vector_rows
    total = rows * cols
    count = prompter.ask_int(
        f"Введите количество ненулевых элементов матрицы (от 1 до {total}): ",
        "Количество ненулевых элементов матрицы введено неверно. Введите еще раз",
        lambda n: 0 < n <= total,
    )
    return rows, cols, count


def fill_matrix_with_coords(matrix: DenseMatrix, count: int, prompter: Prompter) -> None:
    """Ask for coordinates and values until ``count`` zero cells have been filled."""
    free = matrix.rows * matrix.cols - matrix.num_non_zeros
    if not 0 <= count <= free:
        raise ValueError(f"cannot place {count} elements into {free} free cells")
    placed = 0
    while placed < count:
        row = prompter.ask_int(
            f"Введите индекс строки матрицы (от 0 до {matrix.rows - 1}): ",
            "Ошибка ввода индекса строки. Введите еще раз",
            lambda n: 0 <= n < matrix.rows,
        )
        col = prompter.ask_int(
            f"Введите индекс столбца матрицы (от 0 до {matrix.cols - 1}): ",
            "Ошибка ввода индекса столбца.",
            lambda n: 0 <= n < matrix.cols,
        )
        value = prompter.ask_int(
            "Введите ненулевое значение элемента матрицы: ",
            "Ошибка ввода значения элемента. Введите еще раз",
            lambda n: n != 0,
        )
        if matrix[row, col] == 0:
            placed += 1
        else:
            prompter.say("Вы перезаписали ненулевой элемент\n")
        matrix[row, col] = value