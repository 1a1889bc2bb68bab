"""Interactive menu multiplying a matrix by a sparse column vector."""

from __future__ import annotations

import random
import sys
from enum import IntEnum
from typing import TextIO

from .input_tools import EmptyInput, InputError, Prompter, read_int
from .matrix import DenseMatrix, SparseMatrix, fill_matrix_with_coords, read_matrix_size
from .mv_operations import matrix_mul_vector, sparse_matrix_mul_vector
from .sparse_timer import print_measurements
from .vector import SparseVector, read_vector, read_vector_sizes


class MenuAction(IntEnum):
    EXIT = 0
    READ_MATRIX = 1
    READ_VECTOR = 2
    PRINT_MATRIX = 3
    PRINT_VECTOR = 4
    MULTIPLICATION = 5
    COMPARING = 6


def menu_text() -> str:
    """The main menu as printed before each choice."""
    return (
        "\n"
        "========================================\n"
        "Программа для умножения матрицы на вектор-столбец.\n"
        "Пункты меню:\n"
        "1) Ввести матрицу\n"
        "2) Ввести вектор-столбец\n"
        "3) Вывести матрицу\n"
        "4) Вывести вектор-столбец\n"
        "5) Умножить матрицу на вектор-столбец\n"
        "6) Получить результат сравнения алгоритмов при различном проценте заполнения\n"
        "0) Завершить работу программы\n"
        "========================================\n"
        "Введите пункт: "
    )


class _Session:
    """Matrix and vector entered so far, and the actions on them."""

    def __init__(self, prompter: Prompter, rng: random.Random) -> None:
        self.prompter = prompter
        self.rng = rng
        self.matrix: DenseMatrix | None = None
        self.sparse: SparseMatrix | None = None
        self.vector: SparseVector | None = None

    def _choose(self, prompt: str, error: str = "Выбран неверный пункт.") -> int:
        return self.prompter.ask_int(prompt, error, lambda n: n in (1, 2))

    def read_matrix(self) -> None:
        vector_rows = self.vector.rows if self.vector is not None else None
        rows, cols, count = read_matrix_size(self.prompter, vector_rows)
        matrix = DenseMatrix(rows, cols)
        choice = self._choose(
            "Выберите каким способом вы хотите заполнить матрицу:\n"
            "1) Ввод с консоли\n"
            "2) Рандомное заполнение\n",
            "Выбран неверный пункт. Попробуйте еще раз.",
        )
        if choice == 1:
            fill_matrix_with_coords(matrix, count, self.prompter)
        else:
            matrix.fill_random(count, self.rng)
        self.prompter.say("Матрица успешно заполнена.\n")
        self.matrix = matrix
        self.sparse = matrix.to_sparse()

    def read_vector(self) -> None:
        matrix_cols = self.matrix.cols if self.matrix is not None else None
        rows, count = read_vector_sizes(self.prompter, matrix_cols)
        choice = self._choose(
            "Выберите каким способом вы хотите заполнить вектор-столбец:\n"
            "1) Ввод с консоли\n"
            "2) Рандомное заполнение\n"
        )
        if choice == 1:
            vector = read_vector(self.prompter, rows, count)
        else:
            vector = SparseVector(rows)
            vector.fill_random(count, self.rng)
        self.prompter.say("Вектор успешно заполнен.")
        self.vector = vector

    def print_matrix(self) -> None:
        if self.matrix is None or self.sparse is None:
            self.prompter.say("Матрица не введена, выводить нечего.\n")
            return
        choice = self._choose(
            "Выберите в каком формате хотите вывести матрицу:\n"
            "1) В стандартном виде\n"
            "2) В форме хранения CSR\n"
        )
        self.prompter.say(self.matrix.format() if choice == 1 else self.sparse.format())

    def print_vector(self) -> None:
        if self.vector is None:
            self.prompter.say("Векор пуст. Выводить нечего.\n")
            return
        choice = self._choose(
            "Выберите в каком формате хотите вывести вектор-столбец:\n"
            "1) В стандартном виде\n"
            "2) В виде разреженного вектора\n"
        )
        self.prompter.say(
            self.vector.format_dense() if choice == 1 else self.vector.format_sparse()
        )

    def multiply(self) -> None:
        if self.vector is None or self.matrix is None or self.sparse is None:
            self.prompter.say("Матрица или вектор не введены. Умножать нечего.\n")
            return
        choice = self._choose(
            "Выберите каким способом вы хотите произвести умножение:\n"
            "1) Стандартное умножение матриц\n"
            "2) Умножение разреженных матриц\n"
        )
        if choice == 1:
            product = matrix_mul_vector(self.matrix, self.vector)
        else:
            product = sparse_matrix_mul_vector(self.sparse, self.vector)
        product = product.without_zeros()
        self.prompter.say("Результат умножения:\n")
        if product.num_non_zeros:
            self.prompter.say(product.format_sparse())
        else:
            self.prompter.say("Матрица нулевая.")

    def dispatch(self, action: int) -> None:
        if action == MenuAction.READ_MATRIX:
            self.read_matrix()
        elif action == MenuAction.READ_VECTOR:
            self.read_vector()
        elif action == MenuAction.PRINT_MATRIX:
            self.print_matrix()
        elif action == MenuAction.PRINT_VECTOR:
            self.print_vector()
        elif action == MenuAction.MULTIPLICATION:
            self.multiply()
        elif action == MenuAction.COMPARING:
            print_measurements(self.prompter.stdout, rng=self.rng)
        else:
            self.prompter.say("Выберите 1 из пунктов меню.\n")


def run(stdin: TextIO, stdout: TextIO, rng: random.Random | None = None) -> int:
    """Run the menu loop until the exit item is chosen or input ends."""
    prompter = Prompter(stdin, stdout)
    session = _Session(prompter, rng or random.Random())
    try:
        while True:
            prompter.say(menu_text())
            try:
                action = read_int(stdin)
            except EmptyInput:
                break
            except InputError:
                prompter.say("Ошибка: Пожалуйста, введите число.\n")
                continue
            if action == MenuAction.EXIT:
                break
            session.dispatch(action)
    except EOFError:
        pass
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: run the menu on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())