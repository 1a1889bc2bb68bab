import io
import random

import pytest

from structlabs.input_tools import Prompter
from structlabs.matrix import (
    DenseMatrix,
    SparseMatrix,
    fill_matrix_with_coords,
    read_matrix_size,
)


def _prompter(text):
    return Prompter(io.StringIO(text), io.StringIO())


def test_new_matrix_is_zero():
    matrix = DenseMatrix(2, 3)
    assert matrix.data == [[0, 0, 0], [0, 0, 0]]
    assert matrix.num_non_zeros == 0


@pytest.mark.parametrize("rows, cols", [(0, 3), (3, 0), (-1, 2)])
def test_bad_dimensions_rejected(rows, cols):
    with pytest.raises(ValueError):
        DenseMatrix(rows, cols)


def test_item_access():
    matrix = DenseMatrix(2, 2)
    matrix[1, 0] = 9
    assert matrix[1, 0] == 9
    assert matrix.data[1][0] == 9


def test_to_sparse_layout():
    matrix = DenseMatrix.from_rows([[0, 5], [7, 0]])
    sparse = matrix.to_sparse()
    assert sparse.values == [5, 7]
    assert sparse.columns == [1, 0]
    assert sparse.row_starts == [0, 1, 2]


def test_random_fill_round_trip():
    matrix = DenseMatrix(6, 7)
    matrix.fill_random(15, random.Random(3))
    assert matrix.num_non_zeros == 15
    assert all(1 <= v <= 10 for row in matrix.data for v in row if v)
    sparse = matrix.to_sparse()
    assert sparse.num_non_zeros == 15
    assert sparse.row_starts[-1] == 15
    assert sparse.to_dense() == matrix


def test_random_fill_full_matrix():
    matrix = DenseMatrix(3, 3)
    matrix.fill_random(9, random.Random(0))
    assert matrix.num_non_zeros == 9


def test_random_fill_too_many():
    with pytest.raises(ValueError):
        DenseMatrix(2, 2).fill_random(5, random.Random(0))


def test_dense_format():
    matrix = DenseMatrix.from_rows([[1, 0], [0, 2]])
    assert matrix.format() == "Матрица размером 2 на 2:\n1 0\n0 2\n"


def test_sparse_format():
    sparse = DenseMatrix.from_rows([[0, 3], [4, 0]]).to_sparse()
    lines = sparse.format().splitlines()
    assert lines[0] == "Вектор А, который содержит значения ненулевых элементов:"
    assert lines[1] == "3 4"
    assert lines[5] == "0 1 2"


def test_sparse_bad_row_starts():
    with pytest.raises(ValueError):
        SparseMatrix(2, 2, [1], [0], [0, 1])


def test_read_matrix_size_retries():
    prompter = _prompter("0\n2\n3\n7\n4\n")
    assert read_matrix_size(prompter) == (2, 3, 4)
    out = prompter.stdout.getvalue()
    assert "Количество строк введено неверно. Введите еще раз" in out
    assert "Количество ненулевых элементов матрицы введено неверно" in out


def test_read_matrix_size_with_vector():
    prompter = _prompter("2\n3\n")
    assert read_matrix_size(prompter, 5) == (2, 5, 3)
    assert "= 5." in prompter.stdout.getvalue()


def test_read_matrix_size_eof():
    with pytest.raises(EOFError):
        read_matrix_size(_prompter("2\n"))


def test_fill_with_coords_overwrite():
    matrix = DenseMatrix(2, 2)
    prompter = _prompter("9\n0\n1\n5\n0\n1\n6\n1\n0\n-3\n")
    fill_matrix_with_coords(matrix, 2, prompter)
    assert matrix[0, 1] == 6
    assert matrix[1, 0] == -3
    assert matrix.num_non_zeros == 2
    out = prompter.stdout.getvalue()
    assert "Вы перезаписали ненулевой элемент" in out
    assert "Ошибка ввода индекса строки" in out


def test_fill_with_coords_too_many():
    with pytest.raises(ValueError):
        fill_matrix_with_coords(DenseMatrix(1, 1), 2, _prompter(""))