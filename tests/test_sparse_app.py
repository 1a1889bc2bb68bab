import io
import random

from structlabs.matrix import DenseMatrix
from structlabs.mv_operations import matrix_mul_vector, sparse_matrix_mul_vector
from structlabs.sparse_app import MenuAction, menu_text, run
from structlabs.vector import SparseVector


def run_app(text, rng=None):
    out = io.StringIO()
    code = run(io.StringIO(text), out, rng or random.Random(0))
    return code, out.getvalue()


# menu 1, rows 2, cols 2, nnz 2, by hand, (0,0)=3, (1,1)=4
READ_MATRIX = "1\n2\n2\n2\n1\n0\n0\n3\n1\n1\n4\n"
# menu 2, nnz 2, by hand, index 0 value 1, index 1 value 2
READ_VECTOR = "2\n2\n1\n0\n1\n1\n2\n"


def test_menu_text_lists_items():
    text = menu_text()
    assert "5) Умножить матрицу на вектор-столбец\n" in text
    assert text.endswith("Введите пункт: ")
    assert MenuAction.COMPARING == 6


def test_exit_returns_zero():
    code, out = run_app("0\n")
    assert code == 0
    assert out == menu_text()


def test_end_of_input_stops_loop():
    code, out = run_app("")
    assert code == 0
    assert out.count("Введите пункт: ") == 1


def test_non_number_and_unknown_item():
    _, out = run_app("abc\n9\n0\n")
    assert "Ошибка: Пожалуйста, введите число." in out
    assert "Выберите 1 из пунктов меню.\n" in out


def test_nothing_to_print_or_multiply():
    _, out = run_app("3\n4\n5\n0\n")
    assert "Матрица не введена, выводить нечего.\n" in out
    assert "Векор пуст. Выводить нечего.\n" in out
    assert "Матрица или вектор не введены. Умножать нечего.\n" in out


def test_read_and_print_matrix():
    _, out = run_app(READ_MATRIX + "3\n1\n3\n2\n0\n")
    matrix = DenseMatrix.from_rows([[3, 0], [0, 4]])
    assert "Матрица успешно заполнена.\n" in out
    assert matrix.format() in out
    assert matrix.to_sparse().format() in out


def test_invalid_fill_choice_is_asked_again():
    _, out = run_app("1\n1\n1\n1\n7\n1\n0\n0\n5\n0\n")
    assert "Выбран неверный пункт. Попробуйте еще раз." in out
    assert "Матрица успешно заполнена.\n" in out


def test_multiplication_both_ways_match_package_result():
    matrix = DenseMatrix.from_rows([[3, 0], [0, 4]])
    vector = SparseVector(2, [1, 2], [0, 1])
    dense_expected = matrix_mul_vector(matrix, vector).without_zeros().format_sparse()
    sparse_expected = (
        sparse_matrix_mul_vector(matrix.to_sparse(), vector).without_zeros().format_sparse()
    )
    _, out_dense = run_app(READ_MATRIX + READ_VECTOR + "5\n1\n0\n")
    _, out_sparse = run_app(READ_MATRIX + READ_VECTOR + "5\n2\n0\n")
    assert "Результат умножения:\n" + dense_expected in out_dense
    assert "Результат умножения:\n" + sparse_expected in out_sparse
    assert dense_expected == sparse_expected


def test_zero_product_message():
    # matrix 2x2 with (0,0)=1; vector with index 1 value 5
    text = "1\n2\n2\n1\n1\n0\n0\n1\n" + "2\n1\n1\n1\n5\n" + "5\n2\n0\n"
    _, out = run_app(text)
    assert "Матрица нулевая." in out


def test_vector_first_fixes_matrix_columns():
    text = "2\n3\n1\n1\n2\n5\n" + "1\n1\n1\n2\n" + "3\n1\n0\n"
    _, out = run_app(text, random.Random(4))
    assert "Вектор успешно заполнен." in out
    assert "Количество столбцов матрицы равно кол-ву строк вектора столбца = 3.\n" in out
    assert "Матрица размером 1 на 3:\n" in out


def test_print_vector_dense():
    text = "2\n3\n1\n1\n2\n5\n" + "4\n1\n0\n"
    _, out = run_app(text)
    assert SparseVector(3, [5], [2]).format_dense() in out


def test_random_vector_fill_is_reproducible():
    text = "2\n6\n3\n2\n4\n2\n0\n"
    _, first = run_app(text, random.Random(11))
    _, second = run_app(text, random.Random(11))
    assert first == second
    assert "Ненулевые значения вектора:\n" in first