import io
from decimal import Decimal

from structlabs.bignum import multiply, read_bigint, read_bignum
from structlabs.bignum_cli import main, run


def run_cli(text):
    out = io.StringIO()
    code = run(io.StringIO(text), out)
    return code, out.getvalue()


def test_successful_product():
    code, output = run_cli("1.5\n2\n")
    expected = multiply(read_bignum("1.5"), read_bigint("2")).normalized().format()
    assert code == 0
    assert f"Результат: {expected}\n" in output
    assert output.endswith("---------\n")
    assert Decimal(expected) == Decimal("3")


def test_empty_first_number():
    code, output = run_cli("")
    assert code == 1
    assert "Ошибка: введенная строка пустая" in output


def test_invalid_second_number():
    code, output = run_cli("2.5\n1.5\n")
    assert code == 4
    assert "Введен недопустимый символ" in output


def test_first_mantissa_too_long():
    code, output = run_cli("1" * 41 + "\n2\n")
    assert code == 5
    assert "ОШИБКА: мантисса первого числа слишком длинная" in output


def test_second_mantissa_too_long():
    code, output = run_cli("2\n" + "1" * 31 + "\n")
    assert code == 6
    assert "ОШИБКА: мантисса второго числа слишком длинная" in output


def test_result_order_too_large():
    code, output = run_cli("1E99999\n10\n")
    assert code == 8
    assert "ОШИБКА: порядок результата слишком большой" in output


def test_main_uses_standard_streams(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-3\n4\n"))
    assert main([]) == 0
    expected = multiply(read_bignum("-3"), read_bigint("4")).normalized().format()
    assert f"Результат: {expected}" in capsys.readouterr().out