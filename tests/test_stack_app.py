import io

from structlabs.stack_app import MAX_STACK_SIZE, MenuAction, menu_text, run
from structlabs.stack_series import format_series


def _run(text):
    out = io.StringIO()
    status = run(io.StringIO(text), out)
    return status, out.getvalue()


def test_exit_immediately_prints_menu():
    status, output = _run("0\n")
    assert status == 0
    assert output == menu_text()


def test_menu_text_lists_exit_item():
    assert "0) Завершить работу программы\n" in menu_text()
    assert menu_text().endswith("Введите пункт: ")


def test_menu_action_values():
    assert MenuAction.PRINT_MEASUREMENTS == 12
    assert MenuAction(9) is MenuAction.ADD_SEQ_TO_LIST_STACK


def test_array_push_and_print():
    _, output = _run("1\n5\n1\n7\n5\n0\n")
    assert "Текущее состояние стека:\n7 5 \n" in output


def test_array_pop_empty():
    _, output = _run("3\n0\n")
    assert "Ошибка удаления элемента. Стек пуст" in output


def test_array_pop_returns_top():
    _, output = _run("1\n9\n3\n0\n")
    assert "Извлеченный элемент: 9" in output


def test_list_pop_records_freed_node():
    _, output = _run("2\n4\n4\n7\n0\n")
    assert "Извлеченный элемент: 4" in output
    assert "Освобожденная область памяти: 0x" in output


def test_free_list_empty():
    _, output = _run("7\n0\n")
    assert "Выводить нечего. Элементы не удалялись" in output


def test_non_number_action():
    _, output = _run("abc\n0\n")
    assert "Ошибка: Пожалуйста, введите число." in output


def test_unknown_action():
    _, output = _run("99\n0\n")
    assert "Выберите 1 из пунктов меню." in output


def test_push_retries_after_bad_value():
    _, output = _run("1\nx\n3\n5\n0\n")
    assert "Ошибка ввода элемента. Попробуйте еще раз." in output
    assert "3 \n" in output


def test_sequence_series_on_array():
    _, output = _run("8\n3\n5\n1\n2\n10\n0\n")
    assert format_series([2, 1, 5]) in output


def test_sequence_series_on_list():
    _, output = _run("9\n3\n5\n1\n2\n11\n0\n")
    assert format_series([2, 1, 5]) in output


def test_series_on_empty_stack():
    _, output = _run("10\n0\n")
    assert "Выводить нечего. Стек пуст." in output


def test_sequence_zero_length():
    _, output = _run("8\n0\n0\n")
    assert "Ничего не введено." in output


def test_sequence_length_over_capacity_rejected():
    _, output = _run("8\n25\n0\n0\n")
    assert "Введите валидное число." in output


def test_full_array_stack_refuses_push():
    values = "".join(f"{n}\n" for n in range(MAX_STACK_SIZE))
    _, output = _run(f"8\n{MAX_STACK_SIZE}\n{values}1\n0\n")
    assert "Ошибка добавления элемента. Стек переполнен" in output


def test_input_ends_without_exit():
    status, output = _run("1\n")
    assert status == 0
    assert output.count(menu_text()) == 1