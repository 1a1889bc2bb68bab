"""Interactive menu comparing a stack on an array with one on a linked list."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

from .array_stack import ArrayStack
from .input_tools import EmptyInput, InputError, Prompter, read_int
from .list_stack import ListStack
from .stack_series import print_sequence
from .stack_timer import print_measurements

MAX_STACK_SIZE = 20

_EMPTY_PRINT = "Выводить нечего. Стек пуст.\n"
_FULL = "Ошибка добавления элемента. Стек переполнен\n"
_EMPTY_POP = "Ошибка удаления элемента. Стек пуст\n"


class MenuAction(IntEnum):
    EXIT = 0
    ARR_STACK_PUSH = 1
    LIST_STACK_PUSH = 2
    ARR_STACK_POP = 3
    LIST_STACK_POP = 4
    PRINT_ARR_STACK = 5
    PRINT_LIST_STACK = 6
    PRINT_FREE_LIST = 7
    ADD_SEQ_TO_ARR_STACK = 8
    ADD_SEQ_TO_LIST_STACK = 9
    PRINT_SEQUENCE_ON_ARR = 10
    PRINT_SEQUENCE_ON_LIST = 11
    PRINT_MEASUREMENTS = 12


def menu_text() -> str:
    """The main menu as printed before each choice."""
    return (
        "\n"
        "========================================\n"
        "Программа для работы со стеком.\n"
        "Пункты меню:\n"
        "1) Добавить элемент в стек на массиве\n"
        "2) Добавить элемент в стек на списке\n"
        "3) Извлечь элемент из стека на массиве\n"
        "4) Извлечь элемент из стека на списке\n"
        "5) Вывести текущее состояние стека на массиве\n"
        "6) Вывести текущее состояние стека на списке\n"
        "7) Вывести список свободных областей\n"
        "8) Ввести последовательность целых чисел в стек на массиве\n"
        "9) Ввести последовательность целых чисел в стек на списке\n"
        "10) Вывести убывающие серии в стеке на массиве.\n"
        "11) Вывести убывающие серии в стеке на списке.\n"
        "12) Вывести результат замеров\n"
        "0) Завершить работу программы\n"
        "========================================\n"
        "Введите пункт: "
    )


def _push_one(prompter: Prompter, stack: ArrayStack | ListStack) -> None:
    if stack.is_full():
        prompter.say(_FULL)
        return
    value = prompter.ask_int(
        "Введите число, которое хотите добавить в стек: ",
        "Ошибка ввода элемента. Попробуйте еще раз.",
    )
    stack.push(value)


def _pop_one(prompter: Prompter, stack: ArrayStack | ListStack) -> None:
    if stack.is_empty():
        prompter.say(_EMPTY_POP)
        return
    prompter.say(f"Извлеченный элемент: {stack.pop()}")


def _add_sequence(prompter: Prompter, stack: ArrayStack | ListStack, prompt: str) -> None:
    remaining = MAX_STACK_SIZE - len(stack)
    length = prompter.ask_int(
        prompt.format(remaining),
        "Введите валидное число.",
        lambda n: 0 <= n <= remaining,
    )
    if length == 0:
        prompter.say("Ничего не введено.\n")
        return
    prompter.say("Введите последовательность: \n")
    for number in range(1, length + 1):
        value = prompter.ask_int(
            f"Введите {number} член последовательности: ",
            "Число введено неверно.",
        )
        stack.push(value)


def _show_stack(prompter: Prompter, stack: ArrayStack | ListStack) -> None:
    if stack.is_empty():
        prompter.say(_EMPTY_PRINT)
        return
    prompter.say("Текущее состояние стека:\n")
    prompter.say(stack.format())


def _show_series(prompter: Prompter, stack: ArrayStack | ListStack) -> None:
    if stack.is_empty():
        prompter.say(_EMPTY_PRINT)
        return
    print_sequence(prompter.stdout, stack)


def _dispatch(
    action: int, prompter: Prompter, arr_stack: ArrayStack, list_stack: ListStack
) -> None:
    if action == MenuAction.ARR_STACK_PUSH:
        _push_one(prompter, arr_stack)
    elif action == MenuAction.LIST_STACK_PUSH:
        _push_one(prompter, list_stack)
    elif action == MenuAction.ARR_STACK_POP:
        _pop_one(prompter, arr_stack)
    elif action == MenuAction.LIST_STACK_POP:
        _pop_one(prompter, list_stack)
    elif action == MenuAction.PRINT_ARR_STACK:
        _show_stack(prompter, arr_stack)
    elif action == MenuAction.PRINT_LIST_STACK:
        _show_stack(prompter, list_stack)
    elif action == MenuAction.PRINT_FREE_LIST:
        if not list_stack.freed_addresses():
            prompter.say("Выводить нечего. Элементы не удалялись\n")
        else:
            prompter.say(list_stack.format_free_list())
    elif action == MenuAction.ADD_SEQ_TO_ARR_STACK:
        _add_sequence(
            prompter, arr_stack, "Введите кол-во чисел в последовательность (не больше {}): "
        )
    elif action == MenuAction.ADD_SEQ_TO_LIST_STACK:
        _add_sequence(
            prompter, list_stack, "Введите кол-во чисел в последовательность (не больше {})"
        )
    elif action == MenuAction.PRINT_SEQUENCE_ON_ARR:
        _show_series(prompter, arr_stack)
    elif action == MenuAction.PRINT_SEQUENCE_ON_LIST:
        _show_series(prompter, list_stack)
    elif action == MenuAction.PRINT_MEASUREMENTS:
        print_measurements(prompter.stdout)
    else:
        prompter.say("Выберите 1 из пунктов меню.\n")


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the exit item is chosen or input ends."""
    prompter = Prompter(stdin, stdout)
    arr_stack = ArrayStack(MAX_STACK_SIZE)
    list_stack = ListStack(MAX_STACK_SIZE)
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
            _dispatch(action, prompter, arr_stack, list_stack)
    except EOFError:
        pass
    finally:
        list_stack.clear()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: run the menu on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())