"""Interactive menu for a theatre repertoire table and its key table."""

from __future__ import annotations

import math
import sys
from enum import IntEnum
from typing import TextIO

from .input_tools import EmptyInput, InputError, read_int, read_line
from .theatre import MAX_STR_LEN, TheatreError, read_theatre
from .theatre_table import (
    MAX_ROW_COUNT,
    NUM_OF_ITERATIONS,
    TableError,
    TheatreKey,
    TheatreTable,
    insertion_sort,
    quick_sort,
    time_sort_keys,
    time_sort_table,
)

FILE_NAME_LEN = 257
THEATRE_SIZE = 152
KEY_SIZE = 16
_INT_LINE_LEN = 1_000_000

_RULE = "|---------------------------|---------------------------|----------------|\n"


class MenuAction(IntEnum):
    EXIT_PROGRAM = 0
    LOAD_TABLE = 1
    PRINT_NOT_SORTED_TABLE = 2
    PRINT_NOT_SORTED_KEYS = 3
    ADD_THEATRE = 4
    DELETE_THEATRE = 5
    PRINT_SORTED_KEYS = 6
    PRINT_SORTED_TABLE = 7
    PRINT_SORTED_TABLE_BY_KEYS = 8
    PRINT_BALLETS = 9
    COMP_TABLE_WITH_KEYS = 10
    COMPARE_SORTS = 11
    SAVE_FILE = 12


def menu_text() -> str:
    """The main menu as printed before each choice."""
    return (
        "\n"
        "========================================\n"
        "Программа для работы с репертуаром тетаров\n"
        "Пункты меню:\n"
        " 1) Загрузить таблицу из файла\n"
        " 2) Показать несортированную таблицу\n"
        " 3) Вывести неупорядоченную таблицу ключей\n"
        " 4) Добавить запись в конец таблицы\n"
        " 5) Удалить (первый попавшийся) театр по его названию\n"
        " 6) Вывести упорядоченную таблицу ключей\n"
        " 7) Вывести упорядоченную таблицу, к-рая упорядочена сама по минимальной цене билета\n"
        " 8) Вывести таблицу с помощью упорядоченных ключей\n"
        " 9) Вывести все баллеты указанного возраста, продолжительностью меньше указанной\n"
        " 10) Получить результат сравнения эффективности работы для текущей таблицы и массива ключей\n"
        " 11) Получить результат использования различных алгоритмов сортировок\n"
        " 12) Сохранить таблицу в файл.\n"
        " 0) Завершить работу программы\n"
        "========================================\n"
        "Введите пункт: "
    )


def _percent(numerator: float, denominator: float) -> float:
    if denominator:
        return numerator / denominator * 100
    if numerator > 0:
        return math.inf
    if numerator < 0:
        return -math.inf
    return math.nan


def _row(first: str, second: str, value: float) -> str:
    return f"| {first:<25} | {second:<25} | {value:<14.6f} |\n"


def _key_price(key: TheatreKey) -> int:
    return key.price_low


class _Session:
    """The table, its key table and the actions of the menu."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout
        self.table = TheatreTable()
        self.keys: list[TheatreKey] = []

    def say(self, text: str) -> None:
        self.stdout.write(text)

    def _read_file_name(self, prompt: str) -> str | None:
        self.say(prompt)
        try:
            return read_line(self.stdin, FILE_NAME_LEN, allow_empty=True)
        except InputError:
            self.say("Ошибка чтения имени файла.\n")
            return None

    def load(self) -> None:
        name = self._read_file_name("Введите имя файла: ")
        if name is None:
            return
        try:
            stream = open(name, encoding="utf-8")
        except OSError:
            self.say("Ошибка открытия файла или его не существует.\n")
            return
        self.table = TheatreTable()
        self.keys = []
        with stream:
            try:
                table = TheatreTable.load(stream)
            except (TableError, UnicodeDecodeError):
                self.say("Файл записан не правильно, или он пуст.\n")
                return
        self.table = table
        self.keys = table.keys()
        self.say("Таблица успешна загружена.\n")

    def print_table(self) -> None:
        if not self.table.rows:
            self.say("Таблица пуста.\n")
            return
        self.say(self.table.format_table())

    def print_keys(self) -> None:
        if not self.keys:
            self.say("Таблица ключей пуста.\n")
            return
        self.say(self.table.format_keys(self.keys))

    def add(self) -> None:
        if self.table.rows >= MAX_ROW_COUNT:
            self.say("Ошибка добавления театра.\n")
            return
        try:
            theatre = read_theatre(self.stdin, self.stdout)
            self.table.add(theatre)
        except (InputError, TheatreError, TableError):
            self.say("Ошибка добавления театра.\n")
            return
        self.keys = self.table.keys()
        self.say("Театр был успешно добавлен.\n")

    def delete(self) -> None:
        self.say("Введите название театра, который хотите удалить: ")
        try:
            name = read_line(self.stdin, MAX_STR_LEN, allow_empty=True)
        except InputError:
            self.say("Ошибка ввода названия театра.\n")
            self.say("Ничего не удалилось.\n")
            return
        try:
            self.table.delete_by_name(name)
        except TableError:
            self.say("Ничего не удалилось.\n")
            return
        self.say("Театр успешно удален.\n")
        self.keys = self.table.keys()

    def print_sorted_keys(self) -> None:
        if not self.keys:
            self.say("Таблица ключей пуста.\n")
            return
        self.keys = quick_sort(self.keys, _key_price)
        self.say(self.table.format_keys(self.keys))

    def print_sorted_table(self) -> None:
        if not self.table.rows:
            self.say("Таблица пуста.\n")
        self.table.theatres = quick_sort(self.table.theatres, lambda t: t.price_low)
        self.say(self.table.format_table())
        self.keys = self.table.keys()

    def print_by_keys(self) -> None:
        if not self.keys:
            self.say("Таблицы пусты.\n")
            return
        self.keys = quick_sort(self.keys, _key_price)
        self.say(self.table.format_by_keys(self.keys))

    def ballets(self) -> None:
        self.say(
            "Введите возрастное ограничение на балет "
            "(возраст должен быть больше или равен 3): "
        )
        try:
            age = read_int(self.stdin, _INT_LINE_LEN, allow_empty=True)
        except InputError:
            age = None
        if age is None or age < 3:
            self.say("Ошибка ввода возраста.\n")
            return
        self.say("Введите продолжительность балета: ")
        try:
            duration = read_int(self.stdin, _INT_LINE_LEN, allow_empty=True)
        except InputError:
            duration = None
        if duration is None or duration <= 0:
            self.say("Ошибка ввода продолжительности.\n")
            return
        self.say(self.table.format_ballets(age, duration))
        if not self.table.find_ballets(age, duration):
            self.say("Балеты не найдены.\n")

    def _timings(self) -> tuple[float, float, float, float]:
        return (
            time_sort_table(self.table, NUM_OF_ITERATIONS, quick_sort),
            time_sort_keys(self.keys, NUM_OF_ITERATIONS, quick_sort),
            time_sort_table(self.table, NUM_OF_ITERATIONS, insertion_sort),
            time_sort_keys(self.keys, NUM_OF_ITERATIONS, insertion_sort),
        )

    def _sizes(self) -> str:
        table_size = THEATRE_SIZE * self.table.rows
        keys_size = KEY_SIZE * len(self.keys)
        both = table_size + keys_size
        return (
            "\nРазмеры: \n"
            f" -Таблицы: {table_size} байт\n"
            f" -Таблицы + ключи: {both} байт\n"
            f" -Ключи: {keys_size} байт\n"
            "Таблица с ключами занимает на "
            f"{_percent(both, table_size) - 100:.2f}% больше места, чем сама таблица\n"
        )

    def compare_table_with_keys(self) -> None:
        if not self.table.rows:
            self.say("Таблицы пусты. Замерять нечего.\n")
            return
        self.say("Таблица времени от сортировки и алгоритма работы:\n")
        table_quick, keys_quick, table_insert, keys_insert = self._timings()
        self.say(
            f"| {'Algorithm':<25} | {'Data structure':<25} | {'Avg time':<14} |\n"
            + _RULE
            + _row("Quick Sort", "Table", table_quick)
            + _row("Quick Sort", "Keys", keys_quick)
            + _RULE
            + _row("Insertion Sort", "Table", table_insert)
            + _row("Insertion Sort", "Keys", keys_insert)
            + "\n"
        )
        self.say(
            " -Quick sort: КЛЮЧИ на "
            f"{_percent(table_quick - keys_quick, table_quick):.2f}% "
            "более эффективны, чем сортировка ТАБЛИЦЫ\n"
        )
        self.say(
            " -Insertion sort: КЛЮЧИ на  "
            f"{_percent(table_insert - keys_insert, table_insert):.2f}% "
            "более эффективны, чем сортировка ТАБЛИЦЫ\n"
        )
        self.say(self._sizes())

    def compare_sorts(self) -> None:
        if not self.table.rows:
            self.say("Таблицы пусты. Замерять нечего.\n")
            return
        self.say("Таблица времени от сортировки и алгоритма работы:\n")
        table_quick, keys_quick, table_insert, keys_insert = self._timings()
        self.say(
            f"| {'Data structure':<25} | {'Algorithm':<25} | {'Avg time':<14} |\n"
            + _RULE
            + _row("Table", "Quick Sort", table_quick)
            + _row("", "Insertion Sort", table_insert)
            + _RULE
            + _row("Keys", "Quick Sort", keys_quick)
            + _row("", "Insertion Sort", keys_insert)
            + "\n"
        )
        self.say(
            "ЭФФЕКТИВНОСТЬ СОРТИРОВКИ ДЛЯ ТАБЛЦИЦЫ -QUICK sort на "
            f"{_percent(table_insert - table_quick, table_insert):.2f}% "
            "более эффективен, чем INSERTION sort для Таблиц\n"
        )
        if keys_insert < keys_quick:
            self.say(
                "ЭФФЕКТИВНОСТЬ СОРТИРОВКИ ДЛЯ КЛЮЧЕЙ -INSERTION sort на "
                f"{_percent(keys_quick - keys_insert, keys_quick):.2f}% "
                "более эффективен, чем QUICK sort для Ключей\n"
            )
        else:
            self.say(
                " -Qsort на "
                f"{_percent(keys_insert - keys_quick, keys_insert):.2f}% "
                "более эффективен, чем сортировка вставками для Ключей\n"
            )
        self.say(self._sizes())

    def save(self) -> None:
        name = self._read_file_name(
            "Введите имя файла, в который хотите сохранить таблицу: "
        )
        if name is None:
            return
        try:
            stream = open(name, "w", encoding="utf-8")
        except OSError:
            self.say("Ошибка открытия файла или его не существует.\n")
            return
        with stream:
            self.table.save(stream)
        self.say("Таблца успешно сохранена.\n")

    def dispatch(self, action: int) -> None:
        handlers = {
            MenuAction.LOAD_TABLE: self.load,
            MenuAction.PRINT_NOT_SORTED_TABLE: self.print_table,
            MenuAction.PRINT_NOT_SORTED_KEYS: self.print_keys,
            MenuAction.ADD_THEATRE: self.add,
            MenuAction.DELETE_THEATRE: self.delete,
            MenuAction.PRINT_SORTED_KEYS: self.print_sorted_keys,
            MenuAction.PRINT_SORTED_TABLE: self.print_sorted_table,
            MenuAction.PRINT_SORTED_TABLE_BY_KEYS: self.print_by_keys,
            MenuAction.PRINT_BALLETS: self.ballets,
            MenuAction.COMP_TABLE_WITH_KEYS: self.compare_table_with_keys,
            MenuAction.COMPARE_SORTS: self.compare_sorts,
            MenuAction.SAVE_FILE: self.save,
        }
        handler = handlers.get(action)
        if handler is None:
            self.say("Выберите 1 из пунктов меню.\n")
        else:
            handler()


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the exit item is chosen or input ends."""
    session = _Session(stdin, stdout)
    while True:
        session.say(menu_text())
        try:
            action = read_int(stdin, _INT_LINE_LEN, allow_empty=True)
        except EmptyInput:
            break
        except InputError:
            session.say("Ошибка: Пожалуйста, введите число.\n")
            continue
        if action == MenuAction.EXIT_PROGRAM:
            break
        session.dispatch(action)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: run the menu on standard input and output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())