"""Command that multiplies a real number by an integer."""

from __future__ import annotations

import sys
from typing import TextIO

from .bignum import (
    MAX_INT_LEN,
    MAX_MANTISSA_LEN,
    MAX_RESULT_MANTISSA_LEN,
    BigNumError,
    multiply,
    read_bigint,
    read_bignum,
)

MAX_RESULT_ORDER_SIZE = 99999

ERROR_FIRST_MANTISSA_LEN = 5
ERROR_SECOND_MANTISSA_LEN = 6
ERROR_RESULT_MANTISSA_LEN = 7
ERROR_RESULT_ORDER_SIZE = 8

_INTRO = "Программа выполняет действие умножения действительного числа на целое.\n"
_FIRST_PROMPT = (
    "Введите первое число в формате +-m.nЕ+-K, "
    "где суммарная длина мантиссы первого\nсомножителя (m+n) - до 40 значащих цифры, "
    "порядок до 5 цифр."
    "\n----1----2----3----4----5----6----7----8\n"
)
_SECOND_PROMPT = (
    "Введите второе целое число длиной до 30 десятичных цифр"
    "\n----1----2----3----4----5----6\n"
)


def run(stdin: TextIO, stdout: TextIO) -> int:
    """Run the dialogue on the given streams and return the exit status."""
    write = stdout.write
    write(_INTRO)

    write(_FIRST_PROMPT)
    try:
        first = read_bignum(stdin.readline())
    except BigNumError as error:
        write(f"{error}\n")
        return error.code
    if len(first.digits) > MAX_MANTISSA_LEN:
        write("ОШИБКА: мантисса первого числа слишком длинная\n")
        return ERROR_FIRST_MANTISSA_LEN

    write(_SECOND_PROMPT)
    try:
        second = read_bigint(stdin.readline())
    except BigNumError as error:
        write(f"{error}\n")
        return error.code
    if len(second.digits) > MAX_INT_LEN:
        write("ОШИБКА: мантисса второго числа слишком длинная\n")
        return ERROR_SECOND_MANTISSA_LEN

    result = multiply(first, second)
    if len(result.digits) > MAX_RESULT_MANTISSA_LEN:
        write("ОШИБКА: мантисса результата слишком длинная\n")
        return ERROR_RESULT_MANTISSA_LEN
    if abs(result.order) > MAX_RESULT_ORDER_SIZE:
        write("ОШИБКА: порядок результата слишком большой\n")
        return ERROR_RESULT_ORDER_SIZE

    write(f"Результат: {result.normalized().format()}\n")
    write("---------\n")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point: read from standard input, write to standard output."""
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())