"""Arbitrary-length decimal numbers in the form ``±0.dddE±k`` and their product."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import dropwhile

MAX_STR_LEN = 100
MAX_INT_LEN = 30
MAX_MANTISSA_LEN = 40
MAX_RESULT_MANTISSA_LEN = 30
MAX_ORDER_LEN = 5
BASE = 10

_DIGITS = "0123456789"
_NON_ZERO_DIGITS = "123456789"


class BigNumError(ValueError):
    """Base class for errors while reading a number."""

    code = 0
    message = "Ошибка ввода числа"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class EmptyInputError(BigNumError):
    """The input line is empty or missing."""

    code = 1
    message = "Ошибка: введенная строка пустая"


class NumberLengthError(BigNumError):
    """The input line is too long."""

    code = 2
    message = "Ошибка длины вводимой строки"


class OrderLengthError(BigNumError):
    """The exponent has too many digits."""

    code = 3
    message = "Ошибка длины порядка числа"


class InvalidSymbolError(BigNumError):
    """The input contains a character that is not allowed."""

    code = 4
    message = "Введен недопустимый символ"


@dataclass(frozen=True)
class BigNum:
    """A number ``±0.d1d2...dn × 10**order``; digits are most significant first."""

    negative: bool = False
    digits: tuple[int, ...] = ()
    order: int = 0

    def normalized(self) -> BigNum:
        """Drop leading zeros (adjusting the order) and trailing zeros."""
        if not self.digits:
            return self
        significant = tuple(dropwhile(lambda digit: digit == 0, self.digits))
        if not significant:
            return BigNum()
        leading = len(self.digits) - len(significant)
        end = len(significant)
        while significant[end - 1] == 0:
            end -= 1
        return BigNum(self.negative, significant[:end], self.order - leading)

    def format(self) -> str:
        """Render as ``-0.123E4``, or ``0E<order>`` for zero."""
        if not self.digits:
            return f"0E{self.order}"
        sign = "-" if self.negative else ""
        mantissa = "".join(str(digit) for digit in self.digits)
        return f"{sign}0.{mantissa}E{self.order}"

    def __str__(self) -> str:
        return self.format()


def _parse_order(text: str) -> tuple[int, int]:
    """Return the exponent value and the index of ``E`` (or the text length)."""
    position = text.find("E")
    if position == -1:
        return 0, len(text)
    sign = text[position + 1:position + 2]
    start = position + 2 if sign in ("+", "-") and sign else position + 1
    exponent = text[start:]
    if len(exponent) > MAX_ORDER_LEN:
        raise OrderLengthError()
    if any(ch not in _DIGITS for ch in exponent):
        raise InvalidSymbolError()
    value = int(exponent) if exponent else 0
    return (-value if sign == "-" else value), position


def parse_bignum(text: str) -> BigNum:
    """Parse a number such as ``-12.5E+3`` into a :class:`BigNum`."""
    order, order_index = _parse_order(text)
    first_significant = next(
        (index for index, ch in enumerate(text) if ch in _NON_ZERO_DIGITS), 0
    )
    dot_index = text.find(".")
    if dot_index < first_significant:
        first_significant = dot_index

    negative = False
    started = False
    low_first: list[int] = []
    for index in range(order_index - 1, -1, -1):
        ch = text[index]
        if index == 0 and ch not in _DIGITS:
            if ch == "-":
                negative = True
            elif ch not in "+.":
                raise InvalidSymbolError()
        elif ch in _DIGITS:
            if index >= first_significant:
                digit = int(ch)
                if digit:
                    started = True
                if started:
                    low_first.append(digit)
                if dot_index == -1 or index < dot_index:
                    order += 1
        elif ch == ".":
            if index != dot_index:
                raise InvalidSymbolError()
        else:
            raise InvalidSymbolError()
    return BigNum(negative, tuple(reversed(low_first)), order)


def _strip_line(line: str) -> str:
    return line.split("\n", 1)[0]


def read_bignum(line: str) -> BigNum:
    """Read a real number from one input line."""
    text = _strip_line(line)
    if len(text) > MAX_STR_LEN:
        raise NumberLengthError()
    if not text:
        raise EmptyInputError()
    return parse_bignum(text)


def read_bigint(line: str) -> BigNum:
    """Read an integer (digits and minus signs only) from one input line."""
    text = _strip_line(line)
    if not text or len(text) > MAX_STR_LEN:
        raise EmptyInputError()
    if any(ch not in _DIGITS and ch != "-" for ch in text):
        raise InvalidSymbolError()
    return parse_bignum(text)


def _control_overflow(buffer: list[int], length: int) -> int:
    carry = 0
    for index in range(length):
        current = buffer[index]
        buffer[index] = current % BASE + carry
        carry = current // BASE
        if buffer[index] > 9:
            current = buffer[index]
            buffer[index] = current % BASE
            carry = current // BASE
    if buffer[length] > 9:
        buffer[length] %= BASE
        buffer[length + 1] = 1
        length += 1
    return length


def _round_low_digits(buffer: list[int], start: int) -> None:
    for index in range(start):
        if buffer[index] >= 5:
            buffer[index + 1] += 1
        buffer[index] = 0


def multiply(left: BigNum, right: BigNum) -> BigNum:
    """Multiply two numbers, rounding the mantissa to 30 digits."""
    if not left.digits or not right.digits:
        return BigNum()
    dst = left.normalized()
    src = right.normalized()
    if not dst.digits or not src.digits:
        return BigNum()

    order = src.order + dst.order
    negative = src.negative != dst.negative
    src_low = src.digits[::-1]
    dst_low = dst.digits[::-1]
    length = len(src_low) + len(dst_low)
    buffer = [0] * (length + 4)

    for i, a in enumerate(src_low):
        for j, b in enumerate(dst_low):
            product = a * b
            buffer[i + j] += product % BASE
            buffer[i + j + 1] += product // BASE
            value = buffer[i + j]
            buffer[i + j] = value % BASE
            buffer[i + j + 1] += value // BASE

    if buffer[length - 1] == 0 and length == MAX_RESULT_MANTISSA_LEN + 1:
        length -= 1
        order -= 1
    length = _control_overflow(buffer, length)
    start = max(length - MAX_RESULT_MANTISSA_LEN, 0)
    _round_low_digits(buffer, start)
    length = _control_overflow(buffer, length)
    return BigNum(negative, tuple(reversed(buffer[start:length])), order)