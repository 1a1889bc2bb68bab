"""Line-oriented reading of strings and integers from text streams."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import TextIO

MAX_STR_LEN = 30

_DIGITS = frozenset("0123456789")


class InputError(ValueError):
    """Base class for errors while reading user input."""

    code = 0


class NotNumberError(InputError):
    """The line does not hold an integer."""

    code = 6


class EmptyInput(InputError):
    """The stream ended before a line could be read."""

    code = 7


class StringLengthError(InputError):
    """The line is empty where that is not allowed, or too long."""

    code = 8


def read_line(stream: TextIO, max_len: int = MAX_STR_LEN, allow_empty: bool = False) -> str:
    """Read one line without its newline, checking its length."""
    line = stream.readline()
    if not line:
        raise EmptyInput("input ended")
    text = line.split("\n", 1)[0]
    if not text and not allow_empty:
        raise StringLengthError("empty line")
    if len(text) > max_len:
        raise StringLengthError(f"line longer than {max_len} characters")
    return text


def parse_int(text: str) -> int:
    """Parse an integer made of digits with an optional leading sign."""
    body = text[1:] if text[:1] in ("+", "-") else text
    if not body or any(ch not in _DIGITS for ch in body):
        raise NotNumberError(f"not a number: {text!r}")
    return int(text)


def read_int(stream: TextIO, max_len: int = MAX_STR_LEN, allow_empty: bool = False) -> int:
    """Read one line and parse it as an integer."""
    return parse_int(read_line(stream, max_len, allow_empty))


def microseconds_now() -> int:
    """Wall-clock time in microseconds."""
    return time.time_ns() // 1000


class Prompter:
    """Writes prompts to one stream and reads answers from another."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self.stdin = stdin
        self.stdout = stdout

    def say(self, text: str) -> None:
        self.stdout.write(text)

    def ask_int(
        self,
        prompt: str,
        error: str,
        valid: Callable[[int], bool] | None = None,
    ) -> int:
        """Ask until a valid integer is entered; raise EOFError when input ends."""
        while True:
            self.say(prompt)
            try:
                value = read_int(self.stdin)
            except EmptyInput as exc:
                raise EOFError("input ended") from exc
            except InputError:
                self.say(f"{error}\n")
                continue
            if valid is not None and not valid(value):
                self.say(f"{error}\n")
                continue
            return value