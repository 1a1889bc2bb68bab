"""Theatre repertoire records and reading them from text streams."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from .input_tools import EmptyInput, InputError, read_int, read_line

MAX_STR_LEN = 30
_INT_LINE_LEN = 1_000_000


class TheatreError(ValueError):
    """A theatre record holds an invalid value."""

    WRONG_PRICES = 1
    WRONG_TYPE_PERFORMANCE = 2
    WRONG_AGE_LIMIT = 3
    WRONG_MUSICAL_TYPE = 4
    MUSICAL_READ = 5

    def __init__(self, code: int, message: str | None = None) -> None:
        super().__init__(message or f"invalid theatre record (code {code})")
        self.code = code


class AgeLimit(IntEnum):
    AGE_3 = 1
    AGE_10 = 2
    AGE_16 = 3

    @property
    def label(self) -> str:
        return {AgeLimit.AGE_3: "3+", AgeLimit.AGE_10: "10+", AgeLimit.AGE_16: "16+"}[self]


class PerformanceType(IntEnum):
    PLAY = 1
    DRAMA = 2
    COMEDY = 3
    FAIRY_TALE = 4
    MUSICAL = 5

    @property
    def label(self) -> str:
        return {
            PerformanceType.PLAY: "Play",
            PerformanceType.DRAMA: "Drama",
            PerformanceType.COMEDY: "Comedy",
            PerformanceType.FAIRY_TALE: "Fairy tale",
            PerformanceType.MUSICAL: "Musical",
        }[self]


class MusicalType(IntEnum):
    BALLET = 1
    OPERA = 2
    MUSICAL_SHOW = 3

    @property
    def label(self) -> str:
        return {
            MusicalType.BALLET: "Ballet",
            MusicalType.OPERA: "Opera",
            MusicalType.MUSICAL_SHOW: "Musical",
        }[self]


@dataclass(frozen=True)
class Musical:
    """Details of a musical performance."""

    composer: str
    country: str
    type: MusicalType
    age: AgeLimit
    duration: int


_EMPTY_TAIL = "|                               |                     |           |                   |\n"


@dataclass(frozen=True)
class Theatre:
    """One repertoire row: a theatre, its performance and ticket prices."""

    name: str
    performance_name: str
    price_low: int
    price_high: int
    performance_type: PerformanceType
    age_limit: AgeLimit | None = None
    musical: Musical | None = None

    def __post_init__(self) -> None:
        if self.performance_type == PerformanceType.FAIRY_TALE and self.age_limit is None:
            raise ValueError("a fairy tale needs an age limit")
        if self.performance_type == PerformanceType.MUSICAL and self.musical is None:
            raise ValueError("a musical needs musical details")

    def format_row(self) -> str:
        """The table cells of this theatre, ended by a newline."""
        head = (
            f"| {self.name:<30}| {self.performance_name:<30}| {self.price_low:<10}"
            f"| {self.price_high:<10}| {self.performance_type.label:<15}|"
        )
        if self.performance_type == PerformanceType.FAIRY_TALE and self.age_limit is not None:
            return head + f" {self.age_limit.label:<9}" + _EMPTY_TAIL
        if self.performance_type == PerformanceType.MUSICAL and self.musical is not None:
            musical = self.musical
            return head + (
                f" {musical.age.label:<9}| {musical.composer:<30}| {musical.country:<20}"
                f"| {musical.type.label:<10}| {musical.duration:<18}|\n"
            )
        return head + " " * 10 + _EMPTY_TAIL

    def to_lines(self) -> list[str]:
        """The record as lines of the table file, without newlines."""
        lines = [
            self.name,
            self.performance_name,
            str(self.price_low),
            str(self.price_high),
            str(int(self.performance_type)),
        ]
        if self.performance_type == PerformanceType.FAIRY_TALE and self.age_limit is not None:
            lines.append(str(int(self.age_limit)))
        elif self.performance_type == PerformanceType.MUSICAL and self.musical is not None:
            musical = self.musical
            lines += [
                musical.composer,
                musical.country,
                str(int(musical.type)),
                str(int(musical.age)),
                str(musical.duration),
            ]
        return lines


def _say(prompts: TextIO | None, text: str) -> None:
    if prompts is not None:
        prompts.write(text)


@contextmanager
def _reporting(prompts: TextIO | None, message: str) -> Iterator[None]:
    """Write ``message`` to the prompt stream when the block fails."""
    try:
        yield
    except (InputError, TheatreError):
        _say(prompts, message)
        raise


def _read_choice(
    stream: TextIO, prompts: TextIO | None, prompt: str, high: int, code: int
) -> int:
    _say(prompts, prompt)
    try:
        value = read_int(stream, _INT_LINE_LEN, allow_empty=True)
    except EmptyInput:
        raise
    except InputError as exc:
        raise TheatreError(code) from exc
    if not 1 <= value <= high:
        raise TheatreError(code)
    return value


def read_age_limit(stream: TextIO, prompts: TextIO | None = None) -> AgeLimit:
    """Read an age limit given as 1, 2 or 3."""
    value = _read_choice(
        stream,
        prompts,
        "Введите возрастное ограничение на спектакль:\n1) 3+\n2) 10+\n3) 16+\n",
        3,
        TheatreError.WRONG_AGE_LIMIT,
    )
    return AgeLimit(value)


def _read_musical(stream: TextIO, prompts: TextIO | None) -> Musical:
    def text(prompt: str) -> str:
        _say(prompts, prompt)
        try:
            return read_line(stream, MAX_STR_LEN, allow_empty=True)
        except EmptyInput:
            raise
        except InputError as exc:
            raise TheatreError(TheatreError.MUSICAL_READ) from exc

    composer = text(
        f"Введите имя копозитора (максимальное кол-во символов {MAX_STR_LEN}):\n"
    )
    country = text(
        f"Введите название страны (максимальное кол-во символов {MAX_STR_LEN}):\n"
    )
    try:
        musical_type = MusicalType(
            _read_choice(
                stream,
                prompts,
                "Выберите тип музыкального спектакля:\n1) Балет\n2) Опера\n3) Мюзикл\n",
                3,
                TheatreError.WRONG_MUSICAL_TYPE,
            )
        )
        age = read_age_limit(stream, prompts)
    except TheatreError as exc:
        raise TheatreError(TheatreError.MUSICAL_READ) from exc

    _say(prompts, "Введите продолжительность спектакля в минутах (больше нуля):\n")
    try:
        duration = read_int(stream, _INT_LINE_LEN, allow_empty=True)
    except EmptyInput:
        raise
    except InputError as exc:
        raise TheatreError(TheatreError.MUSICAL_READ) from exc
    if duration < 0:
        raise TheatreError(TheatreError.MUSICAL_READ)
    return Musical(composer, country, musical_type, age, duration)


def _read_price(stream: TextIO, prompts: TextIO | None, prompt: str) -> int:
    _say(prompts, prompt)
    with _reporting(prompts, "Ошибка ввода цены\n"):
        price = read_int(stream, _INT_LINE_LEN, allow_empty=True)
        if price < 0:
            raise TheatreError(TheatreError.WRONG_PRICES, "negative price")
    return price


def read_theatre(stream: TextIO, prompts: TextIO | None = None) -> Theatre:
    """Read one theatre record; prompts and error notes go to ``prompts`` if given.

    Raises :class:`EmptyInput` when the stream ends, other input errors for
    malformed lines and :class:`TheatreError` for invalid values.
    """
    _say(prompts, f"Введите название театра (не более {MAX_STR_LEN} символов):\n")
    with _reporting(prompts, "Ошибка ввода названия тетара\n"):
        name = read_line(stream, MAX_STR_LEN, allow_empty=True)

    _say(prompts, f"Введите название спектакля (не более {MAX_STR_LEN}):\n")
    with _reporting(prompts, "Ошибка ввода названия спектакля\n"):
        performance_name = read_line(stream, MAX_STR_LEN, allow_empty=True)

    price_low = _read_price(stream, prompts, "Введите минмальную стоимость билета:\n")
    price_high = _read_price(stream, prompts, "Введите максимальную стоимость билета:\n")
    if price_low > price_high:
        _say(prompts, "Минимальная цена не должна быть больше максимальной.\n")
        raise TheatreError(TheatreError.WRONG_PRICES, "minimum price exceeds maximum")

    with _reporting(prompts, "Ошибка ввода типа спектакля\n"):
        performance_type = PerformanceType(
            _read_choice(
                stream,
                prompts,
                "Выберите тип спектакля:\n1) Пьеса\n2) Драма \n3) Комедия\n"
                "4) Сказка\n5) Музыкальный.\n",
                5,
                TheatreError.WRONG_TYPE_PERFORMANCE,
            )
        )

    age_limit: AgeLimit | None = None
    musical: Musical | None = None
    with _reporting(prompts, "Ошибка ввода параметров спетакля\n"):
        if performance_type == PerformanceType.FAIRY_TALE:
            age_limit = read_age_limit(stream, prompts)
        elif performance_type == PerformanceType.MUSICAL:
            musical = _read_musical(stream, prompts)

    return Theatre(
        name, performance_name, price_low, price_high, performance_type, age_limit, musical
    )