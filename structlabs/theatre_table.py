"""A table of theatre records with a key table sorted by minimum price."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, TextIO, TypeVar

from .input_tools import EmptyInput, InputError, microseconds_now
from .theatre import AgeLimit, MusicalType, PerformanceType, Theatre, TheatreError, read_theatre

MAX_ROW_COUNT = 10000
NUM_OF_ITERATIONS = 1000

T = TypeVar("T")
SortFunction = Callable[[Iterable[Any], Callable[[Any], Any]], list]

_HEADER = (
    f"| {'Индекс':<7} | {'Theatre name':<30}| {'Performance_name':<30}| {'Min price':<10}"
    f"| {'Max price':<10}| {'Performance':<15}| {'Age':<9}| {'Composer':<30}"
    f"| {'Country':<20}| {'Type':<10}| {'Duration':<18}|\n"
)
_ROW_RULE = (
    "|--------|-------------------------------|-------------------------------|-----------"
    "|-----------|----------------|----------|-------------------------------"
    "|---------------------|-----------|-------------------|\n"
)
_END_RULE = (
    "|--------+-------------------------------+-------------------------------+-----------"
    "+-----------+----------------+----------+-------------------------------"
    "+---------------------+-----------+-------------------|\n"
)
_KEY_RULE = "|--------------------------|-----------|\n"


class TableError(Exception):
    """An operation on the theatre table failed."""

    FILE_READ = 9
    EMPTY_FILE = 10
    NAME_THEATRE_READ = 11
    THEATRE_NOT_FOUND = 12
    THEATRE_READ = 13
    BALLET_NOT_FOUND = 14
    TABLE_OVERFLOW = 15

    def __init__(self, code: int, message: str | None = None) -> None:
        super().__init__(message or f"theatre table error (code {code})")
        self.code = code


@dataclass(frozen=True)
class TheatreKey:
    """Minimum ticket price of a row together with the row's position."""

    price_low: int
    theatre_id: int


def _numbered_row(number: int, theatre: Theatre) -> str:
    return _ROW_RULE + f"| {number:<7}" + theatre.format_row()


def _allowed_ages(age: int) -> frozenset[AgeLimit]:
    if age >= 16:
        return frozenset(AgeLimit)
    if age >= 10:
        return frozenset({AgeLimit.AGE_3, AgeLimit.AGE_10})
    if age >= 3:
        return frozenset({AgeLimit.AGE_3})
    return frozenset()


@dataclass
class TheatreTable:
    """Theatre rows in the order they were loaded or added."""

    theatres: list[Theatre] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.theatres)

    def __iter__(self) -> Iterator[Theatre]:
        return iter(self.theatres)

    @property
    def rows(self) -> int:
        return len(self.theatres)

    @classmethod
    def load(cls, stream: TextIO) -> TheatreTable:
        """Read records until the stream ends; an incomplete last record is dropped."""
        theatres: list[Theatre] = []
        while True:
            try:
                theatres.append(read_theatre(stream))
            except EmptyInput:
                break
            except (InputError, TheatreError) as exc:
                raise TableError(TableError.FILE_READ, "malformed table file") from exc
            if len(theatres) > MAX_ROW_COUNT:
                raise TableError(TableError.TABLE_OVERFLOW, "too many rows")
        if not theatres:
            raise TableError(TableError.EMPTY_FILE, "table file is empty")
        return cls(theatres)

    def keys(self) -> list[TheatreKey]:
        """One key per row, in row order."""
        return [
            TheatreKey(theatre.price_low, index) for index, theatre in enumerate(self.theatres)
        ]

    def format_table(self) -> str:
        rows = "".join(
            _numbered_row(number, theatre)
            for number, theatre in enumerate(self.theatres, start=1)
        )
        return _HEADER + rows + _END_RULE

    def format_keys(self, keys: Sequence[TheatreKey]) -> str:
        header = f"| {'Original index':<25}| {'Min price':<10}|\n"
        rows = "".join(
            _KEY_RULE + f"| {key.theatre_id:<25}| {key.price_low:<10}|\n" for key in keys
        )
        return header + rows

    def format_by_keys(self, keys: Sequence[TheatreKey]) -> str:
        """The table in the order given by ``keys``."""
        rows = "".join(
            _numbered_row(number, self.theatres[key.theatre_id])
            for number, key in enumerate(keys, start=1)
        )
        return _HEADER + rows + _END_RULE

    def add(self, theatre: Theatre) -> None:
        if len(self.theatres) >= MAX_ROW_COUNT:
            raise TableError(TableError.TABLE_OVERFLOW, "table is full")
        self.theatres.append(theatre)

    def delete_by_name(self, name: str) -> Theatre:
        """Remove and return the first theatre with the given name."""
        for index, theatre in enumerate(self.theatres):
            if theatre.name == name:
                return self.theatres.pop(index)
        raise TableError(TableError.THEATRE_NOT_FOUND, f"no theatre named {name!r}")

    def find_ballets(self, age: int, duration: int) -> list[tuple[int, Theatre]]:
        """Ballets suitable for ``age`` and shorter than ``duration``, with row indices."""
        allowed = _allowed_ages(age)
        return [
            (index, theatre)
            for index, theatre in enumerate(self.theatres)
            if theatre.performance_type == PerformanceType.MUSICAL
            and theatre.musical is not None
            and theatre.musical.type == MusicalType.BALLET
            and theatre.musical.duration < duration
            and theatre.musical.age in allowed
        ]

    def format_ballets(self, age: int, duration: int) -> str:
        rows = "".join(
            _numbered_row(index + 1, theatre)
            for index, theatre in self.find_ballets(age, duration)
        )
        return _HEADER + rows + _ROW_RULE

    def save(self, stream: TextIO) -> None:
        """Write the table in the format read by :meth:`load`."""
        for theatre in self.theatres:
            stream.write("".join(f"{line}\n" for line in theatre.to_lines()))


def insertion_sort(items: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """Return a new list sorted by ``key`` using insertion sort (stable)."""
    result = list(items)
    for end in range(1, len(result)):
        position = end
        while position > 0 and key(result[position - 1]) > key(result[position]):
            result[position - 1], result[position] = result[position], result[position - 1]
            position -= 1
    return result


def quick_sort(items: Iterable[T], key: Callable[[T], Any]) -> list[T]:
    """Return a new list sorted by ``key`` using quicksort."""
    result = list(items)
    if len(result) <= 1:
        return result
    pivot = key(result[len(result) // 2])
    less = [item for item in result if key(item) < pivot]
    equal = [item for item in result if key(item) == pivot]
    greater = [item for item in result if key(item) > pivot]
    return quick_sort(less, key) + equal + quick_sort(greater, key)


def _price(item: Theatre | TheatreKey) -> int:
    return item.price_low


def _average(data: Sequence[Any], count: int, sort: SortFunction) -> float:
    if count <= 0:
        raise ValueError("count must be positive")
    total = 0
    for _ in range(count):
        copy = list(data)
        begin = microseconds_now()
        sort(copy, _price)
        total += microseconds_now() - begin
    return total / count


def time_sort_table(
    table: TheatreTable, count: int = NUM_OF_ITERATIONS, sort: SortFunction = quick_sort
) -> float:
    """Average microseconds to sort a copy of the table rows by minimum price."""
    return _average(table.theatres, count, sort)


def time_sort_keys(
    keys: Sequence[TheatreKey], count: int = NUM_OF_ITERATIONS, sort: SortFunction = quick_sort
) -> float:
    """Average microseconds to sort a copy of the key table by minimum price."""
    return _average(keys, count, sort)