import io

import pytest

from structlabs.input_tools import EmptyInput, NotNumberError, StringLengthError
from structlabs.theatre import (
    AgeLimit,
    Musical,
    MusicalType,
    PerformanceType,
    Theatre,
    TheatreError,
    read_age_limit,
    read_theatre,
)

PLAY = Theatre("Maly", "Revizor", 100, 500, PerformanceType.PLAY)
FAIRY = Theatre(
    "Puppet", "Kolobok", 50, 60, PerformanceType.FAIRY_TALE, age_limit=AgeLimit.AGE_3
)
MUSICAL = Theatre(
    "Bolshoi",
    "Swan Lake",
    300,
    900,
    PerformanceType.MUSICAL,
    musical=Musical("Tchaikovsky", "Russia", MusicalType.BALLET, AgeLimit.AGE_10, 120),
)


def stream_of(lines):
    return io.StringIO("".join(f"{line}\n" for line in lines))


@pytest.mark.parametrize("theatre", [PLAY, FAIRY, MUSICAL])
def test_round_trip_through_lines(theatre):
    assert read_theatre(stream_of(theatre.to_lines())) == theatre


def test_to_lines_of_fairy_tale():
    assert FAIRY.to_lines() == ["Puppet", "Kolobok", "50", "60", "4", "1"]


def test_rows_have_equal_width():
    widths = {len(theatre.format_row()) for theatre in (PLAY, FAIRY, MUSICAL)}
    assert len(widths) == 1


def test_row_contents():
    assert PLAY.format_row().startswith("| Maly ")
    assert "| Play " in PLAY.format_row()
    assert " 3+ " in FAIRY.format_row()
    row = MUSICAL.format_row()
    assert "| Ballet " in row and "| Tchaikovsky " in row and " 10+ " in row
    assert row.endswith("|\n")


def test_labels():
    assert read_age_limit(io.StringIO("3\n")).label == "16+"
    assert "| Fairy tale " in FAIRY.format_row()
    show = Theatre(
        "Opera House",
        "Cats",
        10,
        20,
        PerformanceType.MUSICAL,
        musical=Musical("Webber", "UK", MusicalType.MUSICAL_SHOW, AgeLimit.AGE_3, 90),
    )
    assert show.format_row().count("| Musical ") == 2


def test_read_age_limit():
    assert read_age_limit(io.StringIO("2\n")) == AgeLimit.AGE_10
    with pytest.raises(TheatreError) as info:
        read_age_limit(io.StringIO("x\n"))
    assert info.value.code == TheatreError.WRONG_AGE_LIMIT
    with pytest.raises(TheatreError):
        read_age_limit(io.StringIO("4\n"))


def test_negative_price():
    with pytest.raises(TheatreError) as info:
        read_theatre(stream_of(["A", "B", "-1", "5", "1"]))
    assert info.value.code == TheatreError.WRONG_PRICES


def test_minimum_above_maximum():
    prompts = io.StringIO()
    with pytest.raises(TheatreError) as info:
        read_theatre(stream_of(["A", "B", "10", "5", "1"]), prompts)
    assert info.value.code == TheatreError.WRONG_PRICES
    assert "Минимальная цена не должна быть больше максимальной." in prompts.getvalue()


def test_wrong_performance_type():
    with pytest.raises(TheatreError) as info:
        read_theatre(stream_of(["A", "B", "1", "5", "6"]))
    assert info.value.code == TheatreError.WRONG_TYPE_PERFORMANCE


def test_wrong_fairy_tale_age():
    with pytest.raises(TheatreError) as info:
        read_theatre(stream_of(["A", "B", "1", "5", "4", "0"]))
    assert info.value.code == TheatreError.WRONG_AGE_LIMIT


def test_wrong_musical_type_is_musical_read_error():
    with pytest.raises(TheatreError) as info:
        read_theatre(stream_of(["A", "B", "1", "5", "5", "C", "D", "9", "1", "10"]))
    assert info.value.code == TheatreError.MUSICAL_READ


def test_negative_duration():
    with pytest.raises(TheatreError) as info:
        read_theatre(stream_of(["A", "B", "1", "5", "5", "C", "D", "1", "1", "-3"]))
    assert info.value.code == TheatreError.MUSICAL_READ


def test_input_errors_propagate():
    with pytest.raises(StringLengthError):
        read_theatre(stream_of(["N" * 31, "B", "1", "5", "1"]))
    with pytest.raises(NotNumberError):
        read_theatre(stream_of(["A", "B", "cheap", "5", "1"]))
    with pytest.raises(EmptyInput):
        read_theatre(io.StringIO(""))


def test_prompts_are_written_when_requested():
    prompts = io.StringIO()
    result = read_theatre(stream_of(PLAY.to_lines()), prompts)
    assert result == PLAY
    text = prompts.getvalue()
    assert "Введите название театра (не более 30 символов):\n" in text
    assert "Выберите тип спектакля:\n" in text


def test_incomplete_records_are_rejected():
    with pytest.raises(ValueError):
        Theatre("A", "B", 1, 2, PerformanceType.MUSICAL)
    with pytest.raises(ValueError):
        Theatre("A", "B", 1, 2, PerformanceType.FAIRY_TALE)