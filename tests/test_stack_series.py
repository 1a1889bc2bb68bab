import io

import pytest

from structlabs.array_stack import ArrayStack, StackEmptyError
from structlabs.list_stack import ListStack
from structlabs.stack_series import (
    HEADER,
    decreasing_series,
    format_series,
    print_sequence,
)

STACKS = [ArrayStack, ListStack]


def build(kind, values):
    stack = kind(20)
    for value in values:
        stack.push(value)
    return stack


@pytest.mark.parametrize("kind", STACKS)
def test_single_decreasing_sequence(kind):
    stack = build(kind, [5, 3, 1])
    assert decreasing_series(stack) == [(1, 3, 5)]


@pytest.mark.parametrize("kind", STACKS)
def test_mixed_sequence(kind):
    stack = build(kind, [4, 2, 6, 5, 1])
    assert decreasing_series(stack) == [(1, 5, 6), (2, 4)]
    assert format_series(stack) == HEADER + "1 5 6 \n2 4 "


@pytest.mark.parametrize("kind", STACKS)
def test_single_element(kind):
    stack = build(kind, [7])
    assert decreasing_series(stack) == [(7,)]
    assert format_series(stack) == HEADER + "7\n"


@pytest.mark.parametrize("kind", STACKS)
def test_no_series(kind):
    stack = build(kind, [1, 2, 3])
    assert decreasing_series(stack) == []
    assert format_series(stack) == HEADER


@pytest.mark.parametrize("kind", STACKS)
def test_stack_unchanged(kind):
    stack = build(kind, [3, 9, 2, 8])
    before = list(stack)
    format_series(stack)
    assert list(stack) == before


@pytest.mark.parametrize("kind", STACKS)
def test_empty_stack_raises(kind):
    with pytest.raises(StackEmptyError):
        decreasing_series(kind(5))


def test_print_sequence_writes_report():
    stack = build(ArrayStack, [5, 3, 1])
    out = io.StringIO()
    print_sequence(out, stack)
    assert out.getvalue() == format_series(stack)
    assert out.getvalue().startswith(HEADER)