import pytest

from structlabs.array_stack import ArrayStack, StackEmptyError, StackOverflowError


def test_lifo_order():
    stack = ArrayStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.pop() == 3
    assert stack.pop() == 2
    assert len(stack) == 1


def test_peek_does_not_remove():
    stack = ArrayStack(3)
    stack.push(7)
    assert stack.peek() == 7
    assert len(stack) == 1


def test_empty_and_full():
    stack = ArrayStack(2)
    assert stack.is_empty()
    stack.push(1)
    stack.push(2)
    assert stack.is_full()
    assert not stack.is_empty()


def test_overflow_raises():
    stack = ArrayStack(1)
    stack.push(1)
    with pytest.raises(StackOverflowError):
        stack.push(2)


def test_pop_and_peek_empty_raise():
    stack = ArrayStack(1)
    with pytest.raises(StackEmptyError):
        stack.pop()
    with pytest.raises(StackEmptyError):
        stack.peek()


def test_max_size_limit():
    with pytest.raises(ValueError):
        ArrayStack(501)


def test_iteration_top_to_bottom():
    stack = ArrayStack(4)
    for value in (4, 5, 6):
        stack.push(value)
    assert list(stack) == [6, 5, 4]


def test_format_keeps_stack():
    stack = ArrayStack(4)
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.format() == "3 2 1 \n"
    assert list(stack) == [3, 2, 1]