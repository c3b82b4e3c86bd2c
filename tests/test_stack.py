import pytest

from zkit.stack import Stack, main


def test_push_pop_is_lifo():
    stack = Stack()
    values = [4, 8, 15, 16]
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == list(reversed(values))
    assert len(stack) == 0


def test_top_does_not_remove():
    stack = Stack()
    stack.push(3)
    stack.push(9)
    assert stack.top() == 9
    assert len(stack) == 2


def test_pop_empty_raises_underflow():
    with pytest.raises(IndexError, match="Stack underflow"):
        Stack().pop()


def test_top_empty_raises():
    with pytest.raises(IndexError, match="Stack is empty"):
        Stack().top()


def test_pop_past_end_raises():
    stack = Stack()
    stack.push(1)
    stack.pop()
    with pytest.raises(IndexError):
        stack.pop()


def test_format_bottom_to_top():
    stack = Stack()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.format() == "1 2 3 "
    assert stack.format().split() == [str(value) for value in stack]


def test_format_empty():
    assert Stack().format() == ""


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "1 2 3 4 5 "
    assert lines[1] == "Popped: 5"
    assert lines[2] == "1 2 3 4 "
    assert lines[3:7] == ["Popped: 4", "Popped: 3", "Popped: 2", "Popped: 1"]
    assert lines[-1] == "Error: Stack is empty"