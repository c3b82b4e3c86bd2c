"""A simple last-in, first-out stack of integers."""

from __future__ import annotations

from typing import Iterator, Optional, Sequence


class Stack:
    """A stack that reports underflow instead of reading past its end."""

    def __init__(self) -> None:
        self._data: list[int] = []

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def push(self, value: int) -> None:
        """Put ``value`` on top."""
        self._data.append(value)

    def pop(self) -> int:
        """Remove and return the top value; raise IndexError when empty."""
        if not self._data:
            raise IndexError("Stack underflow")
        return self._data.pop()

    def top(self) -> int:
        """Return the top value without removing it; raise IndexError when empty."""
        if not self._data:
            raise IndexError("Stack is empty")
        return self._data[-1]

    def format(self) -> str:
        """Return the values from bottom to top, each followed by a space."""
        return "".join(f"{value} " for value in self._data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Exercise the stack: fill it, empty it, then ask for the top."""
    stack = Stack()
    for value in range(1, 6):
        stack.push(value)
    print(stack.format())

    print(f"Popped: {stack.pop()}")
    print(stack.format())

    for _ in range(4):
        print(f"Popped: {stack.pop()}")

    try:
        print(f"Top element: {stack.top()}")
    except IndexError as exc:
        print(f"Error: {exc}")
    return 0