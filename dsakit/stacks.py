"""A bounded stack and infix-to-postfix conversion."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class Stack(Generic[T]):
    """Last-in, first-out stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: T) -> None:
        """Put ``item`` on top; raise StackOverflowError when full."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("stack overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item; raise StackUnderflowError when empty."""
        if not self._items:
            raise StackUnderflowError("stack underflow")
        return self._items.pop()

    def peek(self) -> T:
        """Return the top item without removing it."""
        if not self._items:
            raise StackUnderflowError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Return True if the stack holds nothing."""
        return not self._items


_PRECEDENCE = {"^": 3, "*": 2, "/": 2, "+": 1, "-": 1}


def precedence(operator: str) -> int:
    """Return an operator's binding strength, or -1 for anything else."""
    return _PRECEDENCE.get(operator, -1)


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression of single-character operands to postfix.

    Operators of equal precedence, ``^`` included, associate to the left.
    Raises ValueError on a closing parenthesis without a matching opener.
    """
    pending: list[str] = []
    output: list[str] = []
    for char in expression:
        if _is_operand(char):
            output.append(char)
        elif char == "(":
            pending.append(char)
        elif char == ")":
            while pending and pending[-1] != "(":
                output.append(pending.pop())
            if not pending:
                raise ValueError("unbalanced ')' in expression")
            pending.pop()
        else:
            while pending and precedence(char) <= precedence(pending[-1]):
                output.append(pending.pop())
            pending.append(char)
    output.extend(reversed(pending))
    return "".join(output)