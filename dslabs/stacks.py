"""Stacks and the classic stack exercises: brackets, palindromes, notation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


class StackOverflowError(Exception):
    """Raised when pushing onto a full bounded stack."""


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


@dataclass(eq=False)
class _Node:
    value: Any
    below: Optional["_Node"] = None


class LinkedStack:
    """Unbounded stack built from linked nodes."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._top: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.push(value)

    def push(self, value: Any) -> None:
        """Put a value on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("pop from an empty stack")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("peek at an empty stack")
        return self._top.value

    def __iter__(self) -> Iterator[Any]:
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedStack):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(reversed(list(self)))!r})"


class BoundedStack:
    """Stack with a fixed capacity, stored in a list."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def push(self, value: Any) -> None:
        """Put a value on top; StackOverflowError when full."""
        if self.is_full():
            raise StackOverflowError("push onto a full stack")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("pop from an empty stack")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("peek at an empty stack")
        return self._items[-1]

    def __iter__(self) -> Iterator[Any]:
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundedStack):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self.capacity}, items={self._items!r})"


def balanced_parentheses(expression: str) -> bool:
    """True when every '(' in the expression has a matching ')'."""
    stack = LinkedStack()
    for char in expression:
        if char == "(":
            stack.push(char)
        elif char == ")":
            if not stack:
                return False
            stack.pop()
    return not stack


def is_palindrome(word: str) -> bool:
    """True when the word reads the same backwards."""
    stack = LinkedStack(word)
    return all(char == stack.pop() for char in word)


def precedence(operator: str) -> int:
    """Binding strength of an operator; 0 for anything else."""
    if operator in ("+", "-"):
        return 1
    if operator in ("*", "/"):
        return 2
    if operator == "^":
        return 3
    return 0


def _is_operand(symbol: str) -> bool:
    return symbol.isascii() and symbol.isalnum()


def _convert(expression: str, pops_on_equal: bool) -> str:
    stack = LinkedStack()
    output: list[str] = []
    for symbol in expression:
        if _is_operand(symbol):
            output.append(symbol)
        elif symbol == "(":
            stack.push(symbol)
        elif symbol == ")":
            while stack and stack.peek() != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        else:
            mine = precedence(symbol)
            while stack and (
                mine <= precedence(stack.peek())
                if pops_on_equal
                else mine < precedence(stack.peek())
            ):
                output.append(stack.pop())
            stack.push(symbol)
    output.extend(stack)
    return "".join(output)


def infix_to_postfix(expression: str) -> str:
    """Convert an infix expression to postfix notation."""
    return _convert(expression, pops_on_equal=True)


def infix_to_prefix(expression: str) -> str:
    """Convert an infix expression to prefix notation."""
    mirrored = expression[::-1].translate(str.maketrans("()", ")("))
    return _convert(mirrored, pops_on_equal=False)[::-1]