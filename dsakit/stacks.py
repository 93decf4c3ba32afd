"""A linked-list stack, stack reversal and the next-greater-element problem."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any

NO_GREATER = -1


class StackUnderflowError(IndexError):
    """Raised when popping or peeking an empty stack."""


@dataclass
class _Link:
    value: Any
    below: _Link | None = None


class LinkedStack:
    """LIFO stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Link | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        value = self._top.value
        self._top = self._top.below
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackUnderflowError("stack underflow")
        return self._top.value

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __str__(self) -> str:
        return " -> ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"LinkedStack({list(self)!r})"


def reverse_stack(items: Iterable[Any]) -> list[Any]:
    """Return a stack, given bottom to top, with its order reversed."""
    return list(items)[::-1]


def next_greater_elements(values: Sequence[int]) -> list[int]:
    """For each element, the first later element greater than it, or -1 if there is none."""
    result = [NO_GREATER] * len(values)
    pending: list[int] = []
    for index, value in enumerate(values):
        while pending and value > values[pending[-1]]:
            result[pending.pop()] = value
        pending.append(index)
    return result