"""Bounded ring-buffer queues, a binary max-heap priority queue and an unbounded FIFO queue."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from typing import Any

DEFAULT_CAPACITY = 5


class QueueFullError(OverflowError):
    """Raised when adding to a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when removing from or inspecting an empty queue."""


class _Ring:
    """Fixed-capacity circular storage shared by the bounded queues."""

    _kind = "queue"

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % len(self._slots)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"

    def _ensure_room(self, value: Any) -> None:
        if self.is_full():
            raise QueueFullError(f"{self._kind} is full; cannot enqueue {value!r}")

    def _ensure_items(self) -> None:
        if self.is_empty():
            raise QueueEmptyError(f"{self._kind} is empty")

    def _append(self, value: Any) -> None:
        self._ensure_room(value)
        self._slots[(self._front + self._size) % len(self._slots)] = value
        self._size += 1

    def _prepend(self, value: Any) -> None:
        self._ensure_room(value)
        self._front = (self._front - 1) % len(self._slots)
        self._slots[self._front] = value
        self._size += 1

    def _take_front(self) -> Any:
        self._ensure_items()
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % len(self._slots)
        self._size -= 1
        return value

    def _take_back(self) -> Any:
        self._ensure_items()
        index = (self._front + self._size - 1) % len(self._slots)
        value = self._slots[index]
        self._slots[index] = None
        self._size -= 1
        return value


class CircularQueue(_Ring):
    """FIFO queue of bounded capacity stored in a circular buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        return self._take_front()

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()


class Deque(_Ring):
    """Double-ended queue of bounded capacity stored in a circular buffer."""

    _kind = "deque"

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        super().__init__(capacity)

    def is_empty(self) -> bool:
        return super().is_empty()

    def is_full(self) -> bool:
        return super().is_full()

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the current front."""
        self._prepend(value)

    def push_back(self, value: Any) -> None:
        """Add ``value`` after the current rear."""
        self._append(value)

    def pop_front(self) -> Any:
        """Remove and return the front value."""
        return self._take_front()

    def pop_back(self) -> Any:
        """Remove and return the rear value."""
        return self._take_back()

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[Any]:
        return super().__iter__()


class PriorityQueue:
    """Bounded max-priority queue kept as a binary heap in a list."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._heap: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._heap

    def is_full(self) -> bool:
        return len(self._heap) == self._capacity

    def enqueue(self, value: Any) -> None:
        """Insert ``value`` and restore the heap order upwards."""
        if self.is_full():
            raise QueueFullError(f"priority queue is full; cannot enqueue {value!r}")
        heap = self._heap
        heap.append(value)
        child = len(heap) - 1
        while child > 0:
            parent = (child - 1) // 2
            if heap[child] <= heap[parent]:
                break
            heap[child], heap[parent] = heap[parent], heap[child]
            child = parent

    def dequeue(self) -> Any:
        """Remove and return the largest value."""
        if self.is_empty():
            raise QueueEmptyError("priority queue is empty")
        heap = self._heap
        top = heap[0]
        last = heap.pop()
        if heap:
            heap[0] = last
            self._sift_down()
        return top

    def peek(self) -> Any:
        """Return the largest value without removing it."""
        if self.is_empty():
            raise QueueEmptyError("priority queue is empty")
        return self._heap[0]

    def _sift_down(self) -> None:
        heap = self._heap
        size = len(heap)
        root = 0
        while True:
            largest = root
            left, right = 2 * root + 1, 2 * root + 2
            if left < size and heap[left] > heap[largest]:
                largest = left
            if right < size and heap[right] > heap[largest]:
                largest = right
            if largest == root:
                return
            heap[root], heap[largest] = heap[largest], heap[root]
            root = largest

    def __len__(self) -> int:
        return len(self._heap)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in heap-array order, largest first."""
        return iter(list(self._heap))

    def __repr__(self) -> str:
        return f"PriorityQueue({self._heap!r}, capacity={self._capacity})"


class LinkedQueue:
    """Unbounded FIFO queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items.popleft()

    def front(self) -> Any:
        """Return the front value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[0]

    def rear(self) -> Any:
        """Return the rear value."""
        if not self._items:
            raise QueueEmptyError("queue is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._items)!r})"


def is_palindrome_queue(items: Iterable[Any]) -> bool:
    """Tell whether a sequence reads the same from front and back.

    The first half is pushed onto a stack, the middle element of an odd-length
    sequence is dropped, and the rest is checked against the stack.
    """
    queue = deque(items)
    size = len(queue)
    stack = [queue.popleft() for _ in range(size // 2)]
    if size % 2:
        queue.popleft()
    return all(queue.popleft() == stack.pop() for _ in range(len(queue)))


def reverse_queue(items: Iterable[Any]) -> list[Any]:
    """Return the items in reverse order, reversed through a stack."""
    stack = list(items)
    return [stack.pop() for _ in range(len(stack))]