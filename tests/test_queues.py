import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import (
    CircularQueue,
    Deque,
    LinkedQueue,
    PriorityQueue,
    QueueEmptyError,
    QueueFullError,
    is_palindrome_queue,
    reverse_queue,
)


def test_circular_queue_fifo_order():
    queue = CircularQueue(5)
    for value in (10, 20, 30):
        queue.enqueue(value)
    assert list(queue) == [10, 20, 30]
    assert queue.dequeue() == 10
    assert list(queue) == [20, 30]
    assert len(queue) == 2


def test_circular_queue_wraps_around():
    queue = CircularQueue(5)
    for value in range(1, 6):
        queue.enqueue(value)
    assert queue.is_full()
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    queue.enqueue(6)
    queue.enqueue(7)
    assert list(queue) == [3, 4, 5, 6, 7]
    assert [queue.dequeue() for _ in range(5)] == [3, 4, 5, 6, 7]
    assert queue.is_empty()


def test_circular_queue_full_and_empty_errors():
    queue = CircularQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    assert list(queue) == [1, 2]
    queue.dequeue()
    queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_circular_queue_default_capacity_is_five():
    queue = CircularQueue()
    for value in range(5):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(99)


def test_capacity_must_be_positive():
    with pytest.raises(ValueError):
        CircularQueue(0)
    with pytest.raises(ValueError):
        PriorityQueue(0)


def test_deque_both_ends():
    dq = Deque(5)
    dq.push_back(2)
    dq.push_back(3)
    dq.push_front(1)
    dq.push_front(0)
    assert list(dq) == [0, 1, 2, 3]
    assert dq.pop_back() == 3
    assert dq.pop_front() == 0
    assert list(dq) == [1, 2]
    assert len(dq) == 2


def test_deque_errors():
    dq = Deque(1)
    dq.push_front(7)
    assert dq.is_full()
    with pytest.raises(QueueFullError):
        dq.push_back(8)
    with pytest.raises(QueueFullError):
        dq.push_front(8)
    assert dq.pop_back() == 7
    assert dq.is_empty()
    with pytest.raises(QueueEmptyError):
        dq.pop_front()
    with pytest.raises(QueueEmptyError):
        dq.pop_back()


@given(st.lists(st.integers(), max_size=5))
def test_deque_push_front_reverses(values):
    dq = Deque(5)
    for value in values:
        dq.push_front(value)
    assert list(dq) == values[::-1]


def test_priority_queue_dequeues_largest_first():
    pq = PriorityQueue(5)
    for value in (4, 9, 1, 7, 3):
        pq.enqueue(value)
    assert pq.peek() == 9
    assert [pq.dequeue() for _ in range(5)] == [9, 7, 4, 3, 1]
    assert pq.is_empty()


def test_priority_queue_errors():
    pq = PriorityQueue(1)
    pq.enqueue(5)
    with pytest.raises(QueueFullError):
        pq.enqueue(6)
    pq.dequeue()
    with pytest.raises(QueueEmptyError):
        pq.dequeue()
    with pytest.raises(QueueEmptyError):
        pq.peek()


@given(st.lists(st.integers(), max_size=20))
def test_priority_queue_heap_invariant(values):
    pq = PriorityQueue(20)
    for value in values:
        pq.enqueue(value)
    heap = list(pq)
    assert sorted(heap) == sorted(values)
    assert all(heap[(i - 1) // 2] >= heap[i] for i in range(1, len(heap)))
    assert [pq.dequeue() for _ in values] == sorted(values, reverse=True)


def test_linked_queue_front_and_rear():
    queue = LinkedQueue()
    queue.enqueue(10)
    queue.enqueue(20)
    queue.dequeue()
    queue.dequeue()
    queue.enqueue(30)
    queue.enqueue(40)
    queue.enqueue(50)
    queue.dequeue()
    assert queue.front() == 40
    assert queue.rear() == 50
    assert list(queue) == [40, 50]
    assert len(queue) == 2


def test_linked_queue_empty_errors():
    queue = LinkedQueue()
    assert queue.is_empty()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()
    with pytest.raises(QueueEmptyError):
        queue.front()
    with pytest.raises(QueueEmptyError):
        queue.rear()


@pytest.mark.parametrize(
    ("text", "expected"),
    [("racecar", True), ("abba", True), ("a", True), ("", True), ("abca", False), ("ab", False)],
)
def test_is_palindrome_queue(text, expected):
    assert is_palindrome_queue(text) is expected


@given(st.text(max_size=20))
def test_mirrored_text_is_palindrome(text):
    assert is_palindrome_queue(text + text[::-1])


def test_reverse_queue():
    assert reverse_queue([1, 2, 3, 4]) == [4, 3, 2, 1]
    assert reverse_queue([]) == []


@given(st.lists(st.integers()))
def test_reverse_queue_twice_is_identity(values):
    assert reverse_queue(reverse_queue(values)) == values