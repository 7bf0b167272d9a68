import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.queues import (
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def _filled(queue, items):
    for item in items:
        queue.enqueue(item)
    return queue


@pytest.mark.parametrize("queue_type", [LinearQueue, CircularQueue, LinkedQueue])
def test_dequeue_on_empty_raises(queue_type):
    with pytest.raises(QueueEmptyError):
        queue_type().dequeue()


@pytest.mark.parametrize("queue_type", [LinearQueue, CircularQueue])
def test_bounded_queue_rejects_sixth_item(queue_type):
    queue = _filled(queue_type(), [1, 2, 3, 4, 5])
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(6)
    assert list(queue) == [1, 2, 3, 4, 5]


def test_linear_queue_stays_full_after_dequeue():
    queue = _filled(LinearQueue(), [1, 2, 3, 4, 5])
    assert queue.dequeue() == 1
    assert list(queue) == [2, 3, 4, 5]
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(7)


def test_linear_queue_resets_when_drained():
    queue = _filled(LinearQueue(), [1, 2, 3, 4, 5])
    drained = [queue.dequeue() for _ in range(5)]
    assert drained == [1, 2, 3, 4, 5]
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(9)
    assert list(queue) == [9]


def test_circular_queue_reuses_freed_slot():
    queue = _filled(CircularQueue(), [1, 2, 3, 4, 5])
    assert queue.dequeue() == 1
    assert not queue.is_full()
    queue.enqueue(7)
    assert list(queue) == [2, 3, 4, 5, 7]
    with pytest.raises(QueueFullError):
        queue.enqueue(8)


def test_linked_queue_sequence_from_driver():
    queue = LinkedQueue()
    queue.enqueue(10)
    queue.enqueue(20)
    queue.dequeue()
    queue.dequeue()
    assert queue.is_empty()
    for item in (30, 40, 50):
        queue.enqueue(item)
    assert queue.dequeue() == 30
    assert list(queue) == [40, 50]
    assert len(queue) == 2


@pytest.mark.parametrize("queue_type", [LinearQueue, CircularQueue])
def test_invalid_capacity(queue_type):
    with pytest.raises(ValueError):
        queue_type(0)


@given(st.lists(st.integers()))
def test_linked_queue_is_fifo(items):
    queue = _filled(LinkedQueue(), items)
    assert len(queue) == len(items)
    assert [queue.dequeue() for _ in items] == items
    assert queue.is_empty()


@given(st.lists(st.integers(), max_size=5))
def test_circular_queue_is_fifo(items):
    queue = _filled(CircularQueue(), items)
    assert queue.is_full() == (len(items) == 5)
    assert [queue.dequeue() for _ in items] == items
    assert queue.is_empty()