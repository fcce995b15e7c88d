from collections import deque

import pytest

from dsakit.queues import (
    CircularQueue,
    LinearQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
    StackQueue,
)


def _fresh_queues():
    return [LinearQueue(), CircularQueue(), LinkedQueue(), StackQueue()]


def test_fifo_order():
    values = [5, 3, 8]
    for queue in (LinearQueue(), CircularQueue(), LinkedQueue(), StackQueue()):
        for value in values:
            queue.enqueue(value)
        assert list(queue) == values
        assert [queue.dequeue() for _ in values] == values
        assert queue.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinearQueue().dequeue()
    with pytest.raises(QueueEmptyError):
        CircularQueue().dequeue()
    with pytest.raises(QueueEmptyError):
        LinkedQueue().dequeue()
    with pytest.raises(QueueEmptyError):
        StackQueue().dequeue()


def test_fresh_queues_are_empty():
    for queue in _fresh_queues():
        assert queue.is_empty()
        assert len(queue) == 0
        assert list(queue) == []


@pytest.mark.parametrize("kind", [LinearQueue, CircularQueue, LinkedQueue])
def test_peek_returns_front(kind):
    queue = kind()
    queue.enqueue(11)
    queue.enqueue(12)
    assert queue.peek() == 11
    assert len(queue) == 2


@pytest.mark.parametrize("kind", [LinearQueue, CircularQueue, LinkedQueue])
def test_peek_empty_raises(kind):
    with pytest.raises(QueueEmptyError):
        kind().peek()


def test_linear_queue_default_capacity_is_twenty():
    queue = LinearQueue()
    for value in range(20):
        queue.enqueue(value)
    with pytest.raises(QueueFullError):
        queue.enqueue(20)


def test_linear_queue_stays_full_after_partial_dequeue():
    queue = LinearQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    assert list(queue) == [2, 3]


def test_linear_queue_resets_when_drained():
    queue = LinearQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    queue.dequeue()
    queue.dequeue()
    assert queue.is_empty()
    assert not queue.is_full()
    queue.enqueue(9)
    assert list(queue) == [9]


def test_circular_queue_default_capacity_is_twenty():
    queue = CircularQueue()
    for value in range(20):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(20)


def test_circular_queue_reuses_freed_slot():
    queue = CircularQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    queue.enqueue(4)
    assert queue.is_full()
    assert list(queue) == [2, 3, 4]
    assert [queue.dequeue() for _ in range(3)] == [2, 3, 4]


def test_circular_queue_matches_fifo_model_across_wraparounds():
    queue = CircularQueue(4)
    model = deque()
    counter = 0
    for step in range(60):
        if step % 3 == 2:
            assert queue.dequeue() == model.popleft()
        elif len(model) < 4:
            queue.enqueue(counter)
            model.append(counter)
            counter += 1
        assert list(queue) == list(model)
        assert len(queue) == len(model)


def test_linked_queue_is_unbounded():
    queue = LinkedQueue()
    for value in range(500):
        queue.enqueue(value)
    assert len(queue) == 500
    assert queue.peek() == 0


def test_stack_queue_default_capacity_is_five():
    queue = StackQueue()
    for value in range(5):
        queue.enqueue(value)
    assert queue.is_full()
    with pytest.raises(QueueFullError):
        queue.enqueue(5)


def test_stack_queue_keeps_order_after_dequeue():
    queue = StackQueue(4)
    for value in (7, 8, 9):
        queue.enqueue(value)
    assert queue.dequeue() == 7
    queue.enqueue(10)
    assert list(queue) == [8, 9, 10]
    assert len(queue) == 3


@pytest.mark.parametrize("kind", [LinearQueue, CircularQueue, StackQueue])
def test_non_positive_capacity_rejected(kind):
    with pytest.raises(ValueError):
        kind(0)