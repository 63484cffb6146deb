import pytest

from structkit.queues import (
    ArrayQueue,
    LinkedQueue,
    QueueEmptyError,
    QueueFullError,
)


def test_array_queue_is_fifo():
    queue = ArrayQueue(5)
    values = [10, 20, 30, 40]
    for value in values:
        queue.insert(value)
    assert list(queue) == values
    assert [queue.remove() for _ in values] == values
    assert queue.is_empty()


def test_array_queue_default_capacity():
    assert ArrayQueue().capacity == 128


def test_array_queue_full():
    queue = ArrayQueue(2)
    queue.insert("a")
    queue.insert("b")
    assert queue.is_full()
    with pytest.raises(QueueFullError, match="queue is full"):
        queue.insert("c")
    assert list(queue) == ["a", "b"]


def test_array_queue_remove_empty_raises():
    with pytest.raises(QueueEmptyError, match="queue is empty"):
        ArrayQueue(3).remove()


def test_array_queue_peek_empty_raises():
    with pytest.raises(QueueEmptyError):
        ArrayQueue(3).peek()


def test_array_queue_wraps_around():
    queue = ArrayQueue(3)
    for value in [1, 2, 3]:
        queue.insert(value)
    assert queue.remove() == 1
    assert queue.remove() == 2
    queue.insert(4)
    queue.insert(5)
    assert queue.is_full()
    assert list(queue) == [3, 4, 5]
    assert queue.peek() == 3
    assert [queue.remove() for _ in range(3)] == [3, 4, 5]


def test_array_queue_peek_does_not_remove():
    queue = ArrayQueue(4)
    queue.insert("x")
    queue.insert("y")
    assert queue.peek() == "x"
    assert len(queue) == 2


def test_priority_enqueue_keeps_order():
    values = [5, 1, 4, 2, 3, 2]
    queue = ArrayQueue(10)
    for value in values:
        queue.enqueue(value)
    assert list(queue) == sorted(values)
    assert [queue.remove() for _ in values] == sorted(values)


def test_priority_enqueue_after_wraparound():
    queue = ArrayQueue(4)
    for value in [1, 2, 3]:
        queue.insert(value)
    queue.remove()
    queue.remove()
    for value in [9, 0, 5]:
        queue.enqueue(value)
    assert list(queue) == sorted([3, 9, 0, 5])
    assert queue.is_full()


def test_priority_enqueue_full():
    queue = ArrayQueue(1)
    queue.enqueue(1)
    with pytest.raises(QueueFullError, match="priority queue is full"):
        queue.enqueue(0)


@pytest.mark.parametrize("capacity", [0, -5])
def test_array_queue_rejects_bad_capacity(capacity):
    with pytest.raises(ValueError):
        ArrayQueue(capacity)


def test_linked_queue_is_fifo():
    queue = LinkedQueue()
    values = ["a", "b", "c"]
    for value in values:
        queue.insert(value)
    assert len(queue) == 3
    assert queue.peek() == "a"
    assert [queue.remove() for _ in values] == values
    assert queue.is_empty()


def test_linked_queue_empty_errors():
    queue = LinkedQueue()
    with pytest.raises(QueueEmptyError, match="Queue is empty"):
        queue.remove()
    with pytest.raises(QueueEmptyError, match="Queue is empty"):
        queue.peek()


def test_linked_queue_interleaved():
    queue = LinkedQueue()
    queue.insert(1)
    queue.insert(2)
    assert queue.remove() == 1
    queue.insert(3)
    assert queue.remove() == 2
    assert queue.remove() == 3
    assert len(queue) == 0