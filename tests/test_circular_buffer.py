import random
import threading
import time

import pytest

from drillbox.circular_buffer import (
    BufferEmptyError,
    BufferFullError,
    CircularBuffer,
)


@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_rejected(capacity):
    with pytest.raises(ValueError):
        CircularBuffer(capacity)


def test_new_buffer_is_empty_and_not_full():
    cb = CircularBuffer(3)
    assert cb.is_empty()
    assert not cb.is_full()
    assert len(cb) == 0
    assert cb.capacity == 3


def test_push_until_full_then_rejects():
    cb = CircularBuffer(3)
    cb.push(10)
    cb.push(20)
    cb.push(30)
    with pytest.raises(BufferFullError):
        cb.push(40)
    assert cb.is_full()
    assert len(cb) == 3


def test_pop_returns_items_in_order():
    cb = CircularBuffer(3)
    for value in (10, 20, 30):
        cb.push(value)
    assert cb.pop() == 10
    assert cb.pop() == 20
    assert len(cb) == 1
    assert not cb.is_full()


def test_wrap_around():
    cb = CircularBuffer(3)
    for value in (10, 20, 30):
        cb.push(value)
    assert [cb.pop(), cb.pop()] == [10, 20]
    cb.push(40)
    cb.push(50)
    assert cb.is_full()
    assert [cb.pop(), cb.pop(), cb.pop()] == [30, 40, 50]
    assert cb.is_empty()


def test_pop_from_empty_buffer_raises():
    cb = CircularBuffer(3)
    with pytest.raises(BufferEmptyError):
        cb.pop()
    cb.push(1)
    assert cb.pop() == 1
    with pytest.raises(BufferEmptyError):
        cb.pop()


def test_full_buffer_unchanged_after_rejected_push():
    cb = CircularBuffer(2)
    cb.push(1)
    cb.push(2)
    with pytest.raises(BufferFullError):
        cb.push(3)
    assert [cb.pop(), cb.pop()] == [1, 2]


def test_capacity_one():
    cb = CircularBuffer(1)
    cb.push(7)
    assert cb.is_full() and not cb.is_empty()
    assert cb.pop() == 7
    assert cb.is_empty() and not cb.is_full()


def test_many_producers_and_consumers():
    items_per_producer = 1000
    num_producers = 3
    num_consumers = 3
    cb = CircularBuffer(10)
    consumed: list[list[int]] = [[] for _ in range(num_consumers)]

    def producer(thread_id: int) -> None:
        rng = random.Random(thread_id)
        start = thread_id * items_per_producer
        for value in range(start, start + items_per_producer):
            while True:
                try:
                    cb.push(value)
                    break
                except BufferFullError:
                    time.sleep(0)
            if rng.random() < 0.01:
                time.sleep(0.0005)

    def consumer(thread_id: int) -> None:
        sink = consumed[thread_id]
        while len(sink) < items_per_producer:
            try:
                sink.append(cb.pop())
            except BufferEmptyError:
                time.sleep(0)

    threads = [
        threading.Thread(target=producer, args=(i,)) for i in range(num_producers)
    ] + [threading.Thread(target=consumer, args=(i,)) for i in range(num_consumers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join(timeout=60)

    assert not any(thread.is_alive() for thread in threads)
    assert [len(sink) for sink in consumed] == [items_per_producer] * num_consumers
    everything = sorted(v for sink in consumed for v in sink)
    assert everything == list(range(num_producers * items_per_producer))
    assert cb.is_empty()


def test_per_producer_order_preserved_for_single_consumer():
    cb = CircularBuffer(4)
    received: list[int] = []
    total = 500

    def produce() -> None:
        for value in range(total):
            while True:
                try:
                    cb.push(value)
                    break
                except BufferFullError:
                    time.sleep(0)

    def consume() -> None:
        while len(received) < total:
            try:
                item = cb.pop()
            except BufferEmptyError:
                time.sleep(0)
                continue
            received.append(item)

    producer = threading.Thread(target=produce)
    consumer = threading.Thread(target=consume)
    producer.start()
    consumer.start()
    producer.join(timeout=30)
    consumer.join(timeout=30)

    assert not producer.is_alive() and not consumer.is_alive()
    assert received == list(range(total))
    assert cb.is_empty()
    assert len(cb) == 0
    with pytest.raises(BufferEmptyError):
        cb.pop()