import threading

import pytest

from threadkit.ringbuffer import BufferEmpty, RingBuffer


def test_fifo_order():
    rb = RingBuffer(4)
    for value in ("a", "b", "c"):
        assert rb.push(value) is True
    assert [rb.pop(), rb.pop(), rb.pop()] == ["a", "b", "c"]


def test_push_fails_when_full():
    rb = RingBuffer(3)
    assert all(rb.push(i) for i in range(3))
    assert rb.push(99) is False
    assert len(rb) == 3
    assert rb.pop() == 0
    assert rb.push(99) is True
    assert [rb.pop(), rb.pop(), rb.pop()] == [1, 2, 99]


def test_pop_empty_raises():
    rb = RingBuffer(2)
    with pytest.raises(BufferEmpty):
        rb.pop()
    rb.push(1)
    rb.pop()
    with pytest.raises(BufferEmpty):
        rb.pop()


def test_len_tracks_wraparound():
    rb = RingBuffer(3)
    seen = []
    for i in range(10):
        rb.push(i)
        rb.push(i + 100)
        assert len(rb) == 2
        seen.append(rb.pop())
        seen.append(rb.pop())
        assert len(rb) == 0
    assert seen == [x for i in range(10) for x in (i, i + 100)]


def test_invalid_size():
    with pytest.raises(ValueError):
        RingBuffer(0)


def test_producer_consumer_threads():
    rb = RingBuffer(5)
    count = 500
    received = []

    def producer():
        for i in range(count):
            rb.insert(i)

    def consumer():
        for _ in range(count):
            received.append(rb.extract())

    threads = [threading.Thread(target=producer), threading.Thread(target=consumer)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert received == list(range(count))
    assert len(rb) == 0