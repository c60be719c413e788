"""A fixed-size ring buffer connecting a producer and a consumer thread."""

from __future__ import annotations

import threading
import time
from typing import Any


class BufferEmpty(Exception):
    """Raised when a value is taken from an empty ring buffer."""


class RingBuffer:
    """A circular buffer holding at most `size` values.

    The buffer keeps a head (next write slot), a tail (next read slot) and
    a wrap counter telling whether the head has gone round once more than
    the tail. Equal head and tail mean empty when the counter is zero and
    full otherwise.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"ring buffer size must be positive, got {size}")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._head = 0
        self._tail = 0
        self._wraps = 0
        self._lock = threading.Lock()

    def push(self, value: Any) -> bool:
        """Store a value; return False without storing if the buffer is full."""
        with self._lock:
            if self._head == self._tail and self._wraps > 0:
                return False
            self._slots[self._head] = value
            if self._head == self.size - 1:
                self._wraps += 1
            self._head = (self._head + 1) % self.size
            return True

    def pop(self) -> Any:
        """Take the oldest value; raise BufferEmpty if there is none."""
        with self._lock:
            if self._tail == self._head and self._wraps == 0:
                raise BufferEmpty("ring buffer is empty")
            value = self._slots[self._tail]
            self._slots[self._tail] = None
            if self._tail == self.size - 1:
                self._wraps -= 1
            self._tail = (self._tail + 1) % self.size
            return value

    def insert(self, value: Any) -> None:
        """Store a value, spinning while the buffer is full."""
        while not self.push(value):
            time.sleep(0)

    def extract(self) -> Any:
        """Take the oldest value, spinning while the buffer is empty."""
        while True:
            try:
                return self.pop()
            except BufferEmpty:
                time.sleep(0)

    def __len__(self) -> int:
        with self._lock:
            return self._head - self._tail + self._wraps * self.size