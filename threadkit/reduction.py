"""Thread-safe sum reductions."""

from __future__ import annotations

import threading
from typing import Any


class Reduction:
    """A mutex-protected running sum."""

    def __init__(self, initial: Any = 0) -> None:
        self._data = initial
        self._lock = threading.Lock()

    def accumulate(self, value: Any) -> None:
        with self._lock:
            self._data += value

    def data(self) -> Any:
        with self._lock:
            return self._data

    def reset(self) -> None:
        """Set the sum back to the zero of its type."""
        with self._lock:
            self._data -= self._data


class AtomicAccumulator:
    """A running sum updated by compare-and-swap on the stored value."""

    def __init__(self, initial: Any = 0) -> None:
        self._value = initial
        self._swap_lock = threading.Lock()

    def _compare_and_swap(self, expected: Any, new: Any) -> bool:
        with self._swap_lock:
            if self._value is expected:
                self._value = new
                return True
            return False

    def update(self, value: Any) -> None:
        """Add `value`, retrying until no other thread interfered."""
        while True:
            old = self._value
            if self._compare_and_swap(old, old + value):
                return

    def data(self) -> Any:
        return self._value

    def reset(self) -> None:
        while True:
            old = self._value
            if self._compare_and_swap(old, old - old):
                return