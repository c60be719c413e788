"""A thread-safe deque for handing tasks to worker threads."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class QueueClosed(Exception):
    """Raised by a blocking remove on a deque that is closed and empty."""


class ThDeque:
    """An unbounded deque shared between producer and consumer threads.

    Adding never blocks. ``remove`` sleeps while the deque is empty and
    still active. The ``try_remove_*`` methods never wait: they take from
    the front or the back, or raise IndexError when the deque is empty.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._active = True
        self._cond = threading.Condition()

    def add(self, item: Any) -> None:
        """Append an item at the back and wake a waiting consumer."""
        with self._cond:
            self._items.append(item)
            self._cond.notify()

    def remove(self) -> Any:
        """Take the front item, waiting while the deque is empty and active.

        Raises QueueClosed once the deque is closed and has no items left.
        """
        with self._cond:
            while not self._items and self._active:
                self._cond.wait()
            if not self._items:
                # Other consumers may still be asleep; let them see the closure.
                self._cond.notify_all()
                raise QueueClosed("deque is closed and empty")
            return self._items.popleft()

    def try_remove_front(self) -> Any:
        """Take the front item without waiting; IndexError if empty."""
        with self._cond:
            if not self._items:
                raise IndexError("try_remove_front from an empty deque")
            return self._items.popleft()

    def try_remove_back(self) -> Any:
        """Take the back item without waiting; IndexError if empty."""
        with self._cond:
            if not self._items:
                raise IndexError("try_remove_back from an empty deque")
            return self._items.pop()

    def close(self) -> None:
        """Mark the deque inactive and wake every waiting consumer."""
        with self._cond:
            self._active = False
            self._cond.notify_all()

    def active(self) -> bool:
        """True until close() has been called."""
        with self._cond:
            return self._active

    def __len__(self) -> int:
        with self._cond:
            return len(self._items)