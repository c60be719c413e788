"""Spin locks and boolean locks that busy-wait on a state flag."""

from __future__ import annotations

import threading
import time


class SpinLock:
    """A mutual-exclusion lock that busy-waits instead of sleeping."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def acquire(self) -> bool:
        """Spin until the lock is taken."""
        while not self._lock.acquire(blocking=False):
            time.sleep(0)
        return True

    def release(self) -> None:
        if not self._lock.locked():
            raise RuntimeError("release of an unlocked SpinLock")
        self._lock.release()

    def locked(self) -> bool:
        return self._lock.locked()

    def __enter__(self) -> SpinLock:
        self.acquire()
        return self

    def __exit__(self, *args) -> None:
        self.release()


class BooleanLock:
    """A boolean flag protected by a spin lock, with a busy wait on its value."""

    def __init__(self, state: bool = False) -> None:
        self._state = bool(state)
        self._lock = SpinLock()

    def set_state(self, value: bool) -> None:
        with self._lock:
            self._state = bool(value)

    def get_state(self) -> bool:
        with self._lock:
            return self._state

    def wait_until(self, state: bool) -> None:
        """Spin until the flag equals `state`."""
        wanted = bool(state)
        while self.get_state() != wanted:
            time.sleep(0)