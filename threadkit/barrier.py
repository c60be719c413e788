"""A sense-reversing barrier."""

from __future__ import annotations

import threading


class SenseBarrier:
    """Barrier for a fixed number of threads, reusable across phases.

    Each thread keeps a private sense flag; the last thread to arrive
    resets the count and flips the shared sense, releasing the others.
    """

    def __init__(self, n: int) -> None:
        if n < 1:
            raise ValueError(f"barrier size must be positive, got {n}")
        self.size = n
        self._count = n
        self._sense = False
        self._cond = threading.Condition()
        self._local = threading.local()

    def wait(self) -> bool:
        """Block until all threads arrive; return True for the last arrival."""
        my_sense = getattr(self._local, "sense", True)
        with self._cond:
            self._count -= 1
            if self._count == 0:
                self._count = self.size
                self._sense = my_sense
                self._cond.notify_all()
                last = True
            else:
                self._cond.wait_for(lambda: self._sense == my_sense)
                last = False
        self._local.sense = not my_sense
        return last