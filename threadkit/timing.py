"""Sleeping and wall-clock timing."""

from __future__ import annotations

import sys
import time
from typing import TextIO


def wait_ms(milliseconds: float) -> None:
    """Block the calling thread for the given number of milliseconds."""
    time.sleep(max(milliseconds, 0) / 1000.0)


class CpuTimer:
    """Measures wall-clock time between start() and stop()."""

    def __init__(self) -> None:
        self._start: float | None = None
        self._stop: float | None = None

    def start(self) -> None:
        self._start = time.perf_counter()
        self._stop = None

    def stop(self) -> None:
        if self._start is None:
            raise RuntimeError("timer was never started")
        self._stop = time.perf_counter()

    def elapsed(self) -> float:
        """Seconds between start and stop, or since start if still running."""
        if self._start is None:
            raise RuntimeError("timer was never started")
        end = time.perf_counter() if self._stop is None else self._stop
        return end - self._start

    def report(self, file: TextIO | None = None) -> None:
        out = sys.stdout if file is None else file
        out.write(f"\n Wall time is {self.elapsed():g} seconds\n")
        out.flush()

    def __enter__(self) -> CpuTimer:
        self.start()
        return self

    def __exit__(self, *args) -> None:
        self.stop()