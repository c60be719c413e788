"""Synchronisation of the stages of a thread pipeline."""

from __future__ import annotations

import threading


class _Connector:
    """A boolean flag with idle waiting on its value."""

    def __init__(self) -> None:
        self._state = False
        self._cond = threading.Condition()

    def wait_then_set(self, wait_for: bool, new_state: bool) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._state == wait_for)
            self._state = new_state
            self._cond.notify_all()


class Pipeline:
    """Connects the stages ranked first..last of a pipeline.

    Stage n waits on connector n-1 and releases connector n; the first
    stage never waits and the last never releases.
    """

    def __init__(self, first: int, last: int) -> None:
        if first > last:
            raise ValueError(f"first stage {first} is after last stage {last}")
        self.first = first
        self.last = last
        self._connectors = {n: _Connector() for n in range(first, last)}

    def _check(self, rank: int) -> None:
        if not self.first <= rank <= self.last:
            raise ValueError(f"rank {rank} outside [{self.first}, {self.last}]")

    def release_next(self, rank: int) -> None:
        """Let the stage after `rank` proceed once it has taken the previous release."""
        self._check(rank)
        if rank >= self.last:
            return
        self._connectors[rank].wait_then_set(False, True)

    def wait_for_release(self, rank: int) -> None:
        """Block until the stage before `rank` releases it."""
        self._check(rank)
        if rank == self.first:
            return
        self._connectors[rank - 1].wait_then_set(True, False)