"""Running mean and standard deviation of a data stream."""

from __future__ import annotations

import math


class DMonitor:
    """Accumulates values and reports their average and spread on reset."""

    def __init__(self) -> None:
        self._sum = 0.0
        self._sum_sq = 0.0
        self._count = 0
        self._average = math.nan
        self._variance = math.nan

    def accumulate(self, value: float) -> None:
        self._sum += value
        self._sum_sq += value * value
        self._count += 1

    def reset(self) -> tuple[float, float]:
        """Compute average and standard deviation, then clear the accumulators."""
        if self._count == 0:
            raise ValueError("no data accumulated")
        average = self._sum / self._count
        spread = self._sum_sq / self._count - average * average
        self._average = average
        self._variance = math.sqrt(max(spread, 0.0))
        self._sum = 0.0
        self._sum_sq = 0.0
        self._count = 0
        return self._average, self._variance

    @property
    def average(self) -> float:
        return self._average

    @property
    def variance(self) -> float:
        """Standard deviation computed at the last reset."""
        return self._variance

    @property
    def count(self) -> int:
        return self._count