"""Small, fast pseudo-random generators."""

from __future__ import annotations

import random

IMUL = 314159269
IADD = 453806245
MASK = 2147483647
SCALE = 0.4656612873e-9
RAND_MAX = 2147483647

DEFAULT_SEED = 999


def lcg_step(seed: int) -> tuple[int, float]:
    """Advance a linear congruential seed.

    Returns the new seed and the uniform deviate in [0, 1] it produces.
    """
    new_seed = (seed * IMUL + IADD) & MASK
    return new_seed, new_seed * SCALE


class Rand:
    """Quick and dirty generator of uniform doubles in [0, 1]."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self.seed = int(seed)

    def draw(self) -> float:
        """Return the next uniform deviate in [0, 1]."""
        self.seed, value = lcg_step(self.seed)
        return value

    def __iter__(self):
        while True:
            yield self.draw()


class RandInt:
    """Random integers in [0, n), or in [0, RAND_MAX] when n is 0.

    Each instance owns its generator; the default seed is 1.
    """

    def __init__(self, n: int = 0, seed: int | None = None) -> None:
        if n < 0:
            raise ValueError(f"upper bound must be non-negative, got {n}")
        self.n = n
        self._rng = random.Random(1 if seed is None else seed)

    def draw(self) -> int:
        """Return the next random integer."""
        if self.n == 0:
            return self._rng.randrange(RAND_MAX + 1)
        return self._rng.randrange(self.n)