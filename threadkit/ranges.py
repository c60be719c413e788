"""Integer index ranges and their division among threads."""

from __future__ import annotations


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


class IntRange:
    """A half-open range [begin, end) that can be split recursively.

    The range stops being divisible once it holds no more than
    (end - begin) / granularity + 1 elements of the original range.
    """

    def __init__(self, begin: int, end: int, granularity: int) -> None:
        if granularity == 0:
            raise ValueError("granularity must be non-zero")
        if begin > end:
            begin, end = end, begin
        self.begin = begin
        self.end = end
        self.grain = _trunc_div(end - begin, granularity)

    def split(self) -> IntRange:
        """Split at the middle; return the lower half and keep the upper."""
        middle = _trunc_div(self.end + self.begin, 2)
        lower = IntRange.__new__(IntRange)
        lower.begin = self.begin
        lower.end = middle
        lower.grain = self.grain
        self.begin = middle
        return lower

    def is_empty(self) -> bool:
        return self.end == self.begin

    def is_divisible(self) -> bool:
        return self.end > self.begin + self.grain + 1

    def __len__(self) -> int:
        return self.end - self.begin

    def __iter__(self):
        return iter(range(self.begin, self.end))

    def __repr__(self) -> str:
        return f"IntRange(begin={self.begin}, end={self.end}, grain={self.grain})"


def thread_range(begin: int, end: int, rank: int, n_threads: int) -> tuple[int, int]:
    """Return the sub-range of [begin, end) given to thread `rank`.

    Ranks run from 1 to n_threads. The first (size % n_threads) ranks
    receive one extra element.
    """
    if n_threads < 1:
        raise ValueError(f"n_threads must be positive, got {n_threads}")
    if not 1 <= rank <= n_threads:
        raise ValueError(f"rank must be in [1, {n_threads}], got {rank}")
    size = end - begin
    if size < 0:
        raise ValueError(f"empty or reversed range [{begin}, {end})")
    chunk, extra = divmod(size, n_threads)
    before = rank - 1
    beg = begin + before * chunk + min(before, extra)
    stop = beg + chunk + (1 if rank <= extra else 0)
    return beg, stop