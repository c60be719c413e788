"""Relaxation solver for the stationary heat equation on a rectangle."""

from __future__ import annotations

import re
import sys
import threading
from dataclasses import dataclass, replace
from pathlib import Path

from threadkit.barrier import SenseBarrier
from threadkit.rand import Rand
from threadkit.ranges import thread_range
from threadkit.reduction import Reduction
from threadkit.timing import CpuTimer

EPS = 1.0e-5
DATA_FILE = "heat.dat"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class HeatParams:
    """Problem sizes and run settings."""

    n: int
    m: int
    max_its: int
    n_threads: int
    step_report: int


def read_params(path) -> HeatParams:
    """Read N, M, maxIts, nThreads and stepReport, one per line."""
    lines = Path(path).read_text().splitlines()
    names = ("n", "m", "max_its", "n_threads", "step_report")
    if len(lines) < len(names):
        raise ValueError(f"expected {len(names)} lines in {path}, got {len(lines)}")
    values = {}
    for name, line in zip(names, lines):
        match = _LEADING_INT.match(line)
        if match is None:
            raise ValueError(f"no integer for {name} in line {line!r}")
        values[name] = int(match.group(1))
    return HeatParams(**values)


class HeatSolver:
    """Jacobi relaxation of a Laplace problem with fixed boundary values.

    The left edge is held at 1, the right edge at 0, and the top and
    bottom rows at the linear profile between them. The interior starts
    at that profile plus a small random perturbation.
    """

    def __init__(self, params: HeatParams) -> None:
        if params.n < 2 or params.m < 2:
            raise ValueError(f"grid must be at least 2x2, got {params.m}x{params.n}")
        if params.step_report < 1:
            raise ValueError(f"step_report must be positive, got {params.step_report}")
        self.params = params
        self.u = [[0.0] * params.n for _ in range(params.m)]
        self.v = [[0.0] * params.n for _ in range(params.m)]
        self._set_initial_values()
        self.initial_error = self.residual()
        self.error = self.initial_error
        self.iterations = 0

    def _set_initial_values(self) -> None:
        n_cols, n_rows = self.params.n, self.params.m
        rng = Rand(999)
        for grid in (self.u, self.v):
            for row in grid:
                row[0] = 1.0
                row[n_cols - 1] = 0.0
        a = -1.0 / (n_cols - 1)
        for grid in (self.u, self.v):
            for col in range(n_cols):
                grid[0][col] = a * col + 1
                grid[n_rows - 1][col] = a * col + 1
        for i in range(1, n_rows - 1):
            for j in range(1, n_cols - 1):
                self.u[i][j] = a * j + 1 + 0.0001 * rng.draw()
                self.v[i][j] = a * j + 1 + 0.0001 * rng.draw()

    def residual(self) -> float:
        """Sum of absolute discrete Laplacians of the current field."""
        u = self.u
        total = 0.0
        for i in range(1, self.params.m - 1):
            up, row, down = u[i - 1], u[i], u[i + 1]
            for j in range(1, self.params.n - 1):
                total += abs(down[j] + up[j] + row[j - 1] + row[j + 1] - 4 * row[j])
        return total

    def _next_iteration(self, error: float, total: Reduction) -> bool:
        self.u, self.v = self.v, self.u
        self.iterations += 1
        if self.iterations % self.params.step_report == 0:
            print(f"\n Iteration {self.iterations}")
        if error > EPS * self.initial_error and self.iterations <= self.params.max_its:
            self.error = error
            total.reset()
            return True
        return False

    def solve(self, n_threads: int | None = None) -> int:
        """Relax the field with worker threads; return the iteration count."""
        nt = self.params.n_threads if n_threads is None else n_threads
        if nt < 1:
            raise ValueError(f"n_threads must be positive, got {nt}")
        n_cols, n_rows = self.params.n, self.params.m
        barrier = SenseBarrier(nt)
        total = Reduction(0.0)
        state = {"more": True}

        def work(rank: int) -> None:
            beg, end = thread_range(1, n_rows - 1, rank, nt)
            print(f"\n Thread {rank} range: {beg}   {end}")
            while True:
                u, v = self.u, self.v
                thread_error = 0.0
                for i in range(beg, end):
                    up, row, down, out = u[i - 1], u[i], u[i + 1], v[i]
                    for j in range(1, n_cols - 1):
                        e = down[j] + up[j] + row[j - 1] + row[j + 1] - 4 * row[j]
                        thread_error += abs(e)
                        out[j] = row[j] + 0.25 * e
                total.accumulate(thread_error)
                barrier.wait()
                if rank == 1:
                    state["more"] = self._next_iteration(total.data(), total)
                barrier.wait()
                if not state["more"]:
                    break

        threads = [threading.Thread(target=work, args=(rank,)) for rank in range(1, nt + 1)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        return self.iterations

    def profile(self, step: int) -> list[float]:
        """Values of the middle row at columns 1, 1+step, ... up to N-1."""
        if step < 1:
            raise ValueError(f"step must be positive, got {step}")
        row = self.u[self.params.m // 2]
        return [row[j] for j in range(1, self.params.n, step)]


def format_profile(values) -> str:
    """Render profile values four per line."""
    parts = ["\n Solution profile for m = M/2 : \n\n"]
    counter = 0
    for value in values:
        parts.append(f"{value:g}    ")
        counter += 1
        if counter % 4 == 0:
            parts.append("\n")
            counter = 0
    return "".join(parts)


def main(argv=None) -> int:
    """Read heat.dat from the working directory, solve and print the profile."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        params = read_params(DATA_FILE)
    except (OSError, ValueError):
        print("\n Input error")
        return 1
    if len(args) == 1:
        params = replace(params, n_threads=int(args[0]))
    solver = HeatSolver(params)
    timer = CpuTimer()
    with timer:
        solver.solve()
    sys.stdout.write(format_profile(solver.profile(50)))
    timer.report()
    return 0