# threadkit

Small building blocks for shared-memory parallel programs written with
Python threads, plus two example programs built on top of them. The
package uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `threadkit.threadpool` | `ThreadPool`: a fixed-size pool whose `enqueue(func, *args, **kwargs)` returns a `concurrent.futures.Future`; `active_threads()`, `shutdown()` (queued tasks still run), context-manager use; `PoolStopped`, raised on submitting to a pool that has been shut down; `tree_preorder(num_nodes)` |
| `threadkit.thdeque` | `ThDeque`: a thread-safe deque with `add`, a blocking `remove` (raises `QueueClosed` once closed and empty), non-blocking `try_remove_front` / `try_remove_back` (raise `IndexError` when empty), `close`, `active` and `len()` |
| `threadkit.ringbuffer` | `RingBuffer(size)`: a fixed-capacity circular buffer; `push` returns `False` when full, `pop` raises `BufferEmpty` when empty, `insert` / `extract` spin until they succeed |
| `threadkit.barrier` | `SenseBarrier(n)`: a reusable sense-reversing barrier; `wait()` returns `True` for the last thread to arrive |
| `threadkit.locks` | `SpinLock` (busy-waiting, usable as a context manager) and `BooleanLock`, a flag with `set_state`, `get_state` and a busy-waiting `wait_until` |
| `threadkit.pipeline` | `Pipeline(first, last)`: `release_next(rank)` and `wait_for_release(rank)` hand control from one stage to the next |
| `threadkit.reduction` | `Reduction` (lock-protected sum) and `AtomicAccumulator` (compare-and-swap sum), each with `data()` and `reset()` |
| `threadkit.safeout` | `SafeCout`: writes the content of a `StringIO` buffer plus a newline to a stream under a lock, then empties the buffer |
| `threadkit.ranges` | `IntRange` (a splittable half-open index range) and `thread_range(begin, end, rank, n_threads)`, the sub-range of thread `rank` (ranks count from 1) |
| `threadkit.rand` | `Rand`, a linear congruential generator of doubles in [0, 1] (default seed 999, iterable); `lcg_step`; `RandInt`, integers in [0, n) |
| `threadkit.stats` | `DMonitor`: accumulates values; `reset()` returns the average and standard deviation and clears the sums |
| `threadkit.text` | `StringTokenizer`, `format_container`, `print_container` |
| `threadkit.timing` | `wait_ms` and `CpuTimer`, a wall-clock timer usable as a context manager |
| `threadkit.heat` | `HeatParams`, `read_params`, `HeatSolver`, `format_profile` and the `threadkit-heat` command |

## Examples

A thread pool returning futures:

```python
from threadkit.threadpool import ThreadPool

with ThreadPool(8) as pool:
    futures = [pool.enqueue(lambda x: x * x, n) for n in range(32)]
    print([f.result() for f in futures])
```

Splitting an index range among threads (ranks count from 1; the first
ranks take the remainder):

```python
from threadkit.ranges import thread_range

print(thread_range(0, 10, 1, 3))  # (0, 4)
```

Timing a block:

```python
from threadkit.timing import CpuTimer

with CpuTimer() as timer:
    ...
print(timer.elapsed())
```

## Commands

`threadkit-pool` submits squaring tasks to a thread pool and prints the
results in submission order. Options: `--threads` (pool size, default 8),
`--tasks` (number of tasks, default 32) and `--tree` (submit the task
numbers in preorder of a complete binary tree).

```
threadkit-pool
threadkit-pool --threads 4 --tasks 16 --tree
```

`threadkit-heat` solves the steady-state heat equation on a rectangular
grid with several threads. It reads `heat.dat` from the working directory:
five lines holding N, M, the maximum number of iterations, the thread count
and the report step. A single command-line argument overrides the thread
count. It prints each thread's row range, a line every report-step
iterations, the middle row of the solution and the wall time. If the file
is missing or malformed it prints "Input error" and exits with status 1.

```
threadkit-heat
threadkit-heat 4
```

The same solver is available from Python through `read_params`,
`HeatParams` and `HeatSolver` (`solve`, `residual`, `profile`) in
`threadkit.heat`.

## Limits

`ThreadPool` runs independent callables only. The package has no pool
with job identifiers, task groups, child tasks that a parent waits for,
or work stealing between per-thread queues.