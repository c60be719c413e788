"""A fixed-size pool of worker threads fed from a shared task queue."""

from __future__ import annotations

import argparse
import sys
import threading
from collections import deque
from concurrent.futures import Future
from typing import Any, Callable


class PoolStopped(RuntimeError):
    """Raised when work is submitted to a pool that has been shut down."""


class ThreadPool:
    """Runs submitted callables on `capacity` worker threads.

    Workers sleep until a task is queued or the pool is stopped. A stopped
    pool still drains the tasks already queued before its workers exit.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._tasks: deque[Callable[[], None]] = deque()
        self._cond = threading.Condition()
        self._stopped = False
        self._active = 0
        self._threads = [
            threading.Thread(target=self._wait_loop, daemon=True)
            for _ in range(capacity)
        ]
        for thread in self._threads:
            thread.start()

    def _wait_loop(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._stopped or self._tasks)
                if not self._tasks:
                    return
                task = self._tasks.popleft()
                self._active += 1
            try:
                task()
            finally:
                with self._cond:
                    self._active -= 1

    def enqueue(self, func: Callable[..., Any], *args, **kwargs) -> Future:
        """Queue `func(*args, **kwargs)` and return a future for its result."""
        future: Future = Future()

        def payload() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = func(*args, **kwargs)
            except BaseException as exc:  # delivered through the future
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if self._stopped:
                raise PoolStopped("enqueue on stopped ThreadPool")
            self._tasks.append(payload)
            self._cond.notify()
        return future

    def active_threads(self) -> int:
        """Number of workers currently running a task."""
        with self._cond:
            return self._active

    def shutdown(self) -> None:
        """Stop accepting work, let queued tasks finish and join the workers."""
        with self._cond:
            self._stopped = True
            self._cond.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args) -> None:
        self.shutdown()


def tree_preorder(num_nodes: int) -> list[int]:
    """Node indices of a complete binary tree with `num_nodes` nodes, in preorder.

    Node k has children 2k+1 and 2k+2; the traversal starts at the root 0.
    """
    order: list[int] = []
    stack = [0]
    while stack:
        node = stack.pop()
        if node < num_nodes:
            order.append(node)
            stack.append(2 * node + 2)
            stack.append(2 * node + 1)
    return order


def _square(x: int) -> int:
    return x * x


def main(argv=None) -> int:
    """Square task numbers on a pool and print the results in submission order."""
    parser = argparse.ArgumentParser(description="Square numbers on a thread pool.")
    parser.add_argument("--threads", type=int, default=8, help="pool size")
    parser.add_argument("--tasks", type=int, default=32, help="number of tasks")
    parser.add_argument(
        "--tree",
        action="store_true",
        help="submit tasks in preorder of a complete binary tree",
    )
    args = parser.parse_args(sys.argv[1:] if argv is None else list(argv))

    order = tree_preorder(args.tasks) if args.tree else range(args.tasks)
    with ThreadPool(args.threads) as pool:
        futures = [pool.enqueue(_square, task) for task in order]
        for future in futures:
            print(future.result())
    return 0