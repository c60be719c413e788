"""Threading utilities for shared-memory parallel programs: a thread pool,
barrier, locks, queues, ring buffer, reductions and a parallel heat solver."""

__version__ = "0.1.0"