"""Multi-threaded Jacobi solver with 1D row decomposition.

Rows are split into contiguous blocks, one per worker thread. Every round
each worker updates its own block of the shared ``next`` buffer from the
round-stable ``current`` buffer, records its local maximum change, and
waits at a barrier. The barrier action runs once per round, after all
workers arrived and before any is released: it reduces the local maxima,
copies ``next`` into ``current``, advances the iteration counter and
decides whether to stop.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass

import numpy as np

from .base import JacobiSolver
from .datastructures import JacobiResult, require_positive_int
from .system import LinearSystem


@dataclass(frozen=True)
class RowPartition:
    """Half-open row range ``[start, stop)`` owned by one worker."""
    index: int
    start: int
    stop: int

    @property
    def rows(self) -> int:
        return self.stop - self.start


def partition_rows(n: int, workers: int) -> tuple[RowPartition, ...]:
    """Split ``n`` rows into ``min(workers, n)`` contiguous blocks.

    The first ``n % workers`` blocks get one extra row.

    Examples
    --------
    >>> [(p.start, p.stop) for p in partition_rows(10, 3)]
    [(0, 4), (4, 7), (7, 10)]
    """
    n = require_positive_int(n, "row count")
    workers = min(require_positive_int(workers, "worker count"), n)

    base_size = n // workers
    remainder = n % workers

    partitions = []
    for index in range(workers):
        if index < remainder:
            local_n = base_size + 1
            start = index * local_n
        else:
            local_n = base_size
            start = remainder * (base_size + 1) + (index - remainder) * base_size
        partitions.append(RowPartition(index, start, start + local_n))

    return tuple(partitions)


class _RoundState:
    """Buffers and counters shared by the workers of one solve call.

    ``current`` is only written by ``end_round`` (the barrier action);
    ``nxt`` and ``local_deltas`` are written at disjoint indices by the
    workers.
    """

    def __init__(self, current: np.ndarray, num_workers: int, tolerance: float, max_iter: int):
        self.current = current
        self.nxt = current.copy()
        self.local_deltas = np.zeros(num_workers)
        self.tolerance = tolerance
        self.max_iter = max_iter
        self.iteration = 0
        self.max_delta = np.inf
        self.stop = threading.Event()

    def end_round(self):
        """Barrier action: reduce, publish the new iterate, decide on stopping."""
        self.max_delta = float(np.max(self.local_deltas))
        np.copyto(self.current, self.nxt)
        self.iteration += 1

        if self.iteration >= self.max_iter or self.max_delta <= self.tolerance:
            self.stop.set()


class ThreadedJacobi(JacobiSolver):
    """Threaded Jacobi solver: each thread owns a contiguous block of rows.

    Parameters
    ----------
    num_workers : int
        Requested worker threads; clamped to the system size at solve time
    **kwargs
        Forwarded to JacobiSolver (tolerance, max_iter, use_numba, verbose)

    Raises
    ------
    InvalidConfiguration
        If num_workers is not a positive integer
    """

    method = "threaded"

    def __init__(self, num_workers: int = 1, **kwargs):
        num_workers = require_positive_int(num_workers, "num_workers")
        super().__init__(num_workers=num_workers, **kwargs)

    def effective_workers(self, n: int) -> int:
        """Worker threads actually started for an ``n``-row system."""
        return min(self.config.num_workers, n)

    def solve(
        self,
        system: LinearSystem,
        tolerance: float | None = None,
        max_iter: int | None = None,
        initial_guess=None,
    ) -> JacobiResult:
        """Solve using threaded Jacobi iteration.

        Same contract as SequentialJacobi.solve(). Because every worker
        reduces only its own rows, the result can differ from the
        sequential solver in the last bits.
        """
        tolerance, max_iter, current = self._prepare(system, tolerance, max_iter, initial_guess)

        partitions = partition_rows(system.size, self.config.num_workers)
        num_workers = len(partitions)

        state = _RoundState(current, num_workers, tolerance, max_iter)
        barrier = threading.Barrier(num_workers, action=state.end_round)
        errors: list[BaseException] = []

        threads = [
            threading.Thread(
                target=self._worker,
                args=(partition, system, state, barrier, errors),
                name=f"jacobi-worker-{partition.index + 1}",
            )
            for partition in partitions
        ]

        if self.verbose:
            print(f"Using {'numba' if self.config.use_numba else 'numpy'} kernel with {num_workers} threads")

        t_start = time.perf_counter()
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        wall_time = time.perf_counter() - t_start

        if errors:
            raise errors[0]

        return self._finish(
            system,
            state.current,
            state.iteration,
            state.max_delta,
            tolerance,
            wall_time,
            num_workers=num_workers,
        )

    def _worker(self, partition: RowPartition, system: LinearSystem, state: _RoundState, barrier, errors):
        A = system.coefficients
        b = system.constants

        try:
            while not state.stop.is_set():
                state.local_deltas[partition.index] = self._step(
                    A, b, state.current, state.nxt, partition.start, partition.stop
                )
                barrier.wait()
        except threading.BrokenBarrierError:
            # A peer failed and aborted the barrier; its error is reported
            return
        except Exception as exc:
            errors.append(exc)
            barrier.abort()
