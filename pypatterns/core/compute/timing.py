"""
Stage timing for backends.

Every backend wraps its stages (distances/selection/vote for KNN,
svd/projection/variance for PCA, means/scatter/solve/eigen/projection
for LDA) in Timer sections, so each Result.timing holds a per-stage
breakdown next to 'total_seconds'.
"""

import time
from contextlib import contextmanager
from typing import Iterator


class Timer:
    """
    Wall-clock timer with named, accumulating stages.

    Usage:
        timer = Timer()
        timer.start()
        with timer.section('distances'):
            d = euclidean_distances(points, query)
        timer.stop()
        timer.result()   # {'total_seconds': ..., 'distances': ...}

    A stage entered more than once accumulates its durations.
    """

    def __init__(self) -> None:
        self._stages: dict[str, float] = {}
        self._t0: float | None = None
        self._elapsed: float | None = None

    def start(self) -> None:
        self._t0 = time.perf_counter()

    def stop(self) -> None:
        """
        Raises:
            RuntimeError: If start() was never called
        """
        if self._t0 is None:
            raise RuntimeError("Timer.stop() called before start()")
        self._elapsed = time.perf_counter() - self._t0

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time one stage; the duration is recorded even if the body raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self._stages[name] = self._stages.get(name, 0.0) + (time.perf_counter() - t0)

    def result(self) -> dict[str, float]:
        """
        Total and per-stage durations in seconds.

        Raises:
            RuntimeError: If the timer has not been stopped
        """
        if self._elapsed is None:
            raise RuntimeError("Timer.result() called before stop()")
        return {'total_seconds': self._elapsed, **self._stages}


@contextmanager
def timed() -> Iterator[Timer]:
    """
    Time a block of caller code.

    Usage:
        with timed() as timer:
            labels = [knn.classify(q)[3] for q in queries]
        timer.result()['total_seconds']
    """
    timer = Timer()
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
