"""Wall-clock timing for point-set operations."""

import time
from contextlib import contextmanager
from dataclasses import dataclass


@dataclass
class TimingResult:
    """Elapsed seconds of a timed block, with an optional label."""

    label: str | None = None
    elapsed: float = 0.0


@contextmanager
def timer(label: str | None = None, verbose: bool = False):
    """Measure the wall-clock time of a block.

    Usage:
        with timer("distance matrix", verbose=True) as t:
            ps.get_distance_matrix()
        t.elapsed  # seconds
    """
    result = TimingResult(label=label)
    start = time.perf_counter()
    try:
        yield result
    finally:
        result.elapsed = time.perf_counter() - start
        if verbose:
            print(f"  {label or 'block'}: {result.elapsed:.3f}s")
