"""Timing and memory benchmarks for point-set operations."""

from dataclasses import dataclass

import numpy as np
import psutil
from tqdm import tqdm

from ..datasets.pointset import PointSet
from ..points.kinds import DistType, NormType
from ..utils.timer import timer

DEFAULT_SIZES = [100, 250, 500, 1000]


@dataclass
class BenchmarkResult:
    """Result from a single benchmark run."""

    n: int
    D: int
    dist_type: str
    distance_time: float = 0.0
    distance_evaluations: int = 0
    normalize_time: float = 0.0
    extrema_time: float = 0.0
    matrix_bytes: int = 0
    rss_bytes: int = 0


def memory_usage_bytes() -> int:
    """Return current process RSS memory in bytes."""
    return psutil.Process().memory_info().rss


def random_pointset(n: int, D: int, seed: int = 42) -> PointSet:
    rng = np.random.default_rng(seed)
    return PointSet.from_array(rng.standard_normal((n, D)))


def run_single_benchmark(
    points: PointSet,
    dist_type: DistType = DistType.EUCLIDEAN,
    norm: NormType = NormType.ZERO_MEAN_ONE_STD,
) -> BenchmarkResult:
    """Time distance-matrix construction, normalization and extrema.

    Args:
        points: Point set to benchmark; it is not modified.
        dist_type: Metric for the distance matrix.
        norm: Normalization kind to time.

    Returns:
        BenchmarkResult with timings and memory figures.
    """
    n = points.count
    result = BenchmarkResult(n=n, D=points.dimensions, dist_type=dist_type.value)

    with timer() as t_norm:
        points.normalize(norm)
    result.normalize_time = t_norm.elapsed

    with timer() as t_ext:
        points.get_min_max_weights()
    result.extrema_time = t_ext.elapsed

    with timer() as t_dist:
        dm = points.get_distance_matrix(dist_type)
    result.distance_time = t_dist.elapsed
    result.distance_evaluations = dm.evaluations
    result.matrix_bytes = dm.values.nbytes
    result.rss_bytes = memory_usage_bytes()

    return result


def run_benchmark_sweep(
    sizes: list[int] | None = None,
    D: int = 16,
    dist_types: list[DistType] | None = None,
    seed: int = 42,
) -> list[BenchmarkResult]:
    """Benchmark random point sets of increasing size.

    Args:
        sizes: Point counts to try. Defaults to DEFAULT_SIZES.
        D: Number of attributes.
        dist_types: Metrics to try. Defaults to Euclidean only.
        seed: Random seed for the generated data.

    Returns:
        List of BenchmarkResults, one per (size, metric).
    """
    sizes = sizes or DEFAULT_SIZES
    dist_types = dist_types or [DistType.EUCLIDEAN]

    results = []
    for n in tqdm(sizes, desc="Size sweep"):
        points = random_pointset(n, D, seed=seed)
        for dist_type in dist_types:
            r = run_single_benchmark(points, dist_type)
            results.append(r)
            print(f"  n={n} {dist_type.value}: distances={r.distance_time:.3f}s, "
                  f"normalize={r.normalize_time:.4f}s, matrix={r.matrix_bytes/1024:.1f}KB")

    return results
