"""Dataset utility functions: per-attribute summary statistics."""

import numpy as np

from .pointset import PointSet


def dataset_stats(points: PointSet) -> dict:
    """Compute basic statistics for a point set.

    Args:
        points: Point set of n points with D attributes.

    Returns:
        Dict with keys: n, D, mean, std, min, max (per-attribute arrays of
        shape (D,)), and mean_norm (average L2 norm of the points).
    """
    X = points.to_array()
    return {
        "n": X.shape[0],
        "D": X.shape[1],
        "mean": X.mean(axis=0),
        "std": X.std(axis=0),
        "min": X.min(axis=0),
        "max": X.max(axis=0),
        "mean_norm": float(np.mean(np.linalg.norm(X, axis=1))),
    }
