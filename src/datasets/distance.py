"""Symmetric pairwise distance matrix derived from a point set."""

import numpy as np
from tqdm import tqdm

from ..points.kinds import DistType
from ..utils.errors import InvalidInputError
from .base import AbstractDataset, DataType


class DistanceMatrix(AbstractDataset):
    """Read-only square matrix of pairwise distances.

    Args:
        distances: Array of shape (n, n). It is copied and frozen.
        evaluations: Number of metric evaluations spent building it.
    """

    def __init__(self, distances: np.ndarray, evaluations: int = 0):
        super().__init__(DataType.DISTANCE_MATRIX)
        arr = np.array(distances, dtype=np.float64)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise InvalidInputError(f"Distance matrix must be square, got shape {arr.shape}")
        arr.setflags(write=False)
        self._distances = arr
        self.evaluations = evaluations

    @property
    def count(self) -> int:
        return self._distances.shape[0]

    @property
    def values(self) -> np.ndarray:
        """Read-only (n, n) view of the distances."""
        return self._distances

    def __getitem__(self, idx):
        return self._distances[idx]

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._distances, self._distances.T))

    def max_distance(self) -> float:
        return float(self._distances.max())


def compute_distance_matrix(
    points: list,
    dist_type: DistType = DistType.EUCLIDEAN,
    progress: bool = False,
) -> DistanceMatrix:
    """Build the pairwise distance matrix of a list of points.

    Only the upper triangle is evaluated; each value is mirrored into the
    lower triangle. The diagonal stays at zero.

    Args:
        points: Sequence of Point objects of equal dimensionality.
        dist_type: Metric passed to Point.distance().
        progress: Show a tqdm bar over the rows.

    Returns:
        DistanceMatrix of shape (n, n).
    """
    n = len(points)
    dists = np.zeros((n, n), dtype=np.float64)

    rows = range(n - 1)
    if progress:
        rows = tqdm(rows, desc="Distance matrix", unit="row")

    evaluations = 0
    for i in rows:
        p = points[i]
        for j in range(i + 1, n):
            dists[i, j] = dists[j, i] = p.distance(points[j], dist_type)
            evaluations += 1

    return DistanceMatrix(dists, evaluations=evaluations)
