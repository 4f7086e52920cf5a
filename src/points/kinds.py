"""Metric and normalization kinds with their per-point strategy tables."""

from enum import Enum

import numpy as np
from scipy.spatial import distance

from ..utils.errors import DivideByZeroError


class DistType(Enum):
    EUCLIDEAN = "euclidean"
    SQUARED_EUCLIDEAN = "sqeuclidean"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"
    COSINE = "cosine"


class NormType(Enum):
    """Normalization conventions.

    MAX_ATTR and ZERO_MEAN_ONE_STD need statistics over the whole point set
    and are handled by the point set itself. The remaining kinds only look at
    a single point's coordinates.
    """

    MAX_ATTR = "max_attr"
    ZERO_MEAN_ONE_STD = "zero_mean_one_std"
    MIN_MAX = "min_max"
    UNIT_LENGTH = "unit_length"


def _cosine(u: np.ndarray, v: np.ndarray) -> float:
    if not np.any(u) or not np.any(v):
        raise DivideByZeroError("Cosine distance is undefined for a zero vector")
    return distance.cosine(u, v)


METRICS = {
    DistType.EUCLIDEAN: distance.euclidean,
    DistType.SQUARED_EUCLIDEAN: distance.sqeuclidean,
    DistType.MANHATTAN: distance.cityblock,
    DistType.CHEBYSHEV: distance.chebyshev,
    DistType.COSINE: _cosine,
}


def _min_max(x: np.ndarray) -> np.ndarray:
    lo, hi = x.min(), x.max()
    if hi == lo:
        raise DivideByZeroError(f"Point has zero range (all coordinates equal {lo})")
    return (x - lo) / (hi - lo)


def _unit_length(x: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(x)
    if norm == 0:
        raise DivideByZeroError("Cannot scale a zero vector to unit length")
    return x / norm


POINT_NORMALIZERS = {
    NormType.MIN_MAX: _min_max,
    NormType.UNIT_LENGTH: _unit_length,
}
