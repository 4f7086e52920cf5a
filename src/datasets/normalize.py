"""Attribute normalization over a list of points.

All functions here rescale the given Point objects in place. Statistics are
checked before any point is modified, so a failure leaves the points as
they were.
"""

import numpy as np

from ..points.kinds import NormType
from ..utils.errors import DivideByZeroError


def _stack(points: list) -> np.ndarray:
    return np.vstack([p.coordinates for p in points])


def normalize_max_attr(points: list) -> np.ndarray:
    """Divide each attribute by its maximum over all points.

    The running maximum starts at 0.0, so an attribute whose values are all
    negative (or all zero) has a maximum of 0 and is rejected.

    Returns:
        The per-attribute maxima used as divisors, shape (D,).
    """
    X = _stack(points)
    maxima = np.maximum(X.max(axis=0), 0.0)

    zero = np.flatnonzero(maxima == 0)
    if zero.size:
        raise DivideByZeroError(
            f"MaxAttr normalization: maximum is 0 for attributes {zero.tolist()}"
        )

    for p in points:
        p.normalize(maxima)
    return maxima


def normalize_zero_mean_one_std(points: list) -> tuple[np.ndarray, np.ndarray]:
    """Standardize each attribute to zero mean and unit population std.

    Variance is E[x^2] - E[x]^2 from a single pass of sums and sums of
    squares.

    Returns:
        means: Per-attribute means, shape (D,).
        stds: Per-attribute population standard deviations, shape (D,).
    """
    X = _stack(points)
    n = X.shape[0]

    means = X.sum(axis=0) / n
    sq_means = (X * X).sum(axis=0) / n
    variances = sq_means - means * means
    # Rounding can push the variance of a near-constant column below zero
    stds = np.sqrt(np.maximum(variances, 0.0))

    constant = np.flatnonzero((stds == 0) | (X.max(axis=0) == X.min(axis=0)))
    if constant.size:
        raise DivideByZeroError(
            f"ZeroMeanOneStd normalization: standard deviation is 0 for attributes {constant.tolist()}"
        )

    for p in points:
        p.coordinates = (p.coordinates - means) / stds
    return means, stds


def normalize_points(points: list, norm: NormType) -> None:
    """Apply a normalization kind to every point in place."""
    if norm == NormType.MAX_ATTR:
        normalize_max_attr(points)
    elif norm == NormType.ZERO_MEAN_ONE_STD:
        normalize_zero_mean_one_std(points)
    else:
        scaled = [p.clone() for p in points]
        for s in scaled:
            s.normalize(norm)
        for p, s in zip(points, scaled):
            p.coordinates = s.coordinates
