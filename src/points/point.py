"""A single fixed-dimension point."""

from typing import Iterable

import numpy as np

from ..utils.errors import DivideByZeroError, IndexOutOfRangeError, InvalidInputError
from .kinds import METRICS, POINT_NORMALIZERS, DistType, NormType


class Point:
    """Ordered, fixed-length vector of float64 coordinates.

    Args:
        coordinates: Any 1-D iterable of numbers. The values are copied.
    """

    __slots__ = ("coordinates",)

    def __init__(self, coordinates: Iterable[float]):
        coords = np.array(coordinates, dtype=np.float64)
        if coords.ndim != 1:
            raise InvalidInputError(f"Point coordinates must be 1-D, got shape {coords.shape}")
        self.coordinates = coords

    @property
    def dimensions(self) -> int:
        return self.coordinates.shape[0]

    def __len__(self) -> int:
        return self.coordinates.shape[0]

    def __iter__(self):
        return iter(self.coordinates.tolist())

    def _check_index(self, k: int) -> None:
        if not 0 <= k < self.coordinates.shape[0]:
            raise IndexOutOfRangeError(
                f"Attribute {k} out of range for point with {self.dimensions} dimensions"
            )

    def __getitem__(self, k: int) -> float:
        self._check_index(k)
        return float(self.coordinates[k])

    def __setitem__(self, k: int, value: float) -> None:
        self._check_index(k)
        self.coordinates[k] = value

    def __eq__(self, other) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return np.array_equal(self.coordinates, other.coordinates)

    def __repr__(self) -> str:
        return f"Point({self.coordinates.tolist()})"

    def clone(self) -> "Point":
        return Point(self.coordinates)

    def distance(self, other: "Point", dist_type: DistType = DistType.EUCLIDEAN) -> float:
        """Distance to another point of the same dimensionality."""
        if other.dimensions != self.dimensions:
            raise InvalidInputError(
                f"Dimension mismatch: {self.dimensions} vs {other.dimensions}"
            )
        return float(METRICS[dist_type](self.coordinates, other.coordinates))

    def normalize(self, by) -> None:
        """Rescale the coordinates in place.

        Args:
            by: Either a reference vector of length `dimensions` (each
                coordinate is divided by the matching entry) or a per-point
                NormType such as MIN_MAX or UNIT_LENGTH.
        """
        if isinstance(by, NormType):
            if by not in POINT_NORMALIZERS:
                raise InvalidInputError(f"{by} needs point-set statistics and cannot be applied to one point")
            self.coordinates = POINT_NORMALIZERS[by](self.coordinates)
            return

        ref = np.asarray(by, dtype=np.float64)
        if ref.shape != self.coordinates.shape:
            raise InvalidInputError(
                f"Reference vector shape {ref.shape} does not match point shape {self.coordinates.shape}"
            )
        zero = np.flatnonzero(ref == 0)
        if zero.size:
            raise DivideByZeroError(f"Reference vector is zero at attributes {zero.tolist()}")
        self.coordinates = self.coordinates / ref
