"""Point sets: ordered collections of equal-dimension points.

A PointSet is the input representation for the clustering and mining
algorithms. It can be built from Point objects, from a table of string
cells (as produced by the delimited-file loader), or from a numpy array,
and derives distance matrices, normalized copies, per-attribute extrema and
row/column reductions.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

import numpy as np

from ..points.kinds import DistType, NormType
from ..points.point import Point
from ..utils.errors import (
    EmptyDatasetError,
    IndexOutOfRangeError,
    InvalidInputError,
    ParseError,
)
from .base import AbstractDataset, DataType
from .distance import DistanceMatrix, compute_distance_matrix
from .normalize import normalize_points


@dataclass
class MinMaxWeights:
    """Per-attribute extrema of a point set."""

    min: Point
    max: Point


@dataclass
class ReducedDataSet:
    """A row subset plus the original row index of every kept row."""

    data: "PointSet"
    data_map: np.ndarray


def _index_array(indices: Sequence[int], what: str) -> np.ndarray:
    """Flat, non-empty array of integer indices. Values are not truncated."""
    try:
        arr = np.asarray(indices)
    except ValueError as e:
        raise InvalidInputError(f"{what} list must be a flat list of integers") from e
    if arr.ndim != 1:
        raise InvalidInputError(f"{what} list must be 1-D, got shape {arr.shape}")
    if arr.size == 0:
        raise InvalidInputError(f"{what} list is empty")
    if not np.issubdtype(arr.dtype, np.integer):
        raise InvalidInputError(f"{what} indices must be integers, got {arr.tolist()}")
    return arr.astype(np.intp)


class PointSet(AbstractDataset):
    """Ordered list of points sharing one dimensionality.

    Args:
        points: Non-empty list of Point objects. The dimensionality is taken
            from the first point; all others must match (not re-checked).
    """

    def __init__(self, points: list[Point]):
        super().__init__(DataType.POINT_SET)
        if len(points) == 0:
            raise InvalidInputError("Empty Dataset")
        self.points = list(points)
        self.dimensions = self.points[0].dimensions

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[str]],
        parse: Callable[[str], float] = float,
        line_numbers: Sequence[int] | None = None,
    ) -> "PointSet":
        """Build a point set from a rectangular table of string cells.

        Args:
            rows: Rows of cells; every row must have the same length.
            parse: Converts one cell to a number.
            line_numbers: Source line of each row, reported in errors. Rows
                are otherwise identified only by their 0-based position.

        Raises:
            InvalidInputError: Empty table, empty rows, or ragged rows.
            ParseError: A cell rejected by `parse`.
        """
        if len(rows) == 0:
            raise InvalidInputError("Empty Dataset")
        n_attributes = len(rows[0])
        if n_attributes == 0:
            raise InvalidInputError("Row 0 has no attributes")

        points = []
        for r, row in enumerate(rows):
            line = None if line_numbers is None else line_numbers[r]
            if len(row) != n_attributes:
                where = "" if line is None else f" (line {line})"
                raise InvalidInputError(
                    f"Non-constant number of attributes: row {r} has {len(row)}, expected {n_attributes}{where}"
                )
            values = []
            for c, cell in enumerate(row):
                try:
                    values.append(parse(cell))
                except (TypeError, ValueError) as e:
                    raise ParseError(r, c, cell, line=line) from e
            points.append(Point(values))
        return cls(points)

    @classmethod
    def from_array(cls, X) -> "PointSet":
        """Build a point set from an array-like of shape (n, D)."""
        X = np.asarray(X, dtype=np.float64)
        if X.ndim != 2:
            raise InvalidInputError(f"Expected a 2-D array, got shape {X.shape}")
        if X.shape[1] == 0:
            raise InvalidInputError("Points must have at least one attribute")
        return cls([Point(row) for row in X])

    @classmethod
    def from_file(cls, path: Path | str) -> "PointSet":
        """Load a comma- or tab-separated file of numbers."""
        from .loader import load_delimited

        parsed = load_delimited(path)
        return cls.from_rows(parsed.rows, line_numbers=parsed.line_numbers)

    @property
    def count(self) -> int:
        return len(self.points)

    def _check_row(self, i: int) -> None:
        if not 0 <= i < len(self.points):
            raise IndexOutOfRangeError(f"Row {i} out of range for point set of {self.count} points")

    def __getitem__(self, i: int) -> Point:
        self._check_row(i)
        return self.points[i]

    def __setitem__(self, i: int, point: Point) -> None:
        self._check_row(i)
        if point.dimensions != self.dimensions:
            raise InvalidInputError(
                f"Point has {point.dimensions} dimensions, point set has {self.dimensions}"
            )
        self.points[i] = point

    def __iter__(self):
        return iter(self.points)

    def __repr__(self) -> str:
        return f"PointSet(count={self.count}, dimensions={self.dimensions})"

    def to_array(self) -> np.ndarray:
        """Copy of the coordinates as an array of shape (count, dimensions)."""
        return np.vstack([p.coordinates for p in self.points])

    def copy(self) -> "PointSet":
        return PointSet([p.clone() for p in self.points])

    def get_distance_matrix(
        self,
        dist_type: DistType = DistType.EUCLIDEAN,
        progress: bool = False,
    ) -> DistanceMatrix:
        """Pairwise distances between all points under `dist_type`."""
        return compute_distance_matrix(self.points, dist_type, progress=progress)

    def normalize(self, norm: NormType, inplace: bool = False) -> "PointSet":
        """Rescale attributes under a normalization convention.

        Args:
            norm: MAX_ATTR and ZERO_MEAN_ONE_STD use statistics across all
                points; other kinds are applied to each point on its own.
            inplace: Mutate this point set's points instead of a copy.

        Returns:
            The normalized point set (self when `inplace` is true).

        Raises:
            DivideByZeroError: A zero attribute max, zero std, or a
                degenerate point. Nothing is modified in that case.
        """
        target = self if inplace else self.copy()
        normalize_points(target.points, norm)
        return target

    def get_min_max_weights(self) -> MinMaxWeights:
        """Minimum and maximum value of every attribute.

        For each value the max is only tested when the value did not lower
        the min.
        """
        if not self.points:
            raise EmptyDatasetError("Cannot compute extrema of an empty point set")

        lo = self.points[0].clone()
        hi = self.points[0].clone()
        for p in self.points[1:]:
            for k in range(self.dimensions):
                value = p.coordinates[k]
                if value < lo.coordinates[k]:
                    lo.coordinates[k] = value
                elif value > hi.coordinates[k]:
                    hi.coordinates[k] = value

        return MinMaxWeights(min=lo, max=hi)

    def get_reduced_attribute_set(self, features: Sequence[int]) -> "PointSet":
        """Keep only the listed attributes, in the given order.

        Duplicates are allowed and repeat the attribute.
        """
        features = _index_array(features, "Feature")
        bad = [int(f) for f in features if not 0 <= f < self.dimensions]
        if bad:
            raise IndexOutOfRangeError(
                f"Attributes {bad} out of range for {self.dimensions} dimensions"
            )
        return PointSet([Point(p.coordinates[features]) for p in self.points])

    def get_reduced_data_set(self, rows: Sequence[int]) -> ReducedDataSet:
        """Select rows by index, recording where each came from.

        The selected points are copies; later changes to either set do not
        affect the other.
        """
        data_map = _index_array(rows, "Row")
        bad = [int(i) for i in data_map if not 0 <= i < self.count]
        if bad:
            raise IndexOutOfRangeError(f"Rows {bad} out of range for point set of {self.count} points")

        subset = PointSet([self.points[i].clone() for i in data_map])
        return ReducedDataSet(data=subset, data_map=data_map)

    def to_text(self) -> str:
        """Tab-separated coordinates, one line per point, no trailing newline."""
        return "\n".join(
            "\t".join(repr(float(x)) for x in p.coordinates) for p in self.points
        )

    def save(self, path: Path | str) -> None:
        with open(path, "w") as f:
            f.write(self.to_text())
