"""Tests for single points and their metric/normalization kinds."""

import subprocess
import sys
from pathlib import Path

import numpy as np
import pytest

from src.points.kinds import DistType, NormType
from src.points.point import Point
from src.utils.errors import DivideByZeroError, IndexOutOfRangeError, InvalidInputError


class TestPointAccess:
    def test_coordinates_copied(self):
        raw = np.array([1.0, 2.0])
        p = Point(raw)
        raw[0] = 99.0
        assert p[0] == 1.0
        assert p.dimensions == 2
        assert len(p) == 2

    def test_set_and_get(self):
        p = Point([1, 2, 3])
        p[1] = 7.5
        assert list(p) == [1.0, 7.5, 3.0]

    def test_out_of_range(self):
        p = Point([1, 2])
        with pytest.raises(IndexOutOfRangeError):
            p[2]
        with pytest.raises(IndexOutOfRangeError):
            p[-1] = 0.0

    def test_rejects_2d(self):
        with pytest.raises(InvalidInputError):
            Point([[1, 2], [3, 4]])

    def test_clone_is_independent(self):
        p = Point([1, 2])
        q = p.clone()
        q[0] = 5.0
        assert p[0] == 1.0
        assert q != p


class TestDistance:
    def test_euclidean(self):
        assert Point([0, 0]).distance(Point([3, 4])) == pytest.approx(5.0)

    @pytest.mark.parametrize(
        "dist_type, expected",
        [
            (DistType.SQUARED_EUCLIDEAN, 25.0),
            (DistType.MANHATTAN, 7.0),
            (DistType.CHEBYSHEV, 4.0),
        ],
    )
    def test_other_metrics(self, dist_type, expected):
        assert Point([0, 0]).distance(Point([3, 4]), dist_type) == pytest.approx(expected)

    def test_cosine(self):
        a = Point([1, 0])
        assert a.distance(Point([0, 2]), DistType.COSINE) == pytest.approx(1.0)
        assert a.distance(Point([3, 0]), DistType.COSINE) == pytest.approx(0.0)

    def test_cosine_zero_vector(self):
        with pytest.raises(DivideByZeroError):
            Point([0, 0]).distance(Point([1, 1]), DistType.COSINE)

    def test_dimension_mismatch(self):
        with pytest.raises(InvalidInputError):
            Point([1, 2]).distance(Point([1, 2, 3]))


class TestPointNormalize:
    def test_by_vector(self):
        p = Point([2, 9])
        p.normalize([4, 3])
        np.testing.assert_allclose(p.coordinates, [0.5, 3.0])

    def test_by_vector_zero_entry(self):
        p = Point([2, 9])
        with pytest.raises(DivideByZeroError, match=r"\[1\]"):
            p.normalize([4, 0])
        np.testing.assert_array_equal(p.coordinates, [2, 9])

    def test_min_max(self):
        p = Point([2, 4, 6])
        p.normalize(NormType.MIN_MAX)
        np.testing.assert_allclose(p.coordinates, [0.0, 0.5, 1.0])

    def test_unit_length(self):
        p = Point([3, 4])
        p.normalize(NormType.UNIT_LENGTH)
        np.testing.assert_allclose(p.coordinates, [0.6, 0.8])

    def test_degenerate(self):
        with pytest.raises(DivideByZeroError):
            Point([1, 1]).normalize(NormType.MIN_MAX)
        with pytest.raises(DivideByZeroError):
            Point([0, 0]).normalize(NormType.UNIT_LENGTH)

    def test_set_level_kind_rejected(self):
        with pytest.raises(InvalidInputError, match="point-set statistics"):
            Point([1, 2]).normalize(NormType.MAX_ATTR)


class TestLayering:
    def test_points_do_not_import_datasets(self):
        root = Path(__file__).resolve().parent.parent
        code = (
            "import sys, src.points.point; "
            "print(any(m.startswith('src.datasets') for m in sys.modules))"
        )
        out = subprocess.run(
            [sys.executable, "-c", code], cwd=root, capture_output=True, text=True, check=True
        )
        assert out.stdout.strip() == "False"
