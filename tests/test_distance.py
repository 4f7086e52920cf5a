"""Tests for distance-matrix construction."""

import numpy as np
import pytest
from scipy.spatial.distance import cdist

from src.datasets.base import DataType
from src.datasets.distance import DistanceMatrix
from src.datasets.pointset import PointSet
from src.points.kinds import DistType
from src.points.point import Point
from src.utils.errors import InvalidInputError


@pytest.fixture
def sample_set():
    rng = np.random.default_rng(7)
    return PointSet.from_array(rng.standard_normal((30, 6)))


class TestDistanceMatrix:
    def test_known_example(self):
        ps = PointSet.from_rows([["0", "0"], ["3", "4"]])
        dm = ps.get_distance_matrix()
        np.testing.assert_allclose(dm.values, [[0.0, 5.0], [5.0, 0.0]])
        assert dm.type == DataType.DISTANCE_MATRIX
        assert dm.count == 2

    def test_single_point(self):
        dm = PointSet.from_array([[1, 2, 3]]).get_distance_matrix()
        assert dm.values.shape == (1, 1)
        assert dm[0, 0] == 0.0

    def test_symmetric_zero_diagonal(self, sample_set):
        dm = sample_set.get_distance_matrix()
        assert dm.is_symmetric()
        np.testing.assert_array_equal(np.diag(dm.values), 0.0)

    def test_non_negative_and_triangle_inequality(self, sample_set):
        D = sample_set.get_distance_matrix().values
        assert np.all(D >= 0)
        # D[i, k] <= D[i, j] + D[j, k] for all i, j, k
        lhs = D[:, np.newaxis, :]
        rhs = D[:, :, np.newaxis] + D[np.newaxis, :, :]
        assert np.all(lhs <= rhs + 1e-9)

    @pytest.mark.parametrize(
        "dist_type, scipy_metric",
        [
            (DistType.EUCLIDEAN, "euclidean"),
            (DistType.SQUARED_EUCLIDEAN, "sqeuclidean"),
            (DistType.MANHATTAN, "cityblock"),
            (DistType.CHEBYSHEV, "chebyshev"),
            (DistType.COSINE, "cosine"),
        ],
    )
    def test_matches_cdist(self, sample_set, dist_type, scipy_metric):
        X = sample_set.to_array()
        expected = cdist(X, X, metric=scipy_metric)
        np.fill_diagonal(expected, 0.0)
        dm = sample_set.get_distance_matrix(dist_type)
        np.testing.assert_allclose(dm.values, expected, atol=1e-10)

    @pytest.mark.parametrize("n, expected", [(1, 0), (2, 1), (10, 45)])
    def test_upper_triangle_evaluations(self, monkeypatch, n, expected):
        calls = []
        original = Point.distance

        def counting_distance(self, other, dist_type=DistType.EUCLIDEAN):
            calls.append(1)
            return original(self, other, dist_type)

        monkeypatch.setattr(Point, "distance", counting_distance)
        ps = PointSet.from_array(np.arange(n * 2, dtype=np.float64).reshape(n, 2))
        dm = ps.get_distance_matrix()
        assert len(calls) == expected
        assert dm.evaluations == expected

    def test_progress_bar(self, sample_set):
        dm = sample_set.get_distance_matrix(progress=True)
        assert dm.count == sample_set.count

    def test_read_only(self, sample_set):
        dm = sample_set.get_distance_matrix()
        with pytest.raises(ValueError):
            dm.values[0, 1] = 1.0

    def test_reflects_current_state(self):
        ps = PointSet.from_array([[0, 0], [3, 4]])
        before = ps.get_distance_matrix()
        ps[1][0] = 0.0
        after = ps.get_distance_matrix()
        assert before[0, 1] == pytest.approx(5.0)
        assert after[0, 1] == pytest.approx(4.0)

    def test_max_distance(self):
        dm = PointSet.from_array([[0], [1], [5]]).get_distance_matrix()
        assert dm.max_distance() == pytest.approx(5.0)

    def test_rejects_non_square(self):
        with pytest.raises(InvalidInputError):
            DistanceMatrix(np.zeros((2, 3)))
