"""
Tests for the KNN selection and voting kernels.
"""

import numpy as np
import pytest

from pypatterns.neighbors._selection import (
    euclidean_distances,
    majority_vote,
    select_nearest,
)


class TestEuclideanDistances:

    def test_known_values(self):
        points = np.array([[0.0, 0.0], [3.0, 4.0], [1.0, 1.0]])
        d = euclidean_distances(points, np.array([0.0, 0.0]))
        np.testing.assert_allclose(d, [0.0, 5.0, np.sqrt(2.0)])

    def test_matches_norm(self, rng):
        points = rng.standard_normal((50, 6))
        q = rng.standard_normal(6)
        np.testing.assert_allclose(
            euclidean_distances(points, q),
            np.linalg.norm(points - q, axis=1),
            rtol=1e-12,
        )


class TestSelectNearest:

    def test_nearest_first(self):
        d = np.array([3.0, 1.0, 2.0, 0.5, 5.0])
        np.testing.assert_array_equal(select_nearest(d, 3), [3, 1, 2])

    def test_equal_distances_lower_index_first(self):
        d = np.array([3.0, 1.0, 2.0, 1.0, 5.0])
        np.testing.assert_array_equal(select_nearest(d, 2), [1, 3])

    def test_ties_at_boundary_resolved_by_index(self):
        d = np.array([1.0, 2.0, 2.0, 2.0, 0.0])
        np.testing.assert_array_equal(select_nearest(d, 3), [4, 0, 1])

    def test_k_equals_n_is_full_order(self):
        d = np.array([2.0, 0.0, 1.0])
        np.testing.assert_array_equal(select_nearest(d, 3), [1, 2, 0])

    def test_agrees_with_stable_argsort(self, rng):
        d = rng.integers(0, 10, size=200).astype(float)
        for k in (1, 7, 50, 200):
            np.testing.assert_array_equal(
                select_nearest(d, k), np.argsort(d, kind='stable')[:k]
            )


class TestMajorityVote:

    def test_clear_majority(self):
        label, votes = majority_vote(['B', 'A', 'B'])
        assert label == 'B'
        assert votes == {'B': 2, 'A': 1}

    def test_tie_goes_to_nearest_label(self):
        label, _ = majority_vote(['A', 'B', 'B', 'A'])
        assert label == 'A'
        label, _ = majority_vote(['B', 'A', 'A', 'B'])
        assert label == 'B'

    def test_votes_in_first_seen_order(self):
        _, votes = majority_vote([3, 1, 2, 1])
        assert list(votes) == [3, 1, 2]

    def test_empty_rejected(self):
        with pytest.raises(ValueError):
            majority_vote([])
