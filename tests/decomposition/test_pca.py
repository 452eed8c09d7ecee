"""
Tests for PcaReducer and pca().

Validates:
    - Centering invariant of the stored matrix
    - Output length k * n, with the defensive clamp for k <= 0 or k >= d
    - Sign convention and repeatability
    - Agreement with the covariance eigen-decomposition
    - No-op loads on invalid input, and load isolation
"""

import warnings

import numpy as np
import pytest

from pypatterns import LoadSkippedWarning, NotLoadedError, PcaReducer, ValidationError, pca
from pypatterns.core import Backend
from pypatterns.core.compute.tolerances import CPU_FP64, select_tolerance
from pypatterns.decomposition.backends import CPUEigenBackend, CPUSVDBackend
from pypatterns.neighbors.backends import CPUBruteForceBackend


@pytest.fixture
def loaded(correlated_data):
    reducer = PcaReducer().reduce(correlated_data.ravel(), dim=4, size=100)
    return reducer, correlated_data


# ═══════════════════════════════════════════════════════════════════════
# Centering
# ═══════════════════════════════════════════════════════════════════════


class TestCentering:

    def test_coordinate_means_are_zero(self, loaded):
        reducer, _ = loaded
        assert reducer.centered.shape == (4, 100)
        np.testing.assert_allclose(reducer.centered.mean(axis=1), 0.0, atol=1e-12)

    def test_means_recorded(self, loaded):
        reducer, X = loaded
        np.testing.assert_allclose(reducer.means, X.mean(axis=0), rtol=CPU_FP64.rtol)

    def test_centered_is_a_copy(self, loaded):
        reducer, _ = loaded
        reducer.centered[0, 0] = 1e6
        assert reducer.centered[0, 0] != 1e6


# ═══════════════════════════════════════════════════════════════════════
# Output size and clamp
# ═══════════════════════════════════════════════════════════════════════


class TestDimensionality:

    @pytest.mark.parametrize("k", [1, 2, 3])
    def test_valid_k(self, loaded, k):
        reducer, _ = loaded
        assert reducer[k].shape == (k * 100,)

    @pytest.mark.parametrize("k", [0, -2, 4, 50])
    def test_out_of_range_k_clamped(self, loaded, k):
        reducer, _ = loaded
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            values = reducer[k]
        assert values.shape == (3 * 100,)
        sol = reducer.solve(k)
        assert sol.k == 3
        assert sol.k_requested == k
        assert sol.was_clamped
        assert any("clamped to 3" in w for w in sol.warnings)

    def test_clamped_output_equals_d_minus_1(self, loaded):
        reducer, _ = loaded
        np.testing.assert_array_equal(reducer[0], reducer[3])

    def test_non_integer_k(self, loaded):
        reducer, _ = loaded
        with pytest.raises(ValidationError):
            reducer[1.5]

    def test_one_dimensional_data(self):
        reducer = PcaReducer().reduce([1.0, 2.0, 3.0, 6.0], dim=1)
        np.testing.assert_allclose(reducer[1], [-2.0, -1.0, 0.0, 3.0], atol=1e-12)
        sol = reducer.solve(0)
        assert sol.k == 1
        assert sol.values.shape == (4,)

    def test_fewer_points_than_dims(self, rng):
        X = rng.standard_normal((3, 5))
        sol = PcaReducer().reduce(X, dim=5).solve(4)
        assert sol.values.shape == (12,)
        # centered rank is at most n - 1 = 2
        np.testing.assert_allclose(sol.as_matrix()[:, 2:], 0.0, atol=1e-10)


# ═══════════════════════════════════════════════════════════════════════
# Numerical content
# ═══════════════════════════════════════════════════════════════════════


class TestProjection:

    def test_point_major_layout(self, loaded):
        reducer, _ = loaded
        sol = reducer.solve(2)
        assert sol.as_matrix().shape == (100, 2)
        np.testing.assert_array_equal(sol.values, sol.as_matrix().ravel())

    def test_repeatable(self, loaded):
        reducer, _ = loaded
        np.testing.assert_array_equal(reducer[2], reducer[2])

    def test_sign_convention(self, loaded):
        reducer, _ = loaded
        D = reducer.solve(3).directions
        pivots = np.argmax(np.abs(D), axis=0)
        assert np.all(D[pivots, np.arange(3)] > 0)

    def test_matches_covariance_eigenvalues(self, loaded):
        reducer, X = loaded
        sol = reducer.solve(3)
        expected = np.linalg.eigvalsh(np.cov(X, rowvar=False))[::-1]
        np.testing.assert_allclose(
            sol.explained_variance, expected, rtol=select_tolerance(decomposition=True).rtol
        )
        np.testing.assert_allclose(sol.explained_variance_ratio.sum(), 1.0)

    def test_components_uncorrelated(self, loaded):
        reducer, _ = loaded
        Y = reducer.solve(3).as_matrix()
        C = np.cov(Y, rowvar=False)
        np.testing.assert_allclose(C - np.diag(np.diag(C)), 0.0, atol=1e-9)

    def test_line_data(self):
        t = np.array([-2.0, -1.0, 0.0, 1.0, 2.0])
        X = np.column_stack([t, 2 * t])
        sol = PcaReducer().reduce(X.ravel(), dim=2).solve(1)
        direction = np.array([1.0, 2.0]) / np.sqrt(5.0)
        np.testing.assert_allclose(sol.directions[:, 0], direction, atol=1e-12)
        np.testing.assert_allclose(sol.values, t * np.sqrt(5.0), atol=1e-12)

    def test_info_and_timing(self, loaded):
        reducer, _ = loaded
        sol = reducer.solve(2)
        assert sol.backend_name == 'cpu_svd'
        assert sol.info['method'] == 'pca'
        assert sol.info['rank'] == 4
        assert 'svd' in sol.timing
        assert "PCA projection: d=4 -> k=2" in sol.summary()


# ═══════════════════════════════════════════════════════════════════════
# Load policy
# ═══════════════════════════════════════════════════════════════════════


class TestLoadPolicy:

    @pytest.mark.parametrize("data, dim, size", [
        ([], 2, None),
        ([1.0, 2.0, 3.0], 2, None),
        ([1.0, 2.0, 3.0, 4.0], 0, None),
        ([1.0, 2.0, 3.0, 4.0], 2, 3),
        ([1.0, np.inf], 2, None),
        (None, 2, None),
    ])
    def test_invalid_load_is_noop(self, loaded, data, dim, size):
        reducer, _ = loaded
        before = reducer.centered
        with pytest.warns(LoadSkippedWarning, match="previous data kept"):
            returned = reducer.reduce(data, dim, size)
        assert returned is reducer
        np.testing.assert_array_equal(reducer.centered, before)

    def test_invalid_first_load_leaves_unloaded(self):
        reducer = PcaReducer()
        with pytest.warns(LoadSkippedWarning):
            reducer.reduce([1.0, 2.0, 3.0], dim=2)
        assert not reducer.is_loaded
        assert reducer.n_observations == 0
        with pytest.raises(NotLoadedError):
            reducer[1]

    def test_reload_replaces(self, loaded, rng):
        reducer, _ = loaded
        B = rng.standard_normal((30, 3))
        reducer.reduce(B.ravel(), dim=3)
        assert reducer.dim == 3
        assert reducer.n_observations == 30
        np.testing.assert_allclose(reducer.centered, (B - B.mean(axis=0)).T, atol=1e-12)
        fresh = PcaReducer().reduce(B.ravel(), dim=3)
        np.testing.assert_array_equal(reducer[2], fresh[2])


class TestFunctional:

    def test_pca_matches_reducer(self, correlated_data):
        sol = pca(correlated_data, k=2)
        reducer = PcaReducer().reduce(correlated_data, dim=4)
        np.testing.assert_array_equal(sol.values, reducer[2])

    @pytest.mark.parametrize("backend", [CPUSVDBackend(), CPUEigenBackend(), CPUBruteForceBackend()])
    def test_backends_satisfy_protocol(self, backend):
        assert isinstance(backend, Backend)

    def test_unknown_backend(self, correlated_data):
        with pytest.raises(ValidationError, match="Unknown backend"):
            pca(correlated_data, k=2, backend='gpu')
