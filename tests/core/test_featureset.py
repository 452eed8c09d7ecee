"""
Tests for FeatureSet construction and access.

Validates:
    - from_buffer: point-major reshaping, dim/size checks, 2D input
    - from_arrays / from_dataframe
    - Ownership: private read-only copy
    - Label grouping in first-appearance order
"""

import numpy as np
import pytest

from pypatterns.core.exceptions import DimensionError, ValidationError
from pypatterns.core.featureset import FeatureSet


# ═══════════════════════════════════════════════════════════════════════
# from_buffer
# ═══════════════════════════════════════════════════════════════════════


class TestFromBuffer:

    def test_point_major_layout(self):
        fs = FeatureSet.from_buffer([1, 101, 5, 89, 108, 5], dim=2)
        np.testing.assert_array_equal(fs.points, [[1, 101], [5, 89], [108, 5]])
        assert fs.n_points == 3
        assert fs.dim == 2
        assert len(fs) == 3

    def test_size_inferred_and_checked(self):
        fs = FeatureSet.from_buffer([1, 2, 3, 4], dim=2, size=2)
        assert fs.n_points == 2
        with pytest.raises(DimensionError, match="expected size=3"):
            FeatureSet.from_buffer([1, 2, 3, 4], dim=2, size=3)

    def test_length_not_multiple_of_dim(self):
        with pytest.raises(DimensionError, match="not a multiple of dim=2"):
            FeatureSet.from_buffer([1, 2, 3], dim=2)

    @pytest.mark.parametrize("dim", [0, -3])
    def test_non_positive_dim(self, dim):
        with pytest.raises(ValidationError):
            FeatureSet.from_buffer([1, 2, 3, 4], dim=dim)

    def test_empty_buffer(self):
        with pytest.raises(ValidationError, match="at least 1 point"):
            FeatureSet.from_buffer([], dim=2)

    def test_none_buffer(self):
        with pytest.raises(ValidationError):
            FeatureSet.from_buffer(None, dim=2)

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="non-finite"):
            FeatureSet.from_buffer([1.0, np.nan], dim=2)

    def test_2d_input_must_match_dim(self):
        X = np.arange(6.0).reshape(3, 2)
        fs = FeatureSet.from_buffer(X, dim=2)
        np.testing.assert_array_equal(fs.points, X)
        with pytest.raises(DimensionError, match="expected dim=3"):
            FeatureSet.from_buffer(X, dim=3)

    def test_labels_length_checked(self):
        with pytest.raises(DimensionError, match="data=2, labels=3"):
            FeatureSet.from_buffer([1, 2, 3, 4], dim=2, labels=['a', 'b', 'c'])


# ═══════════════════════════════════════════════════════════════════════
# Ownership
# ═══════════════════════════════════════════════════════════════════════


class TestOwnership:

    def test_caller_mutation_does_not_leak(self):
        buf = np.array([1.0, 2.0, 3.0, 4.0])
        fs = FeatureSet.from_buffer(buf, dim=2)
        buf[0] = 99.0
        assert fs.points[0, 0] == 1.0

    def test_points_read_only(self):
        fs = FeatureSet.from_arrays(np.eye(2))
        with pytest.raises(ValueError):
            fs.points[0, 0] = 5.0


# ═══════════════════════════════════════════════════════════════════════
# Labels and grouping
# ═══════════════════════════════════════════════════════════════════════


class TestLabels:

    def test_unlabeled(self):
        fs = FeatureSet.from_arrays([[1.0], [2.0]])
        assert not fs.is_labeled
        assert fs.labels is None
        with pytest.raises(ValidationError):
            fs.classes()

    def test_classes_first_appearance(self):
        fs = FeatureSet.from_arrays(np.arange(5.0), labels=['b', 'a', 'b', 'c', 'a'])
        assert fs.classes() == ('b', 'a', 'c')

    def test_group_by_label(self):
        fs = FeatureSet.from_arrays(np.arange(5.0), labels=['b', 'a', 'b', 'c', 'a'])
        groups = fs.group_by_label()
        assert list(groups) == ['b', 'a', 'c']
        np.testing.assert_array_equal(groups['b'].ravel(), [0.0, 2.0])
        np.testing.assert_array_equal(groups['a'].ravel(), [1.0, 4.0])
        np.testing.assert_array_equal(groups['c'].ravel(), [3.0])

    def test_1d_array_is_one_feature(self):
        fs = FeatureSet.from_arrays([1.0, 2.0, 3.0])
        assert fs.points.shape == (3, 1)

    def test_repr(self):
        fs = FeatureSet.from_arrays(np.zeros((4, 3)), labels=[0, 1, 0, 1])
        assert repr(fs) == "FeatureSet(n=4, dim=3, classes=2)"


class TestFromDataFrame:

    def test_label_column_excluded(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({
            'x': [1.0, 2.0, 3.0],
            'y': [4.0, 5.0, 6.0],
            'species': ['a', 'b', 'a'],
        })
        fs = FeatureSet.from_dataframe(df, label='species')
        assert fs.columns == ('x', 'y')
        assert fs.labels == ('a', 'b', 'a')
        np.testing.assert_array_equal(fs.points, [[1, 4], [2, 5], [3, 6]])

    def test_explicit_columns(self):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame({'x': [1.0, 2.0], 'y': [3.0, 4.0]})
        fs = FeatureSet.from_dataframe(df, columns=['y'])
        assert fs.dim == 1
        assert not fs.is_labeled
