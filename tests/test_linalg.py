"""
Unit tests for linear algebra helpers.
"""

import pytest
import numpy as np
from pyapop.errors import PyapopWarning
from pyapop.linalg import (
    covariance_matrix,
    det_and_inv,
    x_prime_sigma_x,
    normalize_for_svd,
    sv_decomposition,
    matrix_stack,
    matrix_rm_columns,
)


class TestCovarianceMatrix:
    """Tests for covariance_matrix function."""

    def test_matches_numpy(self):
        """Test against np.cov."""
        rng = np.random.default_rng(1)
        m = rng.normal(size=(30, 3))
        np.testing.assert_array_almost_equal(
            covariance_matrix(m), np.cov(m, rowvar=False)
        )

    def test_input_untouched(self):
        m = np.array([[1.0, 2.0], [3.0, 6.0], [5.0, 10.0]])
        original = m.copy()
        covariance_matrix(m)
        np.testing.assert_array_equal(m, original)

    def test_normalize_in_place(self):
        """Test that normalize demeans the input and gives the same answer."""
        m = np.array([[1.0, 2.0], [3.0, 6.0], [5.0, 10.0]])
        expected = covariance_matrix(m)
        out = covariance_matrix(m, normalize=True)
        np.testing.assert_array_almost_equal(out, expected)
        np.testing.assert_array_almost_equal(m.mean(axis=0), [0.0, 0.0])

    def test_too_few_rows(self):
        with pytest.raises(ValueError):
            covariance_matrix(np.ones((1, 3)))


class TestDetAndInv:
    """Tests for det_and_inv function."""

    def test_diagonal(self):
        det, inv = det_and_inv(np.array([[2.0, 0.0], [0.0, 4.0]]))
        assert np.isclose(det, 8.0)
        np.testing.assert_array_almost_equal(inv, [[0.5, 0.0], [0.0, 0.25]])

    def test_negative_determinant(self):
        """Test the sign from row swaps."""
        det, _ = det_and_inv(np.array([[0.0, 1.0], [1.0, 0.0]]))
        assert np.isclose(det, -1.0)

    def test_matches_numpy(self):
        rng = np.random.default_rng(2)
        m = rng.normal(size=(5, 5))
        det, inv = det_and_inv(m)
        assert np.isclose(det, np.linalg.det(m))
        np.testing.assert_array_almost_equal(inv @ m, np.eye(5))

    def test_flags(self):
        """Test that only the requested outputs are computed."""
        m = np.array([[2.0, 1.0], [1.0, 2.0]])
        det, inv = det_and_inv(m, calc_inv=False)
        assert np.isclose(det, 3.0)
        assert inv is None
        det, inv = det_and_inv(m, calc_det=False)
        assert det == 0.0
        assert inv is not None

    def test_singular(self):
        """Test that a singular matrix has zero determinant and no inverse."""
        with pytest.warns(PyapopWarning, match="singular"):
            det, inv = det_and_inv(np.array([[1.0, 2.0], [2.0, 4.0]]))
        assert det == 0.0
        assert inv is None

    def test_not_square(self):
        with pytest.raises(ValueError):
            det_and_inv(np.ones((2, 3)))


class TestXPrimeSigmaX:
    """Tests for x_prime_sigma_x function."""

    def test_basic(self):
        x = np.array([1.0, 2.0])
        sigma = np.array([[2.0, 0.0], [0.0, 3.0]])
        assert x_prime_sigma_x(x, sigma) == 14.0

    def test_size_mismatch(self):
        with pytest.raises(ValueError):
            x_prime_sigma_x(np.ones(3), np.eye(2))


class TestSVD:
    """Tests for normalize_for_svd and sv_decomposition."""

    def test_normalize_for_svd(self):
        m = np.array([[4.0, 1.0], [1.0, 9.0]])
        normalize_for_svd(m)
        np.testing.assert_array_almost_equal(m, [[16.0, 6.0], [6.0, 81.0]])

    def test_shapes(self):
        rng = np.random.default_rng(0)
        pc, explained = sv_decomposition(rng.normal(size=(50, 4)), 2)
        assert pc.shape == (4, 2)
        assert explained.shape == (2,)

    def test_explained_shares(self):
        """Test that eigenvalue shares are sorted and total one."""
        rng = np.random.default_rng(5)
        data = rng.normal(size=(40, 3))
        _, explained = sv_decomposition(data, 3)
        assert np.isclose(explained.sum(), 1.0)
        assert np.all(np.diff(explained) <= 0)

    def test_orthonormal_vectors(self):
        rng = np.random.default_rng(6)
        pc, _ = sv_decomposition(rng.normal(size=(40, 3)), 3)
        np.testing.assert_array_almost_equal(pc.T @ pc, np.eye(3))

    def test_dominant_direction(self):
        """Test that data along one axis gives that axis first."""
        rng = np.random.default_rng(8)
        data = np.column_stack([rng.normal(size=100) * 10, rng.normal(size=100) * 0.1])
        pc, explained = sv_decomposition(data, 1)
        assert abs(pc[0, 0]) > 0.99
        assert explained[0] > 0.99

    def test_bad_dimensions(self):
        with pytest.raises(ValueError):
            sv_decomposition(np.ones((5, 2)), 3)
        with pytest.raises(ValueError):
            sv_decomposition(np.ones((5, 2)), 0)


class TestMatrixStack:
    """Tests for matrix_stack function."""

    def test_top(self):
        out = matrix_stack(np.ones((1, 2)), np.zeros((2, 2)))
        assert out.shape == (3, 2)
        np.testing.assert_array_equal(out[0], [1.0, 1.0])

    def test_right(self):
        out = matrix_stack(np.ones((2, 1)), np.zeros((2, 2)), 'r')
        np.testing.assert_array_equal(out, [[1.0, 0.0, 0.0], [1.0, 0.0, 0.0]])

    def test_one_missing(self):
        """Test that a None input gives a copy of the other."""
        m = np.ones((2, 2))
        out = matrix_stack(None, m)
        np.testing.assert_array_equal(out, m)
        assert out is not m
        out = matrix_stack(m, None, 'r')
        np.testing.assert_array_equal(out, m)
        assert out is not m
        assert matrix_stack(None, None) is None

    def test_mismatch(self):
        """Test that mismatched shapes return None with a diagnostic."""
        with pytest.warns(PyapopWarning, match="columns"):
            assert matrix_stack(np.ones((1, 2)), np.ones((1, 3))) is None
        with pytest.warns(PyapopWarning, match="rows"):
            assert matrix_stack(np.ones((1, 2)), np.ones((2, 2)), 'r') is None


class TestMatrixRmColumns:
    """Tests for matrix_rm_columns function."""

    def test_basic(self):
        m = np.arange(6.0).reshape(2, 3)
        out = matrix_rm_columns(m, [1, 0, 1])
        np.testing.assert_array_equal(out, [[0.0, 2.0], [3.0, 5.0]])
        np.testing.assert_array_equal(m, np.arange(6.0).reshape(2, 3))

    def test_wrong_flag_count(self):
        with pytest.raises(ValueError):
            matrix_rm_columns(np.ones((2, 3)), [1, 0])
