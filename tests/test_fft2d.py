"""
Unit tests for the 2-D FFT.

Matrices are packed column-major (element [m, n] at sample m + n * dim), so a
packed buffer reshaped to (dim, dim) is indexed [n, m].

Run:
    pytest tests/test_fft2d.py -v
"""

import sys
import os

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest
from scipy.fft import fft2 as scipy_fft2

from fft_core import FastFourierTransform, FastFourierTransform2d, InvalidDimension

from reference_vectors import assert_near, embed


def _pack(a: np.ndarray) -> np.ndarray:
    """Square complex matrix -> column-major interleaved float64 buffer."""
    return np.ascontiguousarray(a.T, dtype=np.complex128).reshape(-1).view(np.float64).copy()


def _unpack(buf: np.ndarray, dim: int, off: int = 0) -> np.ndarray:
    flat = buf[off:off + 2 * dim * dim].copy().view(np.complex128)
    return flat.reshape(dim, dim).T


def _random_matrix(rng, dim):
    return rng.uniform(-1.0, 1.0, (dim, dim)) + 1j * rng.uniform(-1.0, 1.0, (dim, dim))


def _apply(trans, a, inverse=False):
    out = np.empty(2 * trans.dim * trans.dim)
    trans.apply_complex(_pack(a), 0, inverse, out, 0)
    return _unpack(out, trans.dim)


class TestFastFourierTransform2d:
    """Test suite for FastFourierTransform2d."""

    @pytest.mark.parametrize("dim", [2, 4, 8, 32, 128])
    def test_matches_scipy(self, dim):
        rng = np.random.default_rng(dim)
        a = _random_matrix(rng, dim)
        trans = FastFourierTransform2d(dim)

        X_ours = _apply(trans, a)
        error = np.abs(X_ours - scipy_fft2(a))
        print(f"\n[FFT2D dim={dim}] Max error: {error.max():.2e}")
        assert error.max() < 1e-9

    def test_matches_row_column_composition(self):
        """FFT2D == 1-D FFT of every vector, transpose, again, transpose back."""
        dim = 16
        rng = np.random.default_rng(4)
        a = _random_matrix(rng, dim)
        fft1d = FastFourierTransform(dim)
        fft2d = FastFourierTransform2d(dim)

        def rows(m):
            result = np.empty_like(m)
            for i in range(dim):
                out = np.empty(2 * dim)
                fft1d.apply_complex(np.ascontiguousarray(m[i]).view(np.float64), 0, False, out, 0)
                result[i] = out.view(np.complex128)
            return result

        vectors = a.T.copy()  # packed layout, [n, m]
        expected = rows(rows(vectors).T.copy()).T

        out = np.empty(2 * dim * dim)
        fft2d.apply_complex(_pack(a), 0, False, out, 0)
        actual = out.view(np.complex128).reshape(dim, dim)

        assert_near(expected, actual, atol=1e-10)

    def test_real_input(self):
        dim = 8
        rng = np.random.default_rng(8)
        a = rng.standard_normal((dim, dim))
        trans = FastFourierTransform2d(dim)

        x = np.ascontiguousarray(a.T).reshape(-1)
        out = np.empty(2 * dim * dim)
        trans.apply_real(x, 0, False, out, 0)

        assert_near(scipy_fft2(a), _unpack(out, dim), atol=1e-10)
        assert_near(_apply(trans, a.astype(np.complex128)), _unpack(out, dim), atol=1e-12)

    @pytest.mark.parametrize("dim", [2, 16, 64, 1024])
    def test_round_trip(self, dim):
        rng = np.random.default_rng(dim + 3)
        a = _random_matrix(rng, dim)
        trans = FastFourierTransform2d(dim)

        assert_near(a, _apply(trans, _apply(trans, a), inverse=True))

    def test_inverse_real_is_scaled(self):
        """Inverse of a constant real matrix is a unit impulse times the constant."""
        dim = 4
        trans = FastFourierTransform2d(dim)
        out = np.empty(2 * dim * dim)
        trans.apply_real(np.full(dim * dim, 3.0), 0, True, out, 0)

        expected = np.zeros((dim, dim), dtype=np.complex128)
        expected[0, 0] = 3.0
        assert_near(expected, _unpack(out, dim))

    def test_linearity(self):
        dim = 16
        rng = np.random.default_rng(12)
        x = _random_matrix(rng, dim)
        y = _random_matrix(rng, dim)
        a, b = -1.5, 0.3
        trans = FastFourierTransform2d(dim)

        assert_near(_apply(trans, a * x + b * y), a * _apply(trans, x) + b * _apply(trans, y))

    def test_parseval(self):
        dim = 32
        rng = np.random.default_rng(13)
        a = _random_matrix(rng, dim)
        X = _apply(FastFourierTransform2d(dim), a)

        n = dim * dim
        energy_in = np.sum(np.abs(a) ** 2)
        assert abs(np.sum(np.abs(X) ** 2) - n * energy_in) < 1e-7 * n * energy_in

    def test_offsets(self):
        dim = 4
        rng = np.random.default_rng(14)
        a = _random_matrix(rng, dim)
        trans = FastFourierTransform2d(dim)

        x = embed(_pack(a), 3, tail=2)
        out = embed(np.zeros(2 * dim * dim), 9, tail=5)
        trans.apply_complex(x, 3, False, out, 9)

        assert np.isnan(out[:9]).all()
        assert np.isnan(out[-5:]).all()
        assert_near(scipy_fft2(a), _unpack(out, dim, off=9), atol=1e-12)

    def test_scratch_reuse(self):
        """Consecutive calls on one instance do not leak state into each other."""
        dim = 8
        rng = np.random.default_rng(15)
        first = _random_matrix(rng, dim)
        second = _random_matrix(rng, dim)
        trans = FastFourierTransform2d(dim)

        _apply(trans, first)
        assert_near(scipy_fft2(second), _apply(trans, second), atol=1e-10)

    @pytest.mark.parametrize("dim", [0, 1, 3, 6, 1 << 16, 1 << 31])
    def test_invalid_dimension(self, dim):
        with pytest.raises(InvalidDimension):
            FastFourierTransform2d(dim)

    @pytest.mark.parametrize("dim", [2, 4, 1024])
    def test_valid_dimension(self, dim):
        trans = FastFourierTransform2d(dim)
        assert trans.dim == dim
        assert not trans.thread_safe
