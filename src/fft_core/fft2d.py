"""
Fast Fourier Transform on square power-of-two matrices (Numba JIT)

A dim x dim matrix is stored column-major: element [m, n] is sample
``m + n * dim``. For a 2x2 complex matrix the buffer reads
``[r00, i00, r10, i10, r01, i01, r11, i11]``.

Pipeline:
1. Bit-reverse along m while copying into the output buffer
2. Butterfly pass over every length-dim vector
3. Transpose + bit-reverse into the scratch matrix
4. Butterfly pass again (now along the original n axis)
5. Transpose back into the output buffer, scaling by 1/dim^2 if inverse
"""

import logging

import numpy as np
from numba import jit

from .base import ThreadConfinedTransform
from .bits import reversed_index
from .butterfly import radix2_pass_vectors

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _permute_complex(x: np.ndarray, x_off: int, out: np.ndarray, out_off: int,
                     dim: int, bits: int) -> None:
    for m in range(dim):
        dst = out_off + 2 * reversed_index(m, bits)
        src = x_off + 2 * m
        for n in range(dim):
            out[dst + 2 * n * dim] = x[src + 2 * n * dim]
            out[dst + 2 * n * dim + 1] = x[src + 2 * n * dim + 1]


@jit(nopython=True, cache=True)
def _permute_real(x: np.ndarray, x_off: int, out: np.ndarray, out_off: int,
                  dim: int, bits: int) -> None:
    for m in range(dim):
        dst = out_off + 2 * reversed_index(m, bits)
        src = x_off + m
        for n in range(dim):
            out[dst + 2 * n * dim] = x[src + n * dim]
            out[dst + 2 * n * dim + 1] = 0.0


@jit(nopython=True, cache=True)
def _transpose_reverse(a: np.ndarray, a_off: int, out: np.ndarray,
                       dim: int, bits: int) -> None:
    """
    1. Transpose
    2. Bit-reversal shuffle along the new vector axis
    """
    for p in range(dim):
        dst = 2 * reversed_index(p, bits)
        src = a_off + 2 * p * dim
        for q in range(dim):
            out[dst + 2 * q * dim] = a[src + 2 * q]
            out[dst + 2 * q * dim + 1] = a[src + 2 * q + 1]


@jit(nopython=True, cache=True)
def _transpose_scale(a: np.ndarray, out: np.ndarray, out_off: int,
                     dim: int, scale: float) -> None:
    """
    1. Scale
    2. Transpose
    """
    for p in range(dim):
        dst = out_off + 2 * p * dim
        for q in range(dim):
            src = 2 * (p + q * dim)
            out[dst + 2 * q] = a[src] * scale
            out[dst + 2 * q + 1] = a[src + 1] * scale


@jit(nopython=True, cache=True)
def _fft2d_rest(out: np.ndarray, out_off: int, inverse: bool,
                work: np.ndarray, dim: int, bits: int) -> None:
    radix2_pass_vectors(out, out_off, dim, inverse)
    _transpose_reverse(out, out_off, work, dim, bits)
    radix2_pass_vectors(work, 0, dim, inverse)
    scale = 1.0 / (dim * dim) if inverse else 1.0
    _transpose_scale(work, out, out_off, dim, scale)


class FastFourierTransform2d(ThreadConfinedTransform):
    """
    Fast Fourier Transform on a dim x dim matrix of real or complex values.

    Outputs are always complex and stored column-major like the input.
    Memory footprint is just over 16 * dim * dim bytes (one scratch matrix).

    Not thread safe: the scratch matrix is overwritten by every call.
    """

    max_bits = 16

    def __init__(self, dim: int):
        super().__init__(dim)
        self._work = np.zeros(2 * self.dim * self.dim)
        self._log_scratch(self._work.size)

    def apply_complex(self, x: np.ndarray, x_off: int, inverse: bool,
                      out: np.ndarray, out_off: int) -> None:
        """
        Transform a square matrix of complex values.

        Args:
            x: float64 input, ``len(x) >= 2 * dim * dim + x_off``
            x_off: Start position of the data in x
            inverse: False for the forward FFT, True for the inverse FFT
            out: float64 output, ``len(out) >= 2 * dim * dim + out_off``;
                must not overlap x
            out_off: Start position in out
        """
        _permute_complex(x, x_off, out, out_off, self.dim, self.bits)
        _fft2d_rest(out, out_off, inverse, self._work, self.dim, self.bits)

    def apply_real(self, x: np.ndarray, x_off: int, inverse: bool,
                   out: np.ndarray, out_off: int) -> None:
        """
        Transform a square matrix of real values. NOTE that output is COMPLEX.

        Args:
            x: float64 input, ``len(x) >= dim * dim + x_off``
            x_off: Start position of the data in x
            inverse: False for the forward FFT, True for the inverse FFT
            out: float64 output, ``len(out) >= 2 * dim * dim + out_off``
            out_off: Start position in out
        """
        _permute_real(x, x_off, out, out_off, self.dim, self.bits)
        _fft2d_rest(out, out_off, inverse, self._work, self.dim, self.bits)
