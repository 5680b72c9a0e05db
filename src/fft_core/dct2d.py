"""
Fast Discrete Cosine Transform on square power-of-two matrices (Numba JIT)

The 1-D reduction of `dct.py` is applied along the first axis and then along
the second one, with the transpose fused into the shuffles between the two
butterfly passes (as in `fft2d.py`). Matrices are column-major: element
[m, n] is sample ``m + n * dim``.
"""

import logging

import numpy as np
from numba import jit

from .base import ThreadConfinedTransform
from .bits import reversed_index
from .butterfly import radix2_pass_vectors
from .dct import compute_weight_vectors, fold_index

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _fold_reverse(a: np.ndarray, a_off: int, out: np.ndarray,
                  dim: int, bits: int) -> None:
    """
    1. Drop complex components
    2. Fold along m
    3. Bit-reversal shuffle along m
    """
    for r in range(dim):
        src = a_off + fold_index(reversed_index(r, bits), dim)
        for n in range(dim):
            out[2 * (r + n * dim)] = a[src + n * dim]
            out[2 * (r + n * dim) + 1] = 0.0


@jit(nopython=True, cache=True)
def _weight_transpose_fold(a: np.ndarray, weight: np.ndarray, out: np.ndarray,
                           dim: int, bits: int) -> None:
    """
    1. Apply weight vector
    2. Drop imaginary components
    3. Transpose
    4. Fold along the new m axis
    5. Bit-reversal shuffle along the new m axis
    """
    for r in range(dim):
        vec = fold_index(reversed_index(r, bits), dim)
        for c in range(dim):
            src = 2 * (c + vec * dim)
            dst = 2 * (r + c * dim)
            out[dst] = a[src] * weight[2 * c] - a[src + 1] * weight[2 * c + 1]
            out[dst + 1] = 0.0


@jit(nopython=True, cache=True)
def _weight_transpose(a: np.ndarray, weight: np.ndarray, out: np.ndarray,
                      out_off: int, dim: int) -> None:
    """
    1. Apply weight vector
    2. Transpose
    3. Drop imaginary components
    """
    for k in range(dim):
        wr = weight[2 * k]
        wi = weight[2 * k + 1]
        for x in range(dim):
            src = 2 * (k + x * dim)
            out[out_off + x + k * dim] = a[src] * wr - a[src + 1] * wi


@jit(nopython=True, cache=True)
def _inv_weight_reverse(a: np.ndarray, a_off: int, inv_weight: np.ndarray,
                        out: np.ndarray, dim: int, bits: int) -> None:
    """
    1. Apply inverse weights along m
    2. Bit-reversal shuffle along m
    """
    for m in range(dim):
        dst = 2 * reversed_index(m, bits)
        wr = inv_weight[2 * m]
        wi = inv_weight[2 * m + 1]
        for n in range(dim):
            v = a[a_off + m + n * dim]
            out[dst + 2 * n * dim] = wr * v
            out[dst + 2 * n * dim + 1] = wi * v


@jit(nopython=True, cache=True)
def _unfold_transpose_weight(a: np.ndarray, inv_weight: np.ndarray,
                             out: np.ndarray, dim: int, bits: int) -> None:
    """
    1. Drop imaginary components
    2. Undo the fold along m
    3. Transpose
    4. Apply inverse weights
    5. Bit-reversal shuffle along the new m axis
    """
    for i in range(dim):
        vec = reversed_index(i, bits)
        wr = inv_weight[2 * vec]
        wi = inv_weight[2 * vec + 1]
        for j in range(dim):
            val = a[2 * (j + vec * dim)]
            dst = 2 * (i + fold_index(j, dim) * dim)
            out[dst] = val * wr
            out[dst + 1] = val * wi


@jit(nopython=True, cache=True)
def _unfold(a: np.ndarray, out: np.ndarray, out_off: int, dim: int) -> None:
    """
    1. Drop imaginary components
    2. Undo the fold along n
    """
    for i in range(dim):
        dst = out_off + fold_index(i, dim) * dim
        for j in range(dim):
            out[dst + j] = a[2 * (i + j * dim)]


@jit(nopython=True, cache=True)
def _dct2d_forward(a, a_off, out, out_off, weight, work_a, work_b, dim, bits):
    _fold_reverse(a, a_off, work_a, dim, bits)
    radix2_pass_vectors(work_a, 0, dim, False)
    _weight_transpose_fold(work_a, weight, work_b, dim, bits)
    radix2_pass_vectors(work_b, 0, dim, False)
    _weight_transpose(work_b, weight, out, out_off, dim)


@jit(nopython=True, cache=True)
def _dct2d_inverse(a, a_off, out, out_off, inv_weight, work_a, work_b, dim, bits):
    _inv_weight_reverse(a, a_off, inv_weight, work_a, dim, bits)
    radix2_pass_vectors(work_a, 0, dim, True)
    _unfold_transpose_weight(work_a, inv_weight, work_b, dim, bits)
    radix2_pass_vectors(work_b, 0, dim, True)
    _unfold(work_b, out, out_off, dim)


class FastCosineTransform2d(ThreadConfinedTransform):
    """
    Fast Discrete Cosine Transform on a dim x dim matrix of real values.

    Memory footprint is a bit over 32 * (dim * dim + dim) bytes.

    Not thread safe. For parallel use, construct one instance per thread.
    """

    max_bits = 16

    def __init__(self, dim: int):
        super().__init__(dim)
        self._weight, self._inv_weight = compute_weight_vectors(self.dim)
        self._work_a = np.zeros(2 * self.dim * self.dim)
        self._work_b = np.zeros(2 * self.dim * self.dim)
        self._log_scratch(self._work_a.size + self._work_b.size)

    def apply(self, a: np.ndarray, a_off: int, inverse: bool,
              out: np.ndarray, out_off: int) -> None:
        """
        Perform the 2-D DCT (or its inverse) on a square matrix of real values.

        Samples are tightly packed column-major. For a 2x2 matrix:
        ``[r00, r10, r01, r11]``.

        Args:
            a: float64 input matrix, ``len(a) >= dim * dim + a_off``
            a_off: Offset into a
            inverse: Set to True to perform the inverse transform
            out: float64 output with space for dim * dim values after out_off
            out_off: Offset into out
        """
        if not inverse:
            _dct2d_forward(a, a_off, out, out_off, self._weight,
                           self._work_a, self._work_b, self.dim, self.bits)
        else:
            _dct2d_inverse(a, a_off, out, out_off, self._inv_weight,
                           self._work_a, self._work_b, self.dim, self.bits)

    apply_real = apply
