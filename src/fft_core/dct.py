"""
Fast Discrete Cosine Transform on power-of-two vectors (Numba JIT)

The DCT is computed with one complex FFT of the same length (Makhoul's
reduction) instead of a dedicated cosine butterfly.

Forward (DCT-II):
    X[0] = sum(x)
    X[k] = 2 * sum_n x[n] * cos(pi * k * (2n + 1) / (2N)),   k > 0

1. Fold the input: even samples ascending, then odd samples descending
   ([0 1 2 3 4 5 6 7] -> [0 2 4 6 7 5 3 1]), fused with the bit-reversal
   shuffle and zero imaginary parts
2. Forward butterfly pass
3. Multiply by the weight vector (1 at k = 0, 2 * exp(-i*k*pi/(2N)) otherwise)
   and keep the real part

Inverse (DCT-III, the exact inverse of the above) runs the same steps
backwards with the inverse weights exp(+i*k*pi/(2N)) / N, which also absorb
the 1/N scaling.
"""

import logging
from typing import Tuple

import numpy as np
from numba import jit

from .base import ThreadConfinedTransform
from .bits import reversed_index
from .butterfly import radix2_pass

logger = logging.getLogger(__name__)


def compute_weight_vectors(dim: int) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute the twiddle weights linking a length-dim FFT to the DCT.

    Parameters
    ----------
    dim : int
        Transform size

    Returns
    -------
    weight : np.ndarray
        Forward weights, interleaved complex, 2 * dim values
    inv_weight : np.ndarray
        Inverse weights, interleaved complex, 2 * dim values
    """
    k = np.arange(dim)
    angle = k * np.pi * 0.5 / dim
    cos = np.cos(angle)
    sin = np.sin(angle)
    s = 1.0 / dim

    weight = np.empty(2 * dim)
    weight[0::2] = 2.0 * cos
    weight[1::2] = -2.0 * sin
    weight[0] = 1.0
    weight[1] = 0.0

    inv_weight = np.empty(2 * dim)
    inv_weight[0::2] = s * cos
    inv_weight[1::2] = s * sin

    return weight, inv_weight


@jit(nopython=True, cache=True)
def fold_index(i: int, dim: int) -> int:
    """
    Position of sample i after the even/odd fold.

    Equivalent to: 2i if 2i < dim else 2 * dim - 2i - 1.
    The same mapping undoes the fold on the inverse path.
    """
    if 2 * i < dim:
        return 2 * i
    return 2 * dim - 2 * i - 1


@jit(nopython=True, cache=True)
def _dct_forward(a: np.ndarray, a_off: int, out: np.ndarray, out_off: int,
                 weight: np.ndarray, work: np.ndarray, dim: int, bits: int) -> None:
    # Fold + bit-reversal shuffle, imaginary parts zeroed.
    for r in range(dim):
        src = fold_index(reversed_index(r, bits), dim)
        work[2 * r] = a[a_off + src]
        work[2 * r + 1] = 0.0

    radix2_pass(work, 0, dim, False)

    # Apply weights, drop imaginary components.
    for k in range(dim):
        out[out_off + k] = work[2 * k] * weight[2 * k] - work[2 * k + 1] * weight[2 * k + 1]


@jit(nopython=True, cache=True)
def _dct_inverse(a: np.ndarray, a_off: int, out: np.ndarray, out_off: int,
                 inv_weight: np.ndarray, work: np.ndarray, dim: int, bits: int) -> None:
    # Apply weights + bit-reversal shuffle.
    for k in range(dim):
        dst = 2 * reversed_index(k, bits)
        v = a[a_off + k]
        work[dst] = v * inv_weight[2 * k]
        work[dst + 1] = v * inv_weight[2 * k + 1]

    radix2_pass(work, 0, dim, True)

    # Drop imaginary components, undo the fold.
    for i in range(dim):
        out[out_off + fold_index(i, dim)] = work[2 * i]


class FastCosineTransform(ThreadConfinedTransform):
    """
    Fast Discrete Cosine Transform on vectors of `dim` real values.

    Memory footprint is a bit over 48 * dim bytes (two weight vectors and
    one complex scratch vector).

    Not thread safe.
    """

    max_bits = 30

    def __init__(self, dim: int):
        super().__init__(dim)
        self._weight, self._inv_weight = compute_weight_vectors(self.dim)
        self._work = np.zeros(2 * self.dim)
        self._log_scratch(self._work.size)

    def apply(self, a: np.ndarray, a_off: int, inverse: bool,
              out: np.ndarray, out_off: int) -> None:
        """
        Perform the DCT (or its inverse) on a vector of real values.

        Parameters
        ----------
        a : np.ndarray
            float64 input, ``len(a) >= dim + a_off``
        a_off : int
            Offset into a
        inverse : bool
            Set to True to perform the inverse transform
        out : np.ndarray
            float64 output with space for dim values after out_off
        out_off : int
            Offset into out
        """
        if not inverse:
            _dct_forward(a, a_off, out, out_off, self._weight, self._work,
                         self.dim, self.bits)
        else:
            _dct_inverse(a, a_off, out, out_off, self._inv_weight, self._work,
                         self.dim, self.bits)

    apply_real = apply
