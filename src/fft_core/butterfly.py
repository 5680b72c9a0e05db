"""
Radix-2 Butterfly Pass (Numba JIT)

Iterative Cooley-Tukey butterflies over interleaved complex buffers:
``[..., re0, im0, re1, im1, ...]``. Input must already be in bit-reversed
order; no scaling is applied. Both the forward and the inverse transform use
the same code path, the inverse only conjugates the rotations.

Rotations are not evaluated per butterfly. Within a block size, rotation k is
shared by every block, and consecutive rotations come from the recurrence

    c(k + 1) = 2 cos(theta) c(k) - c(k - 1)

The recurrence is reseeded with exact cos/sin values every RESEED_INTERVAL
steps. Its error grows with the square of the number of unreset steps, so
without reseeding large transforms lose accuracy.
"""

import math

import numpy as np
from numba import jit

RESEED_INTERVAL = 32


@jit(nopython=True, cache=True)
def radix2_pass(x: np.ndarray, off: int, n: int, inverse: bool) -> None:
    """
    In-place butterfly pass over n complex samples stored at x[off:off + 2n].

    Parameters
    ----------
    x : np.ndarray
        Flat float64 buffer holding interleaved complex samples
    off : int
        Position of the first real component in x
    n : int
        Number of complex samples, a power of two
    inverse : bool
        Conjugate the rotations (inverse transform, unscaled)
    """
    sign = -1.0 if inverse else 1.0
    half = 1
    block = 2

    while block <= n:
        angle = 2.0 * math.pi / block
        w = 2.0 * math.cos(angle)
        cr = 1.0
        ci = 0.0
        cr_prev = 1.0
        ci_prev = 0.0

        for k in range(half):
            # Rotation exp(-i * sign * k * angle)
            if k % RESEED_INTERVAL == 0:
                cr = math.cos(k * angle)
                ci = -sign * math.sin(k * angle)
                cr_prev = math.cos((k - 1) * angle)
                ci_prev = -sign * math.sin((k - 1) * angle)
            else:
                cr_next = w * cr - cr_prev
                ci_next = w * ci - ci_prev
                cr_prev = cr
                ci_prev = ci
                cr = cr_next
                ci = ci_next

            for start in range(0, n, block):
                a = off + 2 * (start + k)
                b = a + 2 * half

                tr = cr * x[b] - ci * x[b + 1]
                ti = cr * x[b + 1] + ci * x[b]

                x[b] = x[a] - tr
                x[b + 1] = x[a + 1] - ti
                x[a] += tr
                x[a + 1] += ti

        half = block
        block <<= 1


@jit(nopython=True, cache=True)
def radix2_pass_vectors(x: np.ndarray, off: int, n: int, inverse: bool) -> None:
    """
    Butterfly pass applied to every vector of an n x n complex matrix.

    The matrix is n contiguous vectors of n interleaved complex samples
    (vector v starts at off + 2 * n * v). Rotations are shared by all vectors.
    """
    sign = -1.0 if inverse else 1.0
    stride = 2 * n
    half = 1
    block = 2

    while block <= n:
        angle = 2.0 * math.pi / block
        w = 2.0 * math.cos(angle)
        cr = 1.0
        ci = 0.0
        cr_prev = 1.0
        ci_prev = 0.0

        for k in range(half):
            if k % RESEED_INTERVAL == 0:
                cr = math.cos(k * angle)
                ci = -sign * math.sin(k * angle)
                cr_prev = math.cos((k - 1) * angle)
                ci_prev = -sign * math.sin((k - 1) * angle)
            else:
                cr_next = w * cr - cr_prev
                ci_next = w * ci - ci_prev
                cr_prev = cr
                ci_prev = ci
                cr = cr_next
                ci = ci_next

            for v in range(n):
                row = off + v * stride
                for start in range(0, n, block):
                    a = row + 2 * (start + k)
                    b = a + 2 * half

                    tr = cr * x[b] - ci * x[b + 1]
                    ti = cr * x[b + 1] + ci * x[b]

                    x[b] = x[a] - tr
                    x[b + 1] = x[a + 1] - ti
                    x[a] += tr
                    x[a + 1] += ti

        half = block
        block <<= 1
