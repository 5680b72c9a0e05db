"""
Fast Fourier Transform on power-of-two vectors (Numba JIT)

Iterative radix-2 Cooley-Tukey FFT over flat float64 buffers:
1. Bit-reversal permutation straight from the input into the output buffer
2. In-place butterfly pass over the output buffer
3. 1/N scaling on the inverse path

Complex samples are tightly packed as ``[..., r0, i0, r1, i1, ...]``.
Buffers are caller-owned and addressed with an explicit offset; nothing is
allocated per call and nothing is bounds-checked.
"""

import logging

import numpy as np
from numba import jit

from .base import ThreadSafeTransform
from .bits import reversed_index
from .butterfly import radix2_pass

logger = logging.getLogger(__name__)


@jit(nopython=True, cache=True)
def _scale(out: np.ndarray, off: int, length: int, scale: float) -> None:
    for i in range(off, off + length):
        out[i] *= scale


@jit(nopython=True, cache=True)
def _fft_complex(x: np.ndarray, x_off: int, inverse: bool,
                 out: np.ndarray, out_off: int, dim: int, bits: int) -> None:
    # Bit-reverse the order of the samples while copying into out.
    for i in range(dim):
        j = out_off + 2 * reversed_index(i, bits)
        out[j] = x[x_off + 2 * i]
        out[j + 1] = x[x_off + 2 * i + 1]

    radix2_pass(out, out_off, dim, inverse)

    if inverse:
        _scale(out, out_off, 2 * dim, 1.0 / dim)


@jit(nopython=True, cache=True)
def _fft_real(x: np.ndarray, x_off: int, inverse: bool,
              out: np.ndarray, out_off: int, dim: int, bits: int) -> None:
    for i in range(dim):
        j = out_off + 2 * reversed_index(i, bits)
        out[j] = x[x_off + i]
        out[j + 1] = 0.0

    radix2_pass(out, out_off, dim, inverse)

    if inverse:
        _scale(out, out_off, 2 * dim, 1.0 / dim)


class FastFourierTransform(ThreadSafeTransform):
    """
    Fast Fourier Transform on vectors of `dim` real or complex values.

    Outputs are always complex. The forward transform uses exp(-2*pi*i*k*n/N)
    and is unscaled; the inverse is scaled by 1/N.

    This class is reentrant: an instance holds only its dimension and may be
    shared between threads.

    Examples
    --------
    >>> import numpy as np
    >>> trans = FastFourierTransform(8)
    >>> x = np.random.randn(8)
    >>> out = np.empty(16)
    >>> trans.apply_real(x, 0, False, out, 0)
    >>> # out.view(np.complex128) matches np.fft.fft(x)
    """

    max_bits = 30

    def __init__(self, dim: int):
        super().__init__(dim)
        logger.debug(f"FastFourierTransform: dim={self.dim}, bits={self.bits}")

    def apply_complex(self, x: np.ndarray, x_off: int, inverse: bool,
                      out: np.ndarray, out_off: int) -> None:
        """
        Transform a vector of complex values.

        Parameters
        ----------
        x : np.ndarray
            float64 input holding dim interleaved complex samples;
            ``len(x) >= 2 * dim + x_off``
        x_off : int
            Start position of the data in x
        inverse : bool
            False for the forward FFT, True for the inverse FFT
        out : np.ndarray
            float64 output receiving dim interleaved complex samples;
            ``len(out) >= 2 * dim + out_off``. Must not overlap x.
        out_off : int
            Start position in out
        """
        _fft_complex(x, x_off, inverse, out, out_off, self.dim, self.bits)

    def apply_real(self, x: np.ndarray, x_off: int, inverse: bool,
                   out: np.ndarray, out_off: int) -> None:
        """
        Transform a vector of real values.

        The output is complex, so out must hold twice as many values as
        the input: ``len(x) >= dim + x_off`` and ``len(out) >= 2 * dim + out_off``.
        """
        _fft_real(x, x_off, inverse, out, out_off, self.dim, self.bits)
