"""
Array-level API over the transform classes.

These functions take and return numpy arrays and hide the buffer/offset
layout of the kernels. Transform instances are kept in a per-thread store
keyed by (class, dim), so repeated calls for the same size reuse weights and
scratch buffers, and a thread-confined instance never leaves its thread.
Cached instances, scratch buffers included, live until the thread exits or
`clear_cache()` is called from it; a 2-D transform of side 1 << 15 holds
16 GiB or more, so call `clear_cache()` after one-off large transforms.

Conventions match numpy.fft for the FFTs. The DCTs use the unnormalized
DCT-II / DCT-III pair of `dct.py` (X[0] = sum(x)).
"""

import threading

import numpy as np

from .dct import FastCosineTransform
from .dct2d import FastCosineTransform2d
from .fft import FastFourierTransform
from .fft2d import FastFourierTransform2d

_local = threading.local()


def get_transform(cls, dim: int):
    """
    Return this thread's cached instance of `cls` for size `dim`.

    Raises InvalidDimension (from the constructor) for unsupported sizes.
    """
    store = getattr(_local, 'transforms', None)
    if store is None:
        store = _local.transforms = {}

    key = (cls, dim)
    trans = store.get(key)
    if trans is None:
        trans = store[key] = cls(dim)
    return trans


def clear_cache():
    """Drop the calling thread's cached transforms."""
    _local.transforms = {}


def _as_vector(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x)
    if x.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {x.shape}")
    return x


def _as_square(x: np.ndarray) -> np.ndarray:
    x = np.asarray(x)
    if x.ndim != 2 or x.shape[0] != x.shape[1]:
        raise ValueError(f"Input must be a square 2D matrix, got shape {x.shape}")
    return x


def _require_real(x: np.ndarray) -> np.ndarray:
    if np.iscomplexobj(x):
        raise TypeError(f"Cosine transforms take real input, got dtype {x.dtype}")
    return x


def _pack_complex(x: np.ndarray) -> np.ndarray:
    # Column-major for matrices; complex128 viewed as interleaved float64.
    return np.ascontiguousarray(x.T, dtype=np.complex128).reshape(-1).view(np.float64)


def _pack_real(x: np.ndarray) -> np.ndarray:
    return np.ascontiguousarray(x.T, dtype=np.float64).reshape(-1)


def _fft_vector(x: np.ndarray, inverse: bool) -> np.ndarray:
    x = _as_vector(x)
    n = x.shape[0]
    trans = get_transform(FastFourierTransform, n)
    out = np.empty(2 * n)

    if np.iscomplexobj(x):
        trans.apply_complex(_pack_complex(x), 0, inverse, out, 0)
    else:
        trans.apply_real(_pack_real(x), 0, inverse, out, 0)

    return out.view(np.complex128)


def _fft_matrix(x: np.ndarray, inverse: bool) -> np.ndarray:
    x = _as_square(x)
    n = x.shape[0]
    trans = get_transform(FastFourierTransform2d, n)
    out = np.empty(2 * n * n)

    if np.iscomplexobj(x):
        trans.apply_complex(_pack_complex(x), 0, inverse, out, 0)
    else:
        trans.apply_real(_pack_real(x), 0, inverse, out, 0)

    return np.ascontiguousarray(out.view(np.complex128).reshape(n, n).T)


def fft(x: np.ndarray) -> np.ndarray:
    """
    Compute the 1-D discrete Fourier Transform of a power-of-two vector.

    Parameters
    ----------
    x : np.ndarray
        Real or complex input of length N (power of two, N >= 2)

    Returns
    -------
    np.ndarray
        complex128 spectrum of length N, equal to numpy.fft.fft(x)

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 2.0, 1.0, -1.0, 1.5, 1.0, 0.5, -0.5])
    >>> X = fft(x)
    >>> # Should match np.fft.fft(x)
    """
    return _fft_vector(x, False)


def ifft(x: np.ndarray) -> np.ndarray:
    """Inverse of `fft`, scaled by 1/N."""
    return _fft_vector(x, True)


def fft2(x: np.ndarray) -> np.ndarray:
    """
    Compute the 2-D discrete Fourier Transform of a square power-of-two matrix.

    Equal to numpy.fft.fft2(x).
    """
    return _fft_matrix(x, False)


def ifft2(x: np.ndarray) -> np.ndarray:
    """Inverse of `fft2`, scaled by 1/N^2."""
    return _fft_matrix(x, True)


def _dct_vector(x: np.ndarray, inverse: bool) -> np.ndarray:
    x = _require_real(_as_vector(x))
    n = x.shape[0]
    trans = get_transform(FastCosineTransform, n)
    out = np.empty(n)
    trans.apply(_pack_real(x), 0, inverse, out, 0)
    return out


def _dct_matrix(x: np.ndarray, inverse: bool) -> np.ndarray:
    x = _require_real(_as_square(x))
    n = x.shape[0]
    trans = get_transform(FastCosineTransform2d, n)
    out = np.empty(n * n)
    trans.apply(_pack_real(x), 0, inverse, out, 0)
    return np.ascontiguousarray(out.reshape(n, n).T)


def dct(x: np.ndarray) -> np.ndarray:
    """
    Compute the DCT-II of a real power-of-two vector.

    X[0] = sum(x), X[k] = 2 * sum_n x[n] * cos(pi * k * (2n + 1) / (2N)).
    For k > 0 this equals scipy.fft.dct(x, type=2); X[0] is half of scipy's.
    """
    return _dct_vector(x, False)


def idct(x: np.ndarray) -> np.ndarray:
    """Inverse of `dct` (DCT-III scaled by 1/N)."""
    return _dct_vector(x, True)


def dct2(x: np.ndarray) -> np.ndarray:
    """2-D `dct` of a real square matrix, applied along both axes."""
    return _dct_matrix(x, False)


def idct2(x: np.ndarray) -> np.ndarray:
    """Inverse of `dct2`."""
    return _dct_matrix(x, True)
