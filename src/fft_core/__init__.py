"""
FFT Core - Power-of-Two Fourier and Cosine Transform Kernels

Allocation-light transform kernels over flat float64 buffers, for signal and
image processing pipelines that apply the same transform size many times.

Modules:
    - bits: bit-reversal permutation, dimension validation
    - butterfly: radix-2 Cooley-Tukey butterfly pass (Numba JIT)
    - fft / fft2d: Fast Fourier Transform on vectors and square matrices
    - dct / dct2d: Fast Cosine Transform (DCT-II / DCT-III) via the FFT
    - functional: numpy array API (fft, ifft, fft2, dct, ...)

Thread safety:
    FastFourierTransform may be shared between threads. FastFourierTransform2d,
    FastCosineTransform and FastCosineTransform2d own scratch buffers and must
    be confined to one thread at a time.
"""

from .exceptions import InvalidDimension
from .bits import reverse, reversed_index, compute_bit_num, TransformDescriptor
from .base import Transform, ThreadSafeTransform, ThreadConfinedTransform
from .fft import FastFourierTransform
from .fft2d import FastFourierTransform2d
from .dct import FastCosineTransform, compute_weight_vectors
from .dct2d import FastCosineTransform2d
from .functional import (
    fft, ifft, fft2, ifft2, dct, idct, dct2, idct2, get_transform, clear_cache,
)

__all__ = [
    'InvalidDimension',
    # Bit permutation
    'reverse',
    'reversed_index',
    'compute_bit_num',
    'TransformDescriptor',
    # Transform classes
    'Transform',
    'ThreadSafeTransform',
    'ThreadConfinedTransform',
    'FastFourierTransform',
    'FastFourierTransform2d',
    'FastCosineTransform',
    'FastCosineTransform2d',
    'compute_weight_vectors',
    # Array API
    'fft',
    'ifft',
    'fft2',
    'ifft2',
    'dct',
    'idct',
    'dct2',
    'idct2',
    'get_transform',
    'clear_cache',
]

__version__ = '1.0.0'
