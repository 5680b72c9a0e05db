"""
Bit-Reversal Permutation Helpers

Every transform routes samples into butterfly order by reversing the bits of
their index. Reversal works on a full 32-bit word in constant time: each byte
is reversed with a single multiply/mask/modulo step and the four bytes are
reassembled in swapped order. Reversing the low ``bits`` bits of an index is
then a right shift of the reversed word by ``32 - bits``.
"""

import operator
from dataclasses import dataclass

from numba import jit

from .exceptions import InvalidDimension


WORD_BITS = 32


@jit(nopython=True, cache=True)
def _reverse_byte(b: int) -> int:
    """Reverse the 8 bits of b (0 <= b < 256)."""
    return ((b * 0x0202020202) & 0x010884422010) % 1023


@jit(nopython=True, cache=True)
def reverse(val: int) -> int:
    """
    Reverse the bit order of a 32-bit unsigned value (bit 0 <-> bit 31).

    Parameters
    ----------
    val : int
        Value in [0, 2**32)

    Returns
    -------
    int
        val with its 32 bits in reversed order

    Examples
    --------
    >>> reverse(1)
    2147483648
    >>> reverse(0x80000000)
    1
    """
    return (_reverse_byte((val >> 24) & 0xFF)
            | (_reverse_byte((val >> 16) & 0xFF) << 8)
            | (_reverse_byte((val >> 8) & 0xFF) << 16)
            | (_reverse_byte(val & 0xFF) << 24))


@jit(nopython=True, cache=True)
def reversed_index(i: int, bits: int) -> int:
    """Reverse the low `bits` bits of i."""
    return reverse(i) >> (WORD_BITS - bits)


def compute_bit_num(dim, max_bits: int) -> int:
    """
    Validate a transform dimension and return its bit width.

    Parameters
    ----------
    dim : int
        Transform dimension; must be a power of two, larger than 1
    max_bits : int
        Exclusive ceiling on the bit width

    Returns
    -------
    int
        bits such that ``1 << bits == dim``

    Raises
    ------
    InvalidDimension
        If dim is not an integer, not a power of two, <= 1, or too large
    """
    try:
        n = operator.index(dim)
    except TypeError as e:
        raise InvalidDimension(dim, max_bits) from e

    bits = n.bit_length() - 1
    if bits <= 0 or bits >= max_bits or 1 << bits != n:
        raise InvalidDimension(dim, max_bits)
    return bits


@dataclass(frozen=True)
class TransformDescriptor:
    """Immutable size record shared by every transform: dim == 1 << bits."""
    dim: int
    bits: int

    @classmethod
    def for_dimension(cls, dim, max_bits: int) -> "TransformDescriptor":
        bits = compute_bit_num(dim, max_bits)
        return cls(dim=1 << bits, bits=bits)
