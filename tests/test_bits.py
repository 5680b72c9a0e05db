"""
Unit tests for bit-reversal and dimension validation.

Run:
    pytest tests/test_bits.py -v
"""

import sys
import os
import dataclasses

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from fft_core import InvalidDimension, TransformDescriptor, compute_bit_num, reverse, reversed_index


def _reverse_reference(v: int, width: int = 32) -> int:
    return int(format(v, f'0{width}b')[::-1], 2)


class TestReverse:
    """Test suite for 32-bit reversal."""

    def test_single_bits(self):
        """Bit k maps to bit 31 - k."""
        for k in range(32):
            assert reverse(1 << k) == 1 << (31 - k)

    def test_edge_values(self):
        assert reverse(0) == 0
        assert reverse(0xFFFFFFFF) == 0xFFFFFFFF
        assert reverse(0x0000FFFF) == 0xFFFF0000
        assert reverse(0x12345678) == 0x1E6A2C48

    def test_matches_reference(self):
        """Compare against a string-based reversal on random words."""
        rng = np.random.default_rng(7)
        for v in rng.integers(0, 2 ** 32, size=200):
            v = int(v)
            assert reverse(v) == _reverse_reference(v)

    def test_involution(self):
        rng = np.random.default_rng(11)
        for v in rng.integers(0, 2 ** 32, size=100):
            v = int(v)
            assert reverse(reverse(v)) == v


class TestReversedIndex:
    """Test suite for reversal of the low `bits` bits."""

    def test_three_bits(self):
        assert [reversed_index(i, 3) for i in range(8)] == [0, 4, 2, 6, 1, 5, 3, 7]

    def test_is_permutation(self):
        for bits in range(1, 12):
            n = 1 << bits
            perm = [reversed_index(i, bits) for i in range(n)]
            assert sorted(perm) == list(range(n))
            for i in (0, 1, n // 2, n - 1):
                assert perm[i] == _reverse_reference(i, bits)


class TestComputeBitNum:
    """Test suite for dimension validation."""

    @pytest.mark.parametrize("dim,bits", [(2, 1), (4, 2), (1024, 10), (1 << 29, 29)])
    def test_valid(self, dim, bits):
        assert compute_bit_num(dim, 30) == bits

    @pytest.mark.parametrize("dim", [0, 1, 3, 6, -4, 1 << 30, 1 << 31])
    def test_invalid(self, dim):
        with pytest.raises(InvalidDimension):
            compute_bit_num(dim, 30)

    def test_non_integer(self):
        with pytest.raises(InvalidDimension):
            compute_bit_num(4.0, 30)
        with pytest.raises(InvalidDimension):
            compute_bit_num("8", 30)

    def test_numpy_integer_accepted(self):
        assert compute_bit_num(np.int64(64), 30) == 6

    def test_is_value_error(self):
        """InvalidDimension can be caught as a ValueError."""
        with pytest.raises(ValueError) as info:
            compute_bit_num(12, 16)
        assert info.value.dim == 12
        assert info.value.max_bits == 16
        assert "1 << 16" in str(info.value)


class TestTransformDescriptor:

    def test_for_dimension(self):
        desc = TransformDescriptor.for_dimension(256, 30)
        assert desc == TransformDescriptor(dim=256, bits=8)
        assert 1 << desc.bits == desc.dim

    def test_immutable(self):
        desc = TransformDescriptor.for_dimension(8, 30)
        with pytest.raises(dataclasses.FrozenInstanceError):
            desc.dim = 16
