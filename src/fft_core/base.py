"""
Base classes for the transform components.
"""

import logging
from abc import ABC

from .bits import TransformDescriptor

logger = logging.getLogger(__name__)


class Transform(ABC):
    """
    Base class for fixed-size transforms.

    A transform is constructed once for a dimension (paying validation and
    any precomputation up front) and then applied repeatedly to buffers of
    that size. Subclasses set:

    - max_bits: exclusive ceiling on log2(dim)
    - thread_safe: whether one instance may be applied from several
      threads at once
    """

    max_bits: int = 30
    thread_safe: bool = False

    def __init__(self, dim: int):
        """
        Initialize transform.

        Args:
            dim: Transform size (vector length, or side of a square matrix)

        Raises:
            InvalidDimension: If dim is not a power of two, is <= 1,
                or needs max_bits or more bits
        """
        self._descriptor = TransformDescriptor.for_dimension(dim, self.max_bits)

    @classmethod
    def create(cls, dim: int) -> "Transform":
        """Construct a transform for vectors (or matrices) of size dim."""
        return cls(dim)

    @property
    def descriptor(self) -> TransformDescriptor:
        return self._descriptor

    @property
    def dim(self) -> int:
        return self._descriptor.dim

    @property
    def bits(self) -> int:
        return self._descriptor.bits

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dim={self.dim})"


class ThreadSafeTransform(Transform):
    """
    Transform holding no mutable state beyond its descriptor.

    A single instance may be shared and applied concurrently.
    """

    thread_safe = True


class ThreadConfinedTransform(Transform):
    """
    Transform owning scratch buffers that every apply call overwrites.

    An instance must be used by one thread at a time: create one instance
    per thread, or guard each apply call with an external lock.
    """

    thread_safe = False

    def _log_scratch(self, n_doubles: int):
        logger.debug(
            f"{type(self).__name__}: dim={self.dim}, bits={self.bits}, "
            f"scratch={n_doubles * 8 / (1024 * 1024):.2f} MB"
        )
