"""
Exceptions raised by the transform classes.
"""


class InvalidDimension(ValueError):
    """
    Raised when a transform is constructed with an unsupported dimension.

    A dimension must be an integer power of two, larger than 1, and
    smaller than ``1 << max_bits`` of the transform class.
    """

    def __init__(self, dim, max_bits: int):
        self.dim = dim
        self.max_bits = max_bits
        super().__init__(
            f"Dimension must be a power of two, larger than 1, and smaller "
            f"than 1 << {max_bits}, got {dim!r}"
        )
