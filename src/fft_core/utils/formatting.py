"""
Debug formatting for transform buffers.

Matrices are read column-major (element [y, x] at ``y + x * rows``), the
same layout the 2-D transforms use. A vector is a matrix with cols=1.
"""

import numpy as np


def format_complex(v: np.ndarray, off: int, rows: int, cols: int = 1) -> str:
    """Pretty-print interleaved complex samples as a rows x cols grid."""
    lines = []
    for y in range(rows):
        cells = []
        for x in range(cols):
            i = off + (y + x * rows) * 2
            cells.append(f"{v[i]: .4f} {v[i + 1]:+.4f}")
        lines.append("  ".join(cells))
    return "\n".join(lines) + "\n"


def format_real(v: np.ndarray, off: int, rows: int, cols: int = 1) -> str:
    """Pretty-print real samples as a rows x cols grid."""
    lines = []
    for y in range(rows):
        lines.append("  ".join(f"{v[off + y + x * rows]: .4f}" for x in range(cols)))
    return "\n".join(lines) + "\n"


def complex_to_matlab(v: np.ndarray, off: int, rows: int, cols: int = 1) -> str:
    """MATLAB matrix literal, e.g. for checking a result against fft2 there."""
    row_strs = []
    for y in range(rows):
        cells = []
        for x in range(cols):
            i = off + (x * rows + y) * 2
            re = float(v[i])
            im = float(v[i + 1])
            sign = '+' if im >= 0.0 else ''
            cells.append(f"{re!r}{sign}{im!r}i")
        row_strs.append(",".join(cells))
    return "data = [" + ";".join(row_strs) + "];"


def real_to_matlab(v: np.ndarray, off: int, rows: int, cols: int = 1) -> str:
    row_strs = []
    for y in range(rows):
        row_strs.append(",".join(repr(float(v[off + x * rows + y])) for x in range(cols)))
    return "data = [" + ";".join(row_strs) + "];"


def array_to_python(v: np.ndarray, off: int, length: int, name: str) -> str:
    """
    Emit ``NAME = [...]`` with one value per line, for pasting a computed
    buffer into a test module as reference data.
    """
    dec = f"{name} = ["
    prefix = " " * len(dec)
    values = [repr(float(v[off + i])) for i in range(length)]
    return dec + (",\n" + prefix).join(values) + "\n]"
