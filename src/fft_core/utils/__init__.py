"""
Utility modules.
"""

from .logging import setup_logging, get_logger, log_results
from .seed import set_seed
from .formatting import (
    format_complex,
    format_real,
    complex_to_matlab,
    real_to_matlab,
    array_to_python,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'log_results',
    'set_seed',
    'format_complex',
    'format_real',
    'complex_to_matlab',
    'real_to_matlab',
    'array_to_python',
]
