"""
Logging utilities for benchmarks and scripts.

Library modules only call ``logging.getLogger(__name__)``; configuring
handlers is left to the application. `setup_logging` attaches them to the
``fft_core`` package logger by default, so construction-time DEBUG records
from every transform class end up in the same file.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

PACKAGE_LOGGER = 'fft_core'


def setup_logging(
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    console_level: int = logging.WARNING,
    format_string: str = None,
    name: str = PACKAGE_LOGGER
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        log_file: Path to log file (if None, only console output)
        level: Level of the logger and its file handler
        console_level: Level of the console handler (rich owns the console,
            so only warnings and above by default)
        format_string: Custom format string
        name: Logger name (default: the fft_core package logger)

    Returns:
        Configured logger
    """
    if format_string is None:
        format_string = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'

    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers = []

    formatter = logging.Formatter(format_string, datefmt='%Y-%m-%d %H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """
    Get a logger under the fft_core namespace.

    Args:
        name: Child name (e.g. 'benchmark'); None returns the package logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)
    return logging.getLogger(f'{PACKAGE_LOGGER}.{name}')


def log_results(logger: logging.Logger, results: Dict, title: str = "RESULTS", indent: int = 0):
    """Log a (possibly nested) results dictionary, floats with 4 decimals."""
    if indent == 0:
        logger.info("=" * 60)
        logger.info(title)
        logger.info("=" * 60)

    prefix = " " * indent
    for key, value in results.items():
        if isinstance(value, dict):
            logger.info(f"{prefix}{key}:")
            log_results(logger, value, indent=indent + 2)
        elif isinstance(value, float):
            logger.info(f"{prefix}{key}: {value:.4f}")
        else:
            logger.info(f"{prefix}{key}: {value}")
