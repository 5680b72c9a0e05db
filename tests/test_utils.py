"""
Unit tests for the formatting, logging, seeding and benchmark helpers.

Run:
    pytest tests/test_utils.py -v
"""

import sys
import os
import logging

# Add src to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

import numpy as np
import pytest

from fft_core import FastFourierTransform2d
from fft_core.benchmark import (
    DEFAULT_CONFIG,
    TimingResult,
    iter_cases,
    load_config,
    make_call,
    measure_transform,
    run_benchmark,
)
from fft_core.utils import (
    array_to_python,
    complex_to_matlab,
    format_complex,
    format_real,
    get_logger,
    log_results,
    real_to_matlab,
    set_seed,
    setup_logging,
)


class TestFormatting:

    def test_format_complex_vector(self):
        v = np.array([1.0, -2.0, 0.5, 0.25])
        assert format_complex(v, 0, 2) == " 1.0000 -2.0000\n 0.5000 +0.2500\n"

    def test_format_complex_matrix_column_major(self):
        # [[a, c], [b, d]] stored as a, b, c, d
        v = np.array([9.0, 9.0, 1.0, 0.0, 2.0, 0.0, 3.0, 0.0, 4.0, 0.0])
        text = format_complex(v, 2, 2, 2)
        assert text.splitlines() == [
            " 1.0000 +0.0000   3.0000 +0.0000",
            " 2.0000 +0.0000   4.0000 +0.0000",
        ]

    def test_format_real(self):
        v = np.array([1.0, 2.0, 3.0, -4.0])
        assert format_real(v, 0, 2, 2) == " 1.0000   3.0000\n 2.0000  -4.0000\n"

    def test_complex_to_matlab(self):
        v = np.array([1.0, -2.0, 0.5, 0.25])
        assert complex_to_matlab(v, 0, 2) == "data = [1.0-2.0i;0.5+0.25i];"

    def test_real_to_matlab(self):
        v = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
        assert real_to_matlab(v, 1, 2, 2) == "data = [1.0,3.0;2.0,4.0];"

    def test_array_to_python(self):
        v = np.array([7.0, 1.0, 2.5])
        assert array_to_python(v, 1, 2, "X") == "X = [1.0,\n     2.5\n]"


class TestSeed:

    def test_reproducible(self):
        first = set_seed(42).standard_normal(8)
        legacy = np.random.rand(3)
        second = set_seed(42).standard_normal(8)
        assert np.array_equal(first, second)
        assert np.array_equal(legacy, np.random.rand(3))


class TestLogging:

    @pytest.fixture
    def package_logger(self):
        logger = logging.getLogger('fft_core')
        saved = (logger.handlers[:], logger.level)
        yield logger
        for handler in logger.handlers:
            handler.close()
        logger.handlers, level = saved
        logger.setLevel(level)

    def test_get_logger_namespace(self):
        assert get_logger().name == 'fft_core'
        assert get_logger('benchmark').name == 'fft_core.benchmark'

    def test_setup_logging_captures_construction(self, package_logger, tmp_path):
        log_file = tmp_path / 'logs' / 'run.log'
        logger = setup_logging(log_file=str(log_file), level=logging.DEBUG)
        assert logger is package_logger
        assert len(logger.handlers) == 2

        FastFourierTransform2d(8)
        for handler in logger.handlers:
            handler.flush()

        content = log_file.read_text(encoding='utf-8')
        assert "FastFourierTransform2d: dim=8, bits=3" in content
        assert "DEBUG" in content

    def test_setup_logging_replaces_handlers(self, package_logger):
        setup_logging()
        setup_logging()
        assert len(package_logger.handlers) == 1

    def test_log_results(self, package_logger, caplog):
        with caplog.at_level(logging.INFO, logger='fft_core'):
            log_results(get_logger('test'), {'fft': {'mean_ms': 0.123456}, 'dim': 64}, title="TIMING")

        messages = [r.getMessage() for r in caplog.records]
        assert "TIMING" in messages
        assert "fft:" in messages
        assert "  mean_ms: 0.1235" in messages
        assert "dim: 64" in messages


class TestBenchmark:

    def test_measure_transform(self):
        result = measure_transform('fft', 16, iterations=3, warmup=1)
        assert isinstance(result, TimingResult)
        assert result.transform == 'fft'
        assert result.dim == 16
        assert result.iterations == 3
        assert result.mean_ms >= 0.0
        assert set(result.to_dict()) == {
            'transform', 'dim', 'iterations', 'mean_ms', 'std_ms', 'throughput'
        }

    @pytest.mark.parametrize("name", ['fft', 'fft_real', 'fft2d', 'fft2d_real', 'dct', 'dct2d'])
    def test_make_call_runs(self, name):
        call, n_samples = make_call(name, 4, False, np.random.default_rng(0))
        call()
        assert n_samples in (4, 16)

    def test_unknown_transform(self):
        with pytest.raises(ValueError, match="Unknown transform"):
            make_call('wavelet', 16, False, np.random.default_rng(0))

    def test_iter_cases(self):
        config = {'transforms': [{'name': 'fft', 'dims': [8, 16]}, {'name': 'dct2d', 'dims': [4]}]}
        assert iter_cases(config) == [('fft', 8), ('fft', 16), ('dct2d', 4)]
        assert iter_cases({}) == []

    def test_run_benchmark(self):
        seen = []
        config = {
            'iterations': 2,
            'warmup': 0,
            'inverse': True,
            'transforms': [{'name': 'dct', 'dims': [8]}, {'name': 'fft2d', 'dims': [4]}],
        }
        results = run_benchmark(config, on_result=seen.append)

        assert [(r.transform, r.dim) for r in results] == [('dct', 8), ('fft2d', 4)]
        assert seen == results

    def test_load_config(self, tmp_path):
        path = tmp_path / 'bench.yaml'
        path.write_text(
            "iterations: 10\n"
            "transforms:\n"
            "  - name: fft\n"
            "    dims: [32, 64]\n"
        )
        config = load_config(str(path))
        assert config['iterations'] == 10
        assert iter_cases(config) == [('fft', 32), ('fft', 64)]

    def test_load_empty_config(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text("")
        assert load_config(str(path)) == {}

    def test_default_config_cases_are_known(self):
        for name, dim in iter_cases(DEFAULT_CONFIG):
            assert name in ('fft', 'fft_real', 'fft2d', 'fft2d_real', 'dct', 'dct2d')
            assert dim & (dim - 1) == 0
