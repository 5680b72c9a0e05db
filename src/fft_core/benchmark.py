"""
Timing harness for the transform classes.

Measures the steady-state cost of one apply call per transform and size.
The first calls for every (transform, size) are discarded as warm-up, which
also absorbs numba's JIT compilation.
"""

import time
from dataclasses import dataclass, asdict
from typing import Callable, Dict, List, Tuple

import numpy as np
import yaml

from .dct import FastCosineTransform
from .dct2d import FastCosineTransform2d
from .fft import FastFourierTransform
from .fft2d import FastFourierTransform2d
from .utils.logging import get_logger
from .utils.seed import set_seed

logger = get_logger('benchmark')

TRANSFORMS = ('fft', 'fft_real', 'fft2d', 'fft2d_real', 'dct', 'dct2d')

DEFAULT_CONFIG = {
    'seed': 0,
    'iterations': 200,
    'warmup': 5,
    'inverse': False,
    'transforms': [
        {'name': 'fft', 'dims': [256, 1024, 4096]},
        {'name': 'fft_real', 'dims': [1024]},
        {'name': 'dct', 'dims': [512]},
        {'name': 'fft2d', 'dims': [64, 256]},
        {'name': 'dct2d', 'dims': [8, 64]},
    ],
}


@dataclass
class TimingResult:
    """Timing of one transform at one size."""
    transform: str
    dim: int
    iterations: int
    mean_ms: float
    std_ms: float
    # Complex or real samples processed per second
    throughput: float

    def to_dict(self) -> Dict:
        return asdict(self)


def make_call(name: str, dim: int, inverse: bool, rng: np.random.Generator) -> Tuple[Callable[[], None], int]:
    """
    Build a zero-argument callable applying transform `name` to random data.

    Returns:
        (call, n_samples) where n_samples is the number of samples per call
    """
    if name == 'fft':
        trans = FastFourierTransform(dim)
        x = rng.uniform(-1.0, 1.0, 2 * dim)
        out = np.empty(2 * dim)
        return (lambda: trans.apply_complex(x, 0, inverse, out, 0)), dim

    if name == 'fft_real':
        trans = FastFourierTransform(dim)
        x = rng.uniform(-1.0, 1.0, dim)
        out = np.empty(2 * dim)
        return (lambda: trans.apply_real(x, 0, inverse, out, 0)), dim

    if name == 'fft2d':
        trans = FastFourierTransform2d(dim)
        x = rng.uniform(-1.0, 1.0, 2 * dim * dim)
        out = np.empty(2 * dim * dim)
        return (lambda: trans.apply_complex(x, 0, inverse, out, 0)), dim * dim

    if name == 'fft2d_real':
        trans = FastFourierTransform2d(dim)
        x = rng.uniform(-1.0, 1.0, dim * dim)
        out = np.empty(2 * dim * dim)
        return (lambda: trans.apply_real(x, 0, inverse, out, 0)), dim * dim

    if name == 'dct':
        trans = FastCosineTransform(dim)
        x = rng.uniform(-1.0, 1.0, dim)
        out = np.empty(dim)
        return (lambda: trans.apply(x, 0, inverse, out, 0)), dim

    if name == 'dct2d':
        trans = FastCosineTransform2d(dim)
        x = rng.uniform(-1.0, 1.0, dim * dim)
        out = np.empty(dim * dim)
        return (lambda: trans.apply(x, 0, inverse, out, 0)), dim * dim

    raise ValueError(f"Unknown transform: {name!r} (expected one of {TRANSFORMS})")


def measure_transform(
    name: str,
    dim: int,
    iterations: int = 200,
    warmup: int = 5,
    inverse: bool = False,
    seed: int = 0,
) -> TimingResult:
    """Time `iterations` apply calls of transform `name` at size `dim`."""
    rng = set_seed(seed)
    call, n_samples = make_call(name, dim, inverse, rng)

    for _ in range(warmup):
        call()

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        call()
        times.append((time.perf_counter() - start) * 1000)  # ms

    mean_ms = float(np.mean(times))
    std_ms = float(np.std(times))
    throughput = n_samples * 1000.0 / mean_ms if mean_ms > 0 else 0.0

    logger.info(f"{name} dim={dim}: {mean_ms:.4f}±{std_ms:.4f} ms")

    return TimingResult(
        transform=name,
        dim=dim,
        iterations=iterations,
        mean_ms=mean_ms,
        std_ms=std_ms,
        throughput=throughput,
    )


def iter_cases(config: Dict) -> List[Tuple[str, int]]:
    """Flatten the `transforms` section into (name, dim) pairs."""
    cases = []
    for entry in config.get('transforms', []):
        for dim in entry.get('dims', []):
            cases.append((entry['name'], int(dim)))
    return cases


def run_benchmark(config: Dict, on_result: Callable[[TimingResult], None] = None) -> List[TimingResult]:
    """
    Run every (transform, dim) case of a benchmark configuration.

    Args:
        config: Dictionary shaped like DEFAULT_CONFIG; missing keys fall
            back to DEFAULT_CONFIG
        on_result: Optional callback invoked after each case (progress display)

    Returns:
        One TimingResult per case, in configuration order
    """
    merged = {**DEFAULT_CONFIG, **(config or {})}
    results = []

    for name, dim in iter_cases(merged):
        result = measure_transform(
            name,
            dim,
            iterations=int(merged['iterations']),
            warmup=int(merged['warmup']),
            inverse=bool(merged['inverse']),
            seed=int(merged['seed']),
        )
        results.append(result)
        if on_result is not None:
            on_result(result)

    return results


def load_config(config_path: str) -> Dict:
    """Load a YAML benchmark configuration."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}
