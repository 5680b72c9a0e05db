import random

import numpy as np


def set_seed(seed: int) -> np.random.Generator:
    """Seed `random` and numpy's global RNG; return a Generator seeded the same way."""
    random.seed(seed)
    np.random.seed(seed)
    return np.random.default_rng(seed)
