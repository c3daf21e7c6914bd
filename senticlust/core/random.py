"""
Random state management for reproducibility.

Train/test splitting uses get_rng() so that runs are deterministic.
"""

import numpy as np
from typing import Optional

_global_seed: int = 42
_global_rng: Optional[np.random.Generator] = None


def set_seed(seed: int = 42):
    """Set the global random seed for reproducibility."""
    global _global_seed, _global_rng
    _global_seed = seed
    _global_rng = np.random.default_rng(seed)


def get_rng() -> np.random.Generator:
    """Get the global random number generator."""
    global _global_rng
    if _global_rng is None:
        set_seed(_global_seed)
    return _global_rng
