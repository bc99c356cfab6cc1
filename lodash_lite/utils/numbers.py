"""
Random-number helpers.

**Conceptual**: random() draws from a single module-level numpy Generator.
The generator is created lazily from LODASH_LITE_RANDOM_SEED (fresh OS entropy
when unset), and set_random_seed() re-seeds it, which makes sequences of draws
reproducible in tests and simulations.
"""

from typing import Optional

import numpy as np

_rng: Optional[np.random.Generator] = None


def _generator() -> np.random.Generator:
    global _rng

    if _rng is None:
        from lodash_lite.config.settings import get_settings

        _rng = np.random.default_rng(get_settings().random.seed)
    return _rng


def set_random_seed(seed: Optional[int] = None) -> None:
    """
    Re-seed the generator used by random().

    Args:
        seed: Integer seed, or None for fresh OS entropy.

    Example:
        >>> set_random_seed(42)
        >>> first = random(1, 100)
        >>> set_random_seed(42)
        >>> random(1, 100) == first
        True
    """
    global _rng
    _rng = np.random.default_rng(seed)


def random(lower: int, upper: int) -> int:
    """
    Produce a uniformly distributed integer between lower and upper, inclusive.

    **Functionally**:
    - Bounds are truncated to ints (random(1.9, 5.2) draws from [1, 5]).
    - Reversed bounds are swapped rather than rejected.
    - lower == upper always returns that value.

    Args:
        lower: Inclusive lower bound.
        upper: Inclusive upper bound.

    Returns:
        Python int in [lower, upper].
    """
    lower, upper = int(lower), int(upper)
    if lower > upper:
        lower, upper = upper, lower
    return int(_generator().integers(lower, upper, endpoint=True))
