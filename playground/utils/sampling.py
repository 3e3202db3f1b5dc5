"""
Random sampling primitives used by the dataset generators.

Every function draws from an explicitly passed ``numpy.random.Generator``
so callers control reproducibility; ``None`` means a fresh, unseeded
generator.
"""

from __future__ import annotations

import math
from typing import Optional

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create a NumPy random generator.

    Args:
        seed (Optional[int]): Seed for the generator. ``None`` draws fresh
            entropy from the operating system.

    Returns:
        np.random.Generator: New generator instance.
    """
    return np.random.default_rng(seed)


def resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    """Return ``rng`` itself, or a fresh generator when it is ``None``."""
    return rng if rng is not None else make_rng()


def uniform(a: float, b: float, rng: Optional[np.random.Generator] = None) -> float:
    """
    Return a sample from a uniform ``[a, b)`` distribution.

    Args:
        a (float): Lower bound.
        b (float): Upper bound, expected to satisfy ``a <= b``.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        float: Uniform sample.
    """
    rng = resolve_rng(rng)
    return float(rng.random()) * (b - a) + a


def normal(mean: float = 0.0, variance: float = 1.0, rng: Optional[np.random.Generator] = None) -> float:
    """
    Sample from a normal distribution using the Marsaglia polar method.

    Pairs of uniforms in ``(-1, 1)`` are drawn until their squared norm
    ``s`` lies in ``(0, 1]``, then transformed into a standard normal.

    Args:
        mean (float): The mean. Default is 0.
        variance (float): The variance. Default is 1.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        float: Normal sample.
    """
    rng = resolve_rng(rng)
    while True:
        v1 = 2.0 * float(rng.random()) - 1.0
        v2 = 2.0 * float(rng.random()) - 1.0
        s = v1 * v1 + v2 * v2
        # s == 0 would hit log(0).
        if 0.0 < s <= 1.0:
            break

    result = math.sqrt(-2.0 * math.log(s) / s) * v1
    return mean + math.sqrt(variance) * result
