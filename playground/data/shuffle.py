"""
In-place Fisher-Yates shuffle driven by an injectable random generator.
"""

from __future__ import annotations

from typing import MutableSequence, Optional, TypeVar

import numpy as np

from playground.utils.sampling import resolve_rng

T = TypeVar("T")


def shuffle(items: MutableSequence[T], rng: Optional[np.random.Generator] = None) -> None:
    """
    Shuffle ``items`` in place using the Fisher-Yates algorithm.

    Walks from the end of the sequence to the front, swapping each
    position with a uniformly chosen index at or before it.

    Args:
        items (MutableSequence[T]): Sequence to permute.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        None
    """
    rng = resolve_rng(rng)
    counter = len(items)
    while counter > 0:
        index = int(rng.integers(0, counter))
        counter -= 1
        items[counter], items[index] = items[index], items[counter]
