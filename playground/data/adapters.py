"""
Adapters turning fixed point collections into generators.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import numpy as np

from playground.data.examples import DataGenerator, Example2D


def generator_from_examples(examples: Iterable[Example2D]) -> DataGenerator:
    """
    Wrap a fixed set of examples in the generator signature.

    The examples are snapshotted once; every call returns a new list with
    the same points and ignores ``num_samples``, ``noise`` and ``rng``,
    which are already baked into the data.

    Args:
        examples (Iterable[Example2D]): Points to replay.

    Returns:
        DataGenerator: Generator returning independent copies.
    """
    snapshot = tuple(examples)

    def generate(
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None,
    ) -> List[Example2D]:
        return list(snapshot)

    return generate
