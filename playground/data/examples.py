"""
Core data types shared by generators, the CSV importer, and adapters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Protocol

import numpy as np


@dataclass(frozen=True)
class Example2D:
    """
    A two dimensional example: x and y coordinates with the label.

    Args:
        x (float): Horizontal coordinate.
        y (float): Vertical coordinate.
        label (float): ``-1`` or ``1`` for classification, a value in
            ``[-1, 1]`` for regression.
    """

    x: float
    y: float
    label: float


class DataGenerator(Protocol):
    """Callable producing labeled points from a sample count and noise level."""

    def __call__(
        self,
        num_samples: int,
        noise: float,
        rng: Optional[np.random.Generator] = None,
    ) -> List[Example2D]:
        ...
