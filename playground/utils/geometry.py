"""
Planar geometry helpers: Euclidean distance and linear scales.
"""

from __future__ import annotations

import math
from typing import Protocol, Tuple


class SupportsXY(Protocol):
    x: float
    y: float


def distance(a: SupportsXY, b: SupportsXY) -> float:
    """Return the Euclidean distance between two points in the plane."""
    dx = a.x - b.x
    dy = a.y - b.y
    return math.sqrt(dx * dx + dy * dy)


class LinearScale:
    """
    Linear mapping from an input interval onto an output interval.

    Args:
        domain (Tuple[float, float]): Input interval ``(d0, d1)``.
        output_range (Tuple[float, float]): Output interval ``(r0, r1)``.
            The interval may be decreasing, e.g. ``(1, 0)``.
        clamp (bool): If True, inputs outside the domain map to the
            nearest end of the output interval.
    """

    def __init__(
        self,
        domain: Tuple[float, float],
        output_range: Tuple[float, float],
        clamp: bool = False,
    ) -> None:
        if domain[0] == domain[1]:
            raise ValueError(f"LinearScale domain must not be degenerate, got {domain}.")
        self.domain = (float(domain[0]), float(domain[1]))
        self.output_range = (float(output_range[0]), float(output_range[1]))
        self.clamp = clamp

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.output_range
        t = (value - d0) / (d1 - d0)
        if self.clamp:
            t = min(1.0, max(0.0, t))
        return r0 + t * (r1 - r0)

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, output_range={self.output_range}, clamp={self.clamp})"
