"""
Fixed-size stand-in datasets shown in place of user CSV data.

These presets keep the generator signature but ignore ``num_samples``:
the classification presets always return 160 points and the regression
presets 200.
"""

from __future__ import annotations

import math
from typing import List, Optional, Tuple

import numpy as np

from playground.data.examples import Example2D
from playground.data.generators import Bump, Point, max_magnitude_bump
from playground.utils.geometry import LinearScale
from playground.utils.sampling import normal, resolve_rng, uniform

CLASSIFY_PRESET_SIZE = 160
REGRESS_PRESET_SIZE = 200

HILL_BUMPS: Tuple[Bump, ...] = (
    (-2.5, 2.0, 1.0),
    (2.5, -2.0, -1.0),
)


def classify_csv_dummy_1(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """Two clusters, top-right positive and bottom-left negative."""
    rng = resolve_rng(rng)
    points: List[Example2D] = []
    per_cluster = CLASSIFY_PRESET_SIZE // 2

    def add(cx: float, cy: float, label: float) -> None:
        for _ in range(per_cluster):
            x = normal(cx, 0.4 + noise, rng)
            y = normal(cy, 0.4 + noise, rng)
            points.append(Example2D(x, y, label))

    add(2.5, 2.5, 1.0)
    add(-2.5, -2.5, -1.0)
    return points


def classify_csv_dummy_2(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """Concentric circles: inner ring positive, outer ring negative."""
    rng = resolve_rng(rng)
    points: List[Example2D] = []
    for _ in range(CLASSIFY_PRESET_SIZE):
        if rng.random() < 0.5:
            r = 1.0 + 0.2 * uniform(-1, 1, rng)
        else:
            r = 3.0 + 0.3 * uniform(-1, 1, rng)
        t = uniform(0, 2 * math.pi, rng)
        label = 1.0 if r < 2.0 else -1.0
        x = r * math.cos(t) + noise * uniform(-1, 1, rng)
        y = r * math.sin(t) + noise * uniform(-1, 1, rng)
        points.append(Example2D(x, y, label))
    return points


def regress_csv_dummy_1(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """Tilted plane with label proportional to ``x - y``."""
    rng = resolve_rng(rng)
    label_scale = LinearScale((-6.0, 6.0), (-1.0, 1.0), clamp=True)
    points: List[Example2D] = []
    for _ in range(REGRESS_PRESET_SIZE):
        x = uniform(-5.5, 5.5, rng)
        y = uniform(-5.5, 5.5, rng)
        nx = noise * uniform(-1, 1, rng)
        ny = noise * uniform(-1, 1, rng)
        label = label_scale((x + nx) - (y + ny))
        points.append(Example2D(x, y, label))
    return points


def regress_csv_dummy_2(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """Two opposite-signed hills; the label is the stronger one."""
    rng = resolve_rng(rng)
    label_scale = LinearScale((0.0, 4.0), (1.0, 0.0), clamp=True)
    points: List[Example2D] = []
    for _ in range(REGRESS_PRESET_SIZE):
        x = uniform(-6, 6, rng) + noise * uniform(-1, 1, rng)
        y = uniform(-6, 6, rng) + noise * uniform(-1, 1, rng)
        label = max_magnitude_bump(Point(x, y), HILL_BUMPS, label_scale)
        points.append(Example2D(x, y, label))
    return points
