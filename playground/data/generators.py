"""
Synthetic dataset generators.

This module provides the procedural 2D datasets of the playground:
two Gaussian clusters, spirals, circle, and XOR for classification, and
a plane and a multi-Gaussian surface for regression. Every generator
shares the ``(num_samples, noise, rng)`` signature and returns exactly
``num_samples`` points.
"""

from __future__ import annotations

import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from playground.data.examples import Example2D
from playground.utils.geometry import LinearScale, distance
from playground.utils.sampling import normal, resolve_rng, uniform


class Point(NamedTuple):
    x: float
    y: float


# (center x, center y, sign)
Bump = Tuple[float, float, float]

GAUSSIAN_BUMPS: Tuple[Bump, ...] = (
    (-4.0, 2.5, 1.0),
    (0.0, 2.5, -1.0),
    (4.0, 2.5, 1.0),
    (-4.0, -2.5, -1.0),
    (0.0, -2.5, 1.0),
    (4.0, -2.5, -1.0),
)


def _class_sizes(num_samples: int) -> Tuple[int, int]:
    """Split a sample count into positive and negative class sizes."""
    negatives = num_samples // 2
    return num_samples - negatives, negatives


def max_magnitude_bump(p: Point, bumps: Sequence[Bump], scale: LinearScale) -> float:
    """
    Return the bump value with the largest magnitude at ``p``.

    Each bump contributes ``sign * scale(distance(p, center))``. Starting
    from 0, a bump replaces the current value only if its magnitude is
    strictly larger, so on ties the earlier bump wins.

    Args:
        p (Point): Query point.
        bumps (Sequence[Bump]): ``(cx, cy, sign)`` triples.
        scale (LinearScale): Distance-to-magnitude mapping.

    Returns:
        float: Selected bump value.
    """
    label = 0.0
    for cx, cy, sign in bumps:
        value = sign * scale(distance(p, Point(cx, cy)))
        if abs(value) > abs(label):
            label = value
    return label


def classify_two_gauss_data(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """
    Generate two Gaussian clusters centred at ``(2, 2)`` and ``(-2, -2)``.

    The cluster variance grows linearly with noise, mapping ``[0, 0.5]``
    onto ``[0.5, 4]``.

    Args:
        num_samples (int): Total number of points.
        noise (float): Noise level.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        List[Example2D]: Positive cluster followed by the negative one.
    """
    rng = resolve_rng(rng)
    variance = LinearScale((0.0, 0.5), (0.5, 4.0))(noise)
    points: List[Example2D] = []

    def gen_gauss(cx: float, cy: float, label: float, count: int) -> None:
        for _ in range(count):
            x = normal(cx, variance, rng)
            y = normal(cy, variance, rng)
            points.append(Example2D(x, y, label))

    n_pos, n_neg = _class_sizes(num_samples)
    gen_gauss(2.0, 2.0, 1.0, n_pos)
    gen_gauss(-2.0, -2.0, -1.0, n_neg)
    return points


def classify_spiral_data(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """
    Generate two interleaved spiral arms offset by pi.

    Args:
        num_samples (int): Total number of points.
        noise (float): Amplitude of uniform coordinate jitter.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        List[Example2D]: Positive arm followed by the negative arm.
    """
    rng = resolve_rng(rng)
    points: List[Example2D] = []
    n = num_samples / 2

    def gen_spiral(delta_t: float, label: float, count: int) -> None:
        for i in range(count):
            r = i / n * 5
            t = 1.75 * i / n * 2 * math.pi + delta_t
            x = r * math.sin(t) + uniform(-1, 1, rng) * noise
            y = r * math.cos(t) + uniform(-1, 1, rng) * noise
            points.append(Example2D(x, y, label))

    n_pos, n_neg = _class_sizes(num_samples)
    gen_spiral(0.0, 1.0, n_pos)
    gen_spiral(math.pi, -1.0, n_neg)
    return points


def classify_circle_data(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """
    Generate a disc of positives surrounded by a ring of negatives.

    Labels are computed on the jittered position, so with noise some
    points near the boundary carry the other class.

    Args:
        num_samples (int): Total number of points.
        noise (float): Jitter scale relative to the radius.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        List[Example2D]: Inner points followed by outer points.
    """
    rng = resolve_rng(rng)
    radius = 5.0
    origin = Point(0.0, 0.0)
    points: List[Example2D] = []

    def circle_label(p: Point) -> float:
        return 1.0 if distance(p, origin) < radius * 0.5 else -1.0

    def gen_ring(r_min: float, r_max: float, count: int) -> None:
        for _ in range(count):
            r = uniform(r_min, r_max, rng)
            angle = uniform(0, 2 * math.pi, rng)
            x = r * math.sin(angle)
            y = r * math.cos(angle)
            noise_x = uniform(-radius, radius, rng) * noise
            noise_y = uniform(-radius, radius, rng) * noise
            label = circle_label(Point(x + noise_x, y + noise_y))
            points.append(Example2D(x, y, label))

    n_inner, n_outer = _class_sizes(num_samples)
    gen_ring(0.0, radius * 0.5, n_inner)
    gen_ring(radius * 0.7, radius, n_outer)
    return points


def classify_xor_data(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """
    Generate XOR quadrants: positive where ``x * y >= 0``.

    Coordinates are pushed 0.3 away from both axes so the clean pattern
    has a visible gap between quadrants.

    Args:
        num_samples (int): Number of points.
        noise (float): Jitter scale applied before labeling.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        List[Example2D]: Generated points.
    """
    rng = resolve_rng(rng)
    padding = 0.3
    points: List[Example2D] = []
    for _ in range(num_samples):
        x = uniform(-5, 5, rng)
        x += padding if x > 0 else -padding
        y = uniform(-5, 5, rng)
        y += padding if y > 0 else -padding
        noise_x = uniform(-5, 5, rng) * noise
        noise_y = uniform(-5, 5, rng) * noise
        label = 1.0 if (x + noise_x) * (y + noise_y) >= 0 else -1.0
        points.append(Example2D(x, y, label))
    return points


def regress_plane(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """
    Generate a planar regression target proportional to ``x + y``.

    Args:
        num_samples (int): Number of points.
        noise (float): Jitter scale applied before labeling.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        List[Example2D]: Points with labels in ``[-1, 1]``.
    """
    rng = resolve_rng(rng)
    radius = 6.0
    label_scale = LinearScale((-10.0, 10.0), (-1.0, 1.0), clamp=True)
    points: List[Example2D] = []
    for _ in range(num_samples):
        x = uniform(-radius, radius, rng)
        y = uniform(-radius, radius, rng)
        noise_x = uniform(-radius, radius, rng) * noise
        noise_y = uniform(-radius, radius, rng) * noise
        label = label_scale((x + noise_x) + (y + noise_y))
        points.append(Example2D(x, y, label))
    return points


def regress_gaussian(
    num_samples: int,
    noise: float,
    rng: Optional[np.random.Generator] = None,
) -> List[Example2D]:
    """
    Generate a regression surface made of six signed radial bumps.

    Args:
        num_samples (int): Number of points.
        noise (float): Jitter scale applied before labeling.
        rng (Optional[np.random.Generator]): Random source.

    Returns:
        List[Example2D]: Points labeled by the strongest bump.
    """
    rng = resolve_rng(rng)
    radius = 6.0
    label_scale = LinearScale((0.0, 2.0), (1.0, 0.0), clamp=True)
    points: List[Example2D] = []
    for _ in range(num_samples):
        x = uniform(-radius, radius, rng)
        y = uniform(-radius, radius, rng)
        noise_x = uniform(-radius, radius, rng) * noise
        noise_y = uniform(-radius, radius, rng) * noise
        label = max_magnitude_bump(Point(x + noise_x, y + noise_y), GAUSSIAN_BUMPS, label_scale)
        points.append(Example2D(x, y, label))
    return points
