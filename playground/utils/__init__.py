"""
Utility modules for the Deep Playground data layer.

This subpackage provides:
    - random sampling primitives with injectable generators
    - planar geometry helpers
    - deterministic seeding helpers
    - configuration dataclasses
"""

from .configs import CsvImportConfig, DatasetConfig
from .geometry import LinearScale, distance
from .sampling import make_rng, normal, resolve_rng, uniform
from .seed import set_global_seed

__all__ = [
    "make_rng",
    "resolve_rng",
    "uniform",
    "normal",
    "distance",
    "LinearScale",
    "set_global_seed",
    "DatasetConfig",
    "CsvImportConfig",
]
