"""
Configuration dataclasses for dataset generation and CSV import.

These dataclasses centralize the parameters that the hosting
application passes around so that modules do not rely on hard-coded
constants spread throughout the codebase.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class DatasetConfig:
    """
    Configuration for synthetic dataset generation.

    Args:
        kind (str): Dataset identifier, e.g. ``"spiral"`` or ``"reg-gauss"``.
        num_samples (int): Number of points to generate. Fixed-count
            presets ignore it.
        noise (float): Non-negative noise level.
        seed (Optional[int]): Random seed; ``None`` for fresh randomness.
        train_fraction (float): Share of points assigned to the training
            split, in ``[0, 1]``.
        shuffle (bool): Whether to shuffle points before splitting.
    """

    kind: str
    num_samples: int
    noise: float
    seed: Optional[int] = None
    train_fraction: float = 0.5
    shuffle: bool = True


@dataclass
class CsvImportConfig:
    """
    Configuration for CSV import.

    Args:
        is_regression (bool): Keep raw values as labels instead of
            thresholding them to ``{-1, 1}``.
        value_columns (Tuple[str, ...]): Candidate names of the value
            column, tried in order.
    """

    is_regression: bool = False
    value_columns: Tuple[str, ...] = ("values", "value")
