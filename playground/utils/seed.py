"""
Deterministic seeding utilities.

Dataset generation draws only from explicitly passed NumPy generators;
seeding the process-wide sources is left to entry points that want
downstream consumers (e.g. tensor pipelines) to be reproducible too.
"""

from __future__ import annotations

import random

import numpy as np
import torch


def set_global_seed(seed: int) -> None:
    """
    Set random seeds for Python, NumPy, and PyTorch.

    Args:
        seed (int): Base seed value to use for all RNGs.

    Returns:
        None
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
