"""
Train/test partitioning and tensor export for point collections.
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np
import torch
from torch import Tensor

from playground.data.examples import Example2D
from playground.data.shuffle import shuffle


def split_train_test(
    examples: Sequence[Example2D],
    train_fraction: float,
    rng: Optional[np.random.Generator] = None,
    shuffle_first: bool = True,
) -> Tuple[List[Example2D], List[Example2D]]:
    """
    Split examples into train and test lists.

    The first ``floor(len(examples) * train_fraction)`` points (after an
    optional shuffle of a copy) form the training split.

    Args:
        examples (Sequence[Example2D]): Points to split; not modified.
        train_fraction (float): Share of points used for training, in ``[0, 1]``.
        rng (Optional[np.random.Generator]): Random source for the shuffle.
        shuffle_first (bool): Whether to shuffle before splitting.

    Returns:
        Tuple[List[Example2D], List[Example2D]]: ``train`` and ``test`` lists.
    """
    if not 0.0 <= train_fraction <= 1.0:
        raise ValueError(f"train_fraction must lie in [0, 1], got {train_fraction}.")

    data = list(examples)
    if shuffle_first:
        shuffle(data, rng)

    split_index = math.floor(len(data) * train_fraction)
    return data[:split_index], data[split_index:]


def examples_to_tensors(examples: Sequence[Example2D]) -> Tuple[Tensor, Tensor]:
    """
    Convert examples into feature and label tensors.

    Args:
        examples (Sequence[Example2D]): Points to convert.

    Returns:
        Tuple[Tensor, Tensor]:
            ``features`` of shape (N, 2) and ``labels`` of shape (N,), both
            ``float32``.
    """
    features = np.array([[p.x, p.y] for p in examples], dtype=np.float32).reshape(-1, 2)
    labels = np.array([p.label for p in examples], dtype=np.float32)
    return torch.from_numpy(features), torch.from_numpy(labels)
