"""
Unit tests for shuffling, the fixed-collection adapter, and splits.
"""

from __future__ import annotations

from collections import Counter

import pytest
import torch

from playground.data import (
    Example2D,
    classify_xor_data,
    examples_to_tensors,
    generator_from_examples,
    shuffle,
    split_train_test,
)
from playground.utils.sampling import make_rng


def test_shuffle_is_a_permutation_of_the_input() -> None:
    items = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
    original = list(items)
    assert shuffle(items, make_rng(0)) is None
    assert len(items) == len(original)
    assert Counter(items) == Counter(original)


def test_shuffle_handles_trivial_sequences() -> None:
    empty: list = []
    shuffle(empty, make_rng(0))
    assert empty == []
    single = ["only"]
    shuffle(single, make_rng(0))
    assert single == ["only"]


def test_shuffle_is_reproducible_with_seed() -> None:
    a = list(range(20))
    b = list(range(20))
    shuffle(a, make_rng(5))
    shuffle(b, make_rng(5))
    assert a == b


def test_shuffle_reaches_every_permutation_evenly() -> None:
    rng = make_rng(123)
    counts: Counter = Counter()
    for _ in range(6000):
        items = [0, 1, 2]
        shuffle(items, rng)
        counts[tuple(items)] += 1
    assert len(counts) == 6
    assert all(800 < c < 1200 for c in counts.values())


def test_adapter_returns_independent_copies() -> None:
    source = [Example2D(1.0, 2.0, 1.0), Example2D(-1.0, -2.0, -1.0)]
    generator = generator_from_examples(source)

    first = generator(500, 0.5)
    second = generator(10, 0.0, make_rng(0))
    assert first == second == source
    assert first is not second

    first.append(Example2D(0.0, 0.0, 1.0))
    first.reverse()
    assert second == source
    assert generator(0, 0.0) == source


def test_adapter_is_unaffected_by_later_source_mutation() -> None:
    source = [Example2D(1.0, 2.0, 1.0)]
    generator = generator_from_examples(source)
    source.clear()
    assert generator(1, 0.0) == [Example2D(1.0, 2.0, 1.0)]


def test_split_sizes_follow_floor_of_fraction() -> None:
    points = classify_xor_data(11, 0.0, make_rng(0))
    train, test = split_train_test(points, 0.5, make_rng(1))
    assert (len(train), len(test)) == (5, 6)
    assert Counter(train + test) == Counter(points)


def test_split_does_not_mutate_input() -> None:
    points = classify_xor_data(20, 0.0, make_rng(0))
    snapshot = list(points)
    split_train_test(points, 0.7, make_rng(2))
    assert points == snapshot


def test_split_without_shuffle_keeps_order() -> None:
    points = classify_xor_data(10, 0.0, make_rng(0))
    train, test = split_train_test(points, 0.3, shuffle_first=False)
    assert train == points[:3]
    assert test == points[3:]


@pytest.mark.parametrize("fraction", [-0.1, 1.5])
def test_split_rejects_invalid_fraction(fraction: float) -> None:
    with pytest.raises(ValueError):
        split_train_test([], fraction)


def test_examples_to_tensors_shapes_and_values() -> None:
    features, labels = examples_to_tensors([Example2D(1.0, 2.0, -1.0), Example2D(3.0, 4.0, 0.5)])
    assert features.shape == (2, 2) and labels.shape == (2,)
    assert features.dtype == torch.float32 and labels.dtype == torch.float32
    assert torch.equal(features, torch.tensor([[1.0, 2.0], [3.0, 4.0]]))
    assert torch.equal(labels, torch.tensor([-1.0, 0.5]))


def test_examples_to_tensors_handles_empty_collection() -> None:
    features, labels = examples_to_tensors([])
    assert features.shape == (0, 2)
    assert labels.shape == (0,)
