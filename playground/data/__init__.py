"""
Dataset generation utilities for the Deep Playground data layer.

This subpackage exposes the synthetic 2D generators, the dataset
registry, the CSV importer, and helpers to shuffle, split, and replay
point collections.
"""

from .adapters import generator_from_examples
from .csv_import import CsvParseResult, examples_to_csv, parse_csv, parse_csv_result
from .examples import DataGenerator, Example2D
from .generators import (
    classify_circle_data,
    classify_spiral_data,
    classify_two_gauss_data,
    classify_xor_data,
    regress_gaussian,
    regress_plane,
)
from .presets import (
    classify_csv_dummy_1,
    classify_csv_dummy_2,
    regress_csv_dummy_1,
    regress_csv_dummy_2,
)
from .registry import (
    GENERATORS,
    DatasetKind,
    generate_dataset,
    get_generator,
    list_datasets,
    parse_kind,
)
from .shuffle import shuffle
from .splits import examples_to_tensors, split_train_test

__all__ = [
    "Example2D",
    "DataGenerator",
    "classify_two_gauss_data",
    "classify_spiral_data",
    "classify_circle_data",
    "classify_xor_data",
    "regress_plane",
    "regress_gaussian",
    "classify_csv_dummy_1",
    "classify_csv_dummy_2",
    "regress_csv_dummy_1",
    "regress_csv_dummy_2",
    "DatasetKind",
    "GENERATORS",
    "generate_dataset",
    "get_generator",
    "list_datasets",
    "parse_kind",
    "shuffle",
    "generator_from_examples",
    "CsvParseResult",
    "parse_csv",
    "parse_csv_result",
    "examples_to_csv",
    "split_train_test",
    "examples_to_tensors",
]
