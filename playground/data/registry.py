"""
Registry mapping dataset identifiers to generators.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, List, Union

from playground.data.examples import DataGenerator, Example2D
from playground.data.generators import (
    classify_circle_data,
    classify_spiral_data,
    classify_two_gauss_data,
    classify_xor_data,
    regress_gaussian,
    regress_plane,
)
from playground.data.presets import (
    classify_csv_dummy_1,
    classify_csv_dummy_2,
    regress_csv_dummy_1,
    regress_csv_dummy_2,
)
from playground.utils.configs import DatasetConfig
from playground.utils.sampling import make_rng

logger = logging.getLogger(__name__)


class DatasetKind(str, Enum):
    """Identifiers of the built-in datasets."""

    CIRCLE = "circle"
    XOR = "xor"
    GAUSS = "gauss"
    SPIRAL = "spiral"
    REG_PLANE = "reg-plane"
    REG_GAUSS = "reg-gauss"
    CSV_CLASSIFY_1 = "csv-classify-1"
    CSV_CLASSIFY_2 = "csv-classify-2"
    CSV_REGRESS_1 = "csv-regress-1"
    CSV_REGRESS_2 = "csv-regress-2"

    @property
    def is_regression(self) -> bool:
        return self in _REGRESSION_KINDS


_REGRESSION_KINDS = frozenset(
    {
        DatasetKind.REG_PLANE,
        DatasetKind.REG_GAUSS,
        DatasetKind.CSV_REGRESS_1,
        DatasetKind.CSV_REGRESS_2,
    }
)

GENERATORS: Dict[DatasetKind, DataGenerator] = {
    DatasetKind.CIRCLE: classify_circle_data,
    DatasetKind.XOR: classify_xor_data,
    DatasetKind.GAUSS: classify_two_gauss_data,
    DatasetKind.SPIRAL: classify_spiral_data,
    DatasetKind.REG_PLANE: regress_plane,
    DatasetKind.REG_GAUSS: regress_gaussian,
    DatasetKind.CSV_CLASSIFY_1: classify_csv_dummy_1,
    DatasetKind.CSV_CLASSIFY_2: classify_csv_dummy_2,
    DatasetKind.CSV_REGRESS_1: regress_csv_dummy_1,
    DatasetKind.CSV_REGRESS_2: regress_csv_dummy_2,
}


def list_datasets() -> List[str]:
    """Return the identifiers of all registered datasets."""
    return [kind.value for kind in GENERATORS]


def parse_kind(kind: Union[DatasetKind, str]) -> DatasetKind:
    """
    Convert a dataset identifier into a ``DatasetKind``.

    Args:
        kind (Union[DatasetKind, str]): Enum member or its string value.

    Returns:
        DatasetKind: Matching enum member.
    """
    try:
        return DatasetKind(kind)
    except ValueError:
        raise ValueError(f"Unknown dataset {kind!r}; expected one of {list_datasets()}.") from None


def get_generator(kind: Union[DatasetKind, str]) -> DataGenerator:
    """
    Look up the generator registered for ``kind``.

    Args:
        kind (Union[DatasetKind, str]): Dataset identifier.

    Returns:
        DataGenerator: Generator with the ``(num_samples, noise, rng)`` signature.
    """
    return GENERATORS[parse_kind(kind)]


def generate_dataset(config: DatasetConfig) -> List[Example2D]:
    """
    Generate the dataset described by ``config``.

    Args:
        config (DatasetConfig): Dataset configuration.

    Returns:
        List[Example2D]: Generated points in generation order.
    """
    if config.num_samples < 0:
        raise ValueError(f"DatasetConfig.num_samples must be non-negative, got {config.num_samples}.")
    if config.noise < 0:
        raise ValueError(f"DatasetConfig.noise must be non-negative, got {config.noise}.")

    kind = parse_kind(config.kind)
    rng = make_rng(config.seed)
    points = GENERATORS[kind](config.num_samples, config.noise, rng)
    logger.info(
        "Generated %d points for dataset %s (noise=%.3f, seed=%s).",
        len(points),
        kind.value,
        config.noise,
        config.seed,
    )
    return points
