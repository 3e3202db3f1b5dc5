"""
Generate a playground dataset and print it as CSV.

Example:
    python -m playground.scripts.export_dataset --dataset spiral --num-samples 500 --noise 0.1 --seed 0
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence

from playground.data import (
    DatasetKind,
    Example2D,
    examples_to_csv,
    generate_dataset,
    list_datasets,
    split_train_test,
)
from playground.utils.configs import DatasetConfig
from playground.utils.sampling import make_rng
from playground.utils.seed import set_global_seed

logger = logging.getLogger(__name__)


def export_dataset(args: argparse.Namespace) -> str:
    """
    Generate the requested dataset split and serialize it to CSV.

    Args:
        args (argparse.Namespace): Parsed command-line arguments.

    Returns:
        str: CSV text with ``x,y,values`` columns.
    """
    config = DatasetConfig(
        kind=args.dataset,
        num_samples=args.num_samples,
        noise=args.noise,
        seed=args.seed,
        train_fraction=args.train_fraction,
        shuffle=not args.no_shuffle,
    )
    points = generate_dataset(config)

    # Offset the split seed so the shuffle does not replay generation draws.
    split_seed = None if config.seed is None else config.seed + 1
    train, test = split_train_test(
        points,
        config.train_fraction,
        rng=make_rng(split_seed),
        shuffle_first=config.shuffle,
    )

    selected: List[Example2D]
    if args.split == "train":
        selected = train
    elif args.split == "test":
        selected = test
    else:
        selected = train + test

    logger.info(
        "Exporting %d of %d points (%s split, regression=%s).",
        len(selected),
        len(points),
        args.split,
        DatasetKind(config.kind).is_regression,
    )
    return examples_to_csv(selected)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for dataset export.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = argparse.ArgumentParser(description="Generate a playground dataset and print it as CSV.")
    parser.add_argument(
        "--dataset",
        type=str,
        choices=list_datasets(),
        default=DatasetKind.CIRCLE.value,
        help="Dataset identifier.",
    )
    parser.add_argument(
        "--num-samples",
        type=int,
        default=500,
        help="Number of points to generate (fixed-size presets ignore this).",
    )
    parser.add_argument(
        "--noise",
        type=float,
        default=0.0,
        help="Noise level, a non-negative number.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed; omit for nondeterministic output.",
    )
    parser.add_argument(
        "--train-fraction",
        type=float,
        default=0.5,
        help="Share of points assigned to the training split.",
    )
    parser.add_argument(
        "--split",
        type=str,
        choices=["all", "train", "test"],
        default="all",
        help="Which split to print.",
    )
    parser.add_argument(
        "--no-shuffle",
        action="store_true",
        help="Keep generation order instead of shuffling before splitting.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Entry point for CLI execution of dataset export.

    Returns:
        None
    """
    logging.basicConfig(level=logging.INFO)
    args = _parse_args(argv)
    if args.seed is not None:
        set_global_seed(args.seed)
    sys.stdout.write(export_dataset(args))


if __name__ == "__main__":
    main()
