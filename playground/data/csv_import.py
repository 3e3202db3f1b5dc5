"""
CSV import and export for labeled 2D points.

Expected columns are ``x``, ``y`` and ``values`` (or ``value``); extra
columns and fields past the end of the header are ignored. Rows whose
fields are missing or not numeric are skipped. For classification,
values are mapped to ``{-1, 1}``: a value ``<= 0`` becomes ``-1``,
anything else ``1``.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

import pandas as pd

from playground.data.examples import Example2D
from playground.utils.configs import CsvImportConfig

logger = logging.getLogger(__name__)


@dataclass
class CsvParseResult:
    """
    Outcome of parsing a CSV document.

    Args:
        examples (List[Example2D]): Points from the valid rows.
        skipped_rows (int): Number of data rows dropped by validation.
        error (Optional[str]): Description of a structural failure of the
            whole document, ``None`` when the document could be read.
    """

    examples: List[Example2D] = field(default_factory=list)
    skipped_rows: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether the document was structurally readable."""
        return self.error is None


def _derive_label(value: float, is_regression: bool) -> float:
    if is_regression:
        return value
    return -1.0 if value <= 0 else 1.0


def parse_csv_result(text: str, config: Optional[CsvImportConfig] = None) -> CsvParseResult:
    """
    Parse CSV text into examples, reporting structural failures explicitly.

    An empty document or a header without rows is not an error; it yields
    an ``ok`` result with no examples. Only a document the CSV grammar
    cannot read produces a result with ``error`` set.

    Args:
        text (str): CSV text with a header row.
        config (Optional[CsvImportConfig]): Import options; defaults to
            classification with ``values``/``value`` as value columns.

    Returns:
        CsvParseResult: Parsed examples and bookkeeping.
    """
    config = config if config is not None else CsvImportConfig()

    try:
        # Any usecols makes the tokenizer drop fields beyond the header;
        # index_col=False stops a long first row from becoming an index.
        frame = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            index_col=False,
            usecols=lambda column: True,
        )
    except pd.errors.EmptyDataError:
        return CsvParseResult()
    except pd.errors.ParserError as exc:
        return CsvParseResult(error=str(exc))

    value_column = next((name for name in config.value_columns if name in frame.columns), None)
    if "x" not in frame.columns or "y" not in frame.columns or value_column is None:
        logger.debug("CSV header %s lacks x, y or a value column.", list(frame.columns))
        return CsvParseResult(skipped_rows=len(frame))

    xs = pd.to_numeric(frame["x"], errors="coerce")
    ys = pd.to_numeric(frame["y"], errors="coerce")
    values = pd.to_numeric(frame[value_column], errors="coerce")
    valid = xs.notna() & ys.notna() & values.notna()

    examples = [
        Example2D(float(x), float(y), _derive_label(float(v), config.is_regression))
        for x, y, v in zip(xs[valid], ys[valid], values[valid])
    ]
    return CsvParseResult(examples=examples, skipped_rows=len(frame) - len(examples))


def parse_csv(text: str, is_regression: bool = False) -> List[Example2D]:
    """
    Parse CSV text into examples on a best-effort basis.

    A structurally malformed document is logged as a warning and yields an
    empty list instead of raising.

    Args:
        text (str): CSV text with a header row.
        is_regression (bool): Keep raw values as labels.

    Returns:
        List[Example2D]: Points from the valid rows.
    """
    result = parse_csv_result(text, CsvImportConfig(is_regression=is_regression))
    if not result.ok:
        logger.warning("Failed to parse CSV text: %s", result.error)
        return []
    return result.examples


def examples_to_csv(examples: Iterable[Example2D]) -> str:
    """
    Serialize examples to CSV text with ``x,y,values`` columns.

    Args:
        examples (Iterable[Example2D]): Points to serialize.

    Returns:
        str: CSV document including the header row.
    """
    rows = list(examples)
    frame = pd.DataFrame(
        {
            "x": [p.x for p in rows],
            "y": [p.y for p in rows],
            "values": [p.label for p in rows],
        },
        columns=["x", "y", "values"],
    )
    return frame.to_csv(index=False, lineterminator="\n")
