"""
Unit tests for CSV import and export of labeled points.
"""

from __future__ import annotations

import logging

import pytest

from playground.data import (
    Example2D,
    classify_spiral_data,
    examples_to_csv,
    parse_csv,
    parse_csv_result,
    regress_gaussian,
)
from playground.utils.configs import CsvImportConfig
from playground.utils.sampling import make_rng


def test_parse_csv_skips_invalid_rows_and_thresholds_labels() -> None:
    text = "x,y,values\n1,2,0.5\n3,4,-0.2\nbad,4,1\n"
    assert parse_csv(text, False) == [Example2D(1.0, 2.0, 1.0), Example2D(3.0, 4.0, -1.0)]


def test_parse_csv_coerces_to_floats() -> None:
    (point,) = parse_csv("x,y,values\n1,2,3\n", False)
    assert isinstance(point.x, float) and isinstance(point.y, float)
    assert isinstance(point.label, float)


def test_zero_value_maps_to_negative_class() -> None:
    assert [p.label for p in parse_csv("x,y,values\n0,0,0\n0,0,0.001\n", False)] == [-1.0, 1.0]


def test_regression_keeps_raw_values() -> None:
    points = parse_csv("x,y,values\n1,2,0.25\n3,4,-7.5\n", True)
    assert [p.label for p in points] == [0.25, -7.5]


def test_value_column_is_accepted_as_fallback() -> None:
    assert parse_csv("x,y,value\n1,2,-3\n", False) == [Example2D(1.0, 2.0, -1.0)]


def test_values_column_takes_precedence_over_value() -> None:
    assert parse_csv("x,y,value,values\n1,2,-5,5\n", True) == [Example2D(1.0, 2.0, 5.0)]


def test_extra_and_quoted_columns_are_ignored() -> None:
    text = 'id,name,x,y,values\n7,"a, b","1.5",2,1\n'
    assert parse_csv(text, False) == [Example2D(1.5, 2.0, 1.0)]


def test_rows_with_missing_fields_are_skipped() -> None:
    result = parse_csv_result("x,y,values\n1,,1\n2,3,\n4,5,6\n")
    assert result.ok
    assert result.examples == [Example2D(4.0, 5.0, 1.0)]
    assert result.skipped_rows == 2


def test_extra_field_in_first_row_does_not_shift_columns() -> None:
    result = parse_csv_result("x,y,values\n1,2,0.5,9\n3,4,-0.2\n", CsvImportConfig(is_regression=True))
    assert result.ok
    assert result.examples == [Example2D(1.0, 2.0, 0.5), Example2D(3.0, 4.0, -0.2)]


def test_extra_field_in_later_row_keeps_every_row() -> None:
    result = parse_csv_result("x,y,values\n1,2,0.5\n3,4,-0.2,9\n5,6,1\n")
    assert result.ok
    assert result.skipped_rows == 0
    assert result.examples == [
        Example2D(1.0, 2.0, 1.0),
        Example2D(3.0, 4.0, -1.0),
        Example2D(5.0, 6.0, 1.0),
    ]


def test_missing_required_column_yields_no_examples() -> None:
    result = parse_csv_result("x,values\n1,2\n3,4\n")
    assert result.ok
    assert result.examples == []
    assert result.skipped_rows == 2


def test_empty_document_is_not_an_error() -> None:
    for text in ("", "x,y,values\n"):
        result = parse_csv_result(text)
        assert result.ok
        assert result.examples == []
        assert result.skipped_rows == 0


def test_structural_failure_is_reported_in_result() -> None:
    result = parse_csv_result('x,y,values\n"1,2,3\n')
    assert not result.ok
    assert result.error
    assert result.examples == []


def test_parse_csv_logs_and_returns_empty_on_structural_failure(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="playground.data.csv_import"):
        points = parse_csv('x,y,values\n4,5,6\n"1,2,3\n', False)
    assert points == []
    assert "Failed to parse CSV text" in caplog.text


def test_custom_value_columns() -> None:
    config = CsvImportConfig(is_regression=True, value_columns=("target",))
    result = parse_csv_result("x,y,values,target\n1,2,9,0.5\n", config)
    assert result.examples == [Example2D(1.0, 2.0, 0.5)]


def test_examples_to_csv_writes_header_and_rows() -> None:
    text = examples_to_csv([Example2D(1.0, 2.0, -1.0), Example2D(0.5, -0.25, 1.0)])
    assert text.splitlines() == ["x,y,values", "1.0,2.0,-1.0", "0.5,-0.25,1.0"]
    assert examples_to_csv([]).splitlines() == ["x,y,values"]


def test_classification_round_trip_preserves_points() -> None:
    original = classify_spiral_data(60, 0.3, make_rng(0))
    restored = parse_csv(examples_to_csv(original), False)
    assert len(restored) == len(original)
    for before, after in zip(original, restored):
        assert after.x == pytest.approx(before.x, rel=1e-12, abs=1e-12)
        assert after.y == pytest.approx(before.y, rel=1e-12, abs=1e-12)
        assert after.label == before.label


def test_regression_round_trip_preserves_labels() -> None:
    original = regress_gaussian(40, 0.0, make_rng(1))
    restored = parse_csv(examples_to_csv(original), True)
    assert [p.label for p in restored] == pytest.approx([p.label for p in original], rel=1e-12, abs=1e-12)
