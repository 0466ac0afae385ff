# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from datetime import datetime
from itertools import permutations

import pytest

from tesoro.core.primitives import SeriesSettings
from tesoro.series import MultiFieldPoint, TimeSeriesPoint, extract, extract_multi, latest_record
from tests.conftest import raw_rows


def test_extract_sorts_unsorted_records(liquidity_records):
    """Records arriving 03, 01, 02 come out in date order with values intact."""
    points = extract(liquidity_records, "call_rate")

    assert [p.date for p in points] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert [p.value for p in points] == [9.0, 9.05, 9.1]
    assert all(isinstance(p, TimeSeriesPoint) for p in points)


def test_extract_is_independent_of_input_order(liquidity_records):
    expected = extract(liquidity_records, "market_liquidity")
    for ordering in permutations(liquidity_records):
        assert extract(list(ordering), "market_liquidity") == expected


def test_extract_passes_nulls_through(liquidity_records):
    points = extract(liquidity_records, "market_liquidity")
    assert [p.value for p in points] == [110.0, None, 130.0]


def test_missing_field_is_none(liquidity_records):
    assert [p.value for p in extract(liquidity_records, "no_such_field")] == [None, None, None]


def test_extract_does_not_mutate_input(liquidity_records):
    before = list(liquidity_records)
    extract(liquidity_records, "call_rate", window_size=1, order="desc")
    assert liquidity_records == before


class TestWindowing:
    """The window always keeps the chronologically latest points."""

    def test_window_keeps_latest_points(self, liquidity_records):
        points = extract(liquidity_records, "call_rate", window_size=2)
        assert [p.date for p in points] == ["2024-01-02", "2024-01-03"]

    def test_descending_window_keeps_latest_points(self, liquidity_records):
        points = extract(liquidity_records, "call_rate", window_size=2, order="desc")
        assert [p.date for p in points] == ["2024-01-03", "2024-01-02"]

    def test_window_larger_than_series_keeps_everything(self, liquidity_records):
        assert len(extract(liquidity_records, "call_rate", window_size=10)) == 3

    def test_zero_window_is_empty(self, liquidity_records):
        assert extract(liquidity_records, "call_rate", window_size=0) == []

    def test_negative_window_is_rejected(self, liquidity_records):
        with pytest.raises(ValueError, match="window_size"):
            extract(liquidity_records, "call_rate", window_size=-1)


def test_extract_accepts_mappings_and_timestamps():
    rows = raw_rows({"2024-02-02": 2.0, "2024-02-01": 1.0})
    rows.append({"record_date": datetime(2024, 2, 3, 18, 45), "market_liquidity": 3.0})

    points = extract(rows, "market_liquidity")

    assert [p.date for p in points] == ["2024-02-01", "2024-02-02", "2024-02-03"]
    assert [p.value for p in points] == [1.0, 2.0, 3.0]


def test_unreadable_dates_fall_out_of_window_first():
    rows = raw_rows({"2024-02-02": 2.0, "2024-02-01": 1.0})
    rows.append({"record_date": "garbage", "market_liquidity": 9.0})

    assert [p.value for p in extract(rows, "market_liquidity", window_size=2)] == [1.0, 2.0]


def test_empty_input_gives_empty_series():
    assert extract([], "call_rate") == []
    assert extract_multi([], ["call_rate"]) == []


def test_extract_multi_keeps_requested_fields_in_order(liquidity_records):
    points = extract_multi(liquidity_records, ["market_liquidity", "call_rate"], order="desc")

    assert all(isinstance(p, MultiFieldPoint) for p in points)
    assert [p.date for p in points] == ["2024-01-03", "2024-01-02", "2024-01-01"]
    assert list(points[0].values) == ["market_liquidity", "call_rate"]
    assert points[0]["market_liquidity"] == 130.0
    assert points[1].get("market_liquidity") is None
    assert points[2].to_dict() == {
        "date": "2024-01-01",
        "market_liquidity": 110.0,
        "call_rate": 9.0,
    }


def test_latest_record(liquidity_records):
    assert latest_record(liquidity_records).record_date.isoformat() == "2024-01-03"
    assert latest_record([]) is None


def test_sorted_extraction_of_three_days():
    """Rows for 01-03, 01-01, 01-02 at 120/100/110 come out as 100, 110, 120."""
    rows = raw_rows({"2024-01-03": 120, "2024-01-01": 100, "2024-01-02": 110}, field="market_liquidity")

    points = extract(rows, "market_liquidity")

    assert [p.to_dict() for p in points] == [
        {"date": "2024-01-01", "value": 100},
        {"date": "2024-01-02", "value": 110},
        {"date": "2024-01-03", "value": 120},
    ]


class TestSeriesSettings:
    """Order and date field fall back to SeriesSettings when not given."""

    def test_default_order_from_settings(self, liquidity_records):
        settings = SeriesSettings(default_order="desc")
        points = extract(liquidity_records, "call_rate", window_size=2, settings=settings)
        assert [p.date for p in points] == ["2024-01-03", "2024-01-02"]

    def test_explicit_order_overrides_settings(self, liquidity_records):
        settings = SeriesSettings(default_order="desc")
        points = extract(liquidity_records, "call_rate", order="asc", settings=settings)
        assert [p.date for p in points] == ["2024-01-01", "2024-01-02", "2024-01-03"]

    def test_date_field_from_settings(self):
        rows = [{"as_of": "2024-05-02", "rate": 2.0}, {"as_of": "2024-05-01", "rate": 1.0}]
        settings = SeriesSettings(date_field="as_of")

        points = extract_multi(rows, ["rate"], settings=settings)

        assert [p.date for p in points] == ["2024-05-01", "2024-05-02"]
        assert latest_record(rows, settings=settings)["rate"] == 2.0
