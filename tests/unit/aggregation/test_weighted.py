# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from tesoro.aggregation import (
    FieldPair,
    WeightedAggregate,
    aggregate,
    desk_margin,
    flow_breakdown,
    instrument_margin,
)

PAIRS = [("a_amount", "a_rate"), ("b_amount", "b_rate")]


def test_weighted_average_rate():
    """100 @ 5 and 300 @ 9 give a total of 400 at 8."""
    result = aggregate({"a_amount": 100, "a_rate": 5, "b_amount": 300, "b_rate": 9}, PAIRS)
    assert result.total_amount == pytest.approx(400.0)
    assert result.weighted_average_rate == pytest.approx(8.0)


def test_zero_amount_pair_is_ignored():
    """A pair with no amount does not move the rate, whatever its rate is."""
    record = {"a_amount": 0, "a_rate": 99, "b_amount": 200, "b_rate": 7}
    result = aggregate(record, PAIRS)
    assert result.total_amount == 200.0
    assert result.weighted_average_rate == pytest.approx(7.0)


def test_zero_total_gives_zero_rate():
    assert aggregate({"a_rate": 5, "b_rate": 9}, PAIRS) == WeightedAggregate()
    assert aggregate({}, []) == WeightedAggregate(total_amount=0.0, weighted_average_rate=0.0)


def test_nulls_and_garbage_count_as_zero():
    record = {"a_amount": None, "a_rate": 5, "b_amount": "300", "b_rate": "n/a"}
    result = aggregate(record, PAIRS)
    assert result.total_amount == 300.0
    assert result.weighted_average_rate == 0.0


def test_aggregate_accepts_pair_mappings(desk):
    pairs = [
        {"amountField": "inflow_corporate_amount", "rateField": "inflow_corporate_rate"},
        FieldPair(amount_field="inflow_personal_amount", rate_field="inflow_personal_rate"),
    ]
    result = aggregate(desk, pairs)
    assert result.total_amount == 400.0
    assert result.weighted_average_rate == pytest.approx(303.0)
    assert result.to_dict() == {"total_amount": 400.0, "weighted_average_rate": pytest.approx(303.0)}


class TestMargins:
    def test_instrument_margin_when_both_sides_trade(self, desk):
        margin = instrument_margin(
            desk,
            ("inflow_corporate_amount", "inflow_corporate_rate"),
            ("outflow_corporate_amount", "outflow_corporate_rate"),
        )
        assert margin == pytest.approx(5.0)

    def test_instrument_margin_is_zero_for_one_sided_unit(self, desk):
        margin = instrument_margin(
            desk,
            ("inflow_personal_amount", "inflow_personal_rate"),
            ("outflow_personal_amount", "outflow_personal_rate"),
        )
        assert margin == 0.0

    def test_desk_margin(self, desk):
        inflow = [("inflow_corporate_amount", "inflow_corporate_rate"), ("inflow_personal_amount", "inflow_personal_rate")]
        outflow = [("outflow_corporate_amount", "outflow_corporate_rate"), ("outflow_pettah_amount", "outflow_pettah_rate")]
        # 306 blended sale rate against 303 blended purchase rate
        assert desk_margin(desk, inflow, outflow) == pytest.approx(3.0)
        assert desk_margin(desk, inflow, []) == 0.0


def test_flow_breakdown_lines():
    record = {"a_amount": 100, "a_rate": 5, "b_amount": 300, "b_rate": 9, "c_amount": 0, "c_rate": 4}
    pairs = [("a_amount", "a_rate", "A"), ("b_amount", "b_rate", "B"), ("c_amount", "c_rate")]

    lines = flow_breakdown(record, pairs)

    assert [line.label for line in lines] == ["A", "B"]
    assert lines[0].converted_amount == pytest.approx(500.0)
    assert lines[1].share == pytest.approx(75.0)

    with_zero = flow_breakdown(record, pairs, include_zero=True)
    assert with_zero[-1].label == "c_amount"
    assert with_zero[-1].share == 0.0


def test_flow_breakdown_empty_record():
    assert flow_breakdown({}, PAIRS) == []
    assert [line.share for line in flow_breakdown({}, PAIRS, include_zero=True)] == [0.0, 0.0]


def test_flow_breakdown_negative_total_has_zero_shares():
    """Reversals that leave a side net negative give no percentage shares."""
    record = {"a_amount": -300, "a_rate": 5, "b_amount": 100, "b_rate": 9}
    lines = flow_breakdown(record, PAIRS, include_zero=True)
    assert [line.share for line in lines] == [0.0, 0.0]
