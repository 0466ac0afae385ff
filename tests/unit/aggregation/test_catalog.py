# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest

from tesoro.aggregation import (
    CORPORATE_INFLOW_PAIRS,
    CORPORATE_MATCHED_UNITS,
    CORPORATE_OUTFLOW_PAIRS,
    FCY_CURRENCY_PAIRS,
    FCY_PLACEMENT_PAIRS,
    USD_LKR_PURCHASE_PAIRS,
    USD_LKR_SALE_PAIRS,
    aggregate,
    corporate_inflow,
    corporate_outflow,
    corporate_overall_margin,
    corporate_unit_margins,
)
from tesoro.records import CorporateDesk, LiquidityFcyDaily, UsdLkrDaily


@pytest.mark.parametrize(
    "pairs, model",
    [
        (CORPORATE_INFLOW_PAIRS, CorporateDesk),
        (CORPORATE_OUTFLOW_PAIRS, CorporateDesk),
        (FCY_CURRENCY_PAIRS, LiquidityFcyDaily),
        (FCY_PLACEMENT_PAIRS, LiquidityFcyDaily),
        (USD_LKR_PURCHASE_PAIRS, UsdLkrDaily),
        (USD_LKR_SALE_PAIRS, UsdLkrDaily),
    ],
)
def test_catalog_pairs_reference_record_fields(pairs, model):
    fields = set(model.numeric_fields())
    for pair in pairs:
        assert pair.amount_field in fields
        assert pair.rate_field in fields


def test_corporate_pair_counts():
    assert len(CORPORATE_INFLOW_PAIRS) == 10
    assert len(CORPORATE_OUTFLOW_PAIRS) == 12


def test_matched_units_pair_the_same_unit():
    for label, (inflow, outflow) in CORPORATE_MATCHED_UNITS.items():
        assert inflow.amount_field.startswith("inflow_")
        assert outflow.amount_field.startswith("outflow_")
    inflow, outflow = CORPORATE_MATCHED_UNITS["Corporate"]
    assert inflow.amount_field == "inflow_corporate_amount"
    assert outflow.amount_field == "outflow_corporate_amount"


def test_corporate_desk_summary(desk):
    assert corporate_inflow(desk).total_amount == 400.0
    assert corporate_inflow(desk).weighted_average_rate == pytest.approx(303.0)
    assert corporate_outflow(desk).weighted_average_rate == pytest.approx(306.0)
    assert corporate_overall_margin(desk) == pytest.approx(3.0)


def test_corporate_unit_margins(desk):
    margins = corporate_unit_margins(desk)
    assert margins["Corporate"] == pytest.approx(5.0)
    assert margins["Personal"] == 0.0
    assert margins["Pettah"] == 0.0


def test_fcy_currency_aggregate():
    record = LiquidityFcyDaily(
        record_date="2025-01-02", usd_bal=1000, usd_rate=4.0, eur_bal=1000, eur_rate=2.0
    )
    result = aggregate(record, FCY_CURRENCY_PAIRS)
    assert result.total_amount == 2000.0
    assert result.weighted_average_rate == pytest.approx(3.0)
