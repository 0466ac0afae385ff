# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tesoro Aggregation

The Weighted Aggregator (totals and amount-weighted rates), margins, flow
breakdowns and the per-domain catalog of amount/rate field pairs.
"""

from .catalog import (
    CORPORATE_INFLOW_PAIRS,
    CORPORATE_MATCHED_UNITS,
    CORPORATE_OUTFLOW_PAIRS,
    FCY_CURRENCY_PAIRS,
    FCY_PLACEMENT_PAIRS,
    USD_LKR_PURCHASE_PAIRS,
    USD_LKR_SALE_PAIRS,
    corporate_inflow,
    corporate_outflow,
    corporate_overall_margin,
    corporate_unit_margins,
)
from .pairs import FieldPair, as_field_pair, as_field_pairs
from .weighted import (
    FlowComponent,
    WeightedAggregate,
    aggregate,
    desk_margin,
    flow_breakdown,
    instrument_margin,
)

__all__ = [
    # Core aggregation
    "FieldPair",
    "FlowComponent",
    "WeightedAggregate",
    "aggregate",
    "as_field_pair",
    "as_field_pairs",
    "desk_margin",
    "flow_breakdown",
    "instrument_margin",
    # Catalog
    "CORPORATE_INFLOW_PAIRS",
    "CORPORATE_MATCHED_UNITS",
    "CORPORATE_OUTFLOW_PAIRS",
    "FCY_CURRENCY_PAIRS",
    "FCY_PLACEMENT_PAIRS",
    "USD_LKR_PURCHASE_PAIRS",
    "USD_LKR_SALE_PAIRS",
    "corporate_inflow",
    "corporate_outflow",
    "corporate_overall_margin",
    "corporate_unit_margins",
]
