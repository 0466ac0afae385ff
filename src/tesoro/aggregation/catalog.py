# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Amount/rate field pairs for each reporting domain.

These lists parameterize the Weighted Aggregator. Labels are the desk unit
names shown on summaries.
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from .pairs import FieldPair
from .weighted import WeightedAggregate, aggregate, desk_margin, instrument_margin


def _desk_pairs(side: str, units: List[Tuple[str, str]]) -> List[FieldPair]:
    return [
        FieldPair(
            amount_field=f"{side}_{unit}_amount",
            rate_field=f"{side}_{unit}_rate",
            label=label,
        )
        for unit, label in units
    ]


# --- Corporate desk ---

CORPORATE_INFLOW_PAIRS = _desk_pairs(
    "inflow",
    [
        ("other", "Other"),
        ("corporate", "Corporate"),
        ("personal", "Personal"),
        ("fcbu", "FCBU"),
        ("pettah", "Pettah"),
        ("imp", "IMP"),
        ("exchange_house", "Exchange House"),
        ("ir", "IR"),
        ("interbank", "Interbank"),
        ("internal_entries", "Internal Entries"),
    ],
)

CORPORATE_OUTFLOW_PAIRS = _desk_pairs(
    "outflow",
    [
        ("pettah", "Pettah"),
        ("others", "Others"),
        ("tr", "TR"),
        ("metro_tr", "Metro TR"),
        ("ir", "IR"),
        ("nugegoda", "Nugegoda"),
        ("corporate", "Corporate"),
        ("personal", "Personal"),
        ("imp", "IMP"),
        ("cpc", "CPC"),
        ("interbank", "Interbank"),
        ("internal_entries", "Internal Entries"),
    ],
)

# Units that trade on both sides of the desk: label -> (inflow pair, outflow pair)
CORPORATE_MATCHED_UNITS: Dict[str, Tuple[FieldPair, FieldPair]] = {
    "Other": (CORPORATE_INFLOW_PAIRS[0], CORPORATE_OUTFLOW_PAIRS[1]),
    "Corporate": (CORPORATE_INFLOW_PAIRS[1], CORPORATE_OUTFLOW_PAIRS[6]),
    "Personal": (CORPORATE_INFLOW_PAIRS[2], CORPORATE_OUTFLOW_PAIRS[7]),
    "Pettah": (CORPORATE_INFLOW_PAIRS[4], CORPORATE_OUTFLOW_PAIRS[0]),
    "IMP": (CORPORATE_INFLOW_PAIRS[5], CORPORATE_OUTFLOW_PAIRS[8]),
    "IR": (CORPORATE_INFLOW_PAIRS[7], CORPORATE_OUTFLOW_PAIRS[4]),
    "Interbank": (CORPORATE_INFLOW_PAIRS[8], CORPORATE_OUTFLOW_PAIRS[10]),
    "Internal Entries": (CORPORATE_INFLOW_PAIRS[9], CORPORATE_OUTFLOW_PAIRS[11]),
}


# --- FCY liquidity ---

FCY_CURRENCY_PAIRS = [
    FieldPair(amount_field="usd_bal", rate_field="usd_rate", label="USD"),
    FieldPair(amount_field="eur_bal", rate_field="eur_rate", label="EUR"),
    FieldPair(amount_field="gbp_bal", rate_field="gbp_rate", label="GBP"),
    FieldPair(amount_field="aud_bal", rate_field="aud_rate", label="AUD"),
]

FCY_PLACEMENT_PAIRS = [
    FieldPair(amount_field="placement_on", rate_field="placement_on_rate", label="Overnight"),
    FieldPair(amount_field="placement_term", rate_field="placement_term_rate", label="Term"),
]


# --- USD/LKR ---

USD_LKR_PURCHASE_PAIRS = [
    FieldPair(
        amount_field="exchange_house_buying",
        rate_field="exchange_house_average_buy_rate",
        label="Exchange House",
    ),
    FieldPair(
        amount_field="money_products_buying",
        rate_field="money_products_average_buy_rate",
        label="Money Products",
    ),
    FieldPair(amount_field="ir_buying", rate_field="ir_average_buy_rate", label="IR"),
    FieldPair(
        amount_field="inter_bank_buying",
        rate_field="inter_bank_average_buy_rate",
        label="Interbank",
    ),
    FieldPair(
        amount_field="central_bank_buying",
        rate_field="central_bank_average_buy_rate",
        label="Central Bank",
    ),
]

USD_LKR_SALE_PAIRS = [
    FieldPair(
        amount_field="inter_bank_selling",
        rate_field="inter_bank_average_sell_rate",
        label="Interbank",
    ),
    FieldPair(
        amount_field="central_bank_selling",
        rate_field="central_bank_average_sell_rate",
        label="Central Bank",
    ),
]


def corporate_inflow(record: Any) -> WeightedAggregate:
    """Total desk purchases and their blended rate."""
    return aggregate(record, CORPORATE_INFLOW_PAIRS)


def corporate_outflow(record: Any) -> WeightedAggregate:
    """Total desk sales and their blended rate."""
    return aggregate(record, CORPORATE_OUTFLOW_PAIRS)


def corporate_overall_margin(record: Any) -> float:
    """Blended sale rate minus blended purchase rate for the whole desk."""
    return desk_margin(record, CORPORATE_INFLOW_PAIRS, CORPORATE_OUTFLOW_PAIRS)


def corporate_unit_margins(record: Any) -> Dict[str, float]:
    """Per-unit margins for units that trade on both sides of the desk."""
    return {
        label: instrument_margin(record, inflow, outflow)
        for label, (inflow, outflow) in CORPORATE_MATCHED_UNITS.items()
    }
