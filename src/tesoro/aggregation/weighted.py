# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Weighted Aggregator.

One implementation for every blended-rate figure on the dashboards: desk
inflow and outflow rates, FCY balance rates, purchase rates by channel. The
caller chooses the amount/rate field pairs; the arithmetic is shared.

Policy: a total amount that is not positive yields a weighted average rate
of 0, never NaN or an error, because summary displays expect a finite
number.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List

import numpy as np

from ..core.primitives import Model, to_number
from ..records.base import field_value
from .pairs import FieldPair, PairLike, as_field_pair, as_field_pairs

logger = logging.getLogger(__name__)


class WeightedAggregate(Model):
    """Total amount and amount-weighted average rate across several flows."""

    total_amount: float = 0.0
    weighted_average_rate: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "total_amount": self.total_amount,
            "weighted_average_rate": self.weighted_average_rate,
        }


class FlowComponent(Model):
    """One line of a flow breakdown."""

    label: str
    amount: float
    rate: float
    converted_amount: float  # amount * rate (USD flows priced in LKR)
    share: float  # percentage of the side's total amount


def _amounts_and_rates(record: Any, pairs: List[FieldPair]) -> tuple[np.ndarray, np.ndarray]:
    amounts = np.array(
        [to_number(field_value(record, pair.amount_field)) for pair in pairs], dtype=float
    )
    rates = np.array(
        [to_number(field_value(record, pair.rate_field)) for pair in pairs], dtype=float
    )
    return amounts, rates


def aggregate(record: Any, pairs: Iterable[PairLike]) -> WeightedAggregate:
    """
    Total amount and amount-weighted average rate for one record.

    Null or missing amounts and rates count as 0, so a pair with no amount
    contributes nothing to either sum regardless of its rate.

    Args:
        record: Daily record (model or mapping)
        pairs: Amount/rate field pairs to combine

    Returns:
        WeightedAggregate; the rate is 0 when the total amount is not positive

    Example:
        ```python
        aggregate(
            {"a_amount": 100, "a_rate": 5, "b_amount": 300, "b_rate": 9},
            [("a_amount", "a_rate"), ("b_amount", "b_rate")],
        )
        # WeightedAggregate(total_amount=400.0, weighted_average_rate=8.0)
        ```
    """
    field_pairs = as_field_pairs(pairs)
    amounts, rates = _amounts_and_rates(record, field_pairs)

    total_amount = float(amounts.sum())
    weighted_sum = float(np.dot(amounts, rates))
    weighted_average_rate = weighted_sum / total_amount if total_amount > 0 else 0.0

    return WeightedAggregate(
        total_amount=total_amount, weighted_average_rate=weighted_average_rate
    )


def instrument_margin(record: Any, inflow_pair: PairLike, outflow_pair: PairLike) -> float:
    """
    Outflow rate minus inflow rate for one unit of the desk.

    The margin is only meaningful when the unit both bought and sold on the
    day; otherwise it is 0.
    """
    inflow = as_field_pair(inflow_pair)
    outflow = as_field_pair(outflow_pair)

    inflow_amount = to_number(field_value(record, inflow.amount_field))
    outflow_amount = to_number(field_value(record, outflow.amount_field))
    if inflow_amount <= 0 or outflow_amount <= 0:
        return 0.0

    return to_number(field_value(record, outflow.rate_field)) - to_number(
        field_value(record, inflow.rate_field)
    )


def desk_margin(
    record: Any, inflow_pairs: Iterable[PairLike], outflow_pairs: Iterable[PairLike]
) -> float:
    """
    Blended outflow rate minus blended inflow rate.

    Zero unless both sides have a positive total amount.
    """
    inflow = aggregate(record, inflow_pairs)
    outflow = aggregate(record, outflow_pairs)
    if inflow.total_amount <= 0 or outflow.total_amount <= 0:
        return 0.0
    return outflow.weighted_average_rate - inflow.weighted_average_rate


def flow_breakdown(
    record: Any, pairs: Iterable[PairLike], include_zero: bool = False
) -> List[FlowComponent]:
    """
    Per-pair lines for one side of a day's flows.

    Args:
        record: Daily record (model or mapping)
        pairs: Amount/rate field pairs for the side (labels are used as line names)
        include_zero: Keep lines whose amount is not positive

    Returns:
        FlowComponent list in pair order; shares are percentages of the side
        total (0 when the total is not positive)
    """
    field_pairs = as_field_pairs(pairs)
    amounts, rates = _amounts_and_rates(record, field_pairs)
    total_amount = float(amounts.sum())

    components = []
    for pair, amount, rate in zip(field_pairs, amounts.tolist(), rates.tolist()):
        if amount <= 0 and not include_zero:
            continue
        components.append(
            FlowComponent(
                label=pair.display_label,
                amount=amount,
                rate=rate,
                converted_amount=amount * rate,
                share=amount / total_amount * 100 if total_amount > 0 else 0.0,
            )
        )

    logger.debug(f"Flow breakdown: {len(components)} of {len(field_pairs)} lines kept")
    return components
