# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import logging
from typing import Any, Iterable, Sequence

from ..core.primitives import InstrumentClass, Model, to_number
from ..records.base import field_value
from ..series.trends import percent_change
from .buckets import Bucket
from .instruments import DEFAULT_TBILL_MARKER, classify_instrument

logger = logging.getLogger(__name__)


class CashflowTotals(Model):
    """
    Composition of a cashflow schedule.

    Coupons and capital are counted on bonds only; treasury bills contribute
    their capital to ``tbill_capital``. Shares are percentages of ``total``
    and are 0 when the total is 0.
    """

    coupon: float = 0.0
    capital: float = 0.0
    tbill_capital: float = 0.0
    total: float = 0.0
    coupon_share: float = 0.0
    capital_share: float = 0.0
    tbill_share: float = 0.0


class BucketTrend(Model):
    """Percentage change from the second bucket to the first."""

    coupon_change: float = 0.0
    capital_change: float = 0.0


def _share(part: float, total: float) -> float:
    return part / total * 100.0 if total > 0 else 0.0


def summarize_cashflows(
    items: Iterable[Any], tbill_marker: str = DEFAULT_TBILL_MARKER
) -> CashflowTotals:
    coupon = 0.0
    capital = 0.0
    tbill_capital = 0.0
    for item in items:
        if classify_instrument(item, tbill_marker) is InstrumentClass.TBILL:
            tbill_capital += to_number(field_value(item, "capital"))
        else:
            coupon += to_number(field_value(item, "coupon_amount"))
            capital += to_number(field_value(item, "capital"))

    total = coupon + capital + tbill_capital
    logger.debug(f"Summarized cashflows: total {total:,.2f}")
    return CashflowTotals(
        coupon=coupon,
        capital=capital,
        tbill_capital=tbill_capital,
        total=total,
        coupon_share=_share(coupon, total),
        capital_share=_share(capital, total),
        tbill_share=_share(tbill_capital, total),
    )


def bucket_trend(buckets: Sequence[Bucket]) -> BucketTrend:
    """
    Compare the first bucket against the second.

    Returns a zero trend when fewer than two buckets exist; each change is 0
    when the second bucket's sum is 0.
    """
    if len(buckets) < 2:
        return BucketTrend()
    current, previous = buckets[0], buckets[1]
    return BucketTrend(
        coupon_change=percent_change(current.coupon_sum, previous.coupon_sum),
        capital_change=percent_change(current.capital_sum, previous.capital_sum),
    )
