# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives import NumericOrNull
from .base import CashflowItem, DailyRecord


class FixedIncomeDaily(DailyRecord):
    """Daily government securities holdings and benchmark yields."""

    tbill_balance: NumericOrNull = None
    tbond_balance: NumericOrNull = None
    govt_holding: NumericOrNull = None

    # Treasury bill yields
    tbill_rate_3m: NumericOrNull = None
    tbill_rate_6m: NumericOrNull = None
    tbill_rate_1y: NumericOrNull = None

    # Treasury bond yields
    tbond_rate_2y: NumericOrNull = None
    tbond_rate_3y: NumericOrNull = None
    tbond_rate_5y: NumericOrNull = None
    tbond_rate_10y: NumericOrNull = None
    tbond_rate_15y: NumericOrNull = None


# Cashflow rows for the fixed-income book are plain cashflow items.
FixedIncomeCashflow = CashflowItem

# Yield curve tenors in maturity order, as (label, field)
YIELD_CURVE_TENORS = [
    ("3M", "tbill_rate_3m"),
    ("6M", "tbill_rate_6m"),
    ("1Y", "tbill_rate_1y"),
    ("2Y", "tbond_rate_2y"),
    ("3Y", "tbond_rate_3y"),
    ("5Y", "tbond_rate_5y"),
    ("10Y", "tbond_rate_10y"),
    ("15Y", "tbond_rate_15y"),
]
