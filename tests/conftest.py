# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for Tesoro testing.

This module provides convenient factories for records and cashflow items
so that tests only spell out the fields they care about.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, List, Optional

import pytest

from tesoro.core.primitives import BucketSettings
from tesoro.records import CashflowItem, CorporateDesk, LiquidityLkrDaily


# Record Utilities
def lkr_record(record_date: str, **fields: Any) -> LiquidityLkrDaily:
    """Create an LKR liquidity record with only the given fields set."""
    return LiquidityLkrDaily(record_date=record_date, **fields)


def desk_record(record_date: str = "2025-01-02", **fields: Any) -> CorporateDesk:
    """Create a corporate desk record with only the given fields set."""
    return CorporateDesk(record_date=record_date, **fields)


def raw_rows(values: Dict[str, Optional[float]], field: str = "market_liquidity") -> List[dict]:
    """
    Build plain mapping rows from ``{iso_date: value}``.

    Example:
        >>> raw_rows({"2024-01-01": 1.0})
        [{'record_date': '2024-01-01', 'market_liquidity': 1.0}]
    """
    return [{"record_date": day, field: value} for day, value in values.items()]


# Cashflow Utilities
def cashflow(
    cf_date: str,
    coupon_amount: float = 0.0,
    capital: float = 0.0,
    coupon: str = "9.00",
    security: str = "LKB00530E154",
) -> CashflowItem:
    """
    Create a cashflow item.

    Args:
        cf_date: Payment date in YYYY-MM-DD format
        coupon_amount: Coupon paid on the date
        capital: Capital repaid on the date
        coupon: Coupon marker; "TB" makes the item a treasury bill
        security: Security identifier

    Returns:
        Validated CashflowItem
    """
    return CashflowItem(
        security=security,
        amount=coupon_amount + capital,
        coupon=coupon,
        cf_date=cf_date,
        coupon_amount=coupon_amount,
        capital=capital,
    )


def tbill(cf_date: str, capital: float) -> CashflowItem:
    """Create a treasury bill maturity."""
    return cashflow(cf_date, capital=capital, coupon="TB", security="LKA18225A123")


@pytest.fixture
def reference_date() -> date:
    return date(2025, 1, 1)


@pytest.fixture
def bucket_settings() -> BucketSettings:
    return BucketSettings()


@pytest.fixture
def liquidity_records() -> List[LiquidityLkrDaily]:
    """Three LKR liquidity days, deliberately out of order."""
    return [
        lkr_record("2024-01-03", market_liquidity=130.0, call_rate=9.1),
        lkr_record("2024-01-01", market_liquidity=110.0, call_rate=9.0),
        lkr_record("2024-01-02", market_liquidity=None, call_rate=9.05),
    ]


@pytest.fixture
def desk() -> CorporateDesk:
    """A desk day with two inflow units and two outflow units active."""
    return desk_record(
        inflow_corporate_amount=100.0,
        inflow_corporate_rate=300.0,
        inflow_personal_amount=300.0,
        inflow_personal_rate=304.0,
        inflow_fcbu_amount=0.0,
        inflow_fcbu_rate=310.0,
        outflow_corporate_amount=200.0,
        outflow_corporate_rate=305.0,
        outflow_pettah_amount=200.0,
        outflow_pettah_rate=307.0,
    )
