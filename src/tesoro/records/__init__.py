# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tesoro Records

Validated daily records for each reporting domain and the fixed-income
cashflow item, plus the boundary loader that converts raw rows.
"""

from .base import CashflowItem, DailyRecord, field_value
from .corporate import CorporateDesk
from .fixed_income import YIELD_CURVE_TENORS, FixedIncomeCashflow, FixedIncomeDaily
from .liquidity import LiquidityFcyDaily, LiquidityLkrDaily
from .loader import DOMAIN_MODELS, load_cashflows, load_records, resolve_record_model
from .usd_lkr import REMITTANCE_COUNTRY_FIELDS, UsdLkrDaily

__all__ = [
    # Base types
    "DailyRecord",
    "CashflowItem",
    "field_value",
    # Domain records
    "CorporateDesk",
    "FixedIncomeCashflow",
    "FixedIncomeDaily",
    "LiquidityFcyDaily",
    "LiquidityLkrDaily",
    "UsdLkrDaily",
    # Field groups
    "REMITTANCE_COUNTRY_FIELDS",
    "YIELD_CURVE_TENORS",
    # Loading
    "DOMAIN_MODELS",
    "load_cashflows",
    "load_records",
    "resolve_record_model",
]
