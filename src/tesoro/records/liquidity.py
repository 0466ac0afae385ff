# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import ConfigDict, Field

from ..core.primitives import NumericOrNull
from .base import DailyRecord


class LiquidityLkrDaily(DailyRecord):
    """Daily LKR liquidity position, policy rates and flows."""

    # Market liquidity
    market_liquidity: NumericOrNull = None
    boc_liquidity: NumericOrNull = None

    # Policy rates
    srr: NumericOrNull = None
    slfr: NumericOrNull = None
    sdfr: NumericOrNull = None
    opr: NumericOrNull = None

    # Market rates
    call_rate: NumericOrNull = None
    repo_rate: NumericOrNull = None
    awplr: NumericOrNull = None
    awplr_boc: NumericOrNull = None
    awdr: NumericOrNull = None
    awfdr: NumericOrNull = None
    awndr: NumericOrNull = None

    # DST accounts
    dst_current_acc: NumericOrNull = None
    dst_fund_mgt_acc: NumericOrNull = None
    dst_seven_day: NumericOrNull = None
    dst_fd: NumericOrNull = None

    # Inflows
    inflow_interbanks: NumericOrNull = None
    inflow_electronic_payments: NumericOrNull = None
    inflow_dst_ins: NumericOrNull = None
    inflow_tbills: NumericOrNull = None
    inflow_tbonds: NumericOrNull = None
    inflow_coupons: NumericOrNull = None

    # Outflows
    outflow_interbanks: NumericOrNull = None
    outflow_electronic_payments: NumericOrNull = None
    outflow_dst_outs: NumericOrNull = None
    outflow_tbills: NumericOrNull = None
    outflow_tbonds: NumericOrNull = None

    # Settlement
    dvp: NumericOrNull = None
    rvp: NumericOrNull = None

    # Customer repo
    customer_repo_balance: NumericOrNull = None
    customer_repo_rate: NumericOrNull = None


class LiquidityFcyDaily(DailyRecord):
    """Daily foreign-currency balances, placements, payments and market indicators."""

    model_config = ConfigDict(populate_by_name=True)

    # Currency balances and rates
    usd_bal: NumericOrNull = None
    usd_rate: NumericOrNull = None
    eur_bal: NumericOrNull = None
    eur_rate: NumericOrNull = None
    gbp_bal: NumericOrNull = None
    gbp_rate: NumericOrNull = None
    aud_bal: NumericOrNull = None
    aud_rate: NumericOrNull = None
    nostro_bal: NumericOrNull = None

    # Swaps and placements
    swaps: NumericOrNull = None
    swap_cost: NumericOrNull = None
    placement_on: NumericOrNull = None
    placement_on_rate: NumericOrNull = None
    placement_term: NumericOrNull = None
    placement_term_rate: NumericOrNull = None

    # Payments
    fcbu_payments: NumericOrNull = None
    cpc_payments: NumericOrNull = None
    # "import" is a Python keyword; rows keep the column name via the alias
    import_payments: NumericOrNull = Field(default=None, alias="import")
    pettha: NumericOrNull = None
    fcbu: NumericOrNull = None
    travel: NumericOrNull = None
    branch_import: NumericOrNull = None
    usd_unknown_inflows: NumericOrNull = None

    # Market indicators
    sofr: NumericOrNull = None
    brent: NumericOrNull = None
    nemex: NumericOrNull = None
    gold: NumericOrNull = None

    # Foreign policy rates
    fed_fund_rate: NumericOrNull = None
    uk_bank_rate: NumericOrNull = None
    ecb_rate: NumericOrNull = None
    aus_cash_rate: NumericOrNull = None
    india_repo_rate: NumericOrNull = None
