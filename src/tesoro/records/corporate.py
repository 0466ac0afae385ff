# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives import NumericOrNull
from .base import DailyRecord


class CorporateDesk(DailyRecord):
    """
    Daily corporate FX desk position.

    Every flow is an (amount, rate) pair: amounts in USD, rates in LKR per
    USD. Inflows are desk purchases, outflows desk sales. Blended rates and
    margins are derived with ``tesoro.aggregation``.
    """

    # Opening balance
    opening_balance_amount: NumericOrNull = None
    opening_balance_rate: NumericOrNull = None

    # Inflows
    inflow_other_amount: NumericOrNull = None
    inflow_other_rate: NumericOrNull = None
    inflow_corporate_amount: NumericOrNull = None
    inflow_corporate_rate: NumericOrNull = None
    inflow_personal_amount: NumericOrNull = None
    inflow_personal_rate: NumericOrNull = None
    inflow_fcbu_amount: NumericOrNull = None
    inflow_fcbu_rate: NumericOrNull = None
    inflow_pettah_amount: NumericOrNull = None
    inflow_pettah_rate: NumericOrNull = None
    inflow_imp_amount: NumericOrNull = None
    inflow_imp_rate: NumericOrNull = None
    inflow_exchange_house_amount: NumericOrNull = None
    inflow_exchange_house_rate: NumericOrNull = None
    inflow_ir_amount: NumericOrNull = None
    inflow_ir_rate: NumericOrNull = None
    inflow_interbank_amount: NumericOrNull = None
    inflow_interbank_rate: NumericOrNull = None
    inflow_internal_entries_amount: NumericOrNull = None
    inflow_internal_entries_rate: NumericOrNull = None

    # Outflows
    outflow_pettah_amount: NumericOrNull = None
    outflow_pettah_rate: NumericOrNull = None
    outflow_others_amount: NumericOrNull = None
    outflow_others_rate: NumericOrNull = None
    outflow_tr_amount: NumericOrNull = None
    outflow_tr_rate: NumericOrNull = None
    outflow_metro_tr_amount: NumericOrNull = None
    outflow_metro_tr_rate: NumericOrNull = None
    outflow_ir_amount: NumericOrNull = None
    outflow_ir_rate: NumericOrNull = None
    outflow_nugegoda_amount: NumericOrNull = None
    outflow_nugegoda_rate: NumericOrNull = None
    outflow_corporate_amount: NumericOrNull = None
    outflow_corporate_rate: NumericOrNull = None
    outflow_personal_amount: NumericOrNull = None
    outflow_personal_rate: NumericOrNull = None
    outflow_imp_amount: NumericOrNull = None
    outflow_imp_rate: NumericOrNull = None
    outflow_cpc_amount: NumericOrNull = None
    outflow_cpc_rate: NumericOrNull = None
    outflow_interbank_amount: NumericOrNull = None
    outflow_interbank_rate: NumericOrNull = None
    outflow_internal_entries_amount: NumericOrNull = None
    outflow_internal_entries_rate: NumericOrNull = None

    # Closing balance
    closing_balance_amount: NumericOrNull = None
    closing_balance_rate: NumericOrNull = None

    # Margins as reported by the desk
    corporate_margin: NumericOrNull = None
    overall_margin: NumericOrNull = None
