# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from ..core.primitives import NumericOrNull
from .base import DailyRecord


class UsdLkrDaily(DailyRecord):
    """Daily USD/LKR quotes, purchase volumes and remittance flows."""

    # Quotes
    open_bid: NumericOrNull = None
    open_offer: NumericOrNull = None
    close_bid: NumericOrNull = None
    close_offer: NumericOrNull = None

    # Purchases by channel (volume and average rate)
    exchange_house_buying: NumericOrNull = None
    exchange_house_average_buy_rate: NumericOrNull = None
    money_products_buying: NumericOrNull = None
    money_products_average_buy_rate: NumericOrNull = None
    ir_buying: NumericOrNull = None
    ir_average_buy_rate: NumericOrNull = None

    # Remittances by source country
    korea: NumericOrNull = None
    israel: NumericOrNull = None
    qatar: NumericOrNull = None
    uae: NumericOrNull = None
    oman: NumericOrNull = None
    kuwait: NumericOrNull = None
    italy: NumericOrNull = None
    saudi_arabia: NumericOrNull = None
    jordan: NumericOrNull = None
    japan: NumericOrNull = None
    cyprus: NumericOrNull = None

    # Interbank market
    inter_bank_buying: NumericOrNull = None
    inter_bank_selling: NumericOrNull = None
    inter_bank_average_buy_rate: NumericOrNull = None
    inter_bank_average_sell_rate: NumericOrNull = None

    # Central bank
    central_bank_buying: NumericOrNull = None
    central_bank_selling: NumericOrNull = None
    central_bank_average_buy_rate: NumericOrNull = None
    central_bank_average_sell_rate: NumericOrNull = None


REMITTANCE_COUNTRY_FIELDS = [
    "korea",
    "israel",
    "qatar",
    "uae",
    "oman",
    "kuwait",
    "italy",
    "saudi_arabia",
    "jordan",
    "japan",
    "cyprus",
]
