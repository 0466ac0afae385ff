# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base record types shared by every domain.

Records are validated once when they enter the engine; after that every
aggregation reads fields through ``field_value`` so that validated models and
plain mappings (e.g. rows fetched straight from a query layer) are handled
the same way.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any, Optional

from pydantic import Field

from ..core.primitives import Model, NumericOrNull


def field_value(record: Any, name: str) -> Any:
    """Read a named field from a model or mapping; missing fields give None."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class DailyRecord(Model):
    """
    One row per business date within a domain.

    Subclasses declare their numeric fields as ``NumericOrNull``. The record
    date is the domain key and, like every model field, immutable.
    """

    record_date: date

    @classmethod
    def numeric_fields(cls) -> list[str]:
        """Names of the numeric fields declared by this record type."""
        return [name for name in cls.model_fields if name != "record_date"]


class CashflowItem(Model):
    """
    A single fixed-income cashflow event.

    The coupon marker doubles as the instrument discriminant: treasury bills
    carry a marker (``"TB"`` by default), treasury bonds carry their coupon
    rate. Classification is done by ``tesoro.cashflows.classify_instrument``
    so that the marker follows ``BucketSettings.tbill_coupon_marker``.
    """

    security: str
    maturity: Optional[date] = None
    amount: NumericOrNull
    coupon: str = Field(default="", description="Coupon marker ('TB' for treasury bills).")
    cf_date: date
    coupon_amount: NumericOrNull = None
    capital: NumericOrNull
