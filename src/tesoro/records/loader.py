# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Boundary loading for raw rows.

Rows arriving from the query layer are validated here, once. Malformed
numbers, unknown columns and unreadable dates raise pydantic's
``ValidationError``; a second row for an already-seen business date raises
``ValueError``. Everything downstream can then assume numeric-or-null fields.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any, Dict, List, Type, Union

from ..core.primitives import RecordDomain
from .base import CashflowItem, DailyRecord
from .corporate import CorporateDesk
from .fixed_income import FixedIncomeDaily
from .liquidity import LiquidityFcyDaily, LiquidityLkrDaily
from .usd_lkr import UsdLkrDaily

logger = logging.getLogger(__name__)

DOMAIN_MODELS: Dict[RecordDomain, Type[DailyRecord]] = {
    RecordDomain.LIQUIDITY_LKR: LiquidityLkrDaily,
    RecordDomain.LIQUIDITY_FCY: LiquidityFcyDaily,
    RecordDomain.FIXED_INCOME_DAILY: FixedIncomeDaily,
    RecordDomain.USD_LKR: UsdLkrDaily,
    RecordDomain.CORPORATE_DESK: CorporateDesk,
}


def resolve_record_model(
    domain: Union[RecordDomain, str, Type[DailyRecord]],
) -> Type[DailyRecord]:
    """
    Map a domain name (or record class) to its record model.

    Raises:
        ValueError: If the domain is not known
    """
    if isinstance(domain, type) and issubclass(domain, DailyRecord):
        return domain
    try:
        return DOMAIN_MODELS[RecordDomain(domain)]
    except ValueError:
        known = ", ".join(d.value for d in RecordDomain)
        raise ValueError(f"Unknown record domain {domain!r}; expected one of: {known}") from None


def load_records(
    rows: Iterable[Union[Mapping[str, Any], DailyRecord]],
    domain: Union[RecordDomain, str, Type[DailyRecord]],
) -> List[DailyRecord]:
    """
    Validate raw daily rows into domain records.

    Args:
        rows: Raw mappings (or already-validated records) for one domain
        domain: Record domain or record model class

    Returns:
        Validated records in input order

    Raises:
        pydantic.ValidationError: If a row has malformed values or unknown fields
        ValueError: If two rows share a record date

    Example:
        ```python
        records = load_records(
            [{"record_date": "2024-01-01", "market_liquidity": "1,250.5"}],
            "liquidity_lkr",
        )
        records[0].market_liquidity  # 1250.5
        ```
    """
    model = resolve_record_model(domain)
    records: List[DailyRecord] = []
    seen: set[date] = set()

    for row in rows:
        record = row if isinstance(row, model) else model.model_validate(row)
        if record.record_date in seen:
            raise ValueError(
                f"Duplicate {model.__name__} record for {record.record_date.isoformat()}"
            )
        seen.add(record.record_date)
        records.append(record)

    logger.debug(f"Loaded {len(records)} {model.__name__} records")
    return records


def load_cashflows(
    rows: Iterable[Union[Mapping[str, Any], CashflowItem]],
) -> List[CashflowItem]:
    """
    Validate raw fixed-income cashflow rows.

    Raises:
        pydantic.ValidationError: If a row is missing required values or is malformed
    """
    items = [
        row if isinstance(row, CashflowItem) else CashflowItem.model_validate(row)
        for row in rows
    ]
    logger.debug(f"Loaded {len(items)} cashflow items")
    return items
