# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Cashflow Schedule Report

Lays fixed-income cashflow buckets out as a table: one row per period with
coupon, capital and treasury-bill capital columns, plus an optional totals
row. This is the tabular counterpart of the weekly/monthly/annual cashflow
chart.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..cashflows import (
    Bucket,
    CashflowTotals,
    bucket_with_exclusions,
    filter_by_instrument,
    summarize_cashflows,
)
from ..core.primitives import GlobalSettings, Granularity, InstrumentFilter, require_calendar_date
from .base import BaseReport

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ["Coupon", "Capital", "T-Bill Capital", "Total", "Items"]
CURRENCY_COLUMNS = ["Coupon", "Capital", "T-Bill Capital", "Total"]


class CashflowScheduleReport(BaseReport):
    """
    Bucketed cashflow schedule as a DataFrame.

    Example:
        ```python
        report = CashflowScheduleReport(items, reference_date=date(2025, 1, 1))
        monthly = report.generate(granularity="monthly")
        bills = report.generate(granularity="weekly", instrument="tbill", currency_format=True)
        ```
    """

    def __init__(
        self,
        items: Iterable[Any],
        reference_date: Union[date, str],
        settings: Optional[GlobalSettings] = None,
    ):
        self._items = list(items)
        self._reference_date = require_calendar_date(reference_date, "reference_date")
        self._settings = (settings or GlobalSettings()).buckets

    def generate(
        self,
        granularity: Union[Granularity, str] = Granularity.MONTHLY,
        instrument: Union[InstrumentFilter, str] = InstrumentFilter.ALL,
        include_totals: bool = True,
        currency_format: bool = False,
    ) -> pd.DataFrame:
        """
        Generate the schedule table.

        Args:
            granularity: "weekly", "monthly" or "annual"
            instrument: "all", "tbill" or "tbond"
            include_totals: Append a "Total" row summing every column
            currency_format: Render money columns as compact LKR strings

        Returns:
            DataFrame indexed by bucket label ("Period"), in schedule order
        """
        items = filter_by_instrument(self._items, instrument, self._settings.tbill_coupon_marker)
        result = bucket_with_exclusions(items, granularity, self._reference_date, self._settings)
        if result.excluded_count:
            logger.warning(
                f"Cashflow schedule omits {result.excluded_count} items without a readable date"
            )

        frame = self._build_frame(result.buckets, include_totals)
        if currency_format:
            frame = self._format_columns(frame, CURRENCY_COLUMNS)
        return frame

    def summary(
        self, instrument: Union[InstrumentFilter, str] = InstrumentFilter.ALL
    ) -> CashflowTotals:
        """Totals and composition of the (filtered) items across all dates."""
        marker = self._settings.tbill_coupon_marker
        return summarize_cashflows(filter_by_instrument(self._items, instrument, marker), marker)

    def _build_frame(self, buckets: List[Bucket], include_totals: bool) -> pd.DataFrame:
        rows = []
        labels = []
        for item_bucket in buckets:
            tbill_capital = item_bucket.tbill_capital_sum
            rows.append(
                {
                    "Coupon": item_bucket.coupon_sum,
                    "Capital": item_bucket.capital_sum - tbill_capital,
                    "T-Bill Capital": tbill_capital,
                    "Total": item_bucket.total,
                    "Items": item_bucket.item_count,
                }
            )
            labels.append(item_bucket.label)

        if include_totals:
            rows.append(
                {
                    column: sum(row[column] for row in rows) if rows else 0
                    for column in SCHEDULE_COLUMNS
                }
            )
            labels.append("Total")

        frame = pd.DataFrame(rows, index=pd.Index(labels, name="Period"), columns=SCHEDULE_COLUMNS)
        return frame.astype({"Items": int})
