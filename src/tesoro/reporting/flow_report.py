# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Daily Flow Summary Report

One day's inflows or outflows broken down by channel: amount, rate, the
amount converted at that rate, and each channel's share of the day's total,
closed by a weighted-average total row.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Union

import pandas as pd

from ..aggregation import CORPORATE_INFLOW_PAIRS, CORPORATE_OUTFLOW_PAIRS, aggregate, flow_breakdown
from ..aggregation.pairs import PairLike, as_field_pairs
from ..core.primitives import FlowDirection, GlobalSettings, parse_calendar_date, require_calendar_date
from ..records.base import field_value
from ..series import latest_record
from .base import BaseReport

logger = logging.getLogger(__name__)

FLOW_COLUMNS = ["Amount", "Rate", "Converted Amount", "Share (%)"]


class DailyFlowSummaryReport(BaseReport):
    """
    Per-channel flow table for a single business date.

    Defaults to the corporate desk's inflow and outflow channels; pass other
    pair lists (for example ``USD_LKR_PURCHASE_PAIRS``) for other domains.
    """

    def __init__(
        self,
        records: Iterable[Any],
        inflow_pairs: Optional[Iterable[PairLike]] = None,
        outflow_pairs: Optional[Iterable[PairLike]] = None,
        settings: Optional[GlobalSettings] = None,
    ):
        self._records = list(records)
        self._pairs = {
            FlowDirection.INFLOW: as_field_pairs(
                CORPORATE_INFLOW_PAIRS if inflow_pairs is None else inflow_pairs
            ),
            FlowDirection.OUTFLOW: as_field_pairs(
                CORPORATE_OUTFLOW_PAIRS if outflow_pairs is None else outflow_pairs
            ),
        }
        self._settings = (settings or GlobalSettings()).series

    def find_record(self, record_date: Optional[Union[date, str]] = None) -> Optional[Any]:
        """Record for ``record_date``, or the latest record when no date is given."""
        date_field = self._settings.date_field
        if record_date is None:
            return latest_record(self._records, settings=self._settings)

        target = require_calendar_date(record_date, "record_date")
        for record in self._records:
            if parse_calendar_date(field_value(record, date_field)) == target:
                return record
        return None

    def generate(
        self,
        record_date: Optional[Union[date, str]] = None,
        direction: Union[FlowDirection, str] = FlowDirection.INFLOW,
        include_zero: bool = False,
        include_totals: bool = True,
        currency_format: bool = False,
    ) -> pd.DataFrame:
        """
        Generate the breakdown for one day and one side of the book.

        Args:
            record_date: Business date; the latest record when omitted
            direction: "inflow" or "outflow"
            include_zero: Keep channels with no amount on the day
            include_totals: Append a "Total" row with the weighted-average rate
            currency_format: Render amount columns as compact currency strings

        Returns:
            DataFrame indexed by channel label ("Channel"); empty when no
            record matches the date
        """
        direction = FlowDirection(direction)
        pairs = self._pairs[direction]
        record = self.find_record(record_date)
        if record is None:
            logger.debug(f"No record found for {record_date}; returning empty {direction.value} table")
            return pd.DataFrame(columns=FLOW_COLUMNS, index=pd.Index([], name="Channel"))

        components = flow_breakdown(record, pairs, include_zero=include_zero)
        rows: List[dict] = [
            {
                "Amount": component.amount,
                "Rate": component.rate,
                "Converted Amount": component.converted_amount,
                "Share (%)": component.share,
            }
            for component in components
        ]
        labels = [component.label for component in components]

        if include_totals:
            totals = aggregate(record, pairs)
            rows.append(
                {
                    "Amount": totals.total_amount,
                    "Rate": totals.weighted_average_rate,
                    "Converted Amount": sum(row["Converted Amount"] for row in rows),
                    "Share (%)": 100.0 if totals.total_amount > 0 else 0.0,
                }
            )
            labels.append("Total")

        frame = pd.DataFrame(rows, index=pd.Index(labels, name="Channel"), columns=FLOW_COLUMNS)
        if currency_format:
            frame = self._format_columns(frame, ["Amount", "Converted Amount"])
        return frame
