# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Composite series built from several fields of the same record.

Unlike ``extract``, which passes values through verbatim, these helpers
produce totals: null or non-numeric fields count as 0.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Union

from ..core.primitives import SeriesSettings, SortOrder, to_number
from ..records.base import field_value
from .extractor import point_date, resolve_series_options, select_records
from .points import TimeSeriesPoint

# LKR liquidity field groups
DST_BALANCE_FIELDS = ["dst_current_acc", "dst_fund_mgt_acc", "dst_seven_day", "dst_fd"]
LKR_INFLOW_FIELDS = [
    "inflow_interbanks",
    "inflow_electronic_payments",
    "inflow_dst_ins",
    "inflow_tbills",
    "inflow_tbonds",
    "inflow_coupons",
    "dvp",
]
LKR_OUTFLOW_FIELDS = [
    "outflow_interbanks",
    "outflow_electronic_payments",
    "outflow_dst_outs",
    "outflow_tbills",
    "outflow_tbonds",
    "rvp",
]


def sum_fields(record: Any, fields: Sequence[str]) -> float:
    """Total of several numeric fields on one record."""
    return sum(to_number(field_value(record, name)) for name in fields)


def net_flow(
    record: Any, inflow_fields: Sequence[str], outflow_fields: Sequence[str]
) -> float:
    """Inflow total minus outflow total for one record."""
    return sum_fields(record, inflow_fields) - sum_fields(record, outflow_fields)


def extract_sum(
    records: Iterable[Any],
    fields: Sequence[str],
    window_size: Optional[int] = None,
    order: Optional[Union[SortOrder, str]] = None,
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> List[TimeSeriesPoint]:
    """
    Series of per-date totals across several fields.

    Example:
        ```python
        # Total DST balances over the last ten business days
        extract_sum(records, DST_BALANCE_FIELDS, window_size=10)
        ```
    """
    order, date_field = resolve_series_options(order, date_field, settings)
    selected = select_records(records, window_size, order, date_field)
    return [
        TimeSeriesPoint(
            date=point_date(field_value(record, date_field)),
            value=sum_fields(record, fields),
        )
        for record in selected
    ]


def extract_net_flow(
    records: Iterable[Any],
    inflow_fields: Sequence[str] = tuple(LKR_INFLOW_FIELDS),
    outflow_fields: Sequence[str] = tuple(LKR_OUTFLOW_FIELDS),
    window_size: Optional[int] = None,
    order: Optional[Union[SortOrder, str]] = None,
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> List[TimeSeriesPoint]:
    """Series of per-date net flows (inflows minus outflows)."""
    order, date_field = resolve_series_options(order, date_field, settings)
    selected = select_records(records, window_size, order, date_field)
    return [
        TimeSeriesPoint(
            date=point_date(field_value(record, date_field)),
            value=net_flow(record, inflow_fields, outflow_fields),
        )
        for record in selected
    ]
