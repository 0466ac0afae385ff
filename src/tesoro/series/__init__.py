# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tesoro Series

Series and Multi-Field Extractors plus the helpers that sit around them:
composite totals, date-window filters, trend deltas and DataFrame export.
"""

from .composite import (
    DST_BALANCE_FIELDS,
    LKR_INFLOW_FIELDS,
    LKR_OUTFLOW_FIELDS,
    extract_net_flow,
    extract_sum,
    net_flow,
    sum_fields,
)
from .extractor import extract, extract_multi, latest_record, select_records
from .points import MultiFieldPoint, TimeSeriesPoint, points_to_frame
from .trends import Change, comparison_anchor, compute_change, percent_change
from .windows import filter_date_range, filter_trailing, trailing_window_start

__all__ = [
    # Points
    "TimeSeriesPoint",
    "MultiFieldPoint",
    "points_to_frame",
    # Extraction
    "extract",
    "extract_multi",
    "latest_record",
    "select_records",
    # Composite series
    "DST_BALANCE_FIELDS",
    "LKR_INFLOW_FIELDS",
    "LKR_OUTFLOW_FIELDS",
    "extract_net_flow",
    "extract_sum",
    "net_flow",
    "sum_fields",
    # Windows
    "filter_date_range",
    "filter_trailing",
    "trailing_window_start",
    # Trends
    "Change",
    "comparison_anchor",
    "compute_change",
    "percent_change",
]
