# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Date-window filters for daily records.

Filters keep the caller's record order and drop records whose date cannot
be read. The reference date is always passed in; nothing here reads the
system clock.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable, List, Union

from ..core.primitives import (
    TrailingWindow,
    add_months,
    parse_calendar_date,
    require_calendar_date,
)
from ..records.base import field_value
from .extractor import DEFAULT_DATE_FIELD


def trailing_window_start(
    window: Union[TrailingWindow, str], reference_date: Union[date, str]
) -> date:
    """
    First date included in a trailing window ending at the reference date.

    Week is seven days; month, quarter and year are calendar offsets clamped
    to the end of shorter months.
    """
    window = TrailingWindow(window)
    reference = require_calendar_date(reference_date, "reference_date")
    if window is TrailingWindow.WEEK:
        return reference - timedelta(days=7)
    if window is TrailingWindow.MONTH:
        return add_months(reference, -1)
    if window is TrailingWindow.QUARTER:
        return add_months(reference, -3)
    return add_months(reference, -12)


def filter_trailing(
    records: Iterable[Any],
    window: Union[TrailingWindow, str],
    reference_date: Union[date, str],
    date_field: str = DEFAULT_DATE_FIELD,
) -> List[Any]:
    """Records dated on or after the start of the trailing window."""
    cutoff = trailing_window_start(window, reference_date)
    kept = []
    for record in records:
        record_date = parse_calendar_date(field_value(record, date_field))
        if record_date is not None and record_date >= cutoff:
            kept.append(record)
    return kept


def filter_date_range(
    records: Iterable[Any],
    start: Union[date, str],
    end: Union[date, str],
    date_field: str = DEFAULT_DATE_FIELD,
) -> List[Any]:
    """
    Records dated within ``[start, end]`` inclusive.

    Raises:
        ValueError: If start or end cannot be read, or start is after end
    """
    start_date = require_calendar_date(start, "start")
    end_date = require_calendar_date(end, "end")
    if start_date > end_date:
        raise ValueError(f"start {start_date} is after end {end_date}")

    kept = []
    for record in records:
        record_date = parse_calendar_date(field_value(record, date_field))
        if record_date is not None and start_date <= record_date <= end_date:
            kept.append(record)
    return kept
