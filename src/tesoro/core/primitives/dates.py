# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Calendar-date helpers.

Every comparison in the engine is by calendar date. Timestamps are truncated
to their own date (no timezone conversion), so a record stamped late in the
evening never slides into the next day's bucket.
"""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Any, Optional

import pandas as pd
from dateutil.relativedelta import relativedelta

# YYYY-MM-DD with an optional time and UTC offset; keywords such as "now" never match
_ISO_8601 = re.compile(
    r"\d{4}-\d{2}-\d{2}(?:[T ]\d{2}:\d{2}(?::\d{2}(?:\.\d+)?)?(?:Z|[+-]\d{2}:?\d{2})?)?"
)


def parse_calendar_date(value: Any) -> Optional[date]:
    """
    Read a calendar date from a date, datetime or ISO-8601 string.

    Strings must be ISO-8601; relative keywords ("today", "now") and free-form
    text are unreadable, so no result ever depends on the system clock.

    Args:
        value: Raw date value from a record or cashflow item

    Returns:
        The calendar date, or None when the value cannot be read
    """
    if value is pd.NaT:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not _ISO_8601.fullmatch(text):
        return None
    try:
        timestamp = pd.Timestamp(text)
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(timestamp):
        return None
    return timestamp.date()


def require_calendar_date(value: Any, name: str = "date") -> date:
    """Parse a caller-supplied date argument, raising if it is unreadable."""
    parsed = parse_calendar_date(value)
    if parsed is None:
        raise ValueError(f"{name} must be a date or ISO-8601 string, got {value!r}")
    return parsed


def format_iso_date(value: Any) -> Any:
    """Render a date as ``YYYY-MM-DD``; other values are returned unchanged."""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return value


def add_months(value: date, months: int) -> date:
    """Shift a date by whole months, clamping to the end of shorter months."""
    return value + relativedelta(months=months)


def month_start(year: int, month: int) -> date:
    return date(year, month, 1)


def month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])
