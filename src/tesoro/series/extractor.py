# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Series extraction from daily records.

Both extractors follow the same steps on a private copy of the input:

1. Sort chronologically by the calendar date in ``date_field``.
2. Keep the ``window_size`` most recent records, if a window is given.
3. Emit in the requested order (``SeriesSettings.default_order``, ascending
   unless configured otherwise).

Windowing always selects the chronologically latest records, whatever the
requested output order. No field validation is done here: a missing or null
field comes through as ``None``.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from ..core.primitives import SeriesSettings, SortOrder, format_iso_date, parse_calendar_date
from ..records.base import field_value
from .points import MultiFieldPoint, TimeSeriesPoint

logger = logging.getLogger(__name__)

DEFAULT_DATE_FIELD = "record_date"


def _sort_key(entry: Tuple[Optional[date], Any]) -> date:
    # Unreadable dates sort first so they are the first to fall out of a window
    return entry[0] or date.min


def point_date(raw: Any) -> Optional[str]:
    value = format_iso_date(raw)
    if value is None or isinstance(value, str):
        return value
    return str(value)


def resolve_series_options(
    order: Optional[Union[SortOrder, str]] = None,
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> Tuple[SortOrder, str]:
    """Explicit arguments win; otherwise ``settings`` (or its defaults) decide."""
    settings = settings or SeriesSettings()
    resolved_order = SortOrder(order) if order is not None else settings.default_order
    return resolved_order, date_field or settings.date_field


def select_records(
    records: Iterable[Any],
    window_size: Optional[int] = None,
    order: Optional[Union[SortOrder, str]] = None,
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> List[Any]:
    """
    Sort and window records without projecting any field.

    Args:
        records: Daily records (models or mappings), in any order
        window_size: Keep only the N chronologically latest records
        order: Output order, "asc" or "desc"; defaults to ``settings.default_order``
        date_field: Attribute holding the business date; defaults to ``settings.date_field``
        settings: Series defaults; SeriesSettings() when omitted

    Returns:
        New list of the selected records

    Raises:
        ValueError: If window_size is negative or order is unknown
    """
    order, date_field = resolve_series_options(order, date_field, settings)
    if window_size is not None and window_size < 0:
        raise ValueError(f"window_size must be non-negative, got {window_size}")

    dated = [(parse_calendar_date(field_value(r, date_field)), r) for r in records]
    dated.sort(key=_sort_key)

    if window_size is not None:
        dated = dated[max(len(dated) - window_size, 0) :] if window_size else []

    if order is SortOrder.DESC:
        dated.reverse()

    return [record for _, record in dated]


def extract(
    records: Iterable[Any],
    field: str,
    window_size: Optional[int] = None,
    order: Optional[Union[SortOrder, str]] = None,
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> List[TimeSeriesPoint]:
    """
    Project records into a ``(date, value)`` series for one field.

    Args:
        records: Daily records (models or mappings); need not be sorted
        field: Numeric field to project
        window_size: Keep only the N chronologically latest points
        order: Output order, "asc" or "desc"; defaults to ``settings.default_order``
        date_field: Attribute holding the business date; defaults to ``settings.date_field``
        settings: Series defaults; SeriesSettings() when omitted

    Returns:
        List of TimeSeriesPoint; values are copied verbatim, None when absent

    Example:
        ```python
        extract(records, "market_liquidity", window_size=10)
        # [TimeSeriesPoint(date='2024-01-02', value=110.0), ...]
        ```
    """
    order, date_field = resolve_series_options(order, date_field, settings)
    selected = select_records(records, window_size, order, date_field)
    logger.debug(f"Extracted {len(selected)} points for '{field}'")
    return [
        TimeSeriesPoint(
            date=point_date(field_value(record, date_field)),
            value=field_value(record, field),
        )
        for record in selected
    ]


def extract_multi(
    records: Iterable[Any],
    fields: Sequence[str],
    window_size: Optional[int] = None,
    order: Optional[Union[SortOrder, str]] = None,
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> List[MultiFieldPoint]:
    """
    Project records into points carrying several named fields.

    Sorting and windowing follow ``extract``. Each point keeps one entry per
    requested field, in argument order, with the value copied verbatim.
    """
    order, date_field = resolve_series_options(order, date_field, settings)
    selected = select_records(records, window_size, order, date_field)
    logger.debug(f"Extracted {len(selected)} points for {len(fields)} fields")
    return [
        MultiFieldPoint(
            date=point_date(field_value(record, date_field)),
            values={name: field_value(record, name) for name in fields},
        )
        for record in selected
    ]


def latest_record(
    records: Iterable[Any],
    date_field: Optional[str] = None,
    settings: Optional[SeriesSettings] = None,
) -> Optional[Any]:
    """Return the most recent record, or None when there are none."""
    selected = select_records(
        records, window_size=1, order=SortOrder.ASC, date_field=date_field, settings=settings
    )
    return selected[0] if selected else None
