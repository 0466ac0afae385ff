# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Trend deltas for extracted series.

The anchor for every comparison is the latest point in the series, not the
wall clock, so the same series always yields the same delta.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any, Iterable, List, Tuple, Union

from ..core.primitives import ComparisonPeriod, Model, add_months, parse_calendar_date, to_number
from ..records.base import field_value


class Change(Model):
    """Absolute and percentage change between two observations."""

    value: float = 0.0
    percentage: float = 0.0

    @property
    def is_positive(self) -> bool:
        return self.value >= 0


def percent_change(current: float, previous: float, absolute_base: bool = False) -> float:
    """
    Percentage change from ``previous`` to ``current``.

    Args:
        current: Latest value
        previous: Base value; a zero base yields 0
        absolute_base: Divide by ``abs(previous)`` so that a move from a
            negative base keeps its direction (used for net flows)
    """
    if previous == 0:
        return 0.0
    base = abs(previous) if absolute_base else previous
    return (current - previous) / base * 100


def _closest_value(points: List[Tuple[date, float]], target: date) -> float:
    # First point with the smallest distance wins
    best_date, best_value = points[0]
    smallest = abs((best_date - target).days)
    for point_date, value in points[1:]:
        distance = abs((point_date - target).days)
        if distance < smallest:
            smallest = distance
            best_value = value
    return best_value


def comparison_anchor(latest: date, period: Union[ComparisonPeriod, str]) -> date:
    """Target date compared against for a look-back period."""
    period = ComparisonPeriod(period)
    if period is ComparisonPeriod.WEEK:
        return latest - timedelta(days=7)
    if period is ComparisonPeriod.MONTH:
        return add_months(latest, -1)
    if period is ComparisonPeriod.YEAR_TO_DATE:
        return date(latest.year, 1, 1)
    raise ValueError(f"{period.value} has no anchor date; it compares consecutive points")


def compute_change(
    points: Iterable[Any],
    period: Union[ComparisonPeriod, str] = ComparisonPeriod.PREVIOUS,
) -> Change:
    """
    Change of the latest value against a look-back point.

    Points may be ``TimeSeriesPoint`` objects or ``{"date", "value"}``
    mappings. Points with unreadable dates are ignored; non-numeric values
    count as 0. Fewer than two usable points give a zero change.

    Args:
        points: Series points in any order
        period: "previous" (prior point), "1W", "1M" or "YTD"

    Returns:
        Change with the absolute delta and the percentage delta (0 when the
        comparison value is 0)

    Example:
        ```python
        series = extract(records, "call_rate")
        compute_change(series, "1M").percentage
        ```
    """
    period = ComparisonPeriod(period)
    dated = []
    for point in points:
        point_date = parse_calendar_date(field_value(point, "date"))
        if point_date is not None:
            dated.append((point_date, to_number(field_value(point, "value"))))
    if len(dated) < 2:
        return Change()

    dated.sort(key=lambda entry: entry[0])
    latest_date, latest_value = dated[-1]

    if period is ComparisonPeriod.PREVIOUS:
        comparison = dated[-2][1]
    else:
        comparison = _closest_value(dated, comparison_anchor(latest_date, period))

    delta = latest_value - comparison
    return Change(value=delta, percentage=percent_change(latest_value, comparison))
