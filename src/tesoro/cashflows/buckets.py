# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Period Bucketer for fixed-income cashflows.

Groups cashflow items into forward-looking periods relative to an explicit
reference date:

- weekly: a fixed run of consecutive weeks starting on the reference date,
  each covering ``[start, start + 6]`` inclusive
- monthly: a fixed run of calendar months starting with the reference month
- annual: one bucket per calendar year up to the horizon year (reference
  year + 9 by default), then a single overflow bucket for everything later

Weekly and monthly schedules always contain every bucket, empty or not.
Annual schedules only contain years that have items.

Items whose cashflow date cannot be read match no bucket. They are dropped
without raising; ``bucket_with_exclusions`` reports how many.
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from pydantic import Field

from ..core.primitives import (
    BucketSettings,
    Granularity,
    InstrumentClass,
    Model,
    NonNegativeInt,
    add_months,
    month_end,
    month_start,
    parse_calendar_date,
    require_calendar_date,
    to_number,
)
from ..records.base import field_value
from .instruments import DEFAULT_TBILL_MARKER, classify_instrument

logger = logging.getLogger(__name__)


class Bucket(Model):
    """
    Cashflows falling in one period.

    Attributes:
        label: Display label ("Week 3", "Mar-25", "2027", "After 2034")
        sort_key: Position of the bucket in its schedule
        coupon_sum: Sum of member coupon amounts
        capital_sum: Sum of member capital amounts
        tbill_capital_sum: Part of capital_sum maturing from treasury bills
        items: Member cashflow items, in cashflow-date order
        start_date: First day of the period (None for the overflow bucket)
        end_date: Last day of the period (None for the overflow bucket)
        is_overflow: True for the annual "beyond the horizon" bucket
    """

    label: str
    sort_key: int
    coupon_sum: float = 0.0
    capital_sum: float = 0.0
    tbill_capital_sum: float = 0.0
    items: List[Any] = Field(default_factory=list)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_overflow: bool = False

    @property
    def total(self) -> float:
        return self.coupon_sum + self.capital_sum

    @property
    def item_count(self) -> int:
        return len(self.items)

    @property
    def tbond_capital_sum(self) -> float:
        """Capital repaid on treasury bonds in this bucket."""
        return self.capital_sum - self.tbill_capital_sum


class BucketingResult(Model):
    """Bucketed schedule plus the number of items that matched no bucket for lack of a date."""

    granularity: Granularity
    reference_date: date
    buckets: List[Bucket]
    excluded_count: NonNegativeInt = 0


class _BucketAccumulator:
    """Running sums for one bucket while items are scanned."""

    def __init__(
        self,
        label: str,
        sort_key: int,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        is_overflow: bool = False,
        tbill_marker: str = DEFAULT_TBILL_MARKER,
    ) -> None:
        self.label = label
        self.sort_key = sort_key
        self.start_date = start_date
        self.end_date = end_date
        self.is_overflow = is_overflow
        self.tbill_marker = tbill_marker
        self.coupon_sum = 0.0
        self.capital_sum = 0.0
        self.tbill_capital_sum = 0.0
        self.items: List[Any] = []

    def add(self, item: Any) -> None:
        self.coupon_sum += to_number(field_value(item, "coupon_amount"))
        capital = to_number(field_value(item, "capital"))
        self.capital_sum += capital
        if classify_instrument(item, self.tbill_marker) is InstrumentClass.TBILL:
            self.tbill_capital_sum += capital
        self.items.append(item)

    def to_bucket(self) -> Bucket:
        return Bucket(
            label=self.label,
            sort_key=self.sort_key,
            coupon_sum=self.coupon_sum,
            capital_sum=self.capital_sum,
            tbill_capital_sum=self.tbill_capital_sum,
            items=self.items,
            start_date=self.start_date,
            end_date=self.end_date,
            is_overflow=self.is_overflow,
        )


DatedItems = List[Tuple[date, Any]]


def _weekly(dated: DatedItems, reference: date, settings: BucketSettings) -> List[Bucket]:
    length = settings.week_length_days
    accumulators = []
    for index in range(settings.weekly_bucket_count):
        start = reference + timedelta(days=index * length)
        accumulators.append(
            _BucketAccumulator(
                label=f"Week {index + 1}",
                sort_key=index,
                start_date=start,
                end_date=start + timedelta(days=length - 1),
                tbill_marker=settings.tbill_coupon_marker,
            )
        )

    for cf_date, item in dated:
        offset = (cf_date - reference).days
        if offset < 0:
            continue
        index = offset // length
        if index < len(accumulators):
            accumulators[index].add(item)

    return [acc.to_bucket() for acc in accumulators]


def _monthly(dated: DatedItems, reference: date, settings: BucketSettings) -> List[Bucket]:
    first_month = month_start(reference.year, reference.month)
    accumulators: Dict[Tuple[int, int], _BucketAccumulator] = {}
    for offset in range(settings.monthly_bucket_count):
        start = add_months(first_month, offset)
        accumulators[(start.year, start.month)] = _BucketAccumulator(
            label=start.strftime("%b-%y"),
            sort_key=start.year * 100 + start.month,
            start_date=start,
            end_date=month_end(start.year, start.month),
            tbill_marker=settings.tbill_coupon_marker,
        )

    for cf_date, item in dated:
        accumulator = accumulators.get((cf_date.year, cf_date.month))
        if accumulator is not None:
            accumulator.add(item)

    # Dict preserves construction order, which is chronological
    return [acc.to_bucket() for acc in accumulators.values()]


def _annual(dated: DatedItems, reference: date, settings: BucketSettings) -> List[Bucket]:
    horizon_year = reference.year + settings.annual_horizon_years - 1
    years: Dict[int, _BucketAccumulator] = {}
    overflow: Optional[_BucketAccumulator] = None

    for cf_date, item in dated:
        year = cf_date.year
        if year <= horizon_year:
            if year not in years:
                years[year] = _BucketAccumulator(
                    label=str(year),
                    sort_key=year,
                    start_date=date(year, 1, 1),
                    end_date=date(year, 12, 31),
                    tbill_marker=settings.tbill_coupon_marker,
                )
            years[year].add(item)
        else:
            if overflow is None:
                overflow = _BucketAccumulator(
                    label=settings.overflow_label_template.format(year=horizon_year),
                    sort_key=horizon_year + 1,
                    is_overflow=True,
                    tbill_marker=settings.tbill_coupon_marker,
                )
            overflow.add(item)

    buckets = [years[year].to_bucket() for year in sorted(years)]
    if overflow is not None:
        buckets.append(overflow.to_bucket())
    return buckets


_BUCKETERS = {
    Granularity.WEEKLY: _weekly,
    Granularity.MONTHLY: _monthly,
    Granularity.ANNUAL: _annual,
}


def bucket_with_exclusions(
    items: Iterable[Any],
    granularity: Union[Granularity, str],
    reference_date: Union[date, str],
    settings: Optional[BucketSettings] = None,
) -> BucketingResult:
    """
    Bucket cashflow items and report how many were dropped for bad dates.

    Args:
        items: Cashflow items (models or mappings), already filtered by instrument
        granularity: "weekly", "monthly" or "annual"
        reference_date: Anchor date for the schedule ("today" for the caller)
        settings: Bucket counts, horizon and labels; defaults to BucketSettings()

    Returns:
        BucketingResult with the ordered buckets and the excluded item count

    Raises:
        ValueError: If the granularity is unknown or the reference date unreadable
    """
    granularity = Granularity(granularity)
    reference = require_calendar_date(reference_date, "reference_date")
    settings = settings or BucketSettings()

    dated: DatedItems = []
    excluded = 0
    for item in items:
        cf_date = parse_calendar_date(field_value(item, settings.cashflow_date_field))
        if cf_date is None:
            excluded += 1
            continue
        dated.append((cf_date, item))
    dated.sort(key=lambda entry: entry[0])

    buckets = _BUCKETERS[granularity](dated, reference, settings)
    logger.debug(
        f"Bucketed {len(dated)} cashflow items into {len(buckets)} {granularity.value} "
        f"buckets from {reference.isoformat()} ({excluded} excluded)"
    )
    return BucketingResult(
        granularity=granularity,
        reference_date=reference,
        buckets=buckets,
        excluded_count=excluded,
    )


def bucket(
    items: Iterable[Any],
    granularity: Union[Granularity, str],
    reference_date: Union[date, str],
    settings: Optional[BucketSettings] = None,
) -> List[Bucket]:
    """
    Group cashflow items into weekly, monthly or annual buckets.

    Example:
        ```python
        buckets = bucket(items, "annual", reference_date=date(2025, 1, 1))
        [b.label for b in buckets]  # ['2025', '2027', 'After 2034']
        ```
    """
    result = bucket_with_exclusions(items, granularity, reference_date, settings)
    if result.excluded_count:
        logger.warning(
            f"{result.excluded_count} cashflow items had no readable cashflow date "
            f"and were left out of the {result.granularity.value} schedule"
        )
    return result.buckets
