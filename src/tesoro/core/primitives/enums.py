# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class SortOrder(str, Enum):
    """Output order of an extracted series."""

    ASC = "asc"
    DESC = "desc"


class Granularity(str, Enum):
    """
    Bucket granularity for cashflow schedules.

    WEEKLY and MONTHLY produce a fixed number of forward-looking buckets
    anchored on the reference date. ANNUAL groups by calendar year up to a
    horizon and folds later years into a single overflow bucket.
    """

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class InstrumentClass(str, Enum):
    """Government security class of a cashflow item."""

    TBILL = "tbill"  # Treasury bill: discount instrument, capital only
    TBOND = "tbond"  # Treasury bond: coupon plus capital


class InstrumentFilter(str, Enum):
    """Instrument selection applied before bucketing."""

    ALL = "all"
    TBILL = "tbill"
    TBOND = "tbond"


class ComparisonPeriod(str, Enum):
    """
    Look-back used when computing a trend delta for a series.

    PREVIOUS compares against the prior point; the others compare against
    the point closest to the anchor date (one week back, one month back, or
    January 1st of the latest point's year).
    """

    PREVIOUS = "previous"
    WEEK = "1W"
    MONTH = "1M"
    YEAR_TO_DATE = "YTD"


class TrailingWindow(str, Enum):
    """Trailing date windows used to trim records before charting."""

    WEEK = "week"
    MONTH = "month"
    QUARTER = "quarter"
    YEAR = "year"


class FlowDirection(str, Enum):
    """Side of a desk or liquidity flow."""

    INFLOW = "inflow"
    OUTFLOW = "outflow"


class RecordDomain(str, Enum):
    """Daily record domains persisted by the reporting system."""

    LIQUIDITY_LKR = "liquidity_lkr"
    LIQUIDITY_FCY = "liquidity_fcy"
    FIXED_INCOME_DAILY = "fixed_income_daily"
    USD_LKR = "usd_lkr"
    CORPORATE_DESK = "corporate_desk"
