# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fixed-income cashflow scheduling.

Instrument classification and filtering, the Period Bucketer (weekly,
monthly and annual schedules) and schedule-level summaries.
"""

from .buckets import Bucket, BucketingResult, bucket, bucket_with_exclusions
from .instruments import DEFAULT_TBILL_MARKER, classify_instrument, filter_by_instrument
from .summary import BucketTrend, CashflowTotals, bucket_trend, summarize_cashflows

__all__ = [
    # Bucketing
    "Bucket",
    "BucketingResult",
    "bucket",
    "bucket_with_exclusions",
    # Instruments
    "DEFAULT_TBILL_MARKER",
    "classify_instrument",
    "filter_by_instrument",
    # Summaries
    "BucketTrend",
    "CashflowTotals",
    "bucket_trend",
    "summarize_cashflows",
]
