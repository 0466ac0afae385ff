# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import Field, field_validator

from .enums import SortOrder
from .model import Model
from .types import PositiveInt


class SeriesSettings(Model):
    """Defaults for series extraction."""

    date_field: str = Field(
        default="record_date", description="Record attribute holding the business date."
    )
    default_order: SortOrder = Field(
        default=SortOrder.ASC, description="Order of extracted points when none is given."
    )


class BucketSettings(Model):
    """
    Configuration for cashflow period bucketing.

    The defaults reproduce the standard treasury cashflow view: twelve weekly
    buckets, twelve monthly buckets, and a ten-year annual horizon (the
    reference year plus nine) with everything later folded into one bucket.

    Usage Examples:
        # Standard schedule
        settings = BucketSettings()

        # Longer annual horizon for a bond-heavy book
        settings = BucketSettings(annual_horizon_years=15)
    """

    weekly_bucket_count: PositiveInt = Field(
        default=12, description="Number of forward weekly buckets."
    )
    week_length_days: PositiveInt = Field(
        default=7, description="Days covered by each weekly bucket."
    )
    monthly_bucket_count: PositiveInt = Field(
        default=12, description="Number of forward calendar-month buckets."
    )
    annual_horizon_years: PositiveInt = Field(
        default=10,
        description=(
            "Calendar years bucketed individually, counting the reference year. "
            "Later years are folded into the overflow bucket."
        ),
    )
    overflow_label_template: str = Field(
        default="After {year}",
        description="Label of the annual overflow bucket; {year} is the horizon year.",
    )
    cashflow_date_field: str = Field(
        default="cf_date", description="Cashflow item attribute holding the payment date."
    )
    tbill_coupon_marker: str = Field(
        default="TB", description="Coupon marker identifying treasury bills."
    )

    @field_validator("overflow_label_template")
    @classmethod
    def check_overflow_label(cls, value: str) -> str:
        if "{year}" not in value:
            raise ValueError("overflow_label_template must contain a '{year}' placeholder")
        return value


class GlobalSettings(Model):
    """Global engine settings, grouped by functional area."""

    series: SeriesSettings = Field(default_factory=SeriesSettings)
    buckets: BucketSettings = Field(default_factory=BucketSettings)
