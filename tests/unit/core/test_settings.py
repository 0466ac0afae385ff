# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

import pytest
from pydantic import ValidationError

from tesoro.core.primitives import (
    BucketSettings,
    GlobalSettings,
    Granularity,
    SeriesSettings,
    SortOrder,
)


def test_bucket_settings_defaults():
    """Default schedule: 12 weeks, 12 months, ten-year annual horizon."""
    settings = BucketSettings()
    assert settings.weekly_bucket_count == 12
    assert settings.week_length_days == 7
    assert settings.monthly_bucket_count == 12
    assert settings.annual_horizon_years == 10
    assert settings.overflow_label_template.format(year=2034) == "After 2034"
    assert settings.tbill_coupon_marker == "TB"


def test_global_settings_groups_sections():
    settings = GlobalSettings()
    assert isinstance(settings.series, SeriesSettings)
    assert settings.series.default_order is SortOrder.ASC
    assert settings.buckets.annual_horizon_years == 10


def test_overflow_label_requires_year_placeholder():
    with pytest.raises(ValidationError, match="placeholder"):
        BucketSettings(overflow_label_template="Later")


@pytest.mark.parametrize("field", ["weekly_bucket_count", "monthly_bucket_count", "annual_horizon_years"])
def test_bucket_counts_must_be_positive(field):
    with pytest.raises(ValidationError):
        BucketSettings(**{field: 0})


def test_settings_are_frozen():
    settings = BucketSettings()
    with pytest.raises(ValidationError):
        settings.weekly_bucket_count = 4


def test_enum_member_values():
    """Enums accept the wire strings used by callers."""
    assert Granularity("weekly") is Granularity.WEEKLY
    assert SortOrder("desc") is SortOrder.DESC
    with pytest.raises(ValueError):
        Granularity("daily")
