# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tesoro Core Primitives

Essential building blocks for every aggregation: the frozen model base,
numeric-or-null field typing, calendar-date parsing, enums and settings.
"""

from .dates import (
    add_months,
    format_iso_date,
    month_end,
    month_start,
    parse_calendar_date,
    require_calendar_date,
)
from .enums import (
    ComparisonPeriod,
    FlowDirection,
    Granularity,
    InstrumentClass,
    InstrumentFilter,
    RecordDomain,
    SortOrder,
    TrailingWindow,
)
from .model import Model
from .numeric import coerce_numeric, to_number
from .settings import BucketSettings, GlobalSettings, SeriesSettings
from .types import FiniteFloat, NonNegativeInt, NumericOrNull, PositiveInt

__all__ = [
    # Core model
    "Model",
    # Settings
    "GlobalSettings",
    "SeriesSettings",
    "BucketSettings",
    # Enums
    "ComparisonPeriod",
    "FlowDirection",
    "Granularity",
    "InstrumentClass",
    "InstrumentFilter",
    "RecordDomain",
    "SortOrder",
    "TrailingWindow",
    # Types
    "FiniteFloat",
    "NonNegativeInt",
    "NumericOrNull",
    "PositiveInt",
    # Numeric helpers
    "coerce_numeric",
    "to_number",
    # Date helpers
    "add_months",
    "format_iso_date",
    "month_end",
    "month_start",
    "parse_calendar_date",
    "require_calendar_date",
]
