# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tesoro Core Framework

Foundational building blocks shared by every aggregation module: the frozen
model base, numeric and date primitives, enumerations and settings.
"""

from . import primitives
from .primitives import (
    BucketSettings,
    ComparisonPeriod,
    GlobalSettings,
    Granularity,
    InstrumentClass,
    InstrumentFilter,
    Model,
    NumericOrNull,
    RecordDomain,
    SeriesSettings,
    SortOrder,
    TrailingWindow,
)

__all__ = [
    "primitives",
    "Model",
    "NumericOrNull",
    "BucketSettings",
    "GlobalSettings",
    "SeriesSettings",
    "ComparisonPeriod",
    "Granularity",
    "InstrumentClass",
    "InstrumentFilter",
    "RecordDomain",
    "SortOrder",
    "TrailingWindow",
]
