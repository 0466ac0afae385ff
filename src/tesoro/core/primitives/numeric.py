# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Numeric helpers for loosely-typed treasury figures.

Two entry points with different contracts:

- ``coerce_numeric`` runs at the record boundary. It normalizes formatting
  (placeholders, thousands separators) and leaves anything it cannot read
  untouched so that pydantic reports the validation error.
- ``to_number`` runs inside aggregations, which never raise. Anything that is
  not a finite number counts as 0.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any

_NULL_PLACEHOLDERS = {"", "-", "--", "n/a", "na", "null", "none"}


def coerce_numeric(value: Any) -> Any:
    """Normalize a raw numeric field before validation."""
    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if text.lower() in _NULL_PLACEHOLDERS:
            return None
        return text.replace(",", "").replace(" ", "")
    if isinstance(value, Decimal):
        return float(value)
    return value


def to_number(value: Any) -> float:
    """Convert a value to a finite float, treating anything else as 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", ""))
        except ValueError:
            return 0.0
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number
