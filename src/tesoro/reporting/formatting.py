# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display formatting for report cells and summary cards.
"""

from __future__ import annotations

from typing import Any

import pandas as pd

_COMPACT_UNITS = [
    (1_000_000_000, "Bn"),
    (1_000_000, "M"),
    (1_000, "K"),
]


def format_compact_currency(value: Any, currency: str = "LKR") -> str:
    """
    Format an amount as ``LKR 1.2Bn`` / ``LKR 3.4M`` / ``LKR 5.6K`` / ``LKR 789``.

    Missing and non-numeric values format as zero.
    """
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        numeric = 0.0
    if pd.isna(numeric):
        numeric = 0.0

    for threshold, suffix in _COMPACT_UNITS:
        if abs(numeric) >= threshold:
            return f"{currency} {numeric / threshold:.1f}{suffix}"
    return f"{currency} {numeric:.0f}"


def format_value(
    value: Any,
    kind: str = "number",
    decimal_places: int = 1,
    auto_adjust_percentage: bool = True,
    currency: str = "USD",
) -> str:
    """
    Format a number for display.

    Args:
        value: Number or numeric string; anything else is returned as ``str(value)``
        kind: "number", "currency" or "percentage"
        decimal_places: Fixed number of decimals
        auto_adjust_percentage: Treat magnitudes below 1 as fractions and
            scale them by 100 when ``kind`` is "percentage"
        currency: ISO code for "currency"; USD renders as ``$``

    Example:
        ```python
        format_value(1234.5)                                   # '1,234.5'
        format_value(0.0525, kind="percentage", decimal_places=2)  # '5.25%'
        format_value(-12.5, kind="currency")                   # '-$12.5'
        ```
    """
    if value is None or isinstance(value, bool):
        return str(value)
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return str(value)
    if pd.isna(numeric):
        return str(value)

    if kind == "percentage":
        if auto_adjust_percentage and abs(numeric) < 1:
            numeric *= 100
        return f"{numeric:,.{decimal_places}f}%"

    if kind == "currency":
        symbol = "$" if currency.upper() == "USD" else f"{currency.upper()} "
        sign = "-" if numeric < 0 else ""
        return f"{sign}{symbol}{abs(numeric):,.{decimal_places}f}"

    if kind == "number":
        return f"{numeric:,.{decimal_places}f}"

    return str(numeric)
