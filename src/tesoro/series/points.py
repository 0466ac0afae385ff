# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Derived series points.

Points are ephemeral values owned by the caller. Dates are carried as
ISO-8601 strings, the form chart widgets consume; values are copied verbatim
from the source record (nulls included).
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd
from pydantic import Field

from ..core.primitives import Model


class TimeSeriesPoint(Model):
    """A single ``(date, value)`` observation."""

    date: Optional[str]
    value: Any = None

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "value": self.value}


class MultiFieldPoint(Model):
    """
    A date with several named values.

    Values keep the order of the requested fields; lookups are by key.
    """

    date: Optional[str]
    values: Dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, field: str) -> Any:
        return self.values[field]

    def get(self, field: str, default: Any = None) -> Any:
        return self.values.get(field, default)

    def to_dict(self) -> Dict[str, Any]:
        """Flatten to ``{"date": ..., field1: ..., field2: ...}``."""
        return {"date": self.date, **self.values}


def points_to_frame(
    points: Sequence[Union[TimeSeriesPoint, MultiFieldPoint]],
) -> pd.DataFrame:
    """
    Convert extracted points into a DataFrame indexed by date.

    Single-field points produce a ``value`` column; multi-field points
    produce one column per field. Unreadable dates become ``NaT``.

    Args:
        points: Output of ``extract`` or ``extract_multi``

    Returns:
        DataFrame with a DatetimeIndex named ``date``
    """
    rows: List[Dict[str, Any]] = [point.to_dict() for point in points]
    if not rows:
        return pd.DataFrame(index=pd.DatetimeIndex([], name="date"))

    df = pd.DataFrame(rows)
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    return df.set_index("date")
