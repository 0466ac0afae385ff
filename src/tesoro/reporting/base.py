# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports take already-validated records or cashflow items and lay the
engine's derived figures out as pandas DataFrames for tables and exports.
Reports only arrange and format; the arithmetic lives in the aggregation,
series and cashflows packages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

import pandas as pd

from .formatting import format_compact_currency


class BaseReport(ABC):
    """
    Abstract base class for all report formatters.

    Subclasses hold their inputs and expose ``generate`` returning a
    DataFrame.
    """

    currency: str = "LKR"

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """
        Generate the formatted report output.

        This method should lay out figures computed by the engine without
        performing any new arithmetic beyond row totals.
        """
        pass

    def _format_currency(self, value: float) -> str:
        """Format currency values for display."""
        return format_compact_currency(value, currency=self.currency)

    def _format_columns(self, frame: pd.DataFrame, columns) -> pd.DataFrame:
        formatted = frame.copy()
        for column in columns:
            if column in formatted.columns:
                formatted[column] = formatted[column].apply(self._format_currency)
        return formatted
