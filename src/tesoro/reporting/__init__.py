# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tesoro Reporting Module

Tabular views over the engine's derived figures:

    report = CashflowScheduleReport(items, reference_date="2025-01-01")
    schedule = report.generate(granularity="annual", currency_format=True)

    flows = DailyFlowSummaryReport(desk_records).generate(direction="outflow")

This module also exports the base class for custom reports.
"""

from .base import BaseReport
from .cashflow_report import CashflowScheduleReport
from .flow_report import DailyFlowSummaryReport
from .formatting import format_compact_currency, format_value

__all__ = [
    # Base class for custom reports
    "BaseReport",
    # Core reports
    "CashflowScheduleReport",
    "DailyFlowSummaryReport",
    # Formatting
    "format_compact_currency",
    "format_value",
]
