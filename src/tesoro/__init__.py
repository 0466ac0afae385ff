# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
Tesoro - Treasury Time-Series Aggregation

Derivation layer for treasury and liquidity reporting: turns daily records
and fixed-income cashflow items into chart-ready series, weighted rates,
trend deltas and period buckets.

Key Entry Points:
- tesoro.series.extract() - Single-field time series from daily records
- tesoro.series.extract_multi() - Several fields per date point
- tesoro.aggregation.aggregate() - Amount-weighted average rate
- tesoro.cashflows.bucket() - Weekly/monthly/annual cashflow buckets
- tesoro.records.load_records() - Validate raw rows at the boundary

Example Usage:
    ```python
    from datetime import date

    from tesoro.cashflows import bucket, filter_by_instrument
    from tesoro.records import load_cashflows

    items = load_cashflows(rows)
    bonds = filter_by_instrument(items, "tbond")
    annual = bucket(bonds, "annual", reference_date=date(2025, 1, 1))
    ```
"""

# Library logging: applications configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "aggregation",
    "cashflows",
    "core",
    "records",
    "reporting",
    "series",
]


_LAZY_MODULES = {
    "aggregation": "tesoro.aggregation",
    "cashflows": "tesoro.cashflows",
    "core": "tesoro.core",
    "records": "tesoro.records",
    "reporting": "tesoro.reporting",
    "series": "tesoro.series",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'tesoro' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
