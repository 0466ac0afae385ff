# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Any, Iterable, List, Union

from ..core.primitives import InstrumentClass, InstrumentFilter
from ..records.base import field_value

DEFAULT_TBILL_MARKER = "TB"


def classify_instrument(item: Any, tbill_marker: str = DEFAULT_TBILL_MARKER) -> InstrumentClass:
    """Treasury bill when the coupon marker matches ``tbill_marker``, else bond."""
    marker = field_value(item, "coupon")
    if marker is not None and str(marker).strip().upper() == tbill_marker.upper():
        return InstrumentClass.TBILL
    return InstrumentClass.TBOND


def filter_by_instrument(
    items: Iterable[Any],
    instrument: Union[InstrumentFilter, str] = InstrumentFilter.ALL,
    tbill_marker: str = DEFAULT_TBILL_MARKER,
) -> List[Any]:
    """
    Select cashflow items of one instrument class.

    Applied before bucketing; the bucketer itself never filters.

    Raises:
        ValueError: If ``instrument`` is not "all", "tbill" or "tbond"
    """
    instrument = InstrumentFilter(instrument)
    if instrument is InstrumentFilter.ALL:
        return list(items)
    wanted = InstrumentClass(instrument.value)
    return [item for item in items if classify_instrument(item, tbill_marker) is wanted]
