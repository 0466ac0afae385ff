# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterable, List, Optional, Union

from ..core.primitives import Model


class FieldPair(Model):
    """An amount field and the rate field that prices it."""

    amount_field: str
    rate_field: str
    label: Optional[str] = None

    @property
    def display_label(self) -> str:
        return self.label or self.amount_field


PairLike = Union[FieldPair, Mapping, tuple]


def as_field_pair(pair: PairLike) -> FieldPair:
    """
    Normalize a pair given as a FieldPair, mapping or ``(amount, rate)`` tuple.

    Mappings may use ``amount_field``/``rate_field`` or the camelCase
    ``amountField``/``rateField`` keys used by JSON callers.
    """
    if isinstance(pair, FieldPair):
        return pair
    if isinstance(pair, Mapping):
        return FieldPair(
            amount_field=pair.get("amount_field", pair.get("amountField")),
            rate_field=pair.get("rate_field", pair.get("rateField")),
            label=pair.get("label"),
        )
    if isinstance(pair, tuple) and len(pair) in (2, 3):
        return FieldPair(
            amount_field=pair[0],
            rate_field=pair[1],
            label=pair[2] if len(pair) == 3 else None,
        )
    raise TypeError(f"Cannot interpret {pair!r} as an amount/rate field pair")


def as_field_pairs(pairs: Iterable[Any]) -> List[FieldPair]:
    return [as_field_pair(pair) for pair in pairs]
