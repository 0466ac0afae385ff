# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model with common configuration.

    Immutable models for records, derived points and settings. Mutable
    accumulation state (bucket sums while scanning) lives outside of models.
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,  # Immutable models; runtime mutable state lives in external objects
        extra="forbid",  # Catches typos and unknown record fields immediately
    )
