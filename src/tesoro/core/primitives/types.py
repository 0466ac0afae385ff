# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from typing import Annotated, Optional

from pydantic import BeforeValidator, Field

from .numeric import coerce_numeric

# constrained types
PositiveInt = Annotated[int, Field(strict=True, gt=0)]
NonNegativeInt = Annotated[int, Field(strict=True, ge=0)]
FiniteFloat = Annotated[float, Field(allow_inf_nan=False)]

# Numeric observation that may be absent. Raw input is normalized once
# (blank and "-" become None, thousands separators are dropped) before
# pydantic's float validation rejects anything non-numeric.
NumericOrNull = Annotated[Optional[FiniteFloat], BeforeValidator(coerce_numeric)]
