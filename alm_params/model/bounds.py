"""
ALM Params: Numeric Bounds

This module holds the inclusive range each bounded parameter must lie in
and the helpers that apply them. Bounds are declared once here and used
by the setters, by range checking of loaded documents and by the
command-line tools.

Key responsibilities:
- Represent an inclusive ``[minimum, maximum]`` range
- Clamp values into a range, rejecting empty ranges
- Declare the per-field bounds of a configuration

External dependencies:
- None (standard library only)

Thread safety: Thread-safe (bounds are frozen dataclasses)

Author: ALM Team
Created: 2026-10-17
Last Modified: 2026-10-17
Status: Development
Version: v0.1.0
"""

# ============================================================================
# Imports
# ============================================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, TypeVar, Union

Number = TypeVar("Number", int, float)


@dataclass(frozen=True)
class Bounds:
    """Inclusive ``[minimum, maximum]`` range for a numeric parameter."""

    minimum: Union[int, float]
    maximum: Union[int, float]

    def contains(self, value: Union[int, float]) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: Number) -> Number:
        return clamp(value, self.minimum, self.maximum)  # type: ignore[arg-type]


def clamp(value: Number, minimum: Number, maximum: Number) -> Number:
    """Return ``max(minimum, min(value, maximum))``."""

    if minimum > maximum:
        raise ValueError(f"Empty range [{minimum}, {maximum}]")
    return max(minimum, min(value, maximum))


# ============================================================================
# Declared ranges
# ============================================================================

STAGE_COUNT = Bounds(1, 4)
STEP_SIZE_MONTHS = Bounds(1, 6)
LCR_LIMIT = Bounds(100.0, 300.0)
LCR_AVERAGE_DRA_PD = Bounds(0.0, 50.0)
TREASURY_LIQUIDITY_FLOOR = Bounds(1_000_000, 100_000_000)
DELTA_NII_HORIZON_MONTHS = Bounds(1, 36)
SHOCK_BPS = Bounds(-500, 500)

# Attribute name -> bounds for every scalar bounded field of a
# Configuration. Curve elements are checked separately.
FIELD_BOUNDS: Dict[str, Bounds] = {
    "stage_count": STAGE_COUNT,
    "step_size_months": STEP_SIZE_MONTHS,
    "lcr_lower_limit": LCR_LIMIT,
    "lcr_upper_limit": LCR_LIMIT,
    "lcr_average_dra_pd": LCR_AVERAGE_DRA_PD,
    "mxn_treasury_liquidity_floor": TREASURY_LIQUIDITY_FLOOR,
    "cop_treasury_liquidity_floor": TREASURY_LIQUIDITY_FLOOR,
    "brl_treasury_liquidity_floor": TREASURY_LIQUIDITY_FLOOR,
    "delta_nii_horizon_months": DELTA_NII_HORIZON_MONTHS,
}
