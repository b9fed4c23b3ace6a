"""
ALM Params: Configuration Mutation Rules

Every edit to a configuration goes through one of the functions in this
module. They enforce the per-field ranges from
:mod:`alm_params.model.bounds` and the coupling between the two LCR
limits, so that a configuration edited only through these functions can
never hold an out-of-range value or a lower limit above the upper one.

Two policies are supported for out-of-range input:

- ``strict=False`` (default): the value is clamped into range silently,
  the way the desktop editor's slider and drag widgets behaved.
- ``strict=True``: :class:`~alm_params.core.errors.OutOfRangeError` is
  raised and the configuration is left untouched.

Input of the wrong kind (a string for an integer, an unknown curve, an
unknown enum token) always raises
:class:`~alm_params.core.errors.ConfigValidationError`.

Key responsibilities:
- Bounded setters for integers, decimals, floors and curve points
- Keep the LCR limit pair ordered and within range as a unit
- Setters for dates, the reports folder, enums and flags
- Report and clamp out-of-range values of a whole record

External dependencies:
- None beyond :mod:`alm_params.model`

Thread safety: Not thread-safe. Setters mutate the configuration passed
in.

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

import math
from datetime import date, datetime
from typing import Dict, List, Optional, Tuple, Type, Union

from alm_params.core.errors import ConfigValidationError, OutOfRangeError
from alm_params.model import bounds
from alm_params.model.bounds import Bounds, FIELD_BOUNDS, clamp
from alm_params.model.configuration import Configuration
from alm_params.model.curves import check_fixed_curves
from alm_params.model.enums import AssumptionProfile, Environment, IncludedOrExcluded, Optimizer, ParamEnum, from_token

INTEGER_FIELDS: Tuple[str, ...] = (
    "stage_count",
    "step_size_months",
    "mxn_treasury_liquidity_floor",
    "cop_treasury_liquidity_floor",
    "brl_treasury_liquidity_floor",
    "delta_nii_horizon_months",
)

DATE_FIELDS: Tuple[str, ...] = ("base_date", "start_date")

FLAG_FIELDS: Tuple[str, ...] = ("require_annual_benchmark", "must_borrow_benchmark_in_first_year")

CHOICE_FIELDS: Dict[str, Type[ParamEnum]] = {
    "environment": Environment,
    "assumption_profile": AssumptionProfile,
    "optimizer": Optimizer,
    "fwd_start_swap": IncludedOrExcluded,
}

LIQUIDITY_CURRENCIES: Tuple[str, ...] = ("MXN", "COP", "BRL")


# ============================================================================
# Internal helpers
# ============================================================================


def _require_int(field: str, value: object) -> int:
    # bool is an int subclass but never a meaningful count or amount.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigValidationError(f"{field} expects an integer, got {value!r}")
    return value


def _require_number(field: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigValidationError(f"{field} expects a number, got {value!r}")
    if math.isnan(value):
        raise ConfigValidationError(f"{field} must not be NaN")
    return float(value)


def _bounded(field: str, value: float, limits: Bounds, strict: bool) -> float:
    if strict and not limits.contains(value):
        raise OutOfRangeError(field, value, limits.minimum, limits.maximum)
    return limits.clamp(value)


# ============================================================================
# Bounded numeric setters
# ============================================================================


def set_bounded_integer(
    config: Configuration,
    field: str,
    value: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    *,
    strict: bool = False,
) -> int:
    """Store ``value`` into the integer ``field`` after bounding it.

    ``minimum``/``maximum`` default to the field's declared bounds. In the
    default policy the stored value is ``max(minimum, min(value, maximum))``
    however far ``value`` lies outside the range.

    Returns:
        The value actually stored.
    """

    if field not in INTEGER_FIELDS:
        raise ConfigValidationError(f"{field!r} is not a bounded integer field")
    value = _require_int(field, value)

    declared = FIELD_BOUNDS[field]
    lo = int(declared.minimum) if minimum is None else minimum
    hi = int(declared.maximum) if maximum is None else maximum
    if lo > hi:
        raise ConfigValidationError(f"{field}: empty range [{lo}, {hi}]")

    if strict and not lo <= value <= hi:
        raise OutOfRangeError(field, value, lo, hi)

    stored = clamp(value, lo, hi)
    setattr(config, field, stored)
    return stored


def _assign_lcr_pair(config: Configuration, lower: float, upper: float) -> Tuple[float, float]:
    # The model re-checks lower <= upper on every assignment, so the order
    # must keep the pair ordered after each single step.
    if upper >= config.lcr_lower_limit:
        config.lcr_upper_limit = upper
        config.lcr_lower_limit = lower
    else:
        config.lcr_lower_limit = lower
        config.lcr_upper_limit = upper
    return config.lcr_lower_limit, config.lcr_upper_limit


def set_lcr_lower_limit(config: Configuration, value: float, *, strict: bool = False) -> Tuple[float, float]:
    """Set the LCR lower limit, raising the upper limit to match if needed.

    The pair is bounded as a unit: the current upper limit is clamped into
    :data:`~alm_params.model.bounds.LCR_LIMIT` before the coupling rule is
    applied, so both limits end up in range whatever the starting state.

    Returns:
        The resulting ``(lower, upper)`` pair.
    """

    lower = _bounded("lcr_lower_limit", _require_number("lcr_lower_limit", value), bounds.LCR_LIMIT, strict)
    upper = max(bounds.LCR_LIMIT.clamp(config.lcr_upper_limit), lower)
    return _assign_lcr_pair(config, lower, upper)


def set_lcr_upper_limit(config: Configuration, value: float, *, strict: bool = False) -> Tuple[float, float]:
    """Set the LCR upper limit, lowering the lower limit to match if needed.

    The current lower limit is clamped into range first, as in
    :func:`set_lcr_lower_limit`.

    Returns:
        The resulting ``(lower, upper)`` pair.
    """

    upper = _bounded("lcr_upper_limit", _require_number("lcr_upper_limit", value), bounds.LCR_LIMIT, strict)
    lower = min(bounds.LCR_LIMIT.clamp(config.lcr_lower_limit), upper)
    return _assign_lcr_pair(config, lower, upper)


def set_lcr_average_dra_pd(config: Configuration, value: float, *, strict: bool = False) -> float:
    """Set the USD treasury liquidity share of total assets (percent)."""

    stored = _bounded(
        "lcr_average_dra_pd",
        _require_number("lcr_average_dra_pd", value),
        bounds.LCR_AVERAGE_DRA_PD,
        strict,
    )
    config.lcr_average_dra_pd = stored
    return stored


def set_liquidity_floor(config: Configuration, currency: str, value: int, *, strict: bool = False) -> int:
    """Set the treasury liquidity floor (USD) for ``currency``."""

    code = currency.upper()
    if code not in LIQUIDITY_CURRENCIES:
        raise ConfigValidationError(
            f"No liquidity floor for {currency!r} (expected one of {', '.join(LIQUIDITY_CURRENCIES)})"
        )
    return set_bounded_integer(config, f"{code.lower()}_treasury_liquidity_floor", value, strict=strict)


def set_curve_point(
    config: Configuration,
    curve_id: str,
    year_index: int,
    value: int,
    *,
    strict: bool = False,
) -> int:
    """Set the shock (bps) applied to ``curve_id`` in year ``year_index``."""

    shocks = config.rate_shock_curves.get(curve_id)
    if shocks is None:
        raise ConfigValidationError(f"Unknown curve {curve_id!r}")
    year_index = _require_int("year_index", year_index)
    if not 0 <= year_index < len(shocks):
        raise ConfigValidationError(f"{curve_id}: year index {year_index} outside [0, {len(shocks) - 1}]")
    value = _require_int(curve_id, value)

    if strict and not bounds.SHOCK_BPS.contains(value):
        raise OutOfRangeError(f"{curve_id}[{year_index}]", value, bounds.SHOCK_BPS.minimum, bounds.SHOCK_BPS.maximum)

    stored = int(bounds.SHOCK_BPS.clamp(value))
    shocks[year_index] = stored
    return stored


# ============================================================================
# Unbounded setters
# ============================================================================


def set_date(config: Configuration, field: str, value: Union[date, str]) -> date:
    """Set ``base_date`` or ``start_date`` from a date or ISO string."""

    if field not in DATE_FIELDS:
        raise ConfigValidationError(f"{field!r} is not a date field")
    if isinstance(value, datetime):
        value = value.date()
    elif isinstance(value, str):
        try:
            value = date.fromisoformat(value)
        except ValueError as exc:
            raise ConfigValidationError(f"{field}: invalid date {value!r}, expected YYYY-MM-DD") from exc
    elif not isinstance(value, date):
        raise ConfigValidationError(f"{field} expects a date, got {value!r}")
    setattr(config, field, value)
    return value


def set_reports_folder(config: Configuration, value: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigValidationError("reports_folder must be a non-empty path")
    config.reports_folder = value
    return value


def set_choice(config: Configuration, field: str, value: Union[ParamEnum, str]) -> ParamEnum:
    """Set an enumerated field from a member or its exact wire token."""

    enum_cls = CHOICE_FIELDS.get(field)
    if enum_cls is None:
        raise ConfigValidationError(f"{field!r} is not an enumerated field")
    try:
        member = from_token(enum_cls, value)
    except ValueError as exc:
        raise ConfigValidationError(str(exc)) from exc
    setattr(config, field, member)
    return member


def set_flag(config: Configuration, field: str, value: bool) -> bool:
    if field not in FLAG_FIELDS:
        raise ConfigValidationError(f"{field!r} is not a boolean field")
    if not isinstance(value, bool):
        raise ConfigValidationError(f"{field} expects True or False, got {value!r}")
    setattr(config, field, value)
    return value


# ============================================================================
# Whole-record checks
# ============================================================================


def find_range_violations(config: Configuration) -> List[str]:
    """Return one message per field that lies outside its editable range."""

    violations: List[str] = []
    for field, limits in FIELD_BOUNDS.items():
        value = getattr(config, field)
        if not limits.contains(value):
            violations.append(f"{field}={value} outside [{limits.minimum}, {limits.maximum}]")
    if config.lcr_lower_limit > config.lcr_upper_limit:
        violations.append("lcr_lower_limit exceeds lcr_upper_limit")
    if not config.reports_folder.strip():
        violations.append("reports_folder is empty")
    violations.extend(check_fixed_curves(config.rate_shock_curves))
    return violations


def normalize_configuration(config: Configuration) -> Configuration:
    """Return a copy of ``config`` with every bounded value clamped into range.

    The LCR pair is clamped upper limit first, so a lower limit that ends
    above the clamped upper limit is pulled down to it. An empty
    ``reports_folder`` is left as is.
    """

    normalized = config.model_copy(deep=True)
    for field in INTEGER_FIELDS:
        set_bounded_integer(normalized, field, getattr(normalized, field))
    set_lcr_upper_limit(normalized, normalized.lcr_upper_limit)
    set_lcr_average_dra_pd(normalized, normalized.lcr_average_dra_pd)
    for curve_id, shocks in normalized.rate_shock_curves.items():
        for year_index, value in enumerate(shocks):
            set_curve_point(normalized, curve_id, year_index, value)
    return normalized
