"""
ALM Params: Rate Shock Curves

A rate shock curve pairs a named market curve with one basis-point shock
per modelled year. Two document formats exist:

- the current fixed-length format, where every curve carries exactly
  :data:`CURVE_HORIZON_YEARS` shocks, each within [-500, 500];
- the legacy growable format, where each curve holds between
  :data:`LEGACY_MIN_LENGTH` and :data:`LEGACY_MAX_LENGTH` unbounded shocks
  edited by appending or removing the last point.

The store only reads and writes the fixed-length format. Legacy documents
are converted explicitly with :func:`migrate_legacy_curves` (or
:func:`migrate_legacy_document` for a whole raw document).

Key responsibilities:
- Declare the curve vocabulary and the fixed-length default curves
- Check a curve mapping against the fixed-length format
- Edit legacy curves within their length bounds
- Migrate legacy curves and documents to the fixed-length format

External dependencies:
- None (standard library only)

Thread safety: Not thread-safe. The legacy editing helpers mutate the
mapping passed in; callers own that mapping.

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

from typing import Dict, List, Tuple

from alm_params.core.errors import ConfigParseError
from alm_params.core.logging import get_logger
from alm_params.core.types import CurveShocks, LegacyCurveShocks, RawDocument, ReadonlyCurveShocks
from alm_params.model.bounds import SHOCK_BPS

logger = get_logger(__name__)

# ============================================================================
# Curve vocabulary and fixed-length format
# ============================================================================

CURVE_HORIZON_YEARS = 10
DEFAULT_SHOCK_BPS = 100

LEGACY_MIN_LENGTH = 1
LEGACY_MAX_LENGTH = 10

# JSON key holding the curves in the parameter document.
CURVES_WIRE_KEY = "delta_nii_shocks_bps"

CURVE_IDS: Tuple[str, ...] = (
    "CURVE_USD_FED_FUNDS",
    "CURVE_TTD_LIBOR6M",
    "CURVE_USD_OVERNIGHTSOFR",
    "CURVE_USD_LIBOR1M",
    "CURVE_USD_LIBOR3M",
    "CURVE_USD_LIBOR6M",
    "CURVE_USD_LIBOR12M",
    "CURVE_MXN_TIIE28D",
    "CURVE_BRL_CDI",
    "CURVE_COP_OVIBR",
    "CURVE_USD_OIS",
    "CURVE_TTD_GORTT",
    "CURVE_PEN_V_USD6M",
    "CURVE_AUD_OIS",
    "CURVE_CLP_V_CAMARA",
    "CURVE_EUR_OIS",
)


def default_curves() -> CurveShocks:
    """Return a fresh fixed-length mapping seeded for every known curve."""

    return {curve_id: [DEFAULT_SHOCK_BPS] * CURVE_HORIZON_YEARS for curve_id in sorted(CURVE_IDS)}


def check_fixed_curves(curves: ReadonlyCurveShocks) -> List[str]:
    """Return a list of problems with ``curves`` in the fixed format.

    An empty list means every curve has exactly
    :data:`CURVE_HORIZON_YEARS` integer shocks within the shock bounds.
    Curve identifiers are not checked against :data:`CURVE_IDS`; documents
    written by newer revisions may carry additional curves.
    """

    problems: List[str] = []
    for curve_id, shocks in curves.items():
        if len(shocks) != CURVE_HORIZON_YEARS:
            problems.append(
                f"{curve_id}: expected {CURVE_HORIZON_YEARS} shocks, got {len(shocks)}"
            )
        for year, value in enumerate(shocks):
            if not SHOCK_BPS.contains(value):
                problems.append(
                    f"{curve_id}[{year}]: {value} outside [{SHOCK_BPS.minimum}, {SHOCK_BPS.maximum}]"
                )
    return problems


# ============================================================================
# Legacy growable format
# ============================================================================


def append_curve_point(
    curves: LegacyCurveShocks,
    curve_id: str,
    value: int = DEFAULT_SHOCK_BPS,
) -> bool:
    """Append ``value`` to a legacy curve.

    Returns False without changing anything when the curve already holds
    :data:`LEGACY_MAX_LENGTH` points. Raises ``KeyError`` for an unknown
    curve.
    """

    shocks = curves[curve_id]
    if len(shocks) >= LEGACY_MAX_LENGTH:
        return False
    shocks.append(int(value))
    return True


def remove_last_curve_point(curves: LegacyCurveShocks, curve_id: str) -> bool:
    """Drop the last point of a legacy curve.

    Returns False without changing anything when the curve is already at
    :data:`LEGACY_MIN_LENGTH`. Raises ``KeyError`` for an unknown curve.
    """

    shocks = curves[curve_id]
    if len(shocks) <= LEGACY_MIN_LENGTH:
        return False
    shocks.pop()
    return True


def migrate_legacy_curves(curves: ReadonlyCurveShocks) -> CurveShocks:
    """Convert legacy growable curves to the fixed-length format.

    Each sequence is truncated to :data:`CURVE_HORIZON_YEARS` or padded by
    repeating its last shock (the default shock when empty), and every
    shock is clamped into [-500, 500]. Curves are returned in sorted key
    order; the input is not modified.

    Raises:
        ConfigParseError: If a curve is not a list of integers.
    """

    migrated: Dict[str, List[int]] = {}
    for curve_id in sorted(curves):
        shocks = curves[curve_id]
        if not isinstance(shocks, list) or any(isinstance(v, bool) or not isinstance(v, int) for v in shocks):
            raise ConfigParseError(
                f"Legacy curve {curve_id} cannot be migrated",
                [f"{curve_id}: expected a list of integer shocks, got {shocks!r}"],
            )
        fixed = list(shocks[:CURVE_HORIZON_YEARS])
        fill = fixed[-1] if fixed else DEFAULT_SHOCK_BPS
        fixed.extend([fill] * (CURVE_HORIZON_YEARS - len(fixed)))
        migrated[curve_id] = [SHOCK_BPS.clamp(v) for v in fixed]
    return migrated


def is_legacy_document(raw: RawDocument) -> bool:
    """Return True if ``raw`` carries curves that are not fixed-length."""

    curves = raw.get(CURVES_WIRE_KEY)
    if not isinstance(curves, dict):
        return False
    return any(
        isinstance(shocks, list) and len(shocks) != CURVE_HORIZON_YEARS
        for shocks in curves.values()
    )


def migrate_legacy_document(raw: RawDocument) -> RawDocument:
    """Return a copy of ``raw`` with its curves in the fixed-length format.

    Other keys are copied unchanged. A document without a curve mapping is
    returned as a shallow copy.
    """

    migrated = dict(raw)
    curves = raw.get(CURVES_WIRE_KEY)
    if isinstance(curves, dict):
        migrated[CURVES_WIRE_KEY] = migrate_legacy_curves(curves)
        logger.info("Migrated %d legacy curves to %d-year format", len(curves), CURVE_HORIZON_YEARS)
    return migrated
