"""ALM Params – edit a parameter document.

Loads a parameter document, applies the requested edits through the
store's setters and saves the result. Without ``--init`` an unreadable
document is handled per ``ALM_FALLBACK_TO_DEFAULTS``: either the default
parameters are edited instead (with a warning) or the command fails.

Typical uses::

    # Create a fresh document with default values
    python -m alm_params.scripts.edit_config --file data.json --init

    # Tighten the LCR band and switch solver
    python -m alm_params.scripts.edit_config --lcr-lower 120 --lcr-upper 180 --optimizer gurobi

    # Set the 3rd-year MXN TIIE shock and two liquidity floors
    python -m alm_params.scripts.edit_config \\
        --shock CURVE_MXN_TIIE28D:2=-150 --floor MXN=2000000 --floor BRL=5000000

Edits are applied in the order of the options listed by ``--help``; the
LCR coupling therefore sees ``--lcr-lower`` before ``--lcr-upper``.
"""

from __future__ import annotations

import argparse
from typing import List, Optional, Sequence, Tuple

from alm_params.core.errors import ConfigStoreError
from alm_params.core.logging import get_logger
from alm_params.model.enums import AssumptionProfile, Environment, IncludedOrExcluded, Optimizer
from alm_params.store.store import ConfigurationStore


logger = get_logger(__name__)


def _parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in ("true", "yes", "1"):
        return True
    if lowered in ("false", "no", "0"):
        return False
    raise argparse.ArgumentTypeError(f"Invalid boolean {value!r}, expected true or false")


def _parse_floor(value: str) -> Tuple[str, int]:
    try:
        currency, amount = value.split("=", 1)
        return currency.strip(), int(amount)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid floor {value!r}, expected CCY=AMOUNT") from exc


def _parse_shock(value: str) -> Tuple[str, int, int]:
    try:
        target, bps = value.split("=", 1)
        curve_id, year = target.rsplit(":", 1)
        return curve_id.strip(), int(year), int(bps)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid shock {value!r}, expected CURVE:YEAR=BPS") from exc


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit an ALM parameter document",
    )

    parser.add_argument("--file", type=str, default=None, help="Parameter document (default: ALM_PARAMS_FILE)")
    parser.add_argument("--init", action="store_true", help="Start from default parameters instead of loading")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject out-of-range values instead of clamping them",
    )
    parser.add_argument(
        "--normalize",
        action="store_true",
        help="Clamp every existing value into its range before applying edits",
    )

    parser.add_argument("--stage-count", type=int, default=None)
    parser.add_argument("--step-size-months", type=int, default=None)
    parser.add_argument("--base-date", type=str, default=None, help="YYYY-MM-DD")
    parser.add_argument("--start-date", type=str, default=None, help="YYYY-MM-DD")
    parser.add_argument("--reports-folder", type=str, default=None)
    parser.add_argument("--environment", choices=[e.value for e in Environment], default=None)
    parser.add_argument("--assumption-profile", choices=[p.value for p in AssumptionProfile], default=None)
    parser.add_argument("--optimizer", choices=[o.value for o in Optimizer], default=None)
    parser.add_argument("--fwd-start-swap", choices=[s.value for s in IncludedOrExcluded], default=None)
    parser.add_argument("--lcr-lower", type=float, default=None, help="LCR lower limit in percent")
    parser.add_argument("--lcr-upper", type=float, default=None, help="LCR upper limit in percent")
    parser.add_argument(
        "--lcr-average-dra-pd",
        type=float,
        default=None,
        help="USD treasury liquidity as percent of total assets",
    )
    parser.add_argument(
        "--floor",
        type=_parse_floor,
        action="append",
        default=[],
        help="Treasury liquidity floor in USD, e.g. MXN=2000000 (repeatable)",
    )
    parser.add_argument("--require-annual-benchmark", type=_parse_bool, default=None)
    parser.add_argument("--must-borrow-benchmark-in-first-year", type=_parse_bool, default=None)
    parser.add_argument("--nii-horizon-months", type=int, default=None)
    parser.add_argument(
        "--shock",
        type=_parse_shock,
        action="append",
        default=[],
        help="Curve shock in bps for a 0-based year, e.g. CURVE_BRL_CDI:0=200 (repeatable)",
    )

    return parser.parse_args(argv)


def apply_edits(store: ConfigurationStore, args: argparse.Namespace) -> List[str]:
    """Apply every edit present in ``args`` to ``store``.

    Returns:
        A description of each applied edit, in application order.
    """

    applied: List[str] = []

    def _record(name: str, result: object) -> None:
        applied.append(f"{name} -> {result}")

    if args.stage_count is not None:
        _record("stage_count", store.set_stage_count(args.stage_count))
    if args.step_size_months is not None:
        _record("step_size_months", store.set_step_size_months(args.step_size_months))
    if args.base_date is not None:
        _record("base_date", store.set_date("base_date", args.base_date))
    if args.start_date is not None:
        _record("start_date", store.set_date("start_date", args.start_date))
    if args.reports_folder is not None:
        _record("reports_folder", store.set_reports_folder(args.reports_folder))
    if args.environment is not None:
        _record("environment", store.set_environment(args.environment).value)
    if args.assumption_profile is not None:
        _record("assumption_profile", store.set_assumption_profile(args.assumption_profile).value)
    if args.optimizer is not None:
        _record("optimizer", store.set_optimizer(args.optimizer).value)
    if args.fwd_start_swap is not None:
        _record("fwd_start_swap", store.set_fwd_start_swap(args.fwd_start_swap).value)
    if args.lcr_lower is not None:
        _record("lcr_limits", store.set_lcr_lower_limit(args.lcr_lower))
    if args.lcr_upper is not None:
        _record("lcr_limits", store.set_lcr_upper_limit(args.lcr_upper))
    if args.lcr_average_dra_pd is not None:
        _record("lcr_average_dra_pd", store.set_lcr_average_dra_pd(args.lcr_average_dra_pd))
    for currency, amount in args.floor:
        _record(f"{currency.upper()}_treasury_liquidity_floor", store.set_liquidity_floor(currency, amount))
    if args.require_annual_benchmark is not None:
        _record(
            "require_annual_benchmark",
            store.set_flag("require_annual_benchmark", args.require_annual_benchmark),
        )
    if args.must_borrow_benchmark_in_first_year is not None:
        _record(
            "must_borrow_benchmark_in_first_year",
            store.set_flag("must_borrow_benchmark_in_first_year", args.must_borrow_benchmark_in_first_year),
        )
    if args.nii_horizon_months is not None:
        _record("delta_nii_horizon_months", store.set_delta_nii_horizon_months(args.nii_horizon_months))
    for curve_id, year, bps in args.shock:
        _record(f"{curve_id}[{year}]", store.set_curve_point(curve_id, year, bps))

    return applied


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)

    store = ConfigurationStore(args.file, strict=args.strict)
    try:
        if not args.init:
            store.reload()
        else:
            store.dirty = True
        if args.normalize:
            store.normalize()
        for line in apply_edits(store, args):
            logger.info("Set %s", line)
        if store.dirty:
            store.save()
        else:
            logger.info("No changes to save")
    except ConfigStoreError as exc:
        logger.error("%s", exc)
        return 1

    return 0


if __name__ == "__main__":  # pragma: no cover - manual CLI entry
    raise SystemExit(main())
