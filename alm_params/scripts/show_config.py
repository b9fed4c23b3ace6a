"""ALM Params – show a parameter document.

Prints the parameter document after validating it, followed by any
values that lie outside their editable range.

Typical uses::

    # Print the document configured by ALM_PARAMS_FILE (data.json)
    python -m alm_params.scripts.show_config

    # Print a labelled listing of a specific file
    python -m alm_params.scripts.show_config --file runs/data.json --labels
"""

from __future__ import annotations

import argparse
from enum import Enum
from typing import Optional, Sequence

from alm_params.core.config import get_config
from alm_params.core.errors import ConfigStoreError
from alm_params.core.logging import get_logger
from alm_params.model.configuration import Configuration, serialize
from alm_params.model.enums import display_label
from alm_params.model.rules import find_range_violations
from alm_params.store.store import load


logger = get_logger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Validate and print an ALM parameter document",
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Parameter document to read (default: ALM_PARAMS_FILE or data.json)",
    )
    parser.add_argument(
        "--labels",
        action="store_true",
        help="Print one 'field: value' line per parameter instead of JSON",
    )
    return parser.parse_args(argv)


def format_labels(config: Configuration) -> str:
    """Return a ``field: value`` listing with display labels for enums."""

    lines = []
    for field in Configuration.model_fields:
        if field == "rate_shock_curves":
            continue
        value = getattr(config, field)
        if isinstance(value, Enum):
            shown = display_label(value)  # type: ignore[arg-type]
        else:
            shown = str(value)
        lines.append(f"{field}: {shown}")
    for curve_id, shocks in config.rate_shock_curves.items():
        lines.append(f"{curve_id}: {' '.join(str(v) for v in shocks)}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    path = args.file if args.file is not None else get_config().params_file

    try:
        config = load(path)
    except ConfigStoreError as exc:
        logger.error("%s", exc)
        return 1

    if args.labels:
        print(format_labels(config))
    else:
        print(serialize(config), end="")

    violations = find_range_violations(config)
    if violations:
        print()
        print("Out-of-range values:")
        for violation in violations:
            print(f"  {violation}")
    return 0


if __name__ == "__main__":  # pragma: no cover - manual CLI entry
    raise SystemExit(main())
