"""ALM Params – migrate a legacy parameter document.

Earlier editor revisions stored each rate shock curve as a growable list
of 1-10 unbounded shocks. This script converts such a document to the
fixed 10-year format (see :func:`alm_params.model.curves.migrate_legacy_curves`),
validates the result and writes it out.

Typical uses::

    # Migrate in place
    python -m alm_params.scripts.migrate_curves --file data.json

    # Keep the original and write the migrated copy elsewhere
    python -m alm_params.scripts.migrate_curves --file old.json --output data.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Optional, Sequence

from alm_params.core.errors import ConfigIOError, ConfigParseError, ConfigStoreError
from alm_params.core.logging import get_logger
from alm_params.model.configuration import Configuration
from alm_params.model.curves import is_legacy_document, migrate_legacy_document
from alm_params.store.store import parse_document, save


logger = get_logger(__name__)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Convert a legacy variable-length curve document to the fixed-length format",
    )
    parser.add_argument("--file", type=Path, required=True, help="Legacy parameter document")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination (default: overwrite --file)",
    )
    return parser.parse_args(argv)


def migrate_file(source: Path, destination: Optional[Path] = None) -> Configuration:
    """Migrate ``source`` and save it to ``destination`` (or in place).

    Raises:
        ConfigIOError: If ``source`` cannot be read or the result cannot
            be written.
        ConfigParseError: If ``source`` is not a JSON object, holds a
            curve that is not a list of integers, or the migrated
            document is still invalid.
    """

    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigIOError(f"Cannot read parameter file {source}: {exc}") from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(f"Parameter file {source} is not valid JSON", [str(exc)]) from exc
    if not isinstance(raw, dict):
        raise ConfigParseError(f"Parameter file {source} does not hold a JSON object")

    if not is_legacy_document(raw):
        logger.info("%s already uses fixed-length curves", source)

    migrated = migrate_legacy_document(raw)
    config = parse_document(json.dumps(migrated), str(source))
    save(config, destination if destination is not None else source)
    return config


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parse_args(argv)
    try:
        migrate_file(args.file, args.output)
    except ConfigStoreError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover - manual CLI entry
    raise SystemExit(main())
