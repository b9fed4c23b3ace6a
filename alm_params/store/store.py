"""
ALM Params: Configuration Store

This module reads and writes the parameter document and provides
:class:`ConfigurationStore`, the editing session that owns one
:class:`~alm_params.model.configuration.Configuration` between a load and
a save.

Key responsibilities:
- Load a document into a validated configuration, mapping every failure
  onto the :mod:`alm_params.core.errors` hierarchy
- Save a configuration atomically (temporary file, then rename)
- Apply the configured fallback policy when a document cannot be loaded
- Route every edit through :mod:`alm_params.model.rules` and track
  unsaved changes with a dirty flag

External dependencies:
- pydantic: Validation errors raised while parsing documents

Thread safety: Not thread-safe. A store is owned by a single editing
session; concurrent writers to the same file are not detected (last
writer wins).

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

import os
import shutil
import tempfile
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import ValidationError

from alm_params.core.config import AlmParamsConfig, get_config
from alm_params.core.errors import (
    ConfigFileNotFoundError,
    ConfigIOError,
    ConfigParseError,
    ConfigStoreError,
)
from alm_params.core.logging import get_logger
from alm_params.model import rules
from alm_params.model.configuration import Configuration, default_configuration, parse, serialize
from alm_params.model.enums import AssumptionProfile, Environment, IncludedOrExcluded, Optimizer

logger = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

# ============================================================================
# Document I/O
# ============================================================================


def describe_validation_error(exc: ValidationError) -> List[str]:
    """Return one ``location: message`` line per error in ``exc``."""

    problems: List[str] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<document>"
        problems.append(f"{location}: {error['msg']}")
    return problems


def parse_document(text: str, source: str = "<string>") -> Configuration:
    """Parse ``text`` into a configuration, raising :class:`ConfigParseError`."""

    try:
        return parse(text)
    except ValidationError as exc:
        raise ConfigParseError(f"Invalid parameter document {source}", describe_validation_error(exc)) from exc


def load(path: PathLike) -> Configuration:
    """Read and parse the parameter document at ``path``.

    Raises:
        ConfigFileNotFoundError: If ``path`` does not exist.
        ConfigIOError: If ``path`` exists but cannot be read.
        ConfigParseError: If the content is not valid UTF-8 JSON or does
            not describe a valid configuration (including unknown or
            wrongly cased enum tokens and non-conforming curves).
    """

    path = Path(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError as exc:
        raise ConfigFileNotFoundError(f"Parameter file not found: {path}") from exc
    except OSError as exc:
        raise ConfigIOError(f"Cannot read parameter file {path}: {exc}") from exc

    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ConfigParseError(f"Parameter file {path} is not valid UTF-8") from exc

    config = parse_document(text, str(path))
    logger.info("Loaded parameters from %s", path)

    for violation in rules.find_range_violations(config):
        logger.warning("%s: %s", path, violation)

    return config


def save(config: Configuration, path: PathLike) -> Path:
    """Write ``config`` to ``path``, replacing any existing document.

    The document is written to a temporary file in the same directory and
    renamed over the target, so readers never observe a partial file.
    The permission bits of an existing target are preserved.

    Returns:
        The path written.

    Raises:
        ConfigIOError: If the document cannot be written. The target is
            left unchanged and no temporary file remains.
    """

    path = Path(path)
    text = serialize(config)
    tmp_name: Optional[str] = None

    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if path.exists():
            shutil.copymode(path, tmp_name)
        else:
            os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            try:
                os.unlink(tmp_name)
            except OSError:
                logger.warning("Could not remove temporary file %s", tmp_name)
        raise ConfigIOError(f"Cannot write parameter file {path}: {exc}") from exc

    logger.info("Saved parameters to %s", path)
    return path


# ============================================================================
# Editing session
# ============================================================================


class ConfigurationStore:
    """Editing session around a single parameter document.

    The store owns ``config`` for the lifetime of the session. All
    setters delegate to :mod:`alm_params.model.rules` with the store's
    ``strict`` policy and mark the session dirty on success; a
    successful :meth:`save` clears the flag. A failed save leaves both
    the configuration and the flag untouched so the caller can retry.

    Args:
        path: Document location. Defaults to ``ALM_PARAMS_FILE``.
        config: Initial configuration. Defaults to the built-in default.
        strict: Reject out-of-range setter input instead of clamping.
            Defaults to ``ALM_STRICT_SETTERS``.
        settings: Application settings; the global settings when omitted.
    """

    def __init__(
        self,
        path: Optional[PathLike] = None,
        config: Optional[Configuration] = None,
        *,
        strict: Optional[bool] = None,
        settings: Optional[AlmParamsConfig] = None,
    ) -> None:
        settings = settings if settings is not None else get_config()
        self.path = Path(path) if path is not None else settings.params_path
        self.strict = settings.strict_setters if strict is None else strict
        self.fallback_to_defaults = settings.fallback_to_defaults
        self.config = config if config is not None else default_configuration()
        self.dirty = False
        self.last_load_error: Optional[ConfigStoreError] = None

    @classmethod
    def open(
        cls,
        path: Optional[PathLike] = None,
        *,
        strict: Optional[bool] = None,
        settings: Optional[AlmParamsConfig] = None,
    ) -> "ConfigurationStore":
        """Create a store and load its document per the fallback policy."""

        store = cls(path, strict=strict, settings=settings)
        store.reload()
        return store

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def load(self) -> Configuration:
        """Load the document, propagating any :class:`ConfigStoreError`."""

        self.config = load(self.path)
        self.dirty = False
        self.last_load_error = None
        return self.config

    def load_or_default(self) -> Tuple[Configuration, Optional[ConfigStoreError]]:
        """Load the document, substituting the default configuration on failure.

        Returns:
            The active configuration and the error that forced the
            fallback (``None`` when the document loaded).
        """

        try:
            return self.load(), None
        except ConfigStoreError as exc:
            logger.warning("Could not load %s (%s); using default parameters", self.path, exc)
            self.config = default_configuration()
            self.dirty = False
            self.last_load_error = exc
            return self.config, exc

    def reload(self) -> Configuration:
        """Load using the session's fallback policy."""

        if self.fallback_to_defaults:
            config, _ = self.load_or_default()
            return config
        return self.load()

    def save(self) -> Path:
        written = save(self.config, self.path)
        self.dirty = False
        return written

    def range_violations(self) -> List[str]:
        return rules.find_range_violations(self.config)

    def normalize(self) -> None:
        """Clamp every bounded value of the session's configuration into range."""

        normalized = rules.normalize_configuration(self.config)
        if normalized != self.config:
            self.config = normalized
            self.dirty = True

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def _changed(self, result):
        self.dirty = True
        return result

    def set_bounded_integer(
        self,
        field: str,
        value: int,
        minimum: Optional[int] = None,
        maximum: Optional[int] = None,
    ) -> int:
        return self._changed(
            rules.set_bounded_integer(self.config, field, value, minimum, maximum, strict=self.strict)
        )

    def set_stage_count(self, value: int) -> int:
        return self.set_bounded_integer("stage_count", value)

    def set_step_size_months(self, value: int) -> int:
        return self.set_bounded_integer("step_size_months", value)

    def set_delta_nii_horizon_months(self, value: int) -> int:
        return self.set_bounded_integer("delta_nii_horizon_months", value)

    def set_liquidity_floor(self, currency: str, value: int) -> int:
        return self._changed(rules.set_liquidity_floor(self.config, currency, value, strict=self.strict))

    def set_lcr_lower_limit(self, value: float) -> Tuple[float, float]:
        return self._changed(rules.set_lcr_lower_limit(self.config, value, strict=self.strict))

    def set_lcr_upper_limit(self, value: float) -> Tuple[float, float]:
        return self._changed(rules.set_lcr_upper_limit(self.config, value, strict=self.strict))

    def set_lcr_average_dra_pd(self, value: float) -> float:
        return self._changed(rules.set_lcr_average_dra_pd(self.config, value, strict=self.strict))

    def set_curve_point(self, curve_id: str, year_index: int, value: int) -> int:
        return self._changed(rules.set_curve_point(self.config, curve_id, year_index, value, strict=self.strict))

    def set_date(self, field: str, value: Union[date, str]) -> date:
        return self._changed(rules.set_date(self.config, field, value))

    def set_reports_folder(self, value: str) -> str:
        return self._changed(rules.set_reports_folder(self.config, value))

    def set_environment(self, value: Union[Environment, str]) -> Environment:
        return self._changed(rules.set_choice(self.config, "environment", value))

    def set_assumption_profile(self, value: Union[AssumptionProfile, str]) -> AssumptionProfile:
        return self._changed(rules.set_choice(self.config, "assumption_profile", value))

    def set_optimizer(self, value: Union[Optimizer, str]) -> Optimizer:
        return self._changed(rules.set_choice(self.config, "optimizer", value))

    def set_fwd_start_swap(self, value: Union[IncludedOrExcluded, str]) -> IncludedOrExcluded:
        return self._changed(rules.set_choice(self.config, "fwd_start_swap", value))

    def set_flag(self, field: str, value: bool) -> bool:
        return self._changed(rules.set_flag(self.config, field, value))
