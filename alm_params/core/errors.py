"""
ALM Params: Error Hierarchy

All failures raised by the model and store layers derive from
:class:`ConfigStoreError` so that callers can apply a single fallback
policy (see :meth:`alm_params.store.store.ConfigurationStore.load_or_default`).

Key responsibilities:
- Distinguish a missing document, an I/O failure and an invalid document
- Carry the per-field problems found while parsing a document
- Report rejected setter input, including out-of-range values

External dependencies:
- None (standard library only)

Thread safety: Thread-safe (exception classes hold no shared state)

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

from typing import Sequence


class ConfigStoreError(Exception):
    """Base class for parameter document and setter failures."""


class ConfigFileNotFoundError(ConfigStoreError, FileNotFoundError):
    """Raised when the parameter document does not exist."""


class ConfigIOError(ConfigStoreError):
    """Raised when the parameter document cannot be read or written."""


class ConfigParseError(ConfigStoreError):
    """Raised when a document is not valid JSON or does not match the schema.

    Attributes:
        problems: One human-readable line per offending field.
    """

    def __init__(self, message: str, problems: Sequence[str] = ()) -> None:
        super().__init__(message)
        self.problems = list(problems)

    def __str__(self) -> str:
        base = super().__str__()
        if not self.problems:
            return base
        return base + ": " + "; ".join(self.problems)


class ConfigValidationError(ConfigStoreError):
    """Raised when a setter rejects its input."""


class OutOfRangeError(ConfigValidationError):
    """Raised by strict setters for a value outside the field's bounds."""

    def __init__(self, field: str, value: object, minimum: object, maximum: object) -> None:
        super().__init__(f"{field}={value!r} outside [{minimum}, {maximum}]")
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
