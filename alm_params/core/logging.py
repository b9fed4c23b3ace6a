"""
ALM Params: Logging Setup

This module provides centralised logging configuration and a helper for
obtaining namespaced loggers.

Key responsibilities:
- Configure root logging handlers and formats
- Provide a helper to obtain module-specific loggers

External dependencies:
- logging: Python standard library logging framework

Thread safety: Thread-safe (logging module is process-global and
thread-safe under normal usage)

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

import logging
import sys
from typing import Optional

from alm_params.core.config import AlmParamsConfig, get_config

# ============================================================================
# Public API
# ============================================================================


def setup_logging(config: Optional[AlmParamsConfig] = None) -> None:
    """Configure application-wide logging.

    This function initialises the root logger and the ``alm_params``
    namespace logger. It is idempotent: calling it multiple times will not
    attach duplicate handlers.

    Args:
        config: Optional settings object. If omitted, the global settings
            will be loaded via :func:`get_config`.
    """

    if config is None:
        config = get_config()

    root_logger = logging.getLogger()

    # Avoid attaching duplicate handlers if setup_logging is called again.
    if root_logger.handlers:
        return

    log_level = getattr(logging, config.log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(log_level)

    package_logger = logging.getLogger("alm_params")
    package_logger.setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    """Return a namespaced logger for the given module.

    Args:
        name: Module-level ``__name__`` or any descriptive logger name.

    Returns:
        A :class:`logging.Logger` instance under the ``alm_params``
        namespace.
    """

    setup_logging()
    if name == "alm_params" or name.startswith("alm_params."):
        return logging.getLogger(name)
    return logging.getLogger(f"alm_params.{name}")
