"""
ALM Params: Application Settings

This module provides centralised settings management for the parameter
editor tooling. Settings are loaded from environment variables
(optionally via a .env file), with strongly typed access via Pydantic
BaseSettings.

Key responsibilities:
- Load and validate application settings from environment variables
- Provide typed settings for the parameter file location, setter policy
  and logging
- Expose a cached global settings accessor for convenience

External dependencies:
- pydantic: Data validation and settings management
- pydantic-settings: Environment variable integration for settings
- python-dotenv: Optional .env loading for local development

Thread safety: Thread-safe (settings are immutable after initial load)

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

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# ============================================================================
# Data Models
# ============================================================================


class LoggingConfig(BaseModel):
    """Logging configuration.

    Attributes:
        level: Log level name (e.g. "INFO", "DEBUG").
        file: Path to the log file. An empty string disables file output.
    """

    level: str = "INFO"
    file: str = "alm_params.log"


class AlmParamsConfig(BaseSettings):
    """Main application settings loaded from environment variables.

    Environment variables:

    - ALM_PARAMS_FILE: path of the parameter document (``data.json``)
    - ALM_STRICT_SETTERS: reject out-of-range setter input instead of
      clamping it
    - ALM_FALLBACK_TO_DEFAULTS: substitute the default configuration when
      the parameter document cannot be loaded
    - LOG_LEVEL / LOG_FILE for logging
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
    )

    params_file: str = Field(default="data.json", alias="ALM_PARAMS_FILE")
    strict_setters: bool = Field(default=False, alias="ALM_STRICT_SETTERS")
    fallback_to_defaults: bool = Field(default=True, alias="ALM_FALLBACK_TO_DEFAULTS")

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: str = Field(default="alm_params.log", alias="LOG_FILE")

    @property
    def params_path(self) -> Path:
        """Return the parameter document location as a :class:`Path`."""

        return Path(self.params_file)

    @property
    def logging(self) -> LoggingConfig:
        """Return logging configuration."""

        return LoggingConfig(level=self.log_level, file=self.log_file)


# ============================================================================
# Public API
# ============================================================================


def load_config(env_file: Optional[Path] = None) -> AlmParamsConfig:
    """Load application settings.

    For local development this function will attempt to load a `.env` file
    from the current working directory if one is present. Environment
    variables always take precedence over values from `.env`.

    Args:
        env_file: Optional explicit path to a `.env` file. If omitted,
            the function will look for `.env` in the current working
            directory.

    Returns:
        A fully populated :class:`AlmParamsConfig` instance.

    Raises:
        FileNotFoundError: If an explicit ``env_file`` is provided but
            does not exist.
    """

    if env_file is not None:
        if not env_file.exists():
            msg = f"Environment file not found: {env_file}"
            raise FileNotFoundError(msg)
        # An explicit env file wins over the current environment so that
        # tests and local runs can reliably control settings.
        load_dotenv(env_file, override=True)
    else:
        default_env = Path(".env")
        if default_env.exists():
            load_dotenv(default_env)

    return AlmParamsConfig()  # type: ignore[call-arg]


_global_config: Optional[AlmParamsConfig] = None


def get_config() -> AlmParamsConfig:
    """Return the global settings singleton.

    The settings are loaded on first access and cached for subsequent
    calls.

    Returns:
        A cached :class:`AlmParamsConfig` instance.
    """

    global _global_config
    if _global_config is None:
        _global_config = load_config()
    return _global_config
