"""ALM Params – top-level package exports.

This module re-exports the configuration record, its enums and the
editing session for convenience.
"""

from alm_params.core.errors import (
    ConfigFileNotFoundError,
    ConfigIOError,
    ConfigParseError,
    ConfigStoreError,
    ConfigValidationError,
    OutOfRangeError,
)
from alm_params.model.configuration import Configuration, default_configuration
from alm_params.model.enums import AssumptionProfile, Environment, IncludedOrExcluded, Optimizer
from alm_params.store.store import ConfigurationStore, load, save
