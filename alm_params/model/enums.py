"""
ALM Params: Enumerated Parameter Values

This module defines the enumerations stored in the parameter document.
Each enum value is the exact token written to the document. The token
casing differs per enum (upper case, upper case with a space, lower
case) and must be preserved verbatim, because the downstream ALM model
matches tokens case-sensitively.

Key responsibilities:
- Define the environment, assumption profile, optimizer and inclusion
  switch enums with their wire tokens
- Map each member to the display label used by the command-line tools
- Resolve a string to a member without any case folding

External dependencies:
- None (standard library only)

Thread safety: Thread-safe (module-level tables are never mutated)

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

from enum import Enum
from typing import Dict, Type, TypeVar, Union


# ============================================================================
# Enumerations
# ============================================================================


class Environment(str, Enum):
    """Deployment environment the ALM model runs against."""

    PRODUCTION = "PRODUCTION"
    DEVELOPMENT = "DEVELOPMENT"
    TESTING = "TESTING"


class AssumptionProfile(str, Enum):
    """Named bundle of modelling assumptions."""

    BASE_CASE = "BASE CASE"
    SCENARIO_1 = "SCENARIO 1"
    SCENARIO_2 = "SCENARIO 2"
    SCENARIO_3 = "SCENARIO 3"


class Optimizer(str, Enum):
    """Solver backend used by the ALM model."""

    HIGHS = "highs"
    CBC = "cbc"
    GUROBI = "gurobi"


class IncludedOrExcluded(str, Enum):
    """Inclusion switch (used for forward-starting swaps)."""

    INCLUDED = "included"
    EXCLUDED = "excluded"


# ============================================================================
# Labels and token lookup
# ============================================================================

_LABELS: Dict[Enum, str] = {
    Environment.PRODUCTION: "Production",
    Environment.DEVELOPMENT: "Development",
    Environment.TESTING: "Testing",
    AssumptionProfile.BASE_CASE: "Base Case",
    AssumptionProfile.SCENARIO_1: "Scenario 1",
    AssumptionProfile.SCENARIO_2: "Scenario 2",
    AssumptionProfile.SCENARIO_3: "Scenario 3",
    Optimizer.HIGHS: "Highs",
    Optimizer.CBC: "CBC",
    Optimizer.GUROBI: "Gurobi",
    IncludedOrExcluded.INCLUDED: "Included",
    IncludedOrExcluded.EXCLUDED: "Excluded",
}


ParamEnum = Union[Environment, AssumptionProfile, Optimizer, IncludedOrExcluded]
E = TypeVar("E", Environment, AssumptionProfile, Optimizer, IncludedOrExcluded)


def display_label(member: ParamEnum) -> str:
    """Return the human-friendly label for ``member``."""

    return _LABELS[member]


def from_token(enum_cls: Type[E], value: Union[E, str]) -> E:
    """Resolve ``value`` to a member of ``enum_cls``.

    Members pass through unchanged; strings must match a wire token
    exactly (``"GUROBI"`` is not an :class:`Optimizer`). Raises
    ``ValueError`` listing the accepted tokens otherwise.
    """

    if isinstance(value, enum_cls):
        return value
    for member in enum_cls:
        if member.value == value:
            return member
    accepted = ", ".join(repr(m.value) for m in enum_cls)
    raise ValueError(f"{value!r} is not a valid {enum_cls.__name__} token (expected one of {accepted})")
