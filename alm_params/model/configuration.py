"""
ALM Params: Configuration Record

This module defines :class:`Configuration`, the single record persisted
to the parameter document consumed by the ALM Dynamic Model, together
with its default constructor and the JSON (de)serialisation helpers.

The record maps one-to-one onto the document. Attribute names are
descriptive; the JSON keys (aliases) are the ones existing documents use
and must not change. Parsing is strict: every key must be present,
integers must be JSON integers, LCR values must be finite, enum values
must match their wire tokens exactly, and every curve must be in the
fixed-length format. Numeric ranges are deliberately *not* enforced on
parse because the compiled-in default places the LCR pair outside its
editable range; see :mod:`alm_params.model.rules` for range checking and
the clamping setters.

Key responsibilities:
- Declare the configuration fields, wire keys and built-in defaults
- Validate documents (types, tokens, curve shape, LCR ordering)
- Render a configuration as the pretty-printed document

External dependencies:
- pydantic: Model definition, strict parsing and serialisation

Thread safety: Not thread-safe. Configurations are mutable records owned
by a single editing session.

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

import json
from datetime import date
from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_serializer, field_validator, model_validator

from alm_params.core.types import RawDocument
from alm_params.model.curves import CURVES_WIRE_KEY, check_fixed_curves, default_curves
from alm_params.model.enums import AssumptionProfile, Environment, IncludedOrExcluded, Optimizer


# ============================================================================
# Configuration record
# ============================================================================


class Configuration(BaseModel):
    """Parameters of one ALM Dynamic Model run.

    Attributes:
        stage_count: Number of optimisation stages (1-4).
        step_size_months: Length of one stage in months (1-6).
        base_date: Balance-sheet base date.
        start_date: First projection date. No ordering against
            ``base_date`` is enforced.
        reports_folder: Output folder for model reports.
        environment: Deployment environment token.
        assumption_profile: Assumption bundle token.
        optimizer: Solver backend token.
        fwd_start_swap: Whether forward-starting swaps are modelled.
        lcr_lower_limit: Lower LCR limit in percent; never above
            ``lcr_upper_limit``.
        lcr_upper_limit: Upper LCR limit in percent.
        lcr_average_dra_pd: USD treasury liquidity as percent of total
            assets (0-50).
        mxn_treasury_liquidity_floor: MXN treasury liquidity floor in USD.
        cop_treasury_liquidity_floor: COP treasury liquidity floor in USD.
        brl_treasury_liquidity_floor: BRL treasury liquidity floor in USD.
        require_annual_benchmark: Funding gap benchmark switch.
        must_borrow_benchmark_in_first_year: Funding gap benchmark switch.
        delta_nii_horizon_months: NII sensitivity horizon (1-36).
        rate_shock_curves: Curve identifier -> one shock (bps) per year.
    """

    model_config = ConfigDict(
        strict=True,
        populate_by_name=True,
        validate_assignment=True,
        extra="ignore",
    )

    # Model
    stage_count: int = Field(default=2, alias="n_stages")
    step_size_months: int = 4
    base_date: date = date(2020, 1, 1)
    start_date: date = date(2025, 1, 1)
    reports_folder: str = "Reports"
    environment: Environment = Environment.PRODUCTION
    assumption_profile: AssumptionProfile = AssumptionProfile.BASE_CASE
    optimizer: Optimizer = Optimizer.HIGHS
    fwd_start_swap: IncludedOrExcluded = IncludedOrExcluded.INCLUDED

    # Liquidity risk
    lcr_lower_limit: float = Field(default=0.0, allow_inf_nan=False)
    lcr_upper_limit: float = Field(default=100.0, allow_inf_nan=False)
    lcr_average_dra_pd: float = Field(default=0.02, allow_inf_nan=False)
    mxn_treasury_liquidity_floor: int = Field(default=1_000_000, alias="MXN_treasury_liquidity_floor")
    cop_treasury_liquidity_floor: int = Field(default=1_500_000, alias="COP_treasury_liquidity_floor")
    brl_treasury_liquidity_floor: int = Field(default=10_000_000, alias="BRL_treasury_liquidity_floor")

    # Funding gap
    require_annual_benchmark: bool = False
    must_borrow_benchmark_in_first_year: bool = False

    # Interest rate risk
    delta_nii_horizon_months: int = 12
    rate_shock_curves: Dict[str, List[int]] = Field(default_factory=default_curves, alias=CURVES_WIRE_KEY)

    @model_validator(mode="before")
    @classmethod
    def _require_document_keys(cls, data: Any, info: ValidationInfo) -> Any:
        # Defaults fill in only for records built in code, never for documents.
        if not isinstance(data, dict) or not (info.context or {}).get("document"):
            return data
        keys = [field.alias or name for name, field in cls.model_fields.items()]
        missing = [key for key in keys if key not in data]
        if missing:
            raise ValueError(f"missing keys: {', '.join(missing)}")
        return data

    @field_validator("lcr_lower_limit", "lcr_upper_limit", "lcr_average_dra_pd")
    @classmethod
    def _as_float(cls, value: float) -> float:
        return float(value)

    @field_validator("rate_shock_curves")
    @classmethod
    def _check_curves(cls, value: Dict[str, List[int]]) -> Dict[str, List[int]]:
        problems = check_fixed_curves(value)
        if problems:
            raise ValueError("; ".join(problems))
        return {curve_id: list(value[curve_id]) for curve_id in sorted(value)}

    @model_validator(mode="after")
    def _check_lcr_order(self) -> "Configuration":
        if self.lcr_lower_limit > self.lcr_upper_limit:
            raise ValueError(
                f"lcr_lower_limit ({self.lcr_lower_limit}) exceeds lcr_upper_limit ({self.lcr_upper_limit})"
            )
        return self

    @field_serializer("rate_shock_curves")
    def _serialize_curves(self, value: Dict[str, List[int]]) -> Dict[str, List[int]]:
        return {curve_id: list(value[curve_id]) for curve_id in sorted(value)}


# ============================================================================
# Document helpers
# ============================================================================


def default_configuration() -> Configuration:
    """Return a fully populated configuration with the built-in defaults."""

    return Configuration()


def to_document(config: Configuration) -> RawDocument:
    """Return ``config`` as a JSON-ready dict keyed by wire names."""

    return config.model_dump(mode="json", by_alias=True)


def serialize(config: Configuration) -> str:
    """Render ``config`` as the pretty-printed parameter document."""

    return json.dumps(to_document(config), indent=2, ensure_ascii=False) + "\n"


def parse(text: str) -> Configuration:
    """Parse a parameter document.

    Raises:
        pydantic.ValidationError: If ``text`` is not valid JSON or does
            not describe a valid :class:`Configuration`.
    """

    return Configuration.model_validate_json(text, context={"document": True})
