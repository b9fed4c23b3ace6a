"""
ALM Params: Tests for Enums and Bounds

Test suite for ``alm_params.model.enums`` and ``alm_params.model.bounds``.
Covers:
- The exact wire token table
- Case-sensitive token resolution
- Clamp semantics
"""

from __future__ import annotations

import pytest

from alm_params.model import bounds
from alm_params.model.bounds import Bounds, clamp
from alm_params.model.enums import (
    AssumptionProfile,
    Environment,
    IncludedOrExcluded,
    Optimizer,
    display_label,
    from_token,
)


class TestWireTokens:
    """The wire tokens are a compatibility contract and must not drift."""

    def test_environment_tokens(self) -> None:
        assert [e.value for e in Environment] == ["PRODUCTION", "DEVELOPMENT", "TESTING"]

    def test_assumption_profile_tokens(self) -> None:
        assert [p.value for p in AssumptionProfile] == ["BASE CASE", "SCENARIO 1", "SCENARIO 2", "SCENARIO 3"]

    def test_optimizer_tokens(self) -> None:
        assert [o.value for o in Optimizer] == ["highs", "cbc", "gurobi"]

    def test_included_or_excluded_tokens(self) -> None:
        assert [s.value for s in IncludedOrExcluded] == ["included", "excluded"]

    def test_display_labels(self) -> None:
        assert display_label(AssumptionProfile.BASE_CASE) == "Base Case"
        assert display_label(Optimizer.CBC) == "CBC"
        assert display_label(Optimizer.HIGHS) == "Highs"
        assert display_label(Environment.TESTING) == "Testing"
        assert display_label(IncludedOrExcluded.EXCLUDED) == "Excluded"


class TestFromToken:
    def test_resolves_exact_token(self) -> None:
        assert from_token(Optimizer, "gurobi") is Optimizer.GUROBI
        assert from_token(AssumptionProfile, "SCENARIO 2") is AssumptionProfile.SCENARIO_2

    def test_member_passes_through(self) -> None:
        assert from_token(Environment, Environment.DEVELOPMENT) is Environment.DEVELOPMENT

    @pytest.mark.parametrize(
        "enum_cls, token",
        [
            (Optimizer, "GUROBI"),
            (Optimizer, "Highs"),
            (Environment, "production"),
            (AssumptionProfile, "Base Case"),
            (AssumptionProfile, "BASE_CASE"),
            (IncludedOrExcluded, "INCLUDED"),
        ],
    )
    def test_rejects_wrong_case_or_spelling(self, enum_cls, token) -> None:
        with pytest.raises(ValueError, match="not a valid"):
            from_token(enum_cls, token)


class TestClamp:
    @pytest.mark.parametrize(
        "value, expected",
        [(-10**9, 1), (0, 1), (1, 1), (3, 3), (4, 4), (5, 4), (10**9, 4)],
    )
    def test_clamp_matches_min_max_formula(self, value: int, expected: int) -> None:
        assert clamp(value, 1, 4) == expected == max(1, min(value, 4))

    def test_empty_range_raises(self) -> None:
        with pytest.raises(ValueError):
            clamp(5, 10, 1)

    def test_bounds_contains_is_inclusive(self) -> None:
        limits = Bounds(100.0, 300.0)

        assert limits.contains(100.0)
        assert limits.contains(300.0)
        assert not limits.contains(99.99)
        assert limits.clamp(350.0) == 300.0

    def test_declared_ranges(self) -> None:
        assert (bounds.STAGE_COUNT.minimum, bounds.STAGE_COUNT.maximum) == (1, 4)
        assert (bounds.STEP_SIZE_MONTHS.minimum, bounds.STEP_SIZE_MONTHS.maximum) == (1, 6)
        assert (bounds.LCR_LIMIT.minimum, bounds.LCR_LIMIT.maximum) == (100.0, 300.0)
        assert (bounds.LCR_AVERAGE_DRA_PD.minimum, bounds.LCR_AVERAGE_DRA_PD.maximum) == (0.0, 50.0)
        assert bounds.TREASURY_LIQUIDITY_FLOOR.minimum == 1_000_000
        assert bounds.TREASURY_LIQUIDITY_FLOOR.maximum == 100_000_000
        assert (bounds.DELTA_NII_HORIZON_MONTHS.minimum, bounds.DELTA_NII_HORIZON_MONTHS.maximum) == (1, 36)
        assert (bounds.SHOCK_BPS.minimum, bounds.SHOCK_BPS.maximum) == (-500, 500)
