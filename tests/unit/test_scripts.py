"""
ALM Params: Tests for Command-Line Tools

Test suite for ``alm_params.scripts``. Covers:
- show_config output and error exit codes
- edit_config argument parsing, edit ordering and saving
- migrate_curves conversion of legacy documents
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest

from alm_params.model.configuration import default_configuration, serialize, to_document
from alm_params.model.enums import AssumptionProfile, Environment, Optimizer
from alm_params.scripts import edit_config, migrate_curves, show_config
from alm_params.store.store import load, save


@pytest.fixture
def params_file(tmp_path: Path) -> Path:
    path = tmp_path / "data.json"
    save(default_configuration(), path)
    return path


class TestShowConfig:
    def test_prints_document_and_violations(self, params_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert show_config.main(["--file", str(params_file)]) == 0

        out = capsys.readouterr().out
        assert out.startswith(serialize(default_configuration()))
        assert "Out-of-range values:" in out
        assert "lcr_lower_limit=0.0" in out

    def test_labels_use_display_names(self, params_file: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert show_config.main(["--file", str(params_file), "--labels"]) == 0

        out = capsys.readouterr().out
        assert "assumption_profile: Base Case" in out
        assert "optimizer: Highs" in out
        assert "CURVE_EUR_OIS: " + " ".join(["100"] * 10) in out

    def test_missing_file_exits_with_error(self, tmp_path: Path) -> None:
        assert show_config.main(["--file", str(tmp_path / "missing.json")]) == 1


class TestEditConfig:
    def test_init_writes_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"

        assert edit_config.main(["--file", str(path), "--init"]) == 0

        assert path.read_text(encoding="utf-8") == serialize(default_configuration())

    def test_applies_edits_and_saves(self, params_file: Path) -> None:
        argv = [
            "--file", str(params_file),
            "--stage-count", "3",
            "--step-size-months", "2",
            "--base-date", "2024-12-31",
            "--start-date", "2025-01-31",
            "--reports-folder", "out",
            "--environment", "TESTING",
            "--assumption-profile", "SCENARIO 2",
            "--optimizer", "gurobi",
            "--fwd-start-swap", "excluded",
            "--lcr-lower", "120",
            "--lcr-upper", "180",
            "--lcr-average-dra-pd", "7.5",
            "--floor", "MXN=2000000",
            "--floor", "brl=5000000",
            "--require-annual-benchmark", "true",
            "--must-borrow-benchmark-in-first-year", "no",
            "--nii-horizon-months", "24",
            "--shock", "CURVE_MXN_TIIE28D:2=-150",
        ]

        assert edit_config.main(argv) == 0

        config = load(params_file)
        assert config.stage_count == 3
        assert config.step_size_months == 2
        assert config.base_date == date(2024, 12, 31)
        assert config.start_date == date(2025, 1, 31)
        assert config.reports_folder == "out"
        assert config.environment is Environment.TESTING
        assert config.assumption_profile is AssumptionProfile.SCENARIO_2
        assert config.optimizer is Optimizer.GUROBI
        assert (config.lcr_lower_limit, config.lcr_upper_limit) == (120.0, 180.0)
        assert config.lcr_average_dra_pd == 7.5
        assert config.mxn_treasury_liquidity_floor == 2_000_000
        assert config.brl_treasury_liquidity_floor == 5_000_000
        assert config.require_annual_benchmark is True
        assert config.must_borrow_benchmark_in_first_year is False
        assert config.delta_nii_horizon_months == 24
        assert config.rate_shock_curves["CURVE_MXN_TIIE28D"][2] == -150

    def test_lower_applied_before_upper(self, params_file: Path) -> None:
        assert edit_config.main(["--file", str(params_file), "--lcr-lower", "250", "--lcr-upper", "150"]) == 0

        config = load(params_file)
        assert (config.lcr_lower_limit, config.lcr_upper_limit) == (150.0, 150.0)

    def test_out_of_range_clamped_unless_strict(self, params_file: Path) -> None:
        assert edit_config.main(["--file", str(params_file), "--stage-count", "8"]) == 0
        assert load(params_file).stage_count == 4

        assert edit_config.main(["--file", str(params_file), "--strict", "--stage-count", "0"]) == 1
        assert load(params_file).stage_count == 4

    def test_normalize(self, params_file: Path) -> None:
        assert edit_config.main(["--file", str(params_file), "--normalize"]) == 0

        config = load(params_file)
        assert (config.lcr_lower_limit, config.lcr_upper_limit) == (100.0, 100.0)

    def test_no_edits_leaves_file_untouched(self, params_file: Path) -> None:
        before = params_file.stat().st_mtime_ns

        assert edit_config.main(["--file", str(params_file)]) == 0

        assert params_file.stat().st_mtime_ns == before

    def test_unknown_curve_is_an_error(self, params_file: Path) -> None:
        assert edit_config.main(["--file", str(params_file), "--shock", "CURVE_JPY_TONA:0=10"]) == 1

    @pytest.mark.parametrize(
        "argv",
        [
            ["--optimizer", "GUROBI"],
            ["--floor", "MXN"],
            ["--shock", "CURVE_BRL_CDI=10"],
            ["--require-annual-benchmark", "maybe"],
        ],
    )
    def test_bad_arguments_rejected_by_parser(self, argv: list) -> None:
        with pytest.raises(SystemExit):
            edit_config._parse_args(argv)


class TestMigrateCurves:
    def _write_legacy(self, path: Path) -> None:
        raw = to_document(default_configuration())
        raw["delta_nii_shocks_bps"] = {
            "CURVE_USD_FED_FUNDS": [100],
            "CURVE_BRL_CDI": [50, 75, 900],
        }
        path.write_text(json.dumps(raw, indent=2), encoding="utf-8")

    def test_legacy_document_rejected_by_load(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.json"
        self._write_legacy(path)

        assert show_config.main(["--file", str(path)]) == 1

    def test_migrates_to_output(self, tmp_path: Path) -> None:
        source = tmp_path / "legacy.json"
        destination = tmp_path / "data.json"
        self._write_legacy(source)
        original = source.read_bytes()

        assert migrate_curves.main(["--file", str(source), "--output", str(destination)]) == 0

        assert source.read_bytes() == original
        config = load(destination)
        assert config.rate_shock_curves["CURVE_USD_FED_FUNDS"] == [100] * 10
        assert config.rate_shock_curves["CURVE_BRL_CDI"] == [50, 75] + [500] * 8

    def test_migrates_in_place(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        self._write_legacy(path)

        assert migrate_curves.main(["--file", str(path)]) == 0

        assert len(load(path).rate_shock_curves["CURVE_BRL_CDI"]) == 10

    def test_non_object_document_is_an_error(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        assert migrate_curves.main(["--file", str(path)]) == 1

    @pytest.mark.parametrize("shocks", [[None], 5, "100"])
    def test_malformed_legacy_curve_is_an_error(self, tmp_path: Path, shocks: object) -> None:
        path = tmp_path / "data.json"
        raw = to_document(default_configuration())
        raw["delta_nii_shocks_bps"] = {"CURVE_BRL_CDI": shocks}
        path.write_text(json.dumps(raw), encoding="utf-8")
        original = path.read_bytes()

        assert migrate_curves.main(["--file", str(path)]) == 1

        assert path.read_bytes() == original
