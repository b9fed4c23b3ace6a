"""
ALM Params: Tests for Module Documentation Headers

Library modules share one header layout: a title line, a description,
responsibilities, external dependencies, thread safety and version
metadata. Command-line scripts keep a short usage docstring instead.
"""

from __future__ import annotations

import importlib
import pkgutil

import pytest

import alm_params

HEADER_SECTIONS = (
    "Key responsibilities:",
    "External dependencies:",
    "Thread safety:",
    "Author:",
    "Status:",
    "Version:",
)


def _library_modules() -> list:
    names = []
    for info in pkgutil.walk_packages(alm_params.__path__, prefix="alm_params."):
        if info.ispkg or info.name.startswith("alm_params.scripts."):
            continue
        names.append(info.name)
    return sorted(names)


class TestModuleHeaders:
    def test_library_modules_found(self) -> None:
        assert "alm_params.model.rules" in _library_modules()

    @pytest.mark.parametrize("module_name", _library_modules())
    def test_header_sections_present(self, module_name: str) -> None:
        doc = importlib.import_module(module_name).__doc__ or ""

        assert doc.startswith("\nALM Params: ")
        for section in HEADER_SECTIONS:
            assert section in doc, f"{module_name} lacks {section!r}"
