"""
Unit tests for labware path resolution (lay_ingest.paths).
"""

from __future__ import annotations

import pytest

from lay_ingest.config import DEFAULT_LABWARE_BASE_DIR
from lay_ingest.paths import is_rooted, resolve_labware_path


class TestIsRooted:

    @pytest.mark.parametrize("raw", [
        "C:\\Program Files (x86)\\HAMILTON\\LabWare\\ML_STAR\\TIP.rck",
        "D:/labware/plate.rck",
        "\\\\server\\share\\plate.rck",
        "\\LabWare\\plate.rck",
        "/opt/hamilton/LabWare/plate.rck",
    ])
    def test_rooted(self, raw):
        assert is_rooted(raw)

    @pytest.mark.parametrize("raw", ["ML_STAR\\TIP.rck", "plate.rck", "a/b.ctr"])
    def test_relative(self, raw):
        assert not is_rooted(raw)


class TestResolveLabwarePath:

    def test_relative_joined_onto_windows_base(self):
        result = resolve_labware_path("ML_STAR\\TIP_CAR_480.tml", DEFAULT_LABWARE_BASE_DIR)
        assert result == (
            "C:\\Program Files (x86)\\HAMILTON\\LabWare\\ML_STAR\\TIP_CAR_480.tml"
        )

    def test_windows_base_without_trailing_separator(self):
        result = resolve_labware_path("plate.rck", "D:\\LabWare")
        assert result == "D:\\LabWare\\plate.rck"

    def test_absolute_passes_through(self):
        raw = "C:\\Other\\Place\\plate.rck"
        assert resolve_labware_path(raw, DEFAULT_LABWARE_BASE_DIR) == raw

    def test_posix_absolute_passes_through(self):
        raw = "/srv/labware/plate.rck"
        assert resolve_labware_path(raw, "/opt/LabWare") == raw

    def test_relative_joined_onto_posix_base(self):
        """Backslashes in the relative part become POSIX separators."""
        result = resolve_labware_path("ML_STAR\\CORE\\plate.rck", "/opt/LabWare/")
        assert result == "/opt/LabWare/ML_STAR/CORE/plate.rck"

    def test_empty_stays_empty(self):
        assert resolve_labware_path("", DEFAULT_LABWARE_BASE_DIR) == ""
