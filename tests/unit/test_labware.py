"""
Unit tests for the labware definition reader (lay_ingest.parsers.labware).

Tests property extraction, the Rows/Columns -> HoleCnt fallback, and
the missing-file defaults.
"""

from __future__ import annotations

import pytest

from lay_ingest.models import LabwareProperties
from lay_ingest.parsers.labware import (
    extract_labware_properties,
    read_labware_properties,
)


class TestExtractLabwareProperties:

    def test_all_properties(self, kv):
        content = kv([
            ("Dim.Dx", "127.75"),
            ("Dim.Dy", "85.5"),
            ("Cntr.1.base", "-12.5"),
            ("IX.Index", "1"),
            ("Rows", "8"),
            ("Columns", "12"),
        ])
        props = extract_labware_properties(content)
        assert props == LabwareProperties(
            dim_dx=127.75, dim_dy=85.5, cntr_base=-12.5, rows=8, columns=12, ix_index=1
        )

    def test_values_not_floored(self, kv):
        props = extract_labware_properties(kv([("Dim.Dx", "127.7654")]))
        assert props.dim_dx == pytest.approx(127.7654)

    def test_word_boundary(self, kv):
        props = extract_labware_properties(kv([("OtherDim.Dx", "5"), ("Dim.Dy", "6")]))
        assert props.dim_dx == 0.0
        assert props.dim_dy == 6.0

    def test_hole_count_fallback(self, kv):
        """Neither Rows nor Columns: HoleCnt becomes the row count."""
        props = extract_labware_properties(kv([("HoleCnt", "96")]))
        assert props.rows == 96
        assert props.columns == 0

    def test_rows_only_suppresses_fallback(self, kv):
        props = extract_labware_properties(kv([("Rows", "4"), ("HoleCnt", "96")]))
        assert props.rows == 4
        assert props.columns == 0

    def test_columns_only_suppresses_fallback(self, kv):
        props = extract_labware_properties(kv([("Columns", "3"), ("HoleCnt", "96")]))
        assert props.rows == 0
        assert props.columns == 3

    def test_non_integer_rows_count_as_not_found(self, kv):
        props = extract_labware_properties(kv([("Rows", "8.5"), ("HoleCnt", "24")]))
        assert props.rows == 24

    def test_ix_index_decimal_is_zero(self, kv):
        props = extract_labware_properties(kv([("IX.Index", "1.0")]))
        assert props.ix_index == 0

    def test_empty_content(self):
        assert extract_labware_properties("") == LabwareProperties()


class TestReadLabwareProperties:

    def test_reads_file(self, kv, write_file):
        path = write_file("ML_STAR/plate.rck", kv([("Rows", "8"), ("Columns", "12")]))
        props = read_labware_properties(path)
        assert (props.rows, props.columns) == (8, 12)

    def test_missing_file_defaults(self, tmp_path):
        warnings = []
        props = read_labware_properties(tmp_path / "absent.rck", warnings=warnings)
        assert props == LabwareProperties()
        assert warnings[0].reason == "missing"

    def test_empty_path_defaults(self):
        assert read_labware_properties("") == LabwareProperties()

    def test_directory_defaults(self, tmp_path):
        assert read_labware_properties(tmp_path) == LabwareProperties()

    def test_warnings_carry_source(self, kv, write_file):
        path = write_file("plate.rck", kv([("Rows", "8")]))
        warnings = []
        read_labware_properties(path, warnings=warnings)
        assert warnings
        assert all(w.source == str(path) for w in warnings)
