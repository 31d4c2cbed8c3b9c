"""
Unit tests for record derivation (lay_ingest.transforms.derive).

All tests build RawLabwareRecord / LabwareProperties directly -- no
file I/O.
"""

from __future__ import annotations

import pytest

from lay_ingest.models import (
    LabwareProperties,
    LabwareType,
    RawLabwareRecord,
    Vector3,
)
from lay_ingest.transforms.derive import (
    classify_labware,
    derive_record,
    derive_records,
)


def _raw(**overrides) -> RawLabwareRecord:
    defaults = {
        "index": 1,
        "file_path": "C:\\LabWare\\ML_STAR\\plate.rck",
        "id": "PLT_0001",
        "site_id": "",
        "template": "",
    }
    defaults.update(overrides)
    return RawLabwareRecord(**defaults)


# ---------------------------------------------------------------------------
# classify_labware
# ---------------------------------------------------------------------------

class TestClassifyLabware:

    @pytest.mark.parametrize("path,expected", [
        ("C:\\LabWare\\TIP_CAR_480.tml", LabwareType.CARRIER),
        ("C:\\LabWare\\Cos_96_Rd.rck", LabwareType.RACK),
        ("C:\\LabWare\\Trough.ctr", LabwareType.CONTAINER),
        ("C:\\LabWare\\deck.lay", LabwareType.UNKNOWN),
        ("C:\\LabWare\\noext", LabwareType.UNKNOWN),
        ("", LabwareType.UNKNOWN),
    ])
    def test_extension_table(self, path, expected):
        assert classify_labware(path, "") is expected

    def test_extension_case_insensitive(self):
        assert classify_labware("/opt/LabWare/PLATE.RCK", "") is LabwareType.RACK

    def test_rack_on_default_template_is_rack_carrier(self):
        assert classify_labware("x.rck", "default") is LabwareType.RACK_CARRIER

    def test_template_match_is_exact(self):
        assert classify_labware("x.rck", "Default") is LabwareType.RACK

    def test_default_template_only_affects_racks(self):
        assert classify_labware("x.tml", "default") is LabwareType.CARRIER


# ---------------------------------------------------------------------------
# derive_record
# ---------------------------------------------------------------------------

class TestDeriveRecord:

    def test_passthrough_fields(self):
        record = derive_record(_raw(index=7, id="RACK_7"), LabwareProperties(dim_dx=127.75, dim_dy=85.5))
        assert record.index == 7
        assert record.id == "RACK_7"
        assert record.file_path == "C:\\LabWare\\ML_STAR\\plate.rck"
        assert (record.dx, record.dy) == (127.75, 85.5)

    def test_coordinates_from_third_tform_and_ztrans(self):
        raw = _raw(
            tform1=Vector3(10.0, 20.0, 30.0),
            tform2=Vector3(1.0, 2.0, 3.0),
            tform3=Vector3(250.75, -12.5, 99.0),
            z_trans=100.5,
            z_trans_value=40.0,
        )
        record = derive_record(raw, LabwareProperties())
        assert (record.final_x, record.final_y, record.final_z) == (250.75, -12.5, 100.5)

    def test_loadable_carrier_with_site(self):
        record = derive_record(_raw(file_path="a.tml", site_id="1"), LabwareProperties())
        assert record.labware_type is LabwareType.CARRIER
        assert record.loadable

    def test_carrier_without_site_not_loadable(self):
        record = derive_record(_raw(file_path="a.tml", site_id=""), LabwareProperties())
        assert record.labware_type is LabwareType.CARRIER
        assert not record.loadable

    def test_rack_with_site_not_loadable(self):
        assert not derive_record(_raw(site_id="3"), LabwareProperties()).loadable

    @pytest.mark.parametrize("base,expected", [(-10.5, True), (-10.0, False), (0.0, False)])
    def test_tip_rack_threshold(self, base, expected):
        assert derive_record(_raw(), LabwareProperties(cntr_base=base)).tip_rack is expected

    @pytest.mark.parametrize("ix,expected", [(1, True), (0, False), (2, False)])
    def test_alpha_index(self, ix, expected):
        assert derive_record(_raw(), LabwareProperties(ix_index=ix)).alpha_index is expected

    def test_single_column_assumed_when_rows_only(self):
        record = derive_record(_raw(), LabwareProperties(rows=96, columns=0))
        assert (record.row, record.column) == (96, 1)

    def test_grid_kept(self):
        record = derive_record(_raw(), LabwareProperties(rows=8, columns=12))
        assert (record.row, record.column) == (8, 12)

    def test_no_grid(self):
        record = derive_record(_raw(), LabwareProperties())
        assert (record.row, record.column) == (0, 0)

    def test_default_template_hidden(self):
        record = derive_record(_raw(template="default"), LabwareProperties())
        assert record.template == ""
        assert record.labware_type is LabwareType.RACK_CARRIER

    def test_other_template_kept(self):
        record = derive_record(_raw(template="PLT_CAR_L5AC_A00_0001"), LabwareProperties())
        assert record.template == "PLT_CAR_L5AC_A00_0001"


class TestDeriveRecords:

    def test_order_preserved(self):
        raws = [_raw(index=i) for i in (1, 2, 3)]
        props = [LabwareProperties(rows=i) for i in (1, 2, 3)]
        records = derive_records(raws, props)
        assert [(r.index, r.row) for r in records] == [(1, 1), (2, 2), (3, 3)]

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            derive_records([_raw()], [])
