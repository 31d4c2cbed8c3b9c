"""
Record derivation for lay-ingest.

Turns a ``RawLabwareRecord`` plus its ``LabwareProperties`` into a
``DerivedLabwareRecord``:

- labware_type: from the file extension (``.tml`` Carrier, ``.rck``
  Rack, ``.ctr`` Container, else Unknown); a Rack placed on the
  ``"default"`` template is a RackCarrier.
- loadable: Carrier with a site assignment.
- tip_rack: container base offset below -10 mm.
- alpha_index: ``IX.Index`` of 1.
- column: 1 when rows are known but no column count was recorded.
- template: ``"default"`` is shown as empty.
- final_x / final_y: the third TForm vector only.
- final_z: ``ZTrans``; ``ZTransValue`` does not contribute.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import PureWindowsPath

from lay_ingest.models import (
    DerivedLabwareRecord,
    LabwareProperties,
    LabwareType,
    RawLabwareRecord,
)

DEFAULT_TEMPLATE = "default"
TIP_RACK_BASE_THRESHOLD = -10.0

_EXTENSION_TYPES: dict[str, LabwareType] = {
    ".tml": LabwareType.CARRIER,
    ".rck": LabwareType.RACK,
    ".ctr": LabwareType.CONTAINER,
}


def classify_labware(file_path: str, template: str) -> LabwareType:
    """Classify a labware instance from its file extension and template.

    ``PureWindowsPath`` is used for the extension so both ``\\`` and ``/``
    separated paths are handled.
    """
    extension = PureWindowsPath(file_path).suffix.lower() if file_path else ""
    labware_type = _EXTENSION_TYPES.get(extension, LabwareType.UNKNOWN)
    if labware_type is LabwareType.RACK and template == DEFAULT_TEMPLATE:
        return LabwareType.RACK_CARRIER
    return labware_type


def derive_record(
    raw: RawLabwareRecord,
    properties: LabwareProperties,
) -> DerivedLabwareRecord:
    """Compute the presentation-ready record for one labware instance."""
    labware_type = classify_labware(raw.file_path, raw.template)

    row = properties.rows
    column = 1 if row > 0 and properties.columns == 0 else properties.columns

    return DerivedLabwareRecord(
        index=raw.index,
        id=raw.id,
        file_path=raw.file_path,
        final_x=raw.tform3.x,
        final_y=raw.tform3.y,
        final_z=raw.z_trans,
        template="" if raw.template == DEFAULT_TEMPLATE else raw.template,
        labware_type=labware_type,
        loadable=labware_type is LabwareType.CARRIER and bool(raw.site_id),
        dx=properties.dim_dx,
        dy=properties.dim_dy,
        column=column,
        row=row,
        alpha_index=properties.ix_index == 1,
        tip_rack=properties.cntr_base < TIP_RACK_BASE_THRESHOLD,
    )


def derive_records(
    raws: Iterable[RawLabwareRecord],
    properties: Iterable[LabwareProperties],
) -> list[DerivedLabwareRecord]:
    """Derive records pairwise, keeping input order.

    Raises:
        ValueError: If the two inputs differ in length.
    """
    return [derive_record(r, p) for r, p in zip(raws, properties, strict=True)]
