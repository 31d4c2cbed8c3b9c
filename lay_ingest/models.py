"""
Record types for lay-ingest.

Two stages, two record shapes:

- ``RawLabwareRecord``: what the deck layout (``.lay``) file says about
  one labware instance, field by field, with defaults substituted for
  anything missing.
- ``DerivedLabwareRecord``: the classified, presentation-ready record
  built from a raw record plus the ``LabwareProperties`` read from the
  referenced labware definition file.

All records are frozen dataclasses: they are built once per parse and
never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class LabwareType(str, Enum):
    """Classification derived from the labware file extension."""

    CARRIER = "Carrier"
    RACK_CARRIER = "RackCarrier"
    RACK = "Rack"
    CONTAINER = "Container"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class Vector3:
    """One ``TForm`` transform vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"X={self.x:.3f}, Y={self.y:.3f}, Z={self.z:.3f}"


_ZERO = Vector3()


@dataclass(frozen=True)
class RawLabwareRecord:
    """Attributes of one ``Labware.<index>`` entry in a deck layout file.

    Attributes:
        index: 1-based position, matching the ``Labware.<index>`` key.
        file_path: Labware definition path, already resolved against the
            configured labware base directory.
        id: Labware instance id (e.g. ``"TIP_CAR_480_0001"``).
        site_id: Carrier site the instance sits on; empty when unplaced.
        template: Template the instance is placed on, or ``"default"``.
        z_trans: ``ZTrans`` value.
        z_trans_value: ``ZTransValue`` value (extracted, not used in
            the derivation).
        tform1, tform2, tform3: the three recorded ``TForm`` vectors.
    """

    index: int
    file_path: str = ""
    id: str = ""
    site_id: str = ""
    template: str = ""
    z_trans: float = 0.0
    z_trans_value: float = 0.0
    tform1: Vector3 = _ZERO
    tform2: Vector3 = _ZERO
    tform3: Vector3 = _ZERO


@dataclass(frozen=True)
class LabwareProperties:
    """Geometry and grid properties read from a labware definition file."""

    dim_dx: float = 0.0
    dim_dy: float = 0.0
    cntr_base: float = 0.0
    rows: int = 0
    columns: int = 0
    ix_index: int = 0


@dataclass(frozen=True)
class DerivedLabwareRecord:
    index: int
    id: str
    file_path: str
    final_x: float
    final_y: float
    final_z: float
    template: str
    labware_type: LabwareType
    loadable: bool
    dx: float
    dy: float
    column: int
    row: int
    alpha_index: bool
    tip_rack: bool


@dataclass(frozen=True)
class ParseWarning:
    """A value that was missing or malformed and fell back to its default.

    Attributes:
        key: The dotted key that was looked up (e.g. ``"Labware.3.Id"``),
            or the file path for file-level problems.
        reason: ``"missing"``, ``"unparsable"`` or ``"unreadable"``.
        raw: The captured text for ``"unparsable"`` values, or the error
            message for ``"unreadable"`` files.
        source: Path of the file the key was looked up in, when known.
    """

    key: str
    reason: str
    raw: str = ""
    source: str = ""
