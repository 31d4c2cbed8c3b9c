"""
Labware definition reader for lay-ingest.

Reads the handful of geometry and grid properties the derivation needs
from a labware definition file (``.rck`` rack, ``.tml`` carrier
template, ``.ctr`` container, ...):

- ``Dim.Dx`` / ``Dim.Dy``: footprint in mm.
- ``Cntr.1.base``: base offset of the first container.
- ``IX.Index``: indexing scheme (1 = alphanumeric, e.g. ``A1``).
- ``Rows`` / ``Columns``: grid size.
- ``HoleCnt``: hole count, used as the row count when the file records
  neither ``Rows`` nor ``Columns``.

Keys are matched on a word boundary so ``OtherDim.Dx`` does not count
as ``Dim.Dx``.  Values are taken as-is (no flooring).  A missing or
unreadable file yields all-default properties; this is never fatal.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from lay_ingest.models import LabwareProperties, ParseWarning
from lay_ingest.parsers.base import read_content
from lay_ingest.scanner import read_int, read_number

logger = logging.getLogger(__name__)


def extract_labware_properties(
    content: str,
    warnings: list[ParseWarning] | None = None,
) -> LabwareProperties:
    """Extract labware properties from decoded definition file content."""

    def number(key: str) -> float:
        value = read_number(content, key, word_boundary=True, warnings=warnings)
        return 0.0 if value is None else value

    def integer(key: str) -> int | None:
        return read_int(content, key, word_boundary=True, warnings=warnings)

    rows = integer("Rows")
    columns = integer("Columns")
    if rows is None and columns is None:
        # Neither grid key recorded: the hole count stands in for rows
        rows = integer("HoleCnt")

    return LabwareProperties(
        dim_dx=number("Dim.Dx"),
        dim_dy=number("Dim.Dy"),
        cntr_base=number("Cntr.1.base"),
        rows=rows or 0,
        columns=columns or 0,
        ix_index=integer("IX.Index") or 0,
    )


def read_labware_properties(
    path: str | Path,
    *,
    encoding: str = "utf-8",
    warnings: list[ParseWarning] | None = None,
) -> LabwareProperties:
    """Read a labware definition file into ``LabwareProperties``.

    Args:
        path: Resolved labware file path; may be empty.
        encoding: Text encoding of the file.
        warnings: Optional list that collects defaulted values.

    Returns:
        The extracted properties, or all defaults when the path is
        empty, the file does not exist, or it cannot be read.
    """
    source = str(path)
    if not source or not Path(source).is_file():
        logger.warning("Labware file not found: %s", source or "<empty>")
        if warnings is not None:
            warnings.append(ParseWarning(key=source, reason="missing", source=source))
        return LabwareProperties()

    try:
        content = read_content(source, encoding)
    except OSError as exc:
        logger.warning("Could not read properties from %s: %s", source, exc)
        if warnings is not None:
            warnings.append(
                ParseWarning(key=source, reason="unreadable", raw=str(exc), source=source)
            )
        return LabwareProperties()

    collected: list[ParseWarning] = []
    properties = extract_labware_properties(content, collected)
    if warnings is not None:
        warnings.extend(replace(w, source=source) for w in collected)
    logger.debug("Read labware properties from %s: %s", source, properties)
    return properties
