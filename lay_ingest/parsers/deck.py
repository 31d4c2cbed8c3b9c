"""
Deck layout (``.lay``) reader for lay-ingest.

A deck layout file declares how many labware instances sit on the deck
(``Labware.Cnt``) and then lists each instance's attributes under
``Labware.<n>.<property>`` keys:

- ``File``: labware definition path (relative to the labware library
  unless rooted).
- ``Id``, ``SiteId``, ``Template``: strings.
- ``ZTrans``, ``ZTransValue``: numbers.
- ``TForm.<1-3>.<X|Y|Z>``: three transform vectors.

Assembly rules:
- One record per index 1..``Labware.Cnt``, in index order.
- Each field is extracted independently; a missing or malformed field
  gets its default and never aborts the record or the batch.
- An unreadable file or a missing/unparsable count yields no records.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from lay_ingest.config import LayIngestConfig
from lay_ingest.models import ParseWarning, RawLabwareRecord
from lay_ingest.parsers.base import ParseResult, read_content
from lay_ingest.paths import resolve_labware_path
from lay_ingest.scanner import (
    scan_count,
    scan_file_path,
    scan_number,
    scan_string,
    scan_vector,
)

logger = logging.getLogger(__name__)


def assemble_record(
    content: str,
    index: int,
    base_dir: str,
    warnings: list[ParseWarning] | None = None,
) -> RawLabwareRecord:
    """Build the raw record for ``Labware.<index>``."""
    raw_path = scan_file_path(content, index, warnings)
    return RawLabwareRecord(
        index=index,
        file_path=resolve_labware_path(raw_path, base_dir),
        id=scan_string(content, index, "Id", warnings),
        site_id=scan_string(content, index, "SiteId", warnings),
        template=scan_string(content, index, "Template", warnings),
        z_trans=scan_number(content, index, "ZTrans", warnings),
        z_trans_value=scan_number(content, index, "ZTransValue", warnings),
        tform1=scan_vector(content, index, 1, warnings),
        tform2=scan_vector(content, index, 2, warnings),
        tform3=scan_vector(content, index, 3, warnings),
    )


def assemble_records(
    content: str,
    base_dir: str,
    warnings: list[ParseWarning] | None = None,
) -> list[RawLabwareRecord]:
    """Assemble raw records for every declared labware instance.

    Args:
        content: Decoded deck layout content.
        base_dir: Labware library directory for relative ``File`` values.
        warnings: Optional list that collects defaulted fields.

    Returns:
        Records for indexes 1..``Labware.Cnt``; empty if the count is
        missing or unparsable.
    """
    return _assemble(content, scan_count(content, warnings), base_dir, warnings)


def _assemble(
    content: str,
    count: int | None,
    base_dir: str,
    warnings: list[ParseWarning] | None,
) -> list[RawLabwareRecord]:
    if count is None:
        logger.warning("No usable Labware.Cnt; deck layout has no labware records")
        return []

    records = [
        assemble_record(content, index, base_dir, warnings)
        for index in range(1, count + 1)
    ]
    logger.info("Assembled %d raw labware records", len(records))
    return records


def read_deck_layout(
    path: str | Path,
    config: LayIngestConfig | None = None,
) -> ParseResult:
    """Read a deck layout file into raw records.

    Never raises for bad input: an unreadable file is logged and
    reported as an ``"unreadable"`` warning with no records.

    Args:
        path: Path to the ``.lay`` file.
        config: Supplies the labware base directory and encoding.
            Defaults to ``LayIngestConfig()``.

    Returns:
        ParseResult with the raw records and collected warnings.
    """
    config = config or LayIngestConfig()
    source = str(path)
    logger.info("Reading deck layout: %s", source)

    try:
        content = read_content(path, config.encoding)
    except OSError as exc:
        logger.error("Error reading deck layout file %s: %s", source, exc)
        return ParseResult(
            records=[],
            source_path=source,
            warnings=[
                ParseWarning(key=source, reason="unreadable", raw=str(exc), source=source)
            ],
        )

    collected: list[ParseWarning] = []
    count = scan_count(content, collected)
    records = _assemble(content, count, config.labware_base_dir, collected)
    return ParseResult(
        records=records,
        source_path=source,
        declared_count=count,
        warnings=[_with_source(w, source) for w in collected],
    )


def _with_source(warning: ParseWarning, source: str) -> ParseWarning:
    return replace(warning, source=source)
