"""
Internal pipeline orchestration for lay-ingest.

Runs the deck layout -> labware properties -> derivation sequence so
that both ``parse()`` and ``ingest()`` in ``__init__.py`` share it.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from lay_ingest.config import LayIngestConfig
from lay_ingest.models import (
    DerivedLabwareRecord,
    LabwareProperties,
    ParseWarning,
)
from lay_ingest.parsers.deck import read_deck_layout
from lay_ingest.parsers.labware import read_labware_properties
from lay_ingest.transforms.derive import derive_records

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Derived records plus the bookkeeping needed for ``_meta``.

    Attributes:
        records: Derived records in index order (1..N).
        source_path: The deck layout file that was read.
        declared_count: ``Labware.Cnt`` of the deck file, if found.
        warnings: Every defaulted value from the deck file and the
            labware files it references.
    """
    records: list[DerivedLabwareRecord]
    source_path: str = ""
    declared_count: int | None = None
    warnings: list[ParseWarning] = field(default_factory=list)


def run_pipeline(
    deck_path: str | Path,
    config: LayIngestConfig,
) -> PipelineResult:
    """Parse a deck layout and derive one record per labware instance.

    Steps:
      1. Read the deck file into raw records (paths already resolved).
      2. Read labware properties for each distinct resolved path.
      3. Derive the final record for each raw record.

    A labware file referenced by several instances is read once; the
    properties are the same either way.
    """
    parse_result = read_deck_layout(deck_path, config)
    warnings = list(parse_result.warnings)

    properties_by_path: dict[str, LabwareProperties] = {}
    for raw in parse_result.records:
        if raw.file_path not in properties_by_path:
            properties_by_path[raw.file_path] = read_labware_properties(
                raw.file_path, encoding=config.encoding, warnings=warnings
            )

    records = derive_records(
        parse_result.records,
        [properties_by_path[raw.file_path] for raw in parse_result.records],
    )

    logger.info(
        "Pipeline complete: %d records, %d labware files, %d warnings",
        len(records),
        len(properties_by_path),
        len(warnings),
    )
    return PipelineResult(
        records=records,
        source_path=parse_result.source_path,
        declared_count=parse_result.declared_count,
        warnings=warnings,
    )
