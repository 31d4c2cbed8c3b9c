"""
Meta table builder for lay-ingest.

Builds the one-row ``_meta`` table that is written alongside the
labware table.  It is DESCRIPTIVE -- it records what the pipeline did
with one deck layout file (data lineage), complementing the YAML config
which is PRESCRIPTIVE.

Columns:
- source_file, source_hash: deck layout file name and SHA-256.
- labware_base_dir: directory relative labware references resolved against.
- declared_count: ``Labware.Cnt`` (empty if missing).
- records: number of derived records.
- warnings: number of defaulted values (see ``_warnings`` table).
- processed_at: UTC timestamp.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timezone
from pathlib import Path

import pandas as pd

from lay_ingest._pipeline import PipelineResult
from lay_ingest.config import LayIngestConfig

logger = logging.getLogger(__name__)

META_COLUMNS = [
    "source_file", "source_hash", "labware_base_dir", "declared_count",
    "records", "warnings", "processed_at",
]


def _compute_file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file for reproducibility tracking."""
    h = hashlib.sha256()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def build_meta_table(result: PipelineResult, config: LayIngestConfig) -> pd.DataFrame:
    """Build the one-row ``_meta`` DataFrame for a pipeline run."""
    source_path = Path(result.source_path)

    try:
        source_hash = _compute_file_hash(source_path)
    except OSError:
        logger.warning(
            "Source file not readable for hashing: %s (using empty hash)",
            source_path,
        )
        source_hash = ""

    row = {
        "source_file": source_path.name,
        "source_hash": source_hash,
        "labware_base_dir": config.labware_base_dir,
        "declared_count": result.declared_count,
        "records": len(result.records),
        "warnings": len(result.warnings),
        "processed_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
    }
    logger.info("Built _meta table for %s", source_path.name)
    return pd.DataFrame([row], columns=META_COLUMNS)
