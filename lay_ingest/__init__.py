"""
lay-ingest: Python library for extracting labware placement from
Hamilton VENUS deck layout (``.lay``) files.

Public API surface:

- ``parse(path, ...)`` -- read a deck layout file, enrich each labware
  instance with its labware definition file, and return the derived
  records in index order.

- ``ingest(path, ...)`` -- ``parse()`` plus export of the labware table,
  ``_meta`` and ``_warnings`` to CSV or Parquet.  Returns the written
  file paths.

Neither call raises for malformed deck or labware files: missing
values fall back to documented defaults (see ``lay_ingest.parsers``).
"""

from __future__ import annotations

import logging
from pathlib import Path

from lay_ingest._pipeline import run_pipeline
from lay_ingest.config import LayIngestConfig, load_config
from lay_ingest.export import export_records
from lay_ingest.meta import build_meta_table
from lay_ingest.models import (
    DerivedLabwareRecord,
    LabwareProperties,
    LabwareType,
    RawLabwareRecord,
    Vector3,
)

__all__ = [
    "parse",
    "ingest",
    "LayIngestConfig",
    "DerivedLabwareRecord",
    "LabwareProperties",
    "LabwareType",
    "RawLabwareRecord",
    "Vector3",
]

logger = logging.getLogger(__name__)


def parse(
    path: str | Path,
    config: LayIngestConfig | None = None,
) -> list[DerivedLabwareRecord]:
    """Parse a deck layout file into derived labware records.

    Args:
        path: Path to the ``.lay`` file.
        config: Labware base directory and encoding.  Defaults to
            ``LayIngestConfig()`` (VENUS default install directory).

    Returns:
        Derived records indexed 1..N in order; empty if the file is
        unreadable or declares no ``Labware.Cnt``.

    Examples::

        records = lay_ingest.parse(
            "Methods/MyDeck.lay",
            LayIngestConfig(labware_base_dir="/mnt/hamilton/LabWare"),
        )
        tip_racks = [r for r in records if r.tip_rack]
    """
    config = config or LayIngestConfig()
    return run_pipeline(path, config).records


def ingest(
    path: str | Path,
    config_path: str | Path | None = None,
    output_dir: str | None = None,
    output_format: str | None = None,
) -> list[str]:
    """Parse a deck layout file and export the derived tables.

    Orchestration:
      1. ``load_config()`` if *config_path* is given, else defaults.
      2. ``run_pipeline()`` -> derived records + warnings.
      3. ``build_meta_table()`` -> ``_meta``.
      4. ``export_records()`` -> labware, ``_meta``, ``_warnings`` files.

    Args:
        path: Path to the ``.lay`` file.
        config_path: Optional YAML config.
        output_dir: Overrides ``config.output.output_dir``.
        output_format: Overrides ``config.output.output_format``
            (``"csv"`` or ``"parquet"``).

    Returns:
        List of output file paths that were written.

    Raises:
        FileNotFoundError: If *config_path* does not exist.
        pydantic.ValidationError: If the config fails validation.
        ExportError: If the output cannot be written.
    """
    config = load_config(config_path) if config_path else LayIngestConfig()
    out_dir = output_dir or config.output.output_dir
    fmt = output_format or config.output.output_format
    logger.info("ingest() -- path=%s, output_dir=%s, format=%s", path, out_dir, fmt)

    result = run_pipeline(path, config)
    meta_df = build_meta_table(result, config)
    return export_records(
        result.records,
        meta_df,
        output_dir=out_dir,
        output_format=fmt,
        warnings=result.warnings,
    )
