"""
Exporter for lay-ingest.

Writes the derived labware table plus the ``_meta`` and ``_warnings``
tables to the output directory in the configured format (CSV or
Parquet), for whatever presentation layer consumes them.

Output file naming convention:
  "labware.{format}"    -- one row per derived labware record.
  "_meta.{format}"      -- one row describing the parse.
  "_warnings.{format}"  -- one row per defaulted value.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, fields
from pathlib import Path
from typing import Literal

import pandas as pd

from lay_ingest.exceptions import ExportError
from lay_ingest.models import DerivedLabwareRecord, ParseWarning

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}

RECORD_COLUMNS = [f.name for f in fields(DerivedLabwareRecord)]
WARNING_COLUMNS = [f.name for f in fields(ParseWarning)]


def records_to_dataframe(records: list[DerivedLabwareRecord]) -> pd.DataFrame:
    """One row per record, columns in ``DerivedLabwareRecord`` field order.

    ``labware_type`` is stored as its name (``"RackCarrier"``, ...).
    """
    rows = []
    for record in records:
        row = asdict(record)
        row["labware_type"] = record.labware_type.value
        rows.append(row)
    return pd.DataFrame(rows, columns=RECORD_COLUMNS)


def warnings_to_dataframe(warnings: list[ParseWarning]) -> pd.DataFrame:
    return pd.DataFrame([asdict(w) for w in warnings], columns=WARNING_COLUMNS)


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_records(
    records: list[DerivedLabwareRecord],
    meta_df: pd.DataFrame,
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
    warnings: list[ParseWarning] | None = None,
) -> list[str]:
    """Write the labware, ``_meta`` and ``_warnings`` tables to disk.

    The output directory is created recursively if it does not exist.
    CSV files are written with ``utf-8-sig`` encoding (BOM) so they open
    cleanly in Excel.

    Args:
        records: Derived labware records.
        meta_df: The ``_meta`` DataFrame.
        output_dir: Directory to write files into (created if needed).
        output_format: "csv" or "parquet".
        warnings: Defaulted values to write as ``_warnings``; the table
            is written (possibly empty) either way.

    Returns:
        Written file paths: labware table, ``_meta``, ``_warnings``.

    Raises:
        ExportError: If *output_format* is unsupported, or if any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    tables = {
        "labware": records_to_dataframe(records),
        "_meta": meta_df,
        "_warnings": warnings_to_dataframe(warnings or []),
    }

    written: list[str] = []
    for table_name, df in tables.items():
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info(
            "Exported table '%s' -> %s (%d rows)",
            table_name,
            file_path.name,
            len(df),
        )

    return written
