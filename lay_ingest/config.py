"""
Configuration models and YAML I/O for lay-ingest.

This module defines the Pydantic models that map 1:1 to a lay-ingest
YAML config file, plus helpers for loading and saving it.

Key models:
- LayIngestConfig: Top-level config (labware base dir + decoding + output).
- OutputConfig: Output directory and format for ``ingest()``.

Key functions:
- load_config(path) -> LayIngestConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

The labware base directory is deployment-specific (it is wherever the
VENUS labware library lives on the machine that produced the deck
layout), so it is a config value rather than a constant.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from lay_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_LABWARE_BASE_DIR = "C:\\Program Files (x86)\\HAMILTON\\LabWare\\"


class OutputConfig(BaseModel):
    """Output settings."""

    output_dir: str = Field("outputs/", description="Directory for output files")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Output format"
    )


class LayIngestConfig(BaseModel):
    """Top-level configuration for lay-ingest."""

    labware_base_dir: str = Field(
        DEFAULT_LABWARE_BASE_DIR,
        description="Directory that relative labware file references are joined onto",
    )
    encoding: str = Field(
        "utf-8",
        description="Text encoding for deck and labware files (undecodable bytes are replaced)",
    )
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("encoding")
    @classmethod
    def _check_encoding(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"Unknown encoding: '{value}'") from exc
        return value


def load_config(path: str | Path) -> LayIngestConfig:
    """Load and validate a YAML config into a LayIngestConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return LayIngestConfig.model_validate(raw)


def save_config(config: LayIngestConfig, path: str | Path) -> None:
    """Serialize a LayIngestConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# lay-ingest configuration\n")
        f.write("# labware_base_dir: where relative labware references resolve\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
