"""
Custom exception hierarchy for lay-ingest.

Parsing itself never raises for malformed deck or labware files: bad
input degrades to documented defaults (see ``parsers/deck.py``).  The
exceptions below cover the surfaces that *can* fail loudly --
configuration loading and export.
"""


class LayIngestError(Exception):
    """Base exception for all lay-ingest errors."""


class ConfigValidationError(LayIngestError):
    """Raised when a lay-ingest YAML config file is empty."""


class ExportError(LayIngestError):
    """Raised when the exporter fails to write output files.

    For example, permission errors, disk full, or unsupported format.
    """
