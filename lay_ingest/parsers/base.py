"""
Shared parse result container for lay-ingest.

``ParseResult`` is what the deck layout reader hands to the pipeline:
the raw records plus everything needed to describe the parse in the
``_meta`` table (declared count, collected warnings, source path).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from lay_ingest.models import ParseWarning, RawLabwareRecord


@dataclass
class ParseResult:
    """Standardized output of ``read_deck_layout()``.

    Attributes:
        records: Raw records indexed 1..N, in index order.
        source_path: The deck layout file that was read.
        declared_count: Value of ``Labware.Cnt``, or ``None`` if the file
            was unreadable or the count was missing.
        warnings: Missing/unparsable values that fell back to defaults.
    """
    records: list[RawLabwareRecord]
    source_path: str = ""
    declared_count: int | None = None
    warnings: list[ParseWarning] = field(default_factory=list)


def read_content(path: str | Path, encoding: str = "utf-8") -> str:
    """Read a Hamilton file as text.

    Deck and labware files are mostly binary framing around ASCII keys,
    so undecodable bytes are replaced rather than rejected, and newlines
    are left untranslated.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    with open(path, "r", encoding=encoding, errors="replace", newline="") as f:
        return f.read()
