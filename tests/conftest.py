"""
Shared test fixtures for lay-ingest tests.

Deck layout and labware definition files are binary-framed key/value
stores.  The ``kv`` fixture builds synthetic content in that shape: each
key is followed by a run of mixed control characters and then its value,
the way VENUS writes them.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

# Separator run used between keys and values in synthetic content
SEP = "\x00\x01\x1f\x07"


def build_content(pairs: list[tuple[str, object]], sep: str = SEP) -> str:
    """Join ``(key, value)`` pairs into control-character-delimited content."""
    return "".join(f"{key}{sep}{value}{sep}" for key, value in pairs)


@pytest.fixture()
def kv() -> Callable[..., str]:
    """Factory: ``kv([("Labware.Cnt", 1), ...])`` -> content string."""
    return build_content


@pytest.fixture()
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Factory: write *content* (UTF-8) under ``tmp_path`` and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full parse/ingest flow)",
    )
