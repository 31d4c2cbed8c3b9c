"""
Key/value scanner for Hamilton deck layout and labware definition files.

Both file kinds store attributes as dotted keys (``Labware.3.Id``,
``Dim.Dx``, ``Labware.1.TForm.3.X``) followed by a run of separator
bytes and then the value.  The separators are a mix of whitespace and
arbitrary control characters, so the files cannot be split into lines
or fields up front.

The scanner walks the decoded content forward, one key occurrence at a
time:

1. Find the next occurrence of the key.
2. Optionally reject it if it is glued to a preceding word character
   (``OtherDim.Dx`` must not match ``Dim.Dx``).
3. Skip the separator run that follows (at least ``min_separators``).
4. Take the run of value characters after it.  If that run is empty the
   occurrence does not count and scanning resumes after it.

The first occurrence that yields a value wins.  No regular expressions
are involved, so scanning is linear in the content size for each key.

Typed helpers (``scan_string``, ``scan_number``, ``scan_vector``,
``scan_file_path``, ``scan_count``) wrap ``find_value`` for the
``Labware.<index>.<property>`` keys of a deck layout file.  Every helper
substitutes its documented default when a value is missing or cannot be
parsed, and optionally reports that to a ``warnings`` list.
"""

from __future__ import annotations

import logging
import math
from typing import Callable

from lay_ingest.models import ParseWarning, Vector3

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")
_NUMERIC_CHARS = _DIGITS | {"-", "."}

# Largest Labware.Cnt accepted (signed 32-bit)
_MAX_COUNT = 2**31 - 1


# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------

def is_control(ch: str) -> bool:
    """True for C0 control characters (0x00-0x1F) and DEL (0x7F)."""
    code = ord(ch)
    return code <= 0x1F or code == 0x7F


def is_separator(ch: str) -> bool:
    """True for characters that may separate a key from its value."""
    return ch.isspace() or is_control(ch)


def is_value_char(ch: str) -> bool:
    return not is_separator(ch)


def is_path_char(ch: str) -> bool:
    """File paths may contain spaces and drive colons; only control bytes end them."""
    return not is_control(ch)


def is_numeric_char(ch: str) -> bool:
    return ch in _NUMERIC_CHARS


def is_digit(ch: str) -> bool:
    return ch in _DIGITS


def _is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch == "_"


# ---------------------------------------------------------------------------
# Core scanner
# ---------------------------------------------------------------------------

def find_value(
    content: str,
    key: str,
    *,
    value_char: Callable[[str], bool] = is_value_char,
    min_separators: int = 1,
    word_boundary: bool = False,
) -> str | None:
    """Return the value following the first matching occurrence of *key*.

    Args:
        content: Decoded file content.
        key: Literal key text, e.g. ``"Labware.2.SiteId"``.
        value_char: Predicate for characters that belong to the value.
        min_separators: Minimum number of separator characters required
            between the key and its value.
        word_boundary: If True, an occurrence preceded by a word
            character (letter, digit, underscore) is ignored.

    Returns:
        The captured value, or ``None`` if no occurrence yields one.
    """
    n = len(content)
    start = 0
    while True:
        pos = content.find(key, start)
        if pos < 0:
            return None
        start = pos + 1

        if word_boundary and pos > 0 and _is_word_char(content[pos - 1]):
            continue

        value_start = pos + len(key)
        while value_start < n and is_separator(content[value_start]):
            value_start += 1
        if value_start - (pos + len(key)) < min_separators:
            continue

        value_end = value_start
        while value_end < n and value_char(content[value_end]):
            value_end += 1
        if value_end == value_start:
            continue

        return content[value_start:value_end]


# ---------------------------------------------------------------------------
# Token parsing
# ---------------------------------------------------------------------------

def floor3(value: float) -> float:
    """Floor *value* to 3 decimal places (toward negative infinity)."""
    return math.floor(value * 1000) / 1000


def parse_float(token: str) -> float | None:
    """Parse a numeric token (``-12.5``, ``.25``, ``3.``), or ``None``."""
    try:
        return float(token)
    except ValueError:
        return None


def parse_int(token: str) -> int | None:
    """Parse an integer token; decimal points are rejected (``"8.0"`` -> None)."""
    try:
        return int(token)
    except ValueError:
        return None


def _note(
    warnings: list[ParseWarning] | None,
    key: str,
    reason: str,
    raw: str = "",
) -> None:
    logger.debug("Defaulting %s (%s) %r", key, reason, raw)
    if warnings is not None:
        warnings.append(ParseWarning(key=key, reason=reason, raw=raw))


def read_number(
    content: str,
    key: str,
    *,
    min_separators: int = 1,
    word_boundary: bool = False,
    warnings: list[ParseWarning] | None = None,
) -> float | None:
    """Find *key* and parse its numeric token; ``None`` if missing or bad."""
    token = find_value(
        content,
        key,
        value_char=is_numeric_char,
        min_separators=min_separators,
        word_boundary=word_boundary,
    )
    if token is None:
        _note(warnings, key, "missing")
        return None
    value = parse_float(token)
    if value is None:
        _note(warnings, key, "unparsable", token)
    return value


def read_int(
    content: str,
    key: str,
    *,
    word_boundary: bool = False,
    warnings: list[ParseWarning] | None = None,
) -> int | None:
    """Find *key* and parse its numeric token as an integer."""
    token = find_value(
        content, key, value_char=is_numeric_char, word_boundary=word_boundary
    )
    if token is None:
        _note(warnings, key, "missing")
        return None
    value = parse_int(token)
    if value is None:
        _note(warnings, key, "unparsable", token)
    return value


# ---------------------------------------------------------------------------
# Deck layout helpers (Labware.<index>.<property>)
# ---------------------------------------------------------------------------

def labware_key(index: int, prop: str) -> str:
    return f"Labware.{index}.{prop}"


def scan_string(
    content: str,
    index: int,
    prop: str,
    warnings: list[ParseWarning] | None = None,
) -> str:
    """Raw text of ``Labware.<index>.<prop>``, or ``""`` if absent."""
    key = labware_key(index, prop)
    value = find_value(content, key)
    if value is None:
        _note(warnings, key, "missing")
        return ""
    return value


def scan_number(
    content: str,
    index: int,
    prop: str,
    warnings: list[ParseWarning] | None = None,
) -> float:
    """Numeric ``Labware.<index>.<prop>`` floored to 3 decimals, or 0.0."""
    value = read_number(content, labware_key(index, prop), warnings=warnings)
    return 0.0 if value is None else floor3(value)


def scan_vector(
    content: str,
    index: int,
    tform: int,
    warnings: list[ParseWarning] | None = None,
) -> Vector3:
    """``Labware.<index>.TForm.<tform>.X/Y/Z`` as a Vector3.

    Each axis defaults to 0.0 independently, so partial vectors are
    returned as-is.  The axis key may be followed directly by its value
    without any separator.
    """
    axes: list[float] = []
    for axis in ("X", "Y", "Z"):
        value = read_number(
            content,
            labware_key(index, f"TForm.{tform}.{axis}"),
            min_separators=0,
            warnings=warnings,
        )
        axes.append(0.0 if value is None else floor3(value))
    return Vector3(*axes)


def scan_file_path(
    content: str,
    index: int,
    warnings: list[ParseWarning] | None = None,
) -> str:
    """Raw (unresolved) ``Labware.<index>.File`` path, or ``""``."""
    key = labware_key(index, "File")
    value = find_value(content, key, value_char=is_path_char)
    if value is None:
        _note(warnings, key, "missing")
        return ""
    return value


def scan_count(
    content: str,
    warnings: list[ParseWarning] | None = None,
) -> int | None:
    """Declared instance count from ``Labware.Cnt``, or ``None``.

    Counts above ``_MAX_COUNT`` are treated as unparsable.
    """
    token = find_value(content, "Labware.Cnt", value_char=is_digit)
    if token is None:
        _note(warnings, "Labware.Cnt", "missing")
        return None
    count = int(token)
    if count > _MAX_COUNT:
        _note(warnings, "Labware.Cnt", "unparsable", token)
        return None
    return count
