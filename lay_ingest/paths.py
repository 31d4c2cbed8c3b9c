"""
Labware file path resolution.

Deck layout files reference labware definitions either by absolute path
(``C:\\Program Files (x86)\\HAMILTON\\LabWare\\ML_STAR\\TIP_CAR_480.tml``)
or relative to the VENUS labware library (``ML_STAR\\TIP_CAR_480.tml``).
Relative references are joined onto the configured labware base
directory (``LayIngestConfig.labware_base_dir``).

The base directory decides the join flavour: a Windows-looking base
(drive letter or backslashes) gets Windows semantics and the result
keeps backslashes; a POSIX base gets POSIX semantics and the relative
reference's backslashes become ``/``, so a library mirrored onto a
Linux box still resolves.
"""

from __future__ import annotations

from pathlib import PurePosixPath, PureWindowsPath


def is_rooted(raw: str) -> bool:
    """True if *raw* carries a drive or a root (``C:``, ``\\x``, ``/x``, UNC)."""
    p = PureWindowsPath(raw)
    return bool(p.drive or p.root)


def _is_windows_base(base_dir: str) -> bool:
    return bool(PureWindowsPath(base_dir).drive) or "\\" in base_dir


def resolve_labware_path(raw: str, base_dir: str) -> str:
    """Resolve a raw ``Labware.<n>.File`` reference to a usable path.

    Args:
        raw: The path text captured from the deck layout file.
        base_dir: Directory that relative references are joined onto.

    Returns:
        *raw* unchanged if it is empty or already rooted, else the
        joined path.
    """
    if not raw or is_rooted(raw):
        return raw
    if _is_windows_base(base_dir):
        return str(PureWindowsPath(base_dir) / raw)
    return str(PurePosixPath(base_dir) / raw.replace("\\", "/"))
