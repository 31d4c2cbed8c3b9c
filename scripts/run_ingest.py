"""
Demo script: extract labware from one or more deck layout files.

Usage:
    python scripts/run_ingest.py Methods/MyDeck.lay
    python scripts/run_ingest.py Methods/*.lay --config lay_ingest.yaml --csv

Each deck file gets its own output subdirectory under outputs/, named
after the file stem.  Pass --csv to write CSV instead of Parquet.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("run_ingest")


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------

def _split_args(argv: list[str]) -> tuple[list[str], str | None, str]:
    """Split argv into (deck paths, config path, output format)."""
    paths: list[str] = []
    config_path: str | None = None
    output_format = "parquet"
    args = iter(argv)
    for arg in args:
        if arg == "--config":
            config_path = next(args, None)
        elif arg == "--csv":
            output_format = "csv"
        else:
            paths.append(arg)
    return paths, config_path, output_format


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import lay_ingest

    paths, config_path, output_format = _split_args(sys.argv[1:])
    if not paths:
        log.error("Usage: run_ingest.py DECK.lay [...] [--config CFG.yaml] [--csv]")
        sys.exit(2)

    for deck_path in paths:
        if not Path(deck_path).exists():
            log.warning("SKIP  %s  (file not found)", deck_path)
            continue

        output_dir = str(OUTPUT_ROOT / Path(deck_path).stem)

        log.info("=" * 70)
        log.info("Processing: %s", deck_path)
        log.info("  output_dir  : %s", output_dir)
        log.info("=" * 70)

        written = lay_ingest.ingest(
            deck_path,
            config_path=config_path,
            output_dir=output_dir,
            output_format=output_format,
        )
        for path in written:
            log.info("  wrote %s", path)

    log.info("All files processed.")


if __name__ == "__main__":
    main()
