"""
Parsers sub-package for lay-ingest.

Contains the readers for the two Hamilton file kinds:

- deck.py reads a deck layout (``.lay``) file into ``RawLabwareRecord``
  objects, one per ``Labware.<n>`` entry.
- labware.py reads a labware definition file (``.rck``, ``.tml``,
  ``.ctr``, ...) into ``LabwareProperties``.
- base.py holds the ``ParseResult`` container returned by the deck reader.

Both readers use the key/value scanner in ``lay_ingest.scanner`` and
never raise on malformed input: missing files and fields degrade to
documented defaults and are reported through ``ParseWarning`` entries.
"""
