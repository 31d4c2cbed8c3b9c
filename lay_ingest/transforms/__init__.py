"""
Transforms sub-package for lay-ingest.

- derive.py: combine a raw deck record with its labware properties into
  the classified, presentation-ready ``DerivedLabwareRecord``.

Derivation is a pure per-record function: no I/O, no shared state, so
records can be derived in any order and the output keeps input order.
"""
