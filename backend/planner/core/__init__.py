"""Core Layer — pure domain types, error hierarchy and summary rules.

Invariants:
    - No IO: nothing here touches the database, the network or the hashing primitive
    - Infrastructure and services import from core, never the reverse
"""
