"""Roster: in-memory user CRUD service behind an ordered middleware pipeline.

Invariants:
    - Package root holds metadata only (import side-effects prohibited)
"""

__version__ = "1.0.0"
