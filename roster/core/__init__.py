"""Core Layer: pure domain logic, no IO, no async, no HTTP.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or fastapi
    - Errors raised here are RosterError subclasses only

Design Decisions:
    - Functional core separated from the HTTP shell (ADR: impureim sandwich)
"""
