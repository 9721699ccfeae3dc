"""API Layer: FastAPI routes, error handlers and the request pipeline.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every request passes the middleware pipeline before reaching a route

Design Decisions:
    - Thin routes delegate to core.user_store (ADR: impureim sandwich)
"""
