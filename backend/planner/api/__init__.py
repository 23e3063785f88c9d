"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - JSON error bodies share one envelope (api/error_handlers.py)

Design Decisions:
    - Thin routes delegate to services/
"""
