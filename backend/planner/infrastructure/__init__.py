"""Infrastructure Layer — store access, password hashing and logging setup.

Invariants:
    - Infrastructure never imports from services/ or api/
    - Driver and primitive failures are mapped to PlannerError subclasses
"""
