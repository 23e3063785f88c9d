"""Services — one module per resource, each function is one request handler.

Invariants:
    - Services take an AsyncSession and schema objects, never a Request
    - Services raise PlannerError subclasses; HTTP mapping lives in api/
"""
