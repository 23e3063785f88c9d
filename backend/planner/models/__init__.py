"""ORM Models — SQLAlchemy declarative models for users, notes and tasks.

Invariants:
    - All models inherit from Base (db/base.py)
    - Notes and tasks are scoped by user_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from planner.models.user import User  # noqa: F401
from planner.models.note import Note  # noqa: F401
from planner.models.task import Task  # noqa: F401
