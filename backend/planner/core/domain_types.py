"""Domain Types — identity wrappers and the task summary buckets.

Invariants:
    - UserId, NoteId, TaskId wrap store-generated integers
    - TaskBucket has exactly three members; every task lands in exactly one

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: bucket names double as JSON keys of the summary response
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
NoteId = NewType("NoteId", int)
TaskId = NewType("TaskId", int)


# ─── Enums ───────────────────────────────────────────────────────

class TaskBucket(str, Enum):
    """Derived task status used by the per-user summary."""
    COMPLETED = "completed"
    PENDING = "pending"
    OVERDUE = "overdue"
