"""Task Summary Rules — the three bucket conditions as SQL expressions.

Invariants:
    - completed wins over any due date
    - not completed and no due date -> pending
    - not completed and due today or later -> pending; strictly before today -> overdue
    - The three conditions are mutually exclusive for non-null completed values
    - No IO: expressions are built here and executed by services/accounts.py

Design Decisions:
    - Column-agnostic: callers pass the completed/due_date columns and the
      "today" expression, so the aggregate query and its tests share one
      definition of each bucket
"""

from sqlalchemy import ColumnElement, case, func

from planner.core.domain_types import TaskBucket


def bucket_conditions(
    completed: ColumnElement[bool],
    due_date: ColumnElement,
    today: ColumnElement,
) -> dict[TaskBucket, ColumnElement[bool]]:
    """Boolean condition per bucket."""
    not_done = completed.is_(False)
    return {
        TaskBucket.COMPLETED: completed.is_(True),
        TaskBucket.PENDING: not_done & (due_date.is_(None) | (due_date >= today)),
        TaskBucket.OVERDUE: not_done & (due_date < today),
    }


def bucket_counts(
    completed: ColumnElement[bool],
    due_date: ColumnElement,
    today: ColumnElement,
) -> list[ColumnElement[int]]:
    """COUNT(CASE WHEN ... THEN 1 END) per bucket, labelled with the bucket name."""
    return [
        func.count(case((condition, 1))).label(bucket.value)
        for bucket, condition in bucket_conditions(completed, due_date, today).items()
    ]
