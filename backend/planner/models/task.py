"""Task ORM — to-do item owned by a user.

Invariants:
    - Always belongs to a User (user_id FK)
    - is_pinned and completed are the only columns mutated after insert
    - Overdue is never stored: completed = false AND due_date < CURRENT_DATE

Design Decisions:
    - due_date is a Date (not timestamp): the overdue rule compares calendar days
"""

from datetime import date, datetime, timezone

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from planner.db.base import Base


class Task(Base):
    """Task entity."""
    __tablename__ = "tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    creation_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    due_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    is_pinned: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.user_id"), nullable=False, index=True,
    )
