"""Task Schemas — create/update bodies and the listed task.

Invariants:
    - TaskUpdateRequest always carries both flags; they are written together
    - TaskUpdateRequest keeps the camelCase taskId key existing clients send
    - due_date is a calendar date (or null: never overdue); a full ISO
      datetime is truncated to its date part
"""

from datetime import date, datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskCreate(BaseModel):
    title: str
    description: str | None = None
    creation_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    due_date: date | None = None
    completed: bool = False
    user_id: int

    @field_validator("due_date", mode="before")
    @classmethod
    def truncate_to_date(cls, v):
        """Clients send toISOString() values; only the calendar day is kept."""
        if isinstance(v, datetime):
            return v.date()
        if isinstance(v, str) and "T" in v:
            return v.split("T", 1)[0]
        return v


class TaskUpdateRequest(BaseModel):
    """Pin and completion toggles, written in one UPDATE."""
    task_id: int = Field(alias="taskId")
    is_pinned: bool
    completed: bool


class TaskResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: str | None
    creation_date: datetime
    due_date: date | None
    completed: bool
    is_pinned: bool
    user_id: int
