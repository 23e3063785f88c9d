"""Note Schemas — create/update bodies and the materialized note.

Invariants:
    - NoteUpdateRequest keeps the camelCase noteId key existing clients send
    - creation_date defaults to now (UTC) when the client omits it
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class NoteCreate(BaseModel):
    title: str
    content: str | None = None
    creation_date: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    user_id: int


class NoteUpdateRequest(BaseModel):
    """Pin toggle, the only mutable note field."""
    note_id: int = Field(alias="noteId")
    is_pinned: bool


class NoteResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str | None
    creation_date: datetime
    is_pinned: bool
    user_id: int
