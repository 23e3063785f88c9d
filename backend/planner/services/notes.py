"""Note Handlers — list, create, pin toggle, delete.

Invariants:
    - Every query is scoped by a single id (user_id for lists, note id otherwise)
    - create returns the row as stored, including the generated id
    - update writes is_pinned only and reports success even when no row matched

Design Decisions:
    - No existence check on update: clients treat the acknowledgment as
      fire-and-forget; an unmatched id is logged, not reported
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.domain_types import NoteId, UserId
from planner.core.errors import ErrorContext, ResourceNotFoundError
from planner.models.note import Note
from planner.schemas.note import NoteCreate, NoteResponse, NoteUpdateRequest

logger = logging.getLogger(__name__)


async def list_notes(db: AsyncSession, user_id: UserId) -> list[NoteResponse]:
    result = await db.execute(select(Note).where(Note.user_id == user_id))
    return [NoteResponse.model_validate(n) for n in result.scalars().all()]


async def create_note(db: AsyncSession, body: NoteCreate) -> NoteResponse:
    """Insert a note and return it materialized."""
    note = Note(
        title=body.title,
        content=body.content,
        creation_date=body.creation_date,
        user_id=body.user_id,
    )
    db.add(note)
    await db.commit()
    await db.refresh(note)
    logger.info("Note created", extra={"note_id": note.id, "user_id": note.user_id})
    return NoteResponse.model_validate(note)


async def update_note(db: AsyncSession, body: NoteUpdateRequest) -> int:
    """Overwrite the pinned flag. Returns the affected row count."""
    result = await db.execute(
        update(Note).where(Note.id == body.note_id).values(is_pinned=body.is_pinned),
    )
    await db.commit()
    if result.rowcount == 0:
        logger.warning("Note update matched no row", extra={"note_id": body.note_id})
    return result.rowcount


async def delete_note(db: AsyncSession, note_id: NoteId) -> None:
    """Delete one note. Raises ResourceNotFoundError when nothing matched."""
    result = await db.execute(delete(Note).where(Note.id == note_id))
    if result.rowcount == 0:
        await db.rollback()
        raise ResourceNotFoundError(
            "Note", note_id, ErrorContext(resource_id=note_id),
        )
    await db.commit()
    logger.info("Note deleted", extra={"note_id": note_id})
