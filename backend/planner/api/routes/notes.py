"""Note Routes — CRUD over a user's notes.

Invariants:
    - PUT /notes/update answers 201 "Note Updated" whether or not a row matched
    - DELETE answers 204 with an empty body, 404 when nothing was deleted
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.domain_types import NoteId, UserId
from planner.infrastructure.database import get_db
from planner.schemas.note import NoteCreate, NoteResponse, NoteUpdateRequest
from planner.services import notes

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("/{user_id}", response_model=list[NoteResponse])
async def list_notes(user_id: int, db: AsyncSession = Depends(get_db)):
    return await notes.list_notes(db, UserId(user_id))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_note(body: NoteCreate, db: AsyncSession = Depends(get_db)):
    """Create a note and return it with its generated id."""
    note = await notes.create_note(db, body)
    return {"success": True, "note": note}


@router.put("/update", response_class=PlainTextResponse)
async def update_note(
    body: NoteUpdateRequest, db: AsyncSession = Depends(get_db),
):
    """Set a note's pinned flag."""
    await notes.update_note(db, body)
    return PlainTextResponse("Note Updated", status_code=status.HTTP_201_CREATED)


@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_note(note_id: int, db: AsyncSession = Depends(get_db)):
    await notes.delete_note(db, NoteId(note_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
