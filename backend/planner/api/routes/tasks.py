"""Task Routes — CRUD over a user's tasks.

Invariants:
    - POST /tasks acknowledges with 201 "Task added" (the row is not returned)
    - PUT /tasks/update answers 201 "Task Updated" whether or not a row matched
    - DELETE answers 204 with an empty body, 404 when nothing was deleted
"""

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.domain_types import TaskId, UserId
from planner.infrastructure.database import get_db
from planner.schemas.task import TaskCreate, TaskResponse, TaskUpdateRequest
from planner.services import tasks

router = APIRouter(prefix="/tasks", tags=["tasks"])


@router.get("/{user_id}", response_model=list[TaskResponse])
async def list_tasks(user_id: int, db: AsyncSession = Depends(get_db)):
    return await tasks.list_tasks(db, UserId(user_id))


@router.post("", response_class=PlainTextResponse)
async def create_task(body: TaskCreate, db: AsyncSession = Depends(get_db)):
    await tasks.create_task(db, body)
    return PlainTextResponse("Task added", status_code=status.HTTP_201_CREATED)


@router.put("/update", response_class=PlainTextResponse)
async def update_task(
    body: TaskUpdateRequest, db: AsyncSession = Depends(get_db),
):
    """Set a task's pinned and completed flags together."""
    await tasks.update_task(db, body)
    return PlainTextResponse("Task Updated", status_code=status.HTTP_201_CREATED)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, db: AsyncSession = Depends(get_db)):
    await tasks.delete_task(db, TaskId(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
