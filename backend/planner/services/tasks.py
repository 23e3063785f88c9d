"""Task Handlers — list, create, flag update, delete.

Invariants:
    - create acknowledges without returning the row
    - update writes is_pinned and completed together, success even when no row matched
    - delete reports 404 only through ResourceNotFoundError
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.domain_types import TaskId, UserId
from planner.core.errors import ErrorContext, ResourceNotFoundError
from planner.models.task import Task
from planner.schemas.task import TaskCreate, TaskResponse, TaskUpdateRequest

logger = logging.getLogger(__name__)


async def list_tasks(db: AsyncSession, user_id: UserId) -> list[TaskResponse]:
    result = await db.execute(select(Task).where(Task.user_id == user_id))
    return [TaskResponse.model_validate(t) for t in result.scalars().all()]


async def create_task(db: AsyncSession, body: TaskCreate) -> None:
    task = Task(
        title=body.title,
        description=body.description,
        creation_date=body.creation_date,
        due_date=body.due_date,
        completed=body.completed,
        user_id=body.user_id,
    )
    db.add(task)
    await db.commit()
    logger.info("Task created", extra={"task_id": task.id, "user_id": task.user_id})


async def update_task(db: AsyncSession, body: TaskUpdateRequest) -> int:
    """Overwrite pinned and completed flags. Returns the affected row count."""
    result = await db.execute(
        update(Task)
        .where(Task.id == body.task_id)
        .values(is_pinned=body.is_pinned, completed=body.completed),
    )
    await db.commit()
    if result.rowcount == 0:
        logger.warning("Task update matched no row", extra={"task_id": body.task_id})
    return result.rowcount


async def delete_task(db: AsyncSession, task_id: TaskId) -> None:
    result = await db.execute(delete(Task).where(Task.id == task_id))
    if result.rowcount == 0:
        await db.rollback()
        raise ResourceNotFoundError(
            "Task", task_id, ErrorContext(resource_id=task_id),
        )
    await db.commit()
    logger.info("Task deleted", extra={"task_id": task_id})
