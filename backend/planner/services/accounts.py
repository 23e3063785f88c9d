"""Account Handlers — signup, login, password reset, profile and task summary.

Invariants:
    - Password hashes are produced and checked only through infrastructure/passwords.py
    - Login failures are soft: returned as {"success": False, ...}, never raised
    - Reset-password leaves the stored hash untouched unless the old password verifies
    - Summary buckets come from one aggregate query; every task lands in at most one

Design Decisions:
    - Signup duplicate check is a lookup followed by an insert, not a
      constraint: two concurrent signups with one email can both pass the
      lookup before either commits (known race, kept for schema compatibility)
    - Reset-password is verify-then-update without a transaction spanning both
      statements: a concurrent reset between the two may be overwritten
    - Login answers 200 + success flag while reset-password answers 401;
      both contracts are kept as existing clients depend on them
"""

import logging

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.domain_types import TaskBucket, UserId
from planner.core.errors import (
    DuplicateResourceError, ErrorContext, InvalidCredentialsError,
    ResourceNotFoundError,
)
from planner.core.task_summary import bucket_counts
from planner.infrastructure.passwords import hash_password, verify_password
from planner.models.task import Task
from planner.models.user import User
from planner.schemas.user import (
    LoginRequest, PasswordResetRequest, SignupRequest, TaskSummaryResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)


async def _find_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email).limit(1))
    return result.scalars().first()


async def signup(db: AsyncSession, body: SignupRequest) -> dict:
    """Register a user. Raises DuplicateResourceError if the email is taken."""
    if await _find_user_by_email(db, body.email) is not None:
        raise DuplicateResourceError("Email already in use", "email")

    user = User(
        full_name=body.full_name,
        email=body.email,
        password=await hash_password(body.password),
    )
    db.add(user)
    await db.commit()
    logger.info("User registered", extra={"user_id": user.id})
    return {"success": True, "message": "User registered successfully"}


async def login(db: AsyncSession, body: LoginRequest) -> dict:
    """Check credentials. Never raises for bad credentials."""
    user = None
    if body.email:
        user = await _find_user_by_email(db, body.email)
    if user is None:
        logger.warning("Login for unknown email")
        return {"success": False, "message": "User not found"}

    if not await verify_password(body.password, user.password):
        logger.warning("Login with wrong password", extra={"user_id": user.id})
        return {"success": False, "message": "Wrong password"}

    return {"success": True, "userId": user.id}


async def reset_password(db: AsyncSession, body: PasswordResetRequest) -> dict:
    """Replace the stored hash after verifying the old password."""
    ctx = ErrorContext(user_id=body.user_id)
    result = await db.execute(
        select(User.password).where(User.id == body.user_id),
    )
    stored_hash = result.scalar_one_or_none()
    if stored_hash is None:
        raise ResourceNotFoundError("User", body.user_id, ctx)

    if not await verify_password(body.old_password, stored_hash):
        raise InvalidCredentialsError("Old password is incorrect", ctx)

    new_hash = await hash_password(body.new_password)
    await db.execute(
        update(User).where(User.id == body.user_id).values(password=new_hash),
    )
    await db.commit()
    logger.info("Password updated", extra={"user_id": body.user_id})
    return {"success": True, "message": "Password updated successfully!"}


async def get_user(db: AsyncSession, user_id: UserId) -> UserResponse:
    """Public profile of one user. Raises ResourceNotFoundError."""
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise ResourceNotFoundError("User", user_id, ErrorContext(user_id=user_id))
    return UserResponse.model_validate(user)


async def get_task_summary(db: AsyncSession, user_id: UserId) -> TaskSummaryResponse:
    """Completed / pending / overdue counts in one pass over the user's tasks."""
    result = await db.execute(
        select(
            *bucket_counts(Task.completed, Task.due_date, func.current_date()),
        ).where(Task.user_id == user_id),
    )
    row = result.one()
    return TaskSummaryResponse(**{
        bucket.value: int(row._mapping[bucket.value] or 0) for bucket in TaskBucket
    })
