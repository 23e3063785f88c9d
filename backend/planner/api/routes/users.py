"""Account Routes — signup, login, profile, task summary, password reset.

Invariants:
    - /users/summary/{user_id} registered before /users/{user_id}
    - Login always answers 200; the body's success flag carries the outcome
    - Password hashes never appear in any response

Design Decisions:
    - /user/resetpassword keeps its singular prefix: existing clients call it
"""

import logging

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from planner.core.domain_types import UserId
from planner.infrastructure.database import get_db
from planner.schemas.user import (
    LoginRequest, PasswordResetRequest, SignupRequest, TaskSummaryResponse,
    UserResponse,
)
from planner.services import accounts

logger = logging.getLogger(__name__)
router = APIRouter(tags=["users"])


@router.post("/users/signup", status_code=status.HTTP_201_CREATED)
async def signup(body: SignupRequest, db: AsyncSession = Depends(get_db)):
    """Register a new user."""
    return await accounts.signup(db, body)


@router.post("/users/login", status_code=status.HTTP_200_OK)
async def login(body: LoginRequest, db: AsyncSession = Depends(get_db)):
    """Check credentials; failures are soft (200 + success=false)."""
    return await accounts.login(db, body)


@router.get("/users/summary/{user_id}", response_model=TaskSummaryResponse)
async def get_task_summary(user_id: int, db: AsyncSession = Depends(get_db)):
    """Completed / pending / overdue task counts for a user."""
    return await accounts.get_task_summary(db, UserId(user_id))


@router.get("/users/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, db: AsyncSession = Depends(get_db)):
    """Public profile of a user."""
    return await accounts.get_user(db, UserId(user_id))


@router.post("/user/resetpassword", status_code=status.HTTP_200_OK)
async def reset_password(
    body: PasswordResetRequest, db: AsyncSession = Depends(get_db),
):
    """Replace the password after verifying the old one."""
    return await accounts.reset_password(db, body)
