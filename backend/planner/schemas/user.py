"""Account Schemas — signup, login, password reset and profile contracts.

Invariants:
    - SignupRequest and PasswordResetRequest fields are required and non-empty
    - LoginRequest fields are optional: an absent email is a soft "User not found"
    - UserResponse never carries the password hash
"""

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """Signup body; all three fields required."""
    full_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class PasswordResetRequest(BaseModel):
    """Password reset body; the old password is verified before the overwrite."""
    user_id: int
    old_password: str = Field(min_length=1)
    new_password: str = Field(min_length=1)


class UserResponse(BaseModel):
    """Public profile."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    email: str


class TaskSummaryResponse(BaseModel):
    completed: int = 0
    pending: int = 0
    overdue: int = 0
