"""User ORM — account row holding the password hash.

Invariants:
    - Primary key column is user_id (exposed as User.id)
    - password holds a werkzeug hash string, never plaintext
    - email is NOT unique at schema level; signup checks with a lookup first

Design Decisions:
    - No unique constraint on email: matches the deployed schema, so two
      concurrent signups with one email can both succeed (known race)
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from planner.db.base import Base


class User(Base):
    """Account owning notes and tasks."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(
        "user_id", Integer, primary_key=True, autoincrement=True,
    )
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False, index=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
