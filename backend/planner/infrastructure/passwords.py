"""Password Hashing — salted one-way hash and verify via werkzeug.security.

Invariants:
    - Plaintext never leaves this module except as the caller's argument
    - Both calls run in the threadpool; the event loop never blocks on hashing
    - Primitive failures surface as PasswordHashError (500), never as a mismatch

Design Decisions:
    - Method string carries algorithm and cost (e.g. pbkdf2:sha256:600000),
      so raising the cost is a settings change; old hashes keep verifying
      because each hash records its own method
"""

import logging

from fastapi.concurrency import run_in_threadpool
from werkzeug.security import check_password_hash, generate_password_hash

from planner.config import get_settings
from planner.core.errors import PasswordHashError

logger = logging.getLogger(__name__)


async def hash_password(plaintext: str) -> str:
    """Return a salted hash of plaintext using the configured method."""
    settings = get_settings()
    try:
        return await run_in_threadpool(
            generate_password_hash,
            plaintext,
            method=settings.password_hash_method,
            salt_length=settings.password_salt_length,
        )
    except (ValueError, TypeError) as e:
        logger.error(f"Password hashing failed: {e}")
        raise PasswordHashError("hash") from e


async def verify_password(plaintext: str | None, stored_hash: str) -> bool:
    """True when plaintext matches stored_hash. A missing plaintext never matches."""
    if plaintext is None:
        return False
    try:
        return await run_in_threadpool(check_password_hash, stored_hash, plaintext)
    except (ValueError, TypeError) as e:
        logger.error(f"Password verification failed: {e}")
        raise PasswordHashError("verify") from e
