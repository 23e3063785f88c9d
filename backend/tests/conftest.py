"""Root conftest — shared test configuration."""

import os

# Never touch a real database from tests; keep hashing cheap
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")
