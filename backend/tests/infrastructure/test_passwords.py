"""Password hashing — salted, verifiable, failures mapped to PasswordHashError."""

import pytest

from planner.config import get_settings
from planner.core.errors import PasswordHashError
from planner.infrastructure.passwords import hash_password, verify_password


async def test_hash_differs_from_plaintext_and_verifies():
    hashed = await hash_password("correct horse")
    assert hashed != "correct horse"
    assert await verify_password("correct horse", hashed)
    assert not await verify_password("battery staple", hashed)


async def test_same_password_hashes_differently():
    assert await hash_password("same") != await hash_password("same")


async def test_missing_plaintext_never_verifies():
    hashed = await hash_password("x")
    assert await verify_password(None, hashed) is False


async def test_corrupt_stored_hash_does_not_verify():
    assert await verify_password("x", "not-a-hash") is False


async def test_bad_method_raises_password_hash_error(monkeypatch):
    monkeypatch.setattr(get_settings(), "password_hash_method", "rot13")
    with pytest.raises(PasswordHashError):
        await hash_password("x")
