"""Admin auth service — password check, token issue, validation, revocation."""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import func, select

from petadoption.core.errors import AuthenticationError
from petadoption.models.admin_session import AdminSession
from petadoption.services.admin_auth import (
    hash_token, is_valid_admin_token, issue_admin_token, password_matches,
    revoke_admin_token,
)


def test_password_matches():
    assert password_matches("secret", "secret") is True
    assert password_matches("Secret", "secret") is False


def test_unset_password_never_matches():
    assert password_matches("", "") is False
    assert password_matches("anything", "") is False


async def test_issue_stores_only_the_hash(test_db):
    token, expires_at = await issue_admin_token(test_db, "pw", "pw", 60)

    stored = (await test_db.execute(select(AdminSession))).scalars().one()
    assert stored.token_hash == hash_token(token)
    assert stored.token_hash != token
    assert expires_at > datetime.now(timezone.utc)


async def test_wrong_password_raises(test_db):
    with pytest.raises(AuthenticationError) as exc_info:
        await issue_admin_token(test_db, "nope", "pw", 60)
    assert exc_info.value.message == "Incorrect password"


async def test_issued_token_is_valid_until_revoked(test_db):
    token, _ = await issue_admin_token(test_db, "pw", "pw", 60)
    assert await is_valid_admin_token(test_db, token) is True

    assert await revoke_admin_token(test_db, token) is True
    assert await is_valid_admin_token(test_db, token) is False
    assert await revoke_admin_token(test_db, token) is False


async def test_unknown_token_is_invalid(test_db):
    assert await is_valid_admin_token(test_db, "made-up") is False


async def test_expired_token_is_invalid_and_pruned(test_db):
    past = datetime.now(timezone.utc) - timedelta(minutes=5)
    test_db.add(AdminSession(
        token_hash=hash_token("old"), created_at=past, expires_at=past,
    ))
    await test_db.commit()
    assert await is_valid_admin_token(test_db, "old") is False

    await issue_admin_token(test_db, "pw", "pw", 60)
    count = await test_db.scalar(select(func.count()).select_from(AdminSession))
    assert count == 1
