"""Admin Authentication — password login issuing DB-backed session tokens.

Invariants:
    - Login succeeds only when ADMIN_PASSWORD is configured and matches
      (constant-time comparison)
    - Tokens are 256-bit urlsafe random strings; only their sha256 is stored
    - A token is valid until expires_at; logout deletes it immediately
"""

import hashlib
import logging
import secrets
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.core.errors import AuthenticationError
from petadoption.models.admin_session import AdminSession

logger = logging.getLogger(__name__)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()


def password_matches(candidate: str, expected: str) -> bool:
    if not expected:
        return False
    return secrets.compare_digest(
        candidate.encode("utf-8"), expected.encode("utf-8"),
    )


async def issue_admin_token(
    db: AsyncSession, password: str, expected_password: str, ttl_minutes: int,
) -> tuple[str, datetime]:
    """Check the password and persist a new session; returns (token, expires_at)."""
    if not password_matches(password, expected_password):
        logger.warning("Admin login rejected")
        raise AuthenticationError("Incorrect password")

    now = datetime.now(timezone.utc)
    expires_at = now + timedelta(minutes=ttl_minutes)
    token = secrets.token_urlsafe(32)

    # Expired sessions are pruned on each login
    await db.execute(delete(AdminSession).where(AdminSession.expires_at <= now))
    db.add(AdminSession(
        token_hash=hash_token(token), created_at=now, expires_at=expires_at,
    ))
    await db.commit()
    logger.info("Admin session issued")
    return token, expires_at


async def is_valid_admin_token(db: AsyncSession, token: str) -> bool:
    result = await db.execute(
        select(AdminSession.token_hash).where(
            AdminSession.token_hash == hash_token(token),
            AdminSession.expires_at > datetime.now(timezone.utc),
        ),
    )
    return result.scalar_one_or_none() is not None


async def revoke_admin_token(db: AsyncSession, token: str) -> bool:
    result = await db.execute(
        delete(AdminSession).where(AdminSession.token_hash == hash_token(token)),
    )
    await db.commit()
    return bool(result.rowcount)
