"""Admin Session ORM — issued admin tokens, stored as sha256 digests.

Invariants:
    - The raw token is never persisted; lookups hash the presented token
    - A session is valid while expires_at is in the future
"""

from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from petadoption.db.base import Base


class AdminSession(Base):
    """One row per successful admin login."""
    __tablename__ = "admin_sessions"

    token_hash: Mapped[str] = mapped_column(String(64), primary_key=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
