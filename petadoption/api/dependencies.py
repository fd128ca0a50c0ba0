"""Request Dependencies — injected collaborators for route handlers.

Invariants:
    - Every outbound collaborator (IP lookup, notifier, image store) is obtained
      through a dependency, so tests replace it with app.dependency_overrides
    - require_admin accepts only "Authorization: Bearer <token>" from /admin-login
      (skipped entirely when ADMIN_AUTH_REQUIRED is false)
"""

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.config import Settings, get_settings
from petadoption.core.client_address import resolve_client_ip
from petadoption.core.errors import AuthenticationError
from petadoption.core.storage_protocols import ImageStore
from petadoption.infrastructure.database import get_db
from petadoption.infrastructure.image_store import LocalImageStore
from petadoption.infrastructure.ip_lookup import IpLookupClient
from petadoption.infrastructure.telegram import TelegramNotifier
from petadoption.services.admin_auth import is_valid_admin_token


def get_client_ip(
    request: Request, settings: Settings = Depends(get_settings),
) -> str:
    """Address the current request is attributed to."""
    peer = request.client.host if request.client else None
    return resolve_client_ip(
        peer, request.headers.get("x-forwarded-for"), settings.trusted_proxies,
    )


def get_ip_lookup(settings: Settings = Depends(get_settings)) -> IpLookupClient:
    return IpLookupClient(settings.ip_lookup_url, settings.outbound_timeout_seconds)


def get_notifier(settings: Settings = Depends(get_settings)) -> TelegramNotifier:
    return TelegramNotifier(
        settings.telegram_bot_token,
        settings.telegram_chat_id,
        api_base=settings.telegram_api_base,
        timeout_seconds=settings.outbound_timeout_seconds,
    )


def get_image_store(settings: Settings = Depends(get_settings)) -> ImageStore:
    return LocalImageStore(settings.upload_dir)


def bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_admin(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject the request unless it carries a live admin session token."""
    if not settings.admin_auth_required:
        return
    token = bearer_token(authorization)
    if token is None or not await is_valid_admin_token(db, token):
        raise AuthenticationError()
