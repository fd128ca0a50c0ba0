"""Admin Sessions — password login, token check, and logout.

Invariants:
    - POST /admin-login issues a bearer token only for the configured password
    - GET /admin-session answers 200 only for a live token (401 otherwise)
    - POST /admin-logout is idempotent: unknown tokens log out cleanly
"""

from fastapi import APIRouter, Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from petadoption.api.dependencies import bearer_token, require_admin
from petadoption.config import Settings, get_settings
from petadoption.infrastructure.database import get_db
from petadoption.schemas.admin import AdminLoginRequest, AdminLoginResponse
from petadoption.services.admin_auth import issue_admin_token, revoke_admin_token

router = APIRouter(tags=["admin"])


@router.post("/admin-login", response_model=AdminLoginResponse)
async def admin_login(
    body: AdminLoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    token, expires_at = await issue_admin_token(
        db, body.password, settings.admin_password,
        settings.admin_session_ttl_minutes,
    )
    return AdminLoginResponse(token=token, expires_at=expires_at)


@router.get("/admin-session", dependencies=[Depends(require_admin)])
async def admin_session():
    return {"authenticated": True}


@router.post("/admin-logout")
async def admin_logout(
    authorization: str | None = Header(None),
    db: AsyncSession = Depends(get_db),
):
    token = bearer_token(authorization)
    if token is not None:
        await revoke_admin_token(db, token)
    return {"loggedOut": True}
