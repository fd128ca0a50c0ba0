"""HTML Pages — server-rendered public listing (/) and admin (/admin) pages.

Invariants:
    - Pages never touch the database: each request builds a PetsApiClient and a
      fresh view, renders it, and throws both away
    - The visitor's resolved IP is forwarded to the API so adoptions and checks
      are attributed to the visitor
    - The admin session token travels in an HTTP-only cookie, set on successful
      login and cleared on logout

Design Decisions:
    - Form posts render the resulting page directly (alerts shown inline);
      only logout redirects
    - The adoption form posts to / for both Submit and Back (action=cancel)
    - API_BASE_URL unset → the API is called in-process through ASGITransport
"""

import logging
from pathlib import Path
from typing import AsyncGenerator

import httpx
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from petadoption.api.dependencies import get_client_ip
from petadoption.config import Settings, get_settings
from petadoption.views.admin import AdminView
from petadoption.views.api_client import PetsApiClient
from petadoption.views.public_listing import PublicListingView

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pages"], include_in_schema=False)

templates = Jinja2Templates(
    directory=str(Path(__file__).resolve().parents[2] / "templates"),
)

ADMIN_COOKIE = "admin_token"
IN_PROCESS_BASE_URL = "http://petadoption.internal"


async def page_api_client(
    request: Request,
    settings: Settings = Depends(get_settings),
    client_ip: str = Depends(get_client_ip),
) -> AsyncGenerator[PetsApiClient, None]:
    """API client acting on behalf of the visitor behind this request."""
    if settings.api_base_url:
        base_url, transport = settings.api_base_url, None
    else:
        base_url, transport = IN_PROCESS_BASE_URL, httpx.ASGITransport(app=request.app)
    async with PetsApiClient(
        base_url,
        transport=transport,
        forwarded_for=client_ip,
        token=request.cookies.get(ADMIN_COOKIE),
        timeout_seconds=settings.outbound_timeout_seconds,
    ) as client:
        yield client


async def _upload_tuple(image: UploadFile | None) -> tuple[str, bytes, str] | None:
    if image is None or not image.filename:
        return None
    content_type = image.content_type or "application/octet-stream"
    return image.filename, await image.read(), content_type


def _render_public(request: Request, view: PublicListingView) -> HTMLResponse:
    return templates.TemplateResponse(request, "public.html", {"view": view})


def _render_admin(request: Request, view: AdminView) -> HTMLResponse:
    return templates.TemplateResponse(request, "admin.html", {"view": view})


# ─── Public listing ─────────────────────────────────────────────

@router.get("/", response_class=HTMLResponse)
async def public_page(
    request: Request,
    adopt: int | None = None,
    client: PetsApiClient = Depends(page_api_client),
):
    view = PublicListingView(client)
    await view.load()
    if adopt is not None:
        await view.begin_adoption(adopt)
    return _render_public(request, view)


@router.post("/", response_class=HTMLResponse)
async def submit_adoption(
    request: Request,
    pet_id: int = Form(...),
    adoptee_name: str = Form(""),
    action: str = Form("adopt"),
    client: PetsApiClient = Depends(page_api_client),
):
    view = PublicListingView(client)
    await view.load()
    if action == "cancel":
        view.cancel_adoption()
    else:
        await view.submit_adoption(pet_id, adoptee_name)
    return _render_public(request, view)


# ─── Admin ──────────────────────────────────────────────────────

async def _load_admin(client: PetsApiClient) -> AdminView:
    view = AdminView(client)
    await view.load()
    if not view.authenticated and client.token:
        view.alert("Admin session expired, please log in again")
    return view


@router.get("/admin", response_class=HTMLResponse)
async def admin_page(
    request: Request,
    edit: int | None = None,
    client: PetsApiClient = Depends(page_api_client),
):
    view = await _load_admin(client)
    if view.authenticated and edit is not None:
        pet = view.find_pet(edit)
        if pet is not None:
            view.start_edit(pet)
    return _render_admin(request, view)


@router.post("/admin/login", response_class=HTMLResponse)
async def admin_login(
    request: Request,
    password: str = Form(""),
    settings: Settings = Depends(get_settings),
    client: PetsApiClient = Depends(page_api_client),
):
    view = AdminView(client)
    await view.fetch_page_details()
    logged_in = await view.login(password)
    response = _render_admin(request, view)
    if logged_in:
        response.set_cookie(
            ADMIN_COOKIE,
            client.token,
            max_age=settings.admin_session_ttl_minutes * 60,
            httponly=True,
            samesite="lax",
        )
    return response


@router.post("/admin/logout")
async def admin_logout(client: PetsApiClient = Depends(page_api_client)):
    view = AdminView(client)
    await view.logout()
    response = RedirectResponse("/admin", status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(ADMIN_COOKIE)
    return response


@router.post("/admin/animals", response_class=HTMLResponse)
async def admin_submit_animal(
    request: Request,
    name: str = Form(""),
    description: str = Form(""),
    edit_id: int | None = Form(None),
    image: UploadFile | None = File(None),
    client: PetsApiClient = Depends(page_api_client),
):
    view = await _load_admin(client)
    if view.authenticated:
        await view.submit_pet(name, description, await _upload_tuple(image), edit_id)
    return _render_admin(request, view)


@router.post("/admin/animals/{pet_id}/remove", response_class=HTMLResponse)
async def admin_remove_animal(
    request: Request,
    pet_id: int,
    client: PetsApiClient = Depends(page_api_client),
):
    view = await _load_admin(client)
    if view.authenticated:
        await view.remove_pet(pet_id)
    return _render_admin(request, view)


@router.post("/admin/animals/{pet_id}/unadopt", response_class=HTMLResponse)
async def admin_unadopt_animal(
    request: Request,
    pet_id: int,
    client: PetsApiClient = Depends(page_api_client),
):
    view = await _load_admin(client)
    if view.authenticated:
        await view.unadopt_pet(pet_id)
    return _render_admin(request, view)


@router.post("/admin/page-details", response_class=HTMLResponse)
async def admin_update_page_details(
    request: Request,
    title: str = Form(""),
    description: str = Form(""),
    client: PetsApiClient = Depends(page_api_client),
):
    view = await _load_admin(client)
    if view.authenticated:
        await view.update_page_details(title, description)
    return _render_admin(request, view)


@router.post("/admin/website-title", response_class=HTMLResponse)
async def admin_update_website_title(
    request: Request,
    title: str = Form(""),
    client: PetsApiClient = Depends(page_api_client),
):
    view = await _load_admin(client)
    if view.authenticated:
        await view.update_website_title(title)
    return _render_admin(request, view)
