"""Pet Adoption API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PetAdoptionError → {"error", "code"} JSON responses
    - CORS configured from settings (not hardcoded)
    - Database schema created and seeded on startup via lifespan context manager;
      the session manager is stored on app.state, not in a module global

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Uploaded images mounted at /images; the built frontend (if present) is
      mounted last at / so every API and page route takes precedence
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from petadoption.api.error_handlers import register_error_handlers
from petadoption.api.routes import (
    adoption, admin_auth, health, pages, pets, site_text,
)
from petadoption.config import get_settings
from petadoption.db.seed import seed_database
from petadoption.infrastructure.database import DatabaseSessionManager
from petadoption.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


class SPAStaticFiles(StaticFiles):
    """Static files with index.html fallback for client-side routes."""

    async def get_response(self, path: str, scope):
        try:
            return await super().get_response(path, scope)
        except StarletteHTTPException as e:
            if e.status_code != 404:
                raise
            return await super().get_response("index.html", scope)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    settings.upload_dir.mkdir(parents=True, exist_ok=True)

    manager = DatabaseSessionManager(settings.database_url)
    await manager.create_schema()
    if settings.seed_on_startup:
        async with manager.session() as db:
            await seed_database(db, reset_pets=settings.reset_pets_on_startup)
    app.state.db_manager = manager
    logger.info(f"Pet Adoption API started on port {settings.port}")
    yield
    logger.info("Pet Adoption API shutting down")
    await manager.dispose()


app = FastAPI(
    title="Pet Adoption API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(pets.router)
app.include_router(adoption.router)
app.include_router(site_text.router)
app.include_router(admin_auth.router)
app.include_router(pages.router)

app.mount(
    "/images",
    StaticFiles(directory=settings.upload_dir, check_dir=False),
    name="images",
)
if settings.frontend_dir.is_dir():
    app.mount(
        "/", SPAStaticFiles(directory=settings.frontend_dir, html=True),
        name="frontend",
    )
