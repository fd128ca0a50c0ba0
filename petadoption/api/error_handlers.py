"""Error Handlers — map exceptions to the {"error", "code"} JSON envelope.

Invariants:
    - PetAdoptionError → its own http_status and to_response() body
    - SQLAlchemyError raised outside a managed session → 500 DATABASE_ERROR,
      message taken from the driver
    - RequestValidationError (bad JSON, missing form field, non-integer id) → 400
    - Anything else → 500 INTERNAL_ERROR with a fixed message

Design Decisions:
    - One registration helper per layer, all wired from register_error_handlers()
    - Validation failures are 400 rather than FastAPI's 422: clients only
      distinguish success from "bad request"
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from petadoption.core.errors import DatabaseError, ErrorSeverity, PetAdoptionError
from petadoption.infrastructure.database import raw_error_message

logger = logging.getLogger(__name__)

SEVERITY_LOG_LEVELS = {
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}

INTERNAL_ERROR_BODY = {
    "error": "An unexpected error occurred",
    "code": "INTERNAL_ERROR",
}


def register_error_handlers(app: FastAPI) -> None:
    """Install every handler on the app."""
    _register_domain_handler(app)
    _register_store_handler(app)
    _register_validation_handler(app)
    _register_fallback_handler(app)


def _error_response(request: Request, error: PetAdoptionError) -> JSONResponse:
    logger.log(
        SEVERITY_LOG_LEVELS[error.severity],
        f"{type(error).__name__} on {request.method} {request.url.path}: {error.message}",
        extra={"error_code": error.code, "path": request.url.path},
    )
    return JSONResponse(status_code=error.http_status, content=error.to_response())


def _register_domain_handler(app: FastAPI) -> None:

    @app.exception_handler(PetAdoptionError)
    async def handle_domain_error(request: Request, exc: PetAdoptionError):
        return _error_response(request, exc)


def _register_store_handler(app: FastAPI) -> None:

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        return _error_response(
            request, DatabaseError(raw_error_message(exc), "query"),
        )


def _register_validation_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError,
    ):
        details = [
            {
                "field": ".".join(str(part) for part in err["loc"]),
                "message": err["msg"],
                "type": err["type"],
            }
            for err in exc.errors()
        ]
        logger.warning(
            f"Rejected {request.method} {request.url.path}: {len(details)} invalid field(s)",
            extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "Invalid request data",
                "code": "VALIDATION_ERROR",
                "details": details,
            },
        )


def _register_fallback_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            f"Unhandled {type(exc).__name__} on {request.url.path}",
            exc_info=exc,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=INTERNAL_ERROR_BODY,
        )
