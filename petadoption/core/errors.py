"""Error Hierarchy — typed, categorized exceptions for every pet-adoption failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Business-rule errors are 400-level; store and upstream errors are 500
    - to_response() produces the flat {"error": message, "code": code} envelope
      the views read (they only look at the "error" string)

Design Decisions:
    - Single hierarchy with PetAdoptionError base: one global handler catches all
    - DatabaseError keeps the raw driver message (surfaced to the admin as-is)
"""

from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    BUSINESS_RULE = "business_rule"
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    STORAGE = "storage"


class PetAdoptionError(Exception):
    """Base exception for all pet-adoption errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AlreadyAdoptedError(PetAdoptionError):
    """The caller's IP address already holds an adoption."""
    def __init__(self, ip: str):
        super().__init__(
            "You have already adopted a pet",
            "ALREADY_ADOPTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, 400,
        )
        self.ip = ip


class AuthenticationError(PetAdoptionError):
    """Admin password or session token rejected."""
    def __init__(self, message: str = "Admin authentication required"):
        super().__init__(
            message, "AUTHENTICATION_FAILED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, 401,
        )


class ResourceNotFoundError(PetAdoptionError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(PetAdoptionError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str):
        super().__init__(
            message, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, 500,
        )
        self.operation = operation


class ExternalServiceError(PetAdoptionError):
    """An outbound HTTP call (IP lookup, messaging) failed."""
    def __init__(self, message: str, service: str):
        super().__init__(
            message, "EXTERNAL_SERVICE_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, 500,
        )
        self.service = service


class ImageStorageError(PetAdoptionError):
    """Uploaded image could not be stored."""
    def __init__(self, message: str):
        super().__init__(
            message, "IMAGE_STORAGE_ERROR", ErrorCategory.STORAGE,
            ErrorSeverity.CRITICAL, 500,
        )
