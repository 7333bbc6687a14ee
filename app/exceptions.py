# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response shares one shape:
#   {"success": false, "error": ..., "message": ..., "code": ...}
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class EmailBackendException(Exception):
    """
    Base exception for the Email Backend API.

    All custom exceptions inherit from this class.
    `error` is a short title, `message` the human-readable explanation.
    """

    def __init__(
        self,
        message: str,
        code: str = "EMAIL_BACKEND_ERROR",
        status_code: int = 500,
        error: str = "Request failed",
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.error = error
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "success": False,
            "error": self.error,
            "message": self.message,
            "code": self.code,
        }
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Validation Exceptions
# =============================================================================

class ValidationError(EmailBackendException):
    """Raised when a record has missing or malformed fields."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
            status_code=400,
            error="Validation failed",
            details=details,
        )


class InvalidTeamError(ValidationError):
    """Raised when an application names a team that doesn't exist."""

    def __init__(self, team_name: str, available_teams: list[str]):
        super().__init__(
            message=f'Team "{team_name}" not found. Please use one of the existing teams.',
            details={"team": team_name, "availableTeams": available_teams},
        )
        self.code = "INVALID_TEAM"
        self.error = "Invalid team"


class InvalidStatusError(ValidationError):
    """Raised when a status update is missing or outside the allowed values."""

    def __init__(self, status: str | None, allowed: list[str]):
        if status is None:
            message = "Please provide a status value"
        else:
            message = f"Status must be one of: {', '.join(allowed)}"
        super().__init__(
            message=message,
            details={"status": status, "allowedStatuses": allowed},
        )
        self.code = "INVALID_STATUS"
        self.error = "Status is required" if status is None else "Invalid status"


# =============================================================================
# Lookup Exceptions
# =============================================================================

class NotFoundError(EmailBackendException):
    """Raised when a record identifier doesn't exist."""

    def __init__(self, resource: str, record_id: str):
        super().__init__(
            message=f'{resource} with ID "{record_id}" does not exist',
            code=f"{resource.upper()}_NOT_FOUND",
            status_code=404,
            error=f"{resource} not found",
            details={"id": record_id},
        )


class ApplicationNotFoundError(NotFoundError):
    """Raised when an application ID doesn't exist."""

    def __init__(self, application_id: str):
        super().__init__("Application", application_id)


class TeamNotFoundError(NotFoundError):
    """Raised when a team ID doesn't exist."""

    def __init__(self, team_id: str):
        super().__init__("Team", team_id)


class ConflictError(EmailBackendException):
    """Raised when a team name is already taken (case-insensitive)."""

    def __init__(self, team_name: str, existing_id: str | None = None):
        super().__init__(
            message=f'A team with the name "{team_name}" already exists',
            code="TEAM_EXISTS",
            status_code=400,
            error="Team already exists",
            details={"name": team_name, "existingId": existing_id},
        )


class TeamIdConflictError(EmailBackendException):
    """Raised when a create names an ID another team already uses."""

    def __init__(self, team_id: str):
        super().__init__(
            message=f'A team with ID "{team_id}" already exists',
            code="TEAM_EXISTS",
            status_code=400,
            error="Team already exists",
            details={"existingId": team_id},
        )


# =============================================================================
# Infrastructure Exceptions
# =============================================================================

class TransportError(EmailBackendException):
    """
    Raised by a notification sink when mail delivery fails.

    The email service converts this into a failed SendResult, so it never
    reaches a route handler.
    """

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(
            message=message,
            code="TRANSPORT_ERROR",
            status_code=502,
            error="Email delivery failed",
            details={"cause": repr(cause)} if cause else None,
        )
        self.cause = cause


class StorageError(EmailBackendException):
    """Raised when a collection file cannot be written."""

    def __init__(self, path: str, error: str):
        super().__init__(
            message=f"Failed to write {path}: {error}",
            code="STORAGE_ERROR",
            status_code=500,
            error="Storage failure",
            details={"path": path},
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def email_backend_exception_handler(
    request: Request,
    exc: EmailBackendException
) -> JSONResponse:
    """Convert EmailBackendException to JSON response."""
    log = logger.warning if exc.status_code < 500 else logger.error
    log(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body/query validation errors.

    Malformed payloads are client errors, reported as 400 like every
    other validation failure.
    """
    errors = exc.errors()
    fields = [".".join(str(part) for part in err.get("loc", ())[1:]) for err in errors]
    message = "Invalid request: " + ", ".join(
        f"{field or 'body'} ({err.get('msg')})" for field, err in zip(fields, errors)
    )
    logger.warning(f"{request.method} {request.url.path} -> 400: {message}")
    return JSONResponse(
        status_code=400,
        content={
            "success": False,
            "error": "Validation failed",
            "message": message,
            "code": "VALIDATION_ERROR",
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """Shape framework HTTP errors (mostly unknown routes) like our own."""
    if exc.status_code == 404:
        content = {
            "success": False,
            "error": "Route not found",
            "path": request.url.path,
        }
    else:
        content = {
            "success": False,
            "error": str(exc.detail),
            "message": str(exc.detail),
        }
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}")
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)
