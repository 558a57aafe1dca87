"""API exceptions and the handlers rendering them as response envelopes."""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .i18n import locale_from_request, translate

logger = logging.getLogger(__name__)

# SQLSTATE codes of the constraint violations the services translate
UNIQUE_VIOLATION = "23505"
FOREIGN_KEY_VIOLATION = "23503"


class ApiError(HTTPException):
    """
    Base exception for errors returned to API clients.

    Carries a message key rather than a message; the key is localized when
    the response is rendered, using the language of the request.
    """

    def __init__(
        self,
        status_code: int,
        message_key: str,
        extensions: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize API error.

        Args:
            status_code: HTTP status code
            message_key: Message catalog key describing the problem
            extensions: Additional fields merged into the response body
            headers: HTTP headers to include in response
        """
        self.message_key = message_key
        self.extensions = extensions or {}
        super().__init__(status_code=status_code, detail=message_key, headers=headers)

    def to_content(self, locale: str) -> Dict[str, Any]:
        """Build the ``{success: false, message, ...}`` response body."""
        content: Dict[str, Any] = {
            "success": False,
            "message": translate(self.message_key, locale),
        }
        content.update(self.extensions)
        return content


class ValidationError(ApiError):
    """Exception for missing or malformed input."""

    def __init__(
        self,
        message_key: str = "common.validation_failed",
        errors: Optional[list] = None,
    ):
        extensions = {}
        if errors:
            extensions["errors"] = errors
        super().__init__(status_code=400, message_key=message_key, extensions=extensions)


class AuthenticationError(ApiError):
    """Exception for missing, invalid or expired credentials."""

    def __init__(self, message_key: str = "auth.not_authorized"):
        super().__init__(
            status_code=401,
            message_key=message_key,
            headers={"WWW-Authenticate": "Bearer"},
        )


class AuthorizationError(ApiError):
    """Exception for authenticated users acting on resources they do not own."""

    def __init__(self, message_key: str = "common.forbidden"):
        super().__init__(status_code=403, message_key=message_key)


class NotFoundError(ApiError):
    """Exception for resource not found errors."""

    def __init__(
        self,
        resource_type: str = "resource",
        resource_id: Optional[str] = None,
        message_key: str = "common.not_found",
    ):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(status_code=404, message_key=message_key)


class ConflictError(ApiError):
    """Exception for duplicates of resources that must be unique."""

    def __init__(self, message_key: str = "common.conflict"):
        super().__init__(status_code=409, message_key=message_key)


class InternalServerError(ApiError):
    """Exception for unexpected failures. Details stay in the server log."""

    def __init__(
        self,
        message_key: str = "common.internal_error",
        error_id: Optional[str] = None,
    ):
        self.error_id = error_id or str(uuid.uuid4())
        super().__init__(
            status_code=500,
            message_key=message_key,
            extensions={"errorId": self.error_id},
        )


def integrity_error_kind(exc: IntegrityError) -> Optional[str]:
    """
    Classify a database integrity error.

    PostgreSQL drivers expose the SQLSTATE on the wrapped DBAPI error; SQLite
    only reports a message, which is matched as a fallback.

    Returns:
        "unique", "foreign_key" or None when the violation is of another kind
    """
    orig = exc.orig
    code = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if code == UNIQUE_VIOLATION:
        return "unique"
    if code == FOREIGN_KEY_VIOLATION:
        return "foreign_key"

    message = str(orig).lower()
    if "unique constraint" in message or "duplicate key" in message:
        return "unique"
    if "foreign key constraint" in message:
        return "foreign_key"
    return None


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    """
    Exception handler for API errors.

    Args:
        request: FastAPI request object
        exc: API error

    Returns:
        JSONResponse: Envelope with the localized message
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(locale_from_request(request)),
        headers=exc.headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures as 400 envelopes with per-field errors.

    Args:
        request: FastAPI request object
        exc: Validation error raised while parsing the request

    Returns:
        JSONResponse: Envelope listing the invalid fields
    """
    errors = [
        {
            "field": ".".join(str(part) for part in error["loc"] if part != "body"),
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content=ValidationError(errors=errors).to_content(locale_from_request(request)),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Last-resort handler converting unhandled exceptions to a 500 envelope.

    Args:
        request: FastAPI request object
        exc: Unhandled exception

    Returns:
        JSONResponse: Envelope without any internal detail
    """
    error = InternalServerError()
    logger.error(
        "Unhandled exception",
        extra={
            "error_id": error.error_id,
            "path": request.url.path,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=error.to_content(locale_from_request(request)),
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Render framework HTTP errors (unknown route, wrong method) as envelopes.

    Args:
        request: FastAPI request object
        exc: HTTP exception raised outside the API error hierarchy

    Returns:
        JSONResponse: Envelope carrying the framework's detail message
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )
