# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every failure is returned as a JSON body with a stable error code and a
# human-readable message. Stack traces never leave the process.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class AccountsException(Exception):
    """
    Base exception for the Accounts API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "ACCOUNTS_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# User Exceptions
# =============================================================================

class InvalidPasswordError(AccountsException):
    """Raised when password fields break a business rule."""

    def __init__(self, message: str, suggestion: str | None = None):
        super().__init__(
            message=message,
            code="INVALID_PASSWORD",
            status_code=422,
            suggestion=suggestion,
        )


class EmailAlreadyTakenError(AccountsException):
    """Raised when another account already uses the email."""

    def __init__(self, email: str):
        super().__init__(
            message="Email is already taken",
            code="EMAIL_ALREADY_TAKEN",
            status_code=422,
            suggestion="Use a different email address",
            details={"email": email},
        )


class UnprocessableEntityError(AccountsException):
    """Raised when an operation fails or the target user doesn't exist."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message=message,
            code="UNPROCESSABLE_ENTITY",
            status_code=422,
            details=details,
        )


class InternalError(AccountsException):
    """Raised when a collaborator returns something the API can't interpret."""

    def __init__(self, message: str = "An unexpected error occurred"):
        super().__init__(
            message=message,
            code="INTERNAL_ERROR",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def accounts_exception_handler(
    request: Request,
    exc: AccountsException
) -> JSONResponse:
    """
    Convert AccountsException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: [{exc.code}] {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def _format_location(loc: tuple | list) -> str:
    return ".".join(str(part) for part in loc)


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request body validation errors.

    Malformed or missing fields are rejected as a bad request before any
    handler logic runs. The first field error becomes the message.
    """
    errors = [
        {
            "field": _format_location(error.get("loc", ())),
            "message": error.get("msg", "Invalid value"),
        }
        for error in exc.errors()
    ]

    if errors:
        message = f"{errors[0]['field']}: {errors[0]['message']}"
    else:
        message = "Validation error"

    return JSONResponse(
        status_code=400,
        content={
            "detail": message,
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions without leaking internals."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=InternalError().to_dict(),
    )
