"""Global error handling to prevent information disclosure."""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from dog_licence.config import get_settings
from dog_licence.exceptions import DogLicenceError, ValidationError

logger = logging.getLogger(__name__)

# Safe error messages that can be shown to users
SAFE_ERROR_MESSAGES = {
    400: "Invalid request",
    404: "Resource not found",
    405: "Method not allowed",
    422: "Invalid input data",
    500: "Internal server error",
}

# Error messages that are safe to pass through
ALLOWED_ERROR_PATTERNS = [
    "Resource not found",
    "Date of birth is after the evaluation date",
    "Expiring window must not be negative",
]


def is_safe_error_message(message: str) -> bool:
    """Check if an error message is safe to expose to users.

    Args:
        message: Error message to check

    Returns:
        True if message is safe to expose
    """
    message_lower = message.lower()
    return any(pattern.lower() in message_lower for pattern in ALLOWED_ERROR_PATTERNS)


def sanitize_error_detail(detail: Any, status_code: int) -> str:
    """Sanitize error detail to prevent information disclosure.

    Args:
        detail: Original error detail
        status_code: HTTP status code

    Returns:
        Safe error message
    """
    if isinstance(detail, str):
        if is_safe_error_message(detail):
            return detail
    elif isinstance(detail, (list, tuple)):
        # Validation errors - keep only the field name and message
        safe_errors = []
        for error in detail:
            if isinstance(error, dict):
                loc = error.get("loc", [])
                msg = error.get("msg", "Invalid value")
                field = loc[-1] if loc else "field"
                if isinstance(field, str) and not field.startswith("_"):
                    safe_errors.append(f"{field}: {msg}")
        if safe_errors:
            return "; ".join(safe_errors[:3])

    return SAFE_ERROR_MESSAGES.get(status_code, "Request failed")


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with sanitized messages."""
    if get_settings().debug:
        return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})

    safe_detail = sanitize_error_detail(exc.detail, exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": safe_detail})


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle request validation exceptions with sanitized messages.

    Args:
        request: FastAPI request
        exc: Validation exception

    Returns:
        JSONResponse with sanitized error
    """
    logger.warning("Validation error for %s: %s", request.url.path, exc.errors())

    if get_settings().debug:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.errors()},
        )

    safe_detail = sanitize_error_detail(exc.errors(), 422)
    return JSONResponse(
        status_code=422,
        content={"detail": safe_detail},
    )


async def domain_exception_handler(request: Request, exc: DogLicenceError) -> JSONResponse:
    """Map domain exceptions to HTTP responses.

    Args:
        request: FastAPI request
        exc: Domain exception

    Returns:
        JSONResponse with the exception message and details
    """
    if isinstance(exc, ValidationError):
        status_code = status.HTTP_400_BAD_REQUEST
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    logger.info("%s for %s: %s", type(exc).__name__, request.url.path, exc.message)

    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR and not get_settings().debug:
        return JSONResponse(status_code=status_code, content={"detail": SAFE_ERROR_MESSAGES[500]})

    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "details": exc.details},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions without leaking information."""
    logger.error("Unhandled exception for %s: %s", request.url.path, exc, exc_info=True)

    if get_settings().debug:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": str(exc), "type": type(exc).__name__},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": SAFE_ERROR_MESSAGES[500]},
    )
