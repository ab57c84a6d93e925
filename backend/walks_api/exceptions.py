"""Application exceptions and their HTTP error handlers.

    WalksApiError (base)
    ├── ValidationError      → 400, field → messages mapping
    ├── NotFoundError        → 404
    └── AuthenticationError  → 400 (bad credentials)
"""
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

VALIDATION_FAILED_MESSAGE = "One or more validation errors occurred."
BAD_CREDENTIALS_MESSAGE = "Username or Password is incorrect."


class WalksApiError(Exception):
    """Base exception for all application errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(self.message)


class ValidationError(WalksApiError):
    """Client input failed validation."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, errors: Dict[str, List[str]], message: str = VALIDATION_FAILED_MESSAGE):
        super().__init__(message)
        self.errors = errors


class NotFoundError(WalksApiError):
    """Requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource: str = "Resource"):
        super().__init__(f"{resource} not found")
        self.resource = resource


class AuthenticationError(WalksApiError):
    """Username/password pair did not match a user."""

    # Bad credentials are reported as 400, not 401
    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = BAD_CREDENTIALS_MESSAGE):
        super().__init__(message)


class ErrorCollector:
    """Accumulates field errors, then raises them together."""

    def __init__(self):
        self.errors: Dict[str, List[str]] = {}

    def add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def raise_if_invalid(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)


def _field_name(loc: tuple) -> Optional[str]:
    parts = [part for part in loc if part not in ("body", "path", "query")]
    # JSON decode errors report a character offset, not a field
    if not parts or isinstance(parts[-1], int):
        return None
    name = str(parts[-1])
    if "_" in name:
        return "".join(part.capitalize() for part in name.split("_"))
    return name[0].upper() + name[1:]


async def walks_api_error_handler(request: Request, exc: WalksApiError) -> JSONResponse:
    content: dict = {"detail": exc.message}
    if isinstance(exc, ValidationError):
        content["errors"] = exc.errors
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        field = _field_name(tuple(error.get("loc", ())))
        if field is None:
            # Whole body missing, malformed or not an object
            if error.get("type") == "missing":
                message = "request cannot be empty."
            else:
                message = error.get("msg", "request is invalid.")
            errors.setdefault("request", []).append(message)
            continue
        errors.setdefault(field, []).append(error.get("msg", "Invalid value."))
    logger.debug("Request validation failed for %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": VALIDATION_FAILED_MESSAGE, "errors": errors},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's error handlers to a FastAPI app."""
    app.add_exception_handler(WalksApiError, walks_api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
