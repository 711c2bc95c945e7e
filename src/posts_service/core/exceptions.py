"""Exception types and the handlers that turn them into JSON error responses."""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

LOGGER = logging.getLogger(__name__)


class PostsServiceError(Exception):
    """Base class for errors raised by the posts service."""


class DatabaseConnectionError(PostsServiceError):
    """Raised when the database stays unreachable for every allowed attempt."""


class SchemaInitializationError(PostsServiceError):
    """Raised when the posts table cannot be created at startup."""


class StorageError(PostsServiceError):
    """Raised when a storage statement fails while serving a request.

    The message is safe to return to clients; the driver error is chained.
    """


def error_response(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def format_validation_errors(exc: RequestValidationError) -> str:
    """Flatten pydantic errors into `loc: msg` pairs joined by `; `."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()))
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Invalid request body"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_validation_errors(exc)
    LOGGER.info(f"Rejected {request.method} {request.url.path} body: {message}")
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))
