"""Custom exceptions and exception handlers.

This module provides structured exception handling with:
- Application error classes mapped to HTTP status codes
- FastAPI exception handlers for consistent error responses
- Structured error response models
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import ORJSONResponse
from redis.exceptions import RedisError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.observability.logging import get_logger
from app.schemas.base import APIResponse


if TYPE_CHECKING:
    from fastapi import Request

logger = get_logger(__name__)


class ErrorDetail(APIResponse):
    """Structured error detail for validation errors."""

    code: str
    message: str
    field: str | None = None


class ErrorResponse(APIResponse):
    """Structured error response, serialized with camelCase keys."""

    error: str
    message: str
    details: list[ErrorDetail] | None = None
    request_id: str | None = None


class AppError(Exception):
    """Base application error.

    Every error the API returns on purpose derives from this class so the
    handler below can render it the same way.
    """

    def __init__(
        self,
        status_code: int,
        error: str,
        message: str,
        details: list[ErrorDetail] | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class NotFoundError(AppError):
    """Resource not found."""

    def __init__(self, resource: str, identifier: Any) -> None:
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            error="NOT_FOUND",
            message=f"{resource} with identifier '{identifier}' not found",
        )


class UnauthorizedError(AppError):
    """Unauthorized access."""

    def __init__(self, message: str = "Could not validate credentials") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            error="UNAUTHORIZED",
            message=message,
        )


class BadRequestError(AppError):
    """Bad request."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="BAD_REQUEST",
            message=message,
        )


class ConfirmationRequiredError(AppError):
    """A destructive action was requested without explicit confirmation."""

    def __init__(self, action: str) -> None:
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            error="CONFIRMATION_REQUIRED",
            message=f"Confirm '{action}' by passing confirm=true",
        )


class ServiceUnavailableError(AppError):
    """A downstream dependency is unavailable."""

    def __init__(self, message: str = "Service temporarily unavailable") -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="SERVICE_UNAVAILABLE",
            message=message,
        )


class PersistenceError(AppError):
    """The change was applied but could not be written to the document store."""

    def __init__(
        self, message: str = "Your changes could not be saved. Please try again."
    ) -> None:
        super().__init__(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            error="PERSISTENCE_ERROR",
            message=message,
        )


class UpstreamError(AppError):
    """A downstream service answered with an unexpected error."""

    def __init__(self, message: str) -> None:
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            error="UPSTREAM_ERROR",
            message=message,
        )


def _get_request_id(request: Request) -> str | None:
    """Extract request ID from request state."""
    return getattr(request.state, "request_id", None)


def setup_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers with the FastAPI application."""

    @app.exception_handler(AppError)
    async def app_error_handler(
        request: Request,
        exc: AppError,
    ) -> ORJSONResponse:
        """Handle application errors."""
        return ORJSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=exc.error,
                message=exc.message,
                details=exc.details,
                request_id=_get_request_id(request),
            ).model_dump(),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> ORJSONResponse:
        """Handle Starlette HTTP exceptions."""
        return ORJSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error="HTTP_ERROR",
                message=str(exc.detail),
                request_id=_get_request_id(request),
            ).model_dump(),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> ORJSONResponse:
        """Handle Pydantic validation errors."""
        details = [
            ErrorDetail(
                code="VALIDATION_ERROR",
                message=error["msg"],
                field=".".join(str(loc) for loc in error["loc"]),
            )
            for error in exc.errors()
        ]
        return ORJSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=ErrorResponse(
                error="VALIDATION_ERROR",
                message="Request validation failed",
                details=details,
                request_id=_get_request_id(request),
            ).model_dump(),
        )

    @app.exception_handler(RedisError)
    async def redis_error_handler(
        request: Request,
        exc: RedisError,
    ) -> ORJSONResponse:
        """Handle document store failures not mapped by a service."""
        logger.opt(exception=exc).error(
            "Document store error",
            path=request.url.path,
        )
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=ErrorResponse(
                error="SERVICE_UNAVAILABLE",
                message="Document store unavailable",
                request_id=_get_request_id(request),
            ).model_dump(),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> ORJSONResponse:
        """Handle unexpected exceptions."""
        logger.opt(exception=exc).error(
            "Unhandled exception",
            path=request.url.path,
        )
        return ORJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(
                error="INTERNAL_SERVER_ERROR",
                message="An unexpected error occurred",
                request_id=_get_request_id(request),
            ).model_dump(),
        )
