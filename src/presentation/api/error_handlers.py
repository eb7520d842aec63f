"""Mapping of domain errors to HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from domain.exceptions import (
    AdmissionDeniedError,
    DomainError,
    InvalidTransitionError,
    NotFoundError,
    ValidationError,
)
from infrastructure.config import get_logger
from presentation.schemas import ErrorResponse

logger = get_logger(__name__)


def _status_for(exc: DomainError) -> int:
    if isinstance(exc, NotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, (InvalidTransitionError, AdmissionDeniedError)):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_400_BAD_REQUEST


def _errors_for(exc: DomainError) -> list[str]:
    if isinstance(exc, AdmissionDeniedError):
        return [exc.reason]
    if isinstance(exc, InvalidTransitionError) and exc.detail:
        return [exc.detail]
    return [exc.message]


def _envelope(status_code: int, message: str, errors: list[str]) -> JSONResponse:
    body = ErrorResponse(message=message, errors=errors)
    return JSONResponse(status_code=status_code, content=body.model_dump())


async def domain_exception_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle domain-level exceptions."""
    logger.warning(f"Domain exception on {request.method} {request.url.path}: {exc.message}")
    return _envelope(_status_for(exc), exc.message, _errors_for(exc))


async def request_validation_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report pydantic request validation failures in the error envelope."""
    errors = [
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    ]
    return _envelope(status.HTTP_422_UNPROCESSABLE_ENTITY, "Invalid request", errors)


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all exception handler."""
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return _envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Internal server error",
        ["Internal server error"],
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, global_exception_handler)
