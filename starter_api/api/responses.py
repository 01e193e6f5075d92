"""
Error envelopes and status mapping for the HTTP layer.

Every failing endpoint answers ``{"error": ..., "message": ...}``. Expected
failures arrive as :class:`ServiceError` and are mapped by their kind.
"""

from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from starter_api.core.exceptions import ErrorKind, ServiceError
from starter_api.schemas.user import ErrorResponse

STATUS_BY_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
}

GENERIC_ERROR_MESSAGE = "An unexpected error occurred"


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=error, message=message).model_dump())


def model_response(model: BaseModel, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Serialize a schema with its camelCase aliases."""
    return JSONResponse(status_code=status_code, content=model.model_dump(mode="json", by_alias=True))


def unexpected_error(error: str, exc: Exception, expose: bool = True) -> JSONResponse:
    """
    Build the 500 envelope for an unexpected exception.

    Args:
        error: Route-specific error title
        exc: The exception that escaped the service
        expose: Put the exception message in the body instead of the
            generic one
    """
    message = (str(exc) or "Unknown error") if expose else GENERIC_ERROR_MESSAGE
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, error, message)


def format_validation_errors(errors: list[dict[str, Any]]) -> str:
    """Flatten pydantic error dicts into ``"field: message; ..."``."""
    parts = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ()) if p not in ("body", "query", "path")]
        field = ".".join(loc)
        parts.append(f"{field}: {err.get('msg')}" if field else str(err.get("msg")))
    return "; ".join(parts)


async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(exc.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return error_response(status_code, exc.title, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, "Validation error", format_validation_errors(exc.errors()))
