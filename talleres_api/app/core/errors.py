"""
Error taxonomy and JSON error responses.

Every error leaves the API as ``{"message": "..."}``.  Services raise
``ValidationError`` for rejected payloads and endpoints raise
``NotFoundError`` for unknown ids; both derive from ``ApiError`` and
are rendered by a single handler.  Unmatched routes (and known paths
hit with an unsupported method) collapse into a plain 404.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

ENDPOINT_NOT_FOUND = "Endpoint no encontrado"
INVALID_BODY = "El cuerpo de la petición debe ser un objeto JSON válido."


class ApiError(Exception):
    """Base class for errors that map directly to an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ApiError):
    """The payload (or merged candidate) violates a field or integrity rule."""

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(ApiError):
    """The referenced id does not exist in its collection."""

    status_code = status.HTTP_404_NOT_FOUND


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return _message(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected body on %s %s: %s", request.method, request.url.path, exc.errors())
    return _message(status.HTTP_400_BAD_REQUEST, INVALID_BODY)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _message(status.HTTP_404_NOT_FOUND, ENDPOINT_NOT_FOUND)
    return _message(exc.status_code, str(exc.detail))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the JSON error handlers on ``app``."""
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
