"""
Error taxonomy and HTTP mapping.
Services raise ReUseError subclasses; handlers registered in main.py render them
as {"error": message} with the matching status code.
"""

import logging
from typing import Any

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class ReUseError(Exception):
    """Base class for errors that map to a client-facing HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Erro interno"

    def __init__(self, message: str | None = None):
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ReUseError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Dados inválidos."

    def __init__(self, message: str | None = None, fields: dict[str, list[str]] | None = None):
        super().__init__(message)
        self.fields = fields or {}


class ConflictError(ReUseError):
    status_code = status.HTTP_409_CONFLICT
    message = "E-mail já cadastrado"


class UnauthorizedError(ReUseError):
    """401 family. Messages stay generic so clients cannot tell which check failed."""

    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidCredentialsError(UnauthorizedError):
    message = "Credenciais inválidas"


class InvalidTokenError(UnauthorizedError):
    message = "Token inválido"


class MissingTokenError(UnauthorizedError):
    message = "Token ausente"


class ForbiddenError(ReUseError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Sem permissão"


class NotFoundError(ReUseError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Não encontrado"


class InternalError(ReUseError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Erro interno"


def field_errors(errors: list[dict[str, Any]]) -> tuple[str, dict[str, list[str]]]:
    """Flatten pydantic errors into (first message, {field: [messages]})."""
    fields: dict[str, list[str]] = {}
    first = None
    for err in errors:
        ctx_error = (err.get("ctx") or {}).get("error")
        msg = str(ctx_error) if err.get("type") == "value_error" and ctx_error else err["msg"]
        names = [part for part in err.get("loc", ()) if isinstance(part, str) and part != "body"]
        if names:
            fields.setdefault(names[-1], []).append(msg)
        if first is None:
            first = msg
    return first or ValidationError.message, fields


def _error_body(message: str, fields: dict[str, list[str]] | None = None) -> dict[str, Any]:
    body: dict[str, Any] = {"error": message}
    if fields:
        body["fields"] = fields
    return body


async def reuse_error_handler(request: Request, exc: ReUseError) -> JSONResponse:
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s %s: %s", request.method, request.url.path, exc)
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(exc.message, getattr(exc, "fields", None)),
        headers=headers,
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed body/path/query -> 400 with the first human-readable reason."""
    message, fields = field_errors(list(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=_error_body(message, fields))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: full detail goes to the log, never to the client."""
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": InternalError.message},
    )
