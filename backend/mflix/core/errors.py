"""
errors.py – domain error taxonomy + FastAPI handlers

Services raise the AppError subclasses below; the handlers registered by
`install_error_handlers` turn every failure into a JSON `{"error": ...}`
body so nothing reaches the caller as an unhandled fault.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError
from starlette.exceptions import HTTPException

log = logging.getLogger(__name__)


class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Bad request"


class Conflict(AppError):
    # the public API reports duplicates as 400, not 409
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists"


class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid credentials"


class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Internal(AppError):
    pass


def _error(status_code: int, message: str, headers: dict | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message}, headers=headers)


def _describe_validation(exc: RequestValidationError) -> str:
    """First validation problem as `field: message` (e.g. `body.email: Field required`)."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    return f"{loc}: {first.get('msg', 'invalid')}" if loc else first.get("msg", "Invalid request")


# ────────────────────────── handlers ───────────────────────────────────
async def _app_error(_: Request, exc: AppError) -> JSONResponse:
    if exc.status_code >= 500:
        log.error("internal error: %s", exc.message)
    return _error(exc.status_code, exc.message)


async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
    return _error(status.HTTP_400_BAD_REQUEST, _describe_validation(exc))


async def _http_error(_: Request, exc: HTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def _store_error(request: Request, exc: PyMongoError) -> JSONResponse:
    log.error("store error on %s %s", request.method, request.url.path, exc_info=exc)
    return await _app_error(request, Internal(str(exc) or None))


async def _unhandled(request: Request, exc: Exception) -> JSONResponse:
    log.error("unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc) or Internal.default_message)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, _app_error)
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(HTTPException, _http_error)
    app.add_exception_handler(PyMongoError, _store_error)
    # starlette still re-raises after this one runs; it only shapes the body
    app.add_exception_handler(Exception, _unhandled)
