# src/cms_backend/utils/error_handler.py
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from cms_backend.utils.exceptions import DomainError, InvalidInput, Internal, NotFound
from cms_backend.utils.response import failure

logger = logging.getLogger("cms_backend.errors")


def _safe_args(exc: Exception) -> str:
    a = getattr(exc, "args", None)
    return str(a) if a else "No additional details"


def _log_http(request: Request, status_code: int, detail: str, exc: Exception) -> None:
    """
    Log levels:
    - 404 -> INFO (normal noise)
    - 401/403 -> WARNING (auth/permission)
    - other 4xx -> ERROR (client error worth checking)
    - 5xx -> EXCEPTION (stack trace)
    """
    url = str(request.url)
    method = request.method

    if status_code == 404:
        logger.info("404 Not Found: %s %s", method, url)
        return

    if status_code in (401, 403):
        logger.warning("%s: %s %s | detail=%s", status_code, method, url, detail)
        return

    if 400 <= status_code < 500:
        logger.error(
            "%s: %s %s | detail=%s | args=%s",
            status_code,
            method,
            url,
            detail,
            _safe_args(exc),
        )
        return

    logger.error(
        "%s: %s %s | detail=%s",
        status_code,
        method,
        url,
        detail,
        exc_info=(type(exc), exc, exc.__traceback__),
    )


def _json_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=failure(status_code, message))


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "malformed request"
    first = errors[0]
    msg = str(first.get("msg") or "malformed request")
    # pydantic prefixes messages raised from validators
    if msg.startswith("Value error, "):
        msg = msg[len("Value error, "):]
    loc = [str(p) for p in first.get("loc", ()) if p not in ("body", "query", "path")]
    if loc and first.get("type") != "value_error":
        return f"{'.'.join(loc)}: {msg}"
    return msg


async def custom_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Turn every error into the {code, message, data: null} envelope.

    Order matters: DomainError first (raised by handlers and stores), then
    routing errors, request validation, storage errors and finally anything
    else as a 500.
    """
    # -----------------------------
    # 1) Domain errors
    # -----------------------------
    if isinstance(exc, DomainError):
        _log_http(request, exc.status_code, exc.message, exc)
        return _json_error(exc.status_code, exc.message)

    # -----------------------------
    # 2) Starlette / FastAPI HTTPException (routing 404, 405, ...)
    # -----------------------------
    if isinstance(exc, StarletteHTTPException):
        status = int(exc.status_code)
        detail = NotFound.default_message if status == 404 else str(exc.detail)
        _log_http(request, status, detail, exc)
        return _json_error(status, detail)

    # -----------------------------
    # 3) Validation error (reported as 400, not FastAPI's 422)
    # -----------------------------
    if isinstance(exc, RequestValidationError):
        err = InvalidInput(_validation_message(exc))
        _log_http(request, err.status_code, err.message, exc)
        return _json_error(err.status_code, err.message)

    # -----------------------------
    # 4) Storage failure / anything unexpected
    # -----------------------------
    if isinstance(exc, SQLAlchemyError):
        err = Internal("database operation failed")
    else:
        err = Internal()
    _log_http(request, err.status_code, str(exc) or err.message, exc)
    return _json_error(err.status_code, err.message)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, custom_exception_handler)
    # Starlette HTTPException covers FastAPI's subclass and routing 404s
    app.add_exception_handler(StarletteHTTPException, custom_exception_handler)
    app.add_exception_handler(RequestValidationError, custom_exception_handler)
    # Catch-all
    app.add_exception_handler(Exception, custom_exception_handler)
