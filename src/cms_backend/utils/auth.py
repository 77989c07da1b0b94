# src/cms_backend/utils/auth.py
from __future__ import annotations

from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse

from cms_backend.config import settings
from cms_backend.utils.response import failure

TOKEN_PREFIX = "demo-token-"

# Paths that never need a token
PUBLIC_PATHS = frozenset({"/login", "/health", "/docs", "/docs/oauth2-redirect", "/openapi.json", "/redoc"})


# -------------------------------------------------------------------
# Helpers
# -------------------------------------------------------------------
def _get_header(request: Request, name: str) -> Optional[str]:
    val = request.headers.get(name)
    return val if isinstance(val, str) else None


def parse_bearer(authorization: Optional[str]) -> Optional[str]:
    """'Bearer abc' -> 'abc'; anything else -> None."""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def issue_token(user_id: int) -> str:
    """Opaque placeholder credential handed out by /login."""
    return f"Bearer {TOKEN_PREFIX}{user_id}"


def is_valid_token(token: Optional[str]) -> bool:
    return bool(token) and token.startswith(TOKEN_PREFIX)


# -------------------------------------------------------------------
# Middleware
# -------------------------------------------------------------------
async def bearer_guard(request: Request, call_next):
    """
    Presence check on `Authorization: Bearer <token>`.

    Lenient mode (AUTH_ALLOW_ANY_TOKEN) lets everything through; strict mode
    wants a demo-token-* value. Errors raised in middleware skip the app's
    exception handlers, so the 401 envelope is built here.
    """
    token = parse_bearer(_get_header(request, "authorization"))
    request.state.token = token

    if request.url.path in PUBLIC_PATHS or settings.AUTH_ALLOW_ANY_TOKEN:
        return await call_next(request)

    if not is_valid_token(token):
        return JSONResponse(status_code=401, content=failure(401, "missing or invalid token"))

    return await call_next(request)
