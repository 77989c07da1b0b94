# src/cms_backend/utils/logger.py
from __future__ import annotations

import logging
import time

from fastapi import Request

from cms_backend.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

access_logger = logging.getLogger("cms_backend.access")


def setup_logging(level: str | None = None) -> None:
    """Configure the root logger once; later calls are no-ops."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
    )


async def log_requests(request: Request, call_next):
    """Log `method path -> status (ms)` for every request."""
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    access_logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response
