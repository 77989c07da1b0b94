# src/cms_backend/utils/timezone.py
from __future__ import annotations

import logging
from datetime import datetime

import pytz

from cms_backend.config import settings

# -----------------------------------------------------------------------------
# Configure local timezone with fallback
# -----------------------------------------------------------------------------
try:
    LOCAL_TZ = pytz.timezone(settings.TIMEZONE)
except pytz.UnknownTimeZoneError as exc:
    logging.getLogger(__name__).warning(
        "Invalid TIMEZONE '%s' in environment; falling back to UTC. Error: %s",
        settings.TIMEZONE,
        exc,
    )
    LOCAL_TZ = pytz.utc


def now_local() -> datetime:
    """
    Return the current time as a timezone-aware datetime in the configured local timezone.
    Used for every server-assigned create_at / update_at value.
    """
    return datetime.now(LOCAL_TZ)  # 2025-10-04 13:40:15+08:00

