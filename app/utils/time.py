"""Time utility helpers."""

from __future__ import annotations

import re
from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

from app.config import settings


def now_utc() -> datetime:
    """Return current timezone-aware UTC datetime."""
    return datetime.now(tz=UTC)


def utc_today() -> date:
    """Return current UTC date."""
    return now_utc().date()


def local_today(tz_name: str | None = None) -> date:
    """Return today's calendar date in the configured reference timezone."""
    zone = ZoneInfo(tz_name or settings.timezone)
    return now_utc().astimezone(zone).date()


def parse_iso_date(value: str | None, default: date | None = None) -> date:
    """Parse an ISO date string with an optional fallback default.

    Timestamps are accepted too; the date part before ``T`` or a space is
    used. Anything else after the date is rejected.
    """
    if not value:
        if default is None:
            raise ValueError("Missing required date value")
        return default
    text = re.split(r"[T ]", str(value).strip(), maxsplit=1)[0]
    return date.fromisoformat(text)


def date_window(start: date, days: int) -> tuple[date, date]:
    """Return the inclusive ``(start, start + days)`` range."""
    return start, start + timedelta(days=max(0, days))
