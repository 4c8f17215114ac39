"""Helpers for working with timezone-aware datetimes."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from school_alerts.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable (via
    the ``Settings`` model). Plain ``UTC`` and ``UTC+05:30`` style offsets are
    accepted even when the IANA database is not installed.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(tz_name)


def now_in_app_timezone() -> datetime:
    """Return the current time localized to the configured timezone."""

    return datetime.now(tz=get_app_timezone())


def now_in_app_naive_datetime() -> datetime:
    """Return the current localized time without attaching ``tzinfo``."""

    return now_in_app_timezone().replace(tzinfo=None)


def ensure_app_timezone(value: datetime | None) -> datetime | None:
    """Normalize ``value`` so it is expressed in the configured timezone."""

    if value is None:
        return None

    tz = get_app_timezone()
    if value.tzinfo is None:
        return value.replace(tzinfo=tz)
    return value.astimezone(tz)


def ensure_app_naive_datetime(value: datetime | None) -> datetime | None:
    """Return ``value`` localized to the app timezone but without ``tzinfo``.

    Source tables store ``DATETIME`` columns without an offset. This helper
    allows us to keep working with aware datetimes in the domain layer while
    querying with the localized (naive) representation.
    """

    localized = ensure_app_timezone(value)
    if localized is None:
        return None
    return localized.replace(tzinfo=None)


def start_of_app_day(value: datetime) -> datetime:
    """Return midnight of ``value``'s calendar day in the app timezone."""

    return _as_aware(value).replace(hour=0, minute=0, second=0, microsecond=0)


def days_until(target: datetime, now: datetime) -> int:
    """Return the number of calendar days from ``now`` to ``target``.

    Anything due today, at any hour, yields ``0``; overdue dates are negative.
    """

    return (_as_aware(target).date() - _as_aware(now).date()).days


def days_since(moment: datetime, now: datetime) -> int:
    """Return the number of calendar days elapsed between ``moment`` and ``now``."""

    return (_as_aware(now).date() - _as_aware(moment).date()).days


def _as_aware(value: datetime) -> datetime:
    localized = ensure_app_timezone(value)
    if localized is None:  # pragma: no cover - guarded by the signatures
        raise ValueError("A datetime value is required")
    return localized


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    if tz_name.upper() in {"UTC", "GMT", "Z"}:
        return timezone.utc
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return timezone.utc
