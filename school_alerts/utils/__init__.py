"""Utility helpers for reusable functionality."""

from .datetime import (
    days_since,
    days_until,
    ensure_app_naive_datetime,
    ensure_app_timezone,
    get_app_timezone,
    now_in_app_naive_datetime,
    now_in_app_timezone,
    start_of_app_day,
)

__all__ = [
    "days_since",
    "days_until",
    "ensure_app_naive_datetime",
    "ensure_app_timezone",
    "get_app_timezone",
    "now_in_app_naive_datetime",
    "now_in_app_timezone",
    "start_of_app_day",
]
