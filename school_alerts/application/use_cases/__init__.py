"""Aggregate application use cases."""

from .alerts import list_alerts, mark_alert_read, mark_all_alerts_read

__all__ = [
    "list_alerts",
    "mark_alert_read",
    "mark_all_alerts_read",
]
