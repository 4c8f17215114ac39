"""Exceptions raised by the alert use cases."""

from __future__ import annotations


class AlertError(Exception):
    """Base class for alert feed failures."""


class GuardianNotFoundError(AlertError, LookupError):
    """Raised when the viewer has no dependents to build alerts for."""

    def __init__(self, message: str = "Parent not found") -> None:
        super().__init__(message)


class AlertSourceUnavailableError(AlertError):
    """Raised when a source collector or the read-state store fails."""

    def __init__(self, source: str, message: str | None = None) -> None:
        self.source = source
        super().__init__(message or f"Alert source '{source}' is unavailable")


class InvalidAlertIdError(AlertError, ValueError):
    """Raised when an alert id does not match any known alert shape."""

    def __init__(self, alert_id: str) -> None:
        self.alert_id = alert_id
        super().__init__(f"Invalid alert id '{alert_id}'")


__all__ = [
    "AlertError",
    "AlertSourceUnavailableError",
    "GuardianNotFoundError",
    "InvalidAlertIdError",
]
