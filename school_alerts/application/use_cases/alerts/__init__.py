"""Use cases for the guardian alert feed."""

from .errors import (
    AlertError,
    AlertSourceUnavailableError,
    GuardianNotFoundError,
    InvalidAlertIdError,
)
from .list_alerts import list_alerts
from .mark_alert_read import mark_alert_read, validate_alert_id
from .mark_all_alerts_read import mark_all_alerts_read
from .policy import DEFAULT_ALERT_POLICY, AlertPolicy
from .summarize_alerts import count_alerts, summarize_alerts
from .synthesis import AlertSources, synthesize_alerts

__all__ = [
    "AlertError",
    "AlertPolicy",
    "AlertSourceUnavailableError",
    "AlertSources",
    "DEFAULT_ALERT_POLICY",
    "GuardianNotFoundError",
    "InvalidAlertIdError",
    "count_alerts",
    "list_alerts",
    "mark_alert_read",
    "mark_all_alerts_read",
    "summarize_alerts",
    "synthesize_alerts",
    "validate_alert_id",
]
