"""Use case computing the unread badge of a guardian."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from school_alerts.domain.entities import Alert, AlertSummary, AlertType
from school_alerts.infrastructure.database import SessionFactory

from .list_alerts import list_alerts
from .policy import DEFAULT_ALERT_POLICY, AlertPolicy


def count_alerts(alerts: Iterable[Alert]) -> AlertSummary:
    total = 0
    unread_by_type = {alert_type: 0 for alert_type in AlertType}
    for alert in alerts:
        total += 1
        if not alert.read:
            unread_by_type[alert.type] += 1
    return AlertSummary(
        total=total,
        unread=sum(unread_by_type.values()),
        unread_by_type=unread_by_type,
    )


async def summarize_alerts(
    session_factory: SessionFactory,
    viewer_id: int,
    *,
    now: datetime | None = None,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> AlertSummary:
    alerts = await list_alerts(session_factory, viewer_id, now=now, policy=policy)
    return count_alerts(alerts)


__all__ = ["count_alerts", "summarize_alerts"]
