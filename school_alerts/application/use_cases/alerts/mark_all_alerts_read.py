"""Use case acknowledging every currently active alert."""

from __future__ import annotations

import logging
from datetime import datetime

from school_alerts.infrastructure.database import SessionFactory
from school_alerts.infrastructure.repositories import AlertReadRepository
from school_alerts.utils import ensure_app_timezone, now_in_app_timezone

from .collectors import run_in_session
from .list_alerts import SOURCE_READ_MARKERS, build_current_alerts, fetch_dependents
from .policy import DEFAULT_ALERT_POLICY, AlertPolicy

logger = logging.getLogger(__name__)


async def mark_all_alerts_read(
    session_factory: SessionFactory,
    viewer_id: int,
    *,
    now: datetime | None = None,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> int:
    """Mark the alerts active right now as read and return how many were new.

    The alert list is recomputed here rather than taken from the client, so
    an alert that appeared after the client's last fetch is marked too and one
    that disappeared in the meantime is not. A viewer without dependents has
    nothing to acknowledge, so ``0`` is returned.
    """

    current_time = ensure_app_timezone(now) if now else now_in_app_timezone()
    dependents = await fetch_dependents(session_factory, viewer_id)
    if not dependents:
        return 0
    alerts = await build_current_alerts(
        session_factory, dependents, now=current_time, policy=policy
    )
    alert_ids = [alert.id for alert in alerts]
    marked = await run_in_session(
        session_factory,
        SOURCE_READ_MARKERS,
        lambda session: AlertReadRepository(session).mark_read_bulk(viewer_id, alert_ids),
    )
    logger.info(
        "Marked %d of %d active alerts as read for user %s",
        marked,
        len(alert_ids),
        viewer_id,
    )
    return marked


__all__ = ["mark_all_alerts_read"]
