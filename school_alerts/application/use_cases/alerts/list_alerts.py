"""Use case building the annotated alert feed of a guardian."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from functools import partial

from school_alerts.domain.entities import Alert, Dependent
from school_alerts.infrastructure.database import SessionFactory
from school_alerts.infrastructure.repositories import (
    AlertReadRepository,
    GuardianRepository,
)
from school_alerts.utils import ensure_app_timezone, now_in_app_timezone

from .collectors import collect_alert_sources, gather_sources, run_in_session
from .errors import GuardianNotFoundError
from .policy import DEFAULT_ALERT_POLICY, AlertPolicy
from .synthesis import apply_read_state, synthesize_alerts

SOURCE_DEPENDENTS = "dependents"
SOURCE_READ_MARKERS = "read_markers"


async def fetch_dependents(
    session_factory: SessionFactory, viewer_id: int
) -> Sequence[Dependent]:
    """Return the viewer's dependents; empty when they have none."""

    return await run_in_session(
        session_factory,
        SOURCE_DEPENDENTS,
        lambda session: GuardianRepository(session).list_dependents(viewer_id),
    )


async def build_current_alerts(
    session_factory: SessionFactory,
    dependents: Sequence[Dependent],
    *,
    now: datetime,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> list[Alert]:
    """Collect, synthesize and sort the alerts active at ``now``."""

    sources = await collect_alert_sources(
        session_factory, dependents, now=now, policy=policy
    )
    return synthesize_alerts(sources, now, policy)


async def list_alerts(
    session_factory: SessionFactory,
    viewer_id: int,
    *,
    now: datetime | None = None,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> list[Alert]:
    """Return the viewer's alerts, newest first, annotated with read state.

    The read markers are fetched in the same round trip as the dependents.
    Nothing is written.
    """

    current_time = ensure_app_timezone(now) if now else now_in_app_timezone()
    fetched = await gather_sources(
        {
            SOURCE_DEPENDENTS: partial(fetch_dependents, session_factory, viewer_id),
            SOURCE_READ_MARKERS: partial(
                run_in_session,
                session_factory,
                SOURCE_READ_MARKERS,
                lambda session: AlertReadRepository(session).list_read_alert_ids(
                    viewer_id
                ),
            ),
        }
    )
    dependents = fetched[SOURCE_DEPENDENTS]
    if not dependents:
        raise GuardianNotFoundError()

    alerts = await build_current_alerts(
        session_factory, dependents, now=current_time, policy=policy
    )
    return apply_read_state(alerts, fetched[SOURCE_READ_MARKERS])


__all__ = [
    "SOURCE_DEPENDENTS",
    "SOURCE_READ_MARKERS",
    "build_current_alerts",
    "fetch_dependents",
    "list_alerts",
]
