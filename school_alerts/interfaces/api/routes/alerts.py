"""Endpoints exposing the guardian alert feed and its read state."""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from school_alerts.application.use_cases.alerts import (
    AlertError,
    AlertPolicy,
    AlertSourceUnavailableError,
    GuardianNotFoundError,
    InvalidAlertIdError,
    list_alerts as list_alerts_uc,
    mark_alert_read as mark_alert_read_uc,
    mark_all_alerts_read as mark_all_alerts_read_uc,
    summarize_alerts as summarize_alerts_uc,
)
from school_alerts.domain.entities import Alert, AlertSummary, User
from school_alerts.infrastructure.database import (
    SessionFactory,
    get_db,
    get_session_factory,
)
from school_alerts.interfaces.api.dependencies import (
    get_alert_policy,
    get_current_active_user,
    get_current_time,
)
from school_alerts.interfaces.api.schemas import AlertAck, AlertRead, AlertSummaryRead

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/alerts", tags=["alerts"])


def _to_http_error(exc: AlertError) -> HTTPException:
    if isinstance(exc, GuardianNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc))
    if isinstance(exc, InvalidAlertIdError):
        return HTTPException(status_code=422, detail=str(exc))
    if isinstance(exc, AlertSourceUnavailableError):
        return HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Alerts are temporarily unavailable",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))


def _alert_to_schema(alert: Alert) -> AlertRead:
    return AlertRead(
        id=alert.id,
        title=alert.title,
        message=alert.message,
        type=alert.type,
        created_at=alert.created_at,
        read=alert.read,
    )


def _summary_to_schema(summary: AlertSummary) -> AlertSummaryRead:
    return AlertSummaryRead(
        total=summary.total,
        unread=summary.unread,
        unread_by_type={
            alert_type.value: count
            for alert_type, count in summary.unread_by_type.items()
        },
    )


@router.get("/", response_model=list[AlertRead])
async def read_alerts(
    current_user: User = Depends(get_current_active_user),
    session_factory: SessionFactory = Depends(get_session_factory),
    now: datetime = Depends(get_current_time),
    policy: AlertPolicy = Depends(get_alert_policy),
) -> list[AlertRead]:
    """Return the alerts of the authenticated guardian, newest first."""

    try:
        alerts = await list_alerts_uc(
            session_factory, current_user.id, now=now, policy=policy
        )
    except AlertError as exc:
        raise _to_http_error(exc) from exc
    return [_alert_to_schema(alert) for alert in alerts]


@router.get("/summary", response_model=AlertSummaryRead)
async def read_alert_summary(
    current_user: User = Depends(get_current_active_user),
    session_factory: SessionFactory = Depends(get_session_factory),
    now: datetime = Depends(get_current_time),
    policy: AlertPolicy = Depends(get_alert_policy),
) -> AlertSummaryRead:
    """Return total and unread counters for the notification badge."""

    try:
        summary = await summarize_alerts_uc(
            session_factory, current_user.id, now=now, policy=policy
        )
    except AlertError as exc:
        raise _to_http_error(exc) from exc
    return _summary_to_schema(summary)


@router.patch("/read-all", response_model=AlertAck)
async def mark_all_alerts_read(
    current_user: User = Depends(get_current_active_user),
    session_factory: SessionFactory = Depends(get_session_factory),
    now: datetime = Depends(get_current_time),
    policy: AlertPolicy = Depends(get_alert_policy),
) -> AlertAck:
    """Mark every alert active at this moment as read."""

    try:
        marked = await mark_all_alerts_read_uc(
            session_factory, current_user.id, now=now, policy=policy
        )
    except AlertError as exc:
        raise _to_http_error(exc) from exc
    return AlertAck(message="All alerts marked as read", marked=marked)


@router.patch("/{alert_id}/read", response_model=AlertAck)
def mark_alert_read(
    alert_id: str,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_active_user),
) -> AlertAck:
    """Mark a single alert as read, whether or not it is still active."""

    try:
        normalized = mark_alert_read_uc(db, current_user.id, alert_id)
    except AlertSourceUnavailableError as exc:
        logger.warning(
            "Could not store read marker %s for user %s", alert_id, current_user.id
        )
        raise _to_http_error(exc) from exc
    except AlertError as exc:
        raise _to_http_error(exc) from exc
    return AlertAck(message="Alert marked as read", id=normalized)


__all__ = ["router"]
