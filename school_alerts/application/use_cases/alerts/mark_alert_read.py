"""Use case acknowledging a single alert."""

from __future__ import annotations

import re
from typing import Final

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from school_alerts.domain.entities import ALERT_TAGS
from school_alerts.infrastructure.repositories import AlertReadRepository

from .errors import AlertSourceUnavailableError, InvalidAlertIdError

_MAX_ALERT_ID_LENGTH: Final[int] = 120
_ALERT_ID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:%s)-[A-Za-z0-9_]+$" % "|".join(re.escape(tag) for tag in ALERT_TAGS)
)


def validate_alert_id(alert_id: str) -> str:
    """Return ``alert_id`` stripped, or raise when it has no known shape."""

    candidate = (alert_id or "").strip()
    if len(candidate) > _MAX_ALERT_ID_LENGTH or not _ALERT_ID_PATTERN.match(candidate):
        raise InvalidAlertIdError(alert_id)
    return candidate


def mark_alert_read(session: Session, viewer_id: int, alert_id: str) -> str:
    """Store the viewer's acknowledgment of ``alert_id``.

    The alert does not have to be active: markers for alerts that are no
    longer synthesized are kept and simply never match. Repeating the call is
    a no-op. Returns the normalized alert id.
    """

    normalized = validate_alert_id(alert_id)
    try:
        AlertReadRepository(session).mark_read(viewer_id, normalized)
    except SQLAlchemyError as exc:
        session.rollback()
        raise AlertSourceUnavailableError("read_markers") from exc
    return normalized


__all__ = ["mark_alert_read", "validate_alert_id"]
