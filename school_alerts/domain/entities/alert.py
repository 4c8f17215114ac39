"""Domain entities describing synthesized guardian alerts."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum


class AlertType(str, Enum):
    """Urgency classification of an alert."""

    INFO = "info"
    WARNING = "warning"
    URGENT = "urgent"


ALERT_TAG_FEE = "fee"
ALERT_TAG_HOMEWORK_DUE = "homework-due"
ALERT_TAG_HOMEWORK_OVERDUE = "homework-overdue"
ALERT_TAG_EXAM_RESULT = "exam-result"
ALERT_TAG_ATTENDANCE = "attendance"

ALERT_TAGS: tuple[str, ...] = (
    ALERT_TAG_FEE,
    ALERT_TAG_HOMEWORK_DUE,
    ALERT_TAG_HOMEWORK_OVERDUE,
    ALERT_TAG_EXAM_RESULT,
    ALERT_TAG_ATTENDANCE,
)


def build_alert_id(tag: str, source_id: int | str) -> str:
    """Return the stable identifier of the alert fired by ``tag`` for a record."""

    return f"{tag}-{source_id}"


@dataclass(frozen=True)
class Alert:
    """Notification computed on demand from a source domain record.

    ``created_at`` is the date that drives the alert (due date, result date or
    absence date) and is only used for ordering.
    """

    id: str
    title: str
    message: str
    type: AlertType
    created_at: datetime
    read: bool = False

    def with_read_state(self, read: bool) -> "Alert":
        """Return a copy of the alert annotated with ``read``."""

        return replace(self, read=read)


@dataclass(frozen=True)
class AlertSummary:
    """Counters displayed on the guardian's notification badge."""

    total: int
    unread: int
    unread_by_type: dict[AlertType, int] = field(default_factory=dict)


__all__ = [
    "AlertSummary",
    "ALERT_TAGS",
    "ALERT_TAG_ATTENDANCE",
    "ALERT_TAG_EXAM_RESULT",
    "ALERT_TAG_FEE",
    "ALERT_TAG_HOMEWORK_DUE",
    "ALERT_TAG_HOMEWORK_OVERDUE",
    "Alert",
    "AlertType",
    "build_alert_id",
]
