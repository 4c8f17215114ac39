"""Pure rules turning source domain records into alerts.

Every function receives the same ``now`` so that one response never mixes
two readings of the clock across a day boundary.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from school_alerts.domain.entities import (
    ALERT_TAG_ATTENDANCE,
    ALERT_TAG_EXAM_RESULT,
    ALERT_TAG_FEE,
    ALERT_TAG_HOMEWORK_DUE,
    ALERT_TAG_HOMEWORK_OVERDUE,
    ATTENDANCE_STATUS_ABSENT,
    HOMEWORK_STATUS_OVERDUE,
    HOMEWORK_STATUS_PENDING,
    Alert,
    AlertType,
    AttendanceRecord,
    ExamResult,
    FeePayment,
    HomeworkSubmission,
    build_alert_id,
)
from school_alerts.utils import days_since, days_until, ensure_app_timezone

from .policy import DEFAULT_ALERT_POLICY, AlertPolicy


@dataclass(frozen=True)
class AlertSources:
    """Records gathered by the collectors for one viewer."""

    fees: Sequence[FeePayment] = field(default_factory=tuple)
    homework: Sequence[HomeworkSubmission] = field(default_factory=tuple)
    exams: Sequence[ExamResult] = field(default_factory=tuple)
    attendance: Sequence[AttendanceRecord] = field(default_factory=tuple)


def _format_amount(amount: Decimal) -> str:
    if amount == amount.to_integral_value():
        return str(int(amount))
    return f"{amount:.2f}"


def _due_phrase(days: int) -> str:
    if days <= 0:
        return "today"
    return f"in {days} day{'' if days == 1 else 's'}"


def fee_alert(
    payment: FeePayment,
    now: datetime,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> Alert:
    """Return the alert of an open fee payment.

    The collector already restricted payments to the lookahead window, so a
    payment always yields an alert: ``urgent`` when due today or overdue,
    ``warning`` otherwise.
    """

    days = days_until(payment.due_date, now)
    amount = _format_amount(payment.amount_due)
    return Alert(
        id=build_alert_id(ALERT_TAG_FEE, payment.id),
        title="Fee Payment Due",
        message=(
            f"Fee payment of {policy.currency_symbol}{amount} is due "
            f"{_due_phrase(days)} for {payment.student.full_name}"
        ),
        type=AlertType.URGENT if days <= 0 else AlertType.WARNING,
        created_at=ensure_app_timezone(payment.due_date),
    )


def homework_alert(
    submission: HomeworkSubmission,
    now: datetime,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> Alert | None:
    """Return the alert of a homework submission, if any.

    Overdue submissions and pending ones due within the warning window use
    different id tags, so acknowledging "due soon" never hides "overdue".
    """

    student_name = submission.student.full_name
    due_date = ensure_app_timezone(submission.due_date)
    if submission.status == HOMEWORK_STATUS_OVERDUE:
        return Alert(
            id=build_alert_id(ALERT_TAG_HOMEWORK_OVERDUE, submission.id),
            title="Homework Overdue",
            message=f"{submission.title} is overdue for {student_name}",
            type=AlertType.URGENT,
            created_at=due_date,
        )
    if submission.status != HOMEWORK_STATUS_PENDING:
        return None

    days = days_until(submission.due_date, now)
    if days > policy.homework_warning_days:
        return None
    return Alert(
        id=build_alert_id(ALERT_TAG_HOMEWORK_DUE, submission.id),
        title="Homework Due Soon",
        message=f"{submission.title} is due {_due_phrase(days)} for {student_name}",
        type=AlertType.URGENT if days <= 0 else AlertType.WARNING,
        created_at=due_date,
    )


def exam_alert(
    result: ExamResult,
    now: datetime,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> Alert | None:
    if days_since(result.recorded_at, now) > policy.exam_recent_days:
        return None
    return Alert(
        id=build_alert_id(ALERT_TAG_EXAM_RESULT, result.id),
        title="New Exam Result",
        message=(
            f"Exam result for {result.exam_name or 'Exam'} - "
            f"{result.subject_name or 'Subject'} is available for "
            f"{result.student.full_name}"
        ),
        type=AlertType.INFO,
        created_at=ensure_app_timezone(result.recorded_at),
    )


def attendance_alert(record: AttendanceRecord) -> Alert | None:
    """Return a warning when the latest attendance record is an absence."""

    if record.status != ATTENDANCE_STATUS_ABSENT:
        return None
    absence_date = ensure_app_timezone(record.date)
    return Alert(
        id=build_alert_id(ALERT_TAG_ATTENDANCE, record.id),
        title="Absence Recorded",
        message=(
            f"{record.student.full_name} was marked absent on "
            f"{absence_date.date().isoformat()}"
        ),
        type=AlertType.WARNING,
        created_at=absence_date,
    )


def sort_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    """Order alerts by ``created_at`` descending; ties keep their input order."""

    return sorted(alerts, key=lambda alert: alert.created_at, reverse=True)


def synthesize_alerts(
    sources: AlertSources,
    now: datetime,
    policy: AlertPolicy = DEFAULT_ALERT_POLICY,
) -> list[Alert]:
    """Build the merged, sorted alert list for the collected ``sources``."""

    candidates: list[Alert | None] = []
    candidates.extend(fee_alert(payment, now, policy) for payment in sources.fees)
    candidates.extend(
        homework_alert(submission, now, policy) for submission in sources.homework
    )
    candidates.extend(exam_alert(result, now, policy) for result in sources.exams)
    candidates.extend(attendance_alert(record) for record in sources.attendance)
    return sort_alerts(alert for alert in candidates if alert is not None)


def apply_read_state(alerts: Iterable[Alert], read_ids: set[str]) -> list[Alert]:
    """Annotate ``alerts`` with membership in the viewer's read markers."""

    return [alert.with_read_state(alert.id in read_ids) for alert in alerts]


__all__ = [
    "AlertSources",
    "apply_read_state",
    "attendance_alert",
    "exam_alert",
    "fee_alert",
    "homework_alert",
    "sort_alerts",
    "synthesize_alerts",
]
