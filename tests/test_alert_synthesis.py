"""Unit tests for the pure alert synthesis rules."""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

import pytest

from conftest import NOW
from school_alerts.application.use_cases.alerts import (
    AlertPolicy,
    AlertSources,
    count_alerts,
    synthesize_alerts,
)
from school_alerts.application.use_cases.alerts.synthesis import (
    apply_read_state,
    attendance_alert,
    exam_alert,
    fee_alert,
    homework_alert,
    sort_alerts,
)
from school_alerts.domain.entities import (
    Alert,
    AlertType,
    AttendanceRecord,
    Dependent,
    ExamResult,
    FeePayment,
    HomeworkSubmission,
)

RIYA = Dependent(id=1, first_name="Riya", last_name="Sharma")
KABIR = Dependent(id=2, first_name="Kabir", last_name="Sharma")

MIDNIGHT = NOW.replace(hour=0, minute=0)


def _fee(payment_id=7, *, due_date, final="500", paid="0", student=RIYA):
    return FeePayment(
        id=payment_id,
        student=student,
        final_amount=Decimal(final),
        amount_paid=Decimal(paid),
        status="PENDING",
        due_date=due_date,
    )


def _homework(submission_id=3, *, due_date, status="PENDING", title="Algebra worksheet"):
    return HomeworkSubmission(
        id=submission_id,
        student=RIYA,
        title=title,
        status=status,
        due_date=due_date,
    )


def test_fee_due_today_is_urgent():
    alert = fee_alert(_fee(due_date=MIDNIGHT), NOW)

    assert alert.id == "fee-7"
    assert alert.type is AlertType.URGENT
    assert alert.title == "Fee Payment Due"
    assert alert.message == "Fee payment of ₹500 is due today for Riya Sharma"
    assert alert.created_at == MIDNIGHT


def test_overdue_fee_still_reads_due_today():
    alert = fee_alert(_fee(due_date=MIDNIGHT - timedelta(days=3)), NOW)

    assert alert.type is AlertType.URGENT
    assert "due today" in alert.message


@pytest.mark.parametrize(
    ("offset", "phrase"),
    [
        (timedelta(days=1), "due in 1 day for"),
        (timedelta(days=1, hours=14), "due in 1 day for"),
        (timedelta(days=7), "due in 7 days for"),
    ],
)
def test_fee_due_later_is_a_warning(offset, phrase):
    alert = fee_alert(_fee(due_date=NOW + offset), NOW)

    assert alert.type is AlertType.WARNING
    assert phrase in alert.message


@pytest.mark.parametrize("hour", [9, 17, 23])
def test_fee_due_later_today_is_urgent(hour):
    alert = fee_alert(_fee(due_date=NOW.replace(hour=hour, minute=30)), NOW)

    assert alert.type is AlertType.URGENT
    assert "is due today for" in alert.message


def test_fee_amount_due_is_not_clamped():
    alert = fee_alert(_fee(due_date=MIDNIGHT, final="300", paid="450"), NOW)

    assert alert.message.startswith("Fee payment of ₹-150 is due")


def test_fee_amount_keeps_cents_and_configured_currency():
    policy = AlertPolicy(currency_symbol="$")
    alert = fee_alert(_fee(due_date=MIDNIGHT, final="1250.50", paid="0"), NOW, policy)

    assert alert.message.startswith("Fee payment of $1250.50 is due")


def test_overdue_homework_is_urgent():
    alert = homework_alert(_homework(due_date=NOW - timedelta(days=2), status="OVERDUE"), NOW)

    assert alert.id == "homework-overdue-3"
    assert alert.type is AlertType.URGENT
    assert alert.title == "Homework Overdue"
    assert alert.message == "Algebra worksheet is overdue for Riya Sharma"


@pytest.mark.parametrize(
    ("due_date", "expected_type", "phrase"),
    [
        (MIDNIGHT, AlertType.URGENT, "is due today for"),
        (NOW.replace(hour=17), AlertType.URGENT, "is due today for"),
        (NOW + timedelta(days=1), AlertType.WARNING, "is due in 1 day for"),
        (NOW + timedelta(days=2), AlertType.WARNING, "is due in 2 days for"),
        (NOW.replace(hour=23) + timedelta(days=2), AlertType.WARNING, "is due in 2 days for"),
    ],
)
def test_pending_homework_within_two_days(due_date, expected_type, phrase):
    alert = homework_alert(_homework(due_date=due_date), NOW)

    assert alert is not None
    assert alert.id == "homework-due-3"
    assert alert.title == "Homework Due Soon"
    assert alert.type is expected_type
    assert phrase in alert.message


@pytest.mark.parametrize("due_date", [NOW + timedelta(days=3), MIDNIGHT + timedelta(days=3)])
def test_pending_homework_due_in_three_days_is_suppressed(due_date):
    assert homework_alert(_homework(due_date=due_date), NOW) is None


def test_submitted_homework_is_ignored():
    assert homework_alert(_homework(due_date=MIDNIGHT, status="SUBMITTED"), NOW) is None


def test_homework_transition_produces_a_new_alert_id():
    due_soon = homework_alert(_homework(due_date=NOW + timedelta(days=1)), NOW)
    overdue = homework_alert(
        _homework(due_date=NOW + timedelta(days=1), status="OVERDUE"), NOW
    )

    assert due_soon.id != overdue.id


@pytest.mark.parametrize(
    "recorded_at", [NOW - timedelta(days=7), MIDNIGHT - timedelta(days=7)]
)
def test_exam_result_seven_days_old_is_included(recorded_at):
    result = ExamResult(
        id=11,
        student=RIYA,
        exam_name="Mid-term Exam",
        subject_name="Physics",
        recorded_at=recorded_at,
    )

    alert = exam_alert(result, NOW)

    assert alert.id == "exam-result-11"
    assert alert.type is AlertType.INFO
    assert alert.message == (
        "Exam result for Mid-term Exam - Physics is available for Riya Sharma"
    )


@pytest.mark.parametrize(
    "recorded_at", [NOW - timedelta(days=8), NOW - timedelta(days=7, hours=10)]
)
def test_exam_result_eight_days_old_is_excluded(recorded_at):
    result = ExamResult(
        id=11,
        student=RIYA,
        exam_name="Mid-term Exam",
        subject_name="Physics",
        recorded_at=recorded_at,
    )

    assert exam_alert(result, NOW) is None


def test_exam_result_without_names_uses_placeholders():
    result = ExamResult(
        id=12, student=RIYA, exam_name=None, subject_name=None, recorded_at=NOW
    )

    assert "Exam result for Exam - Subject is available" in exam_alert(result, NOW).message


def test_absence_produces_warning():
    record = AttendanceRecord(
        id=5, student=KABIR, date=MIDNIGHT - timedelta(days=1), status="ABSENT"
    )

    alert = attendance_alert(record)

    assert alert.id == "attendance-5"
    assert alert.type is AlertType.WARNING
    assert alert.message == "Kabir Sharma was marked absent on 2026-03-09"


@pytest.mark.parametrize("status", ["PRESENT", "LATE"])
def test_presence_produces_nothing(status):
    record = AttendanceRecord(id=5, student=KABIR, date=MIDNIGHT, status=status)

    assert attendance_alert(record) is None


def test_synthesized_alerts_are_sorted_newest_first():
    sources = AlertSources(
        fees=[_fee(due_date=NOW + timedelta(days=5))],
        homework=[_homework(due_date=NOW + timedelta(days=1))],
        exams=[
            ExamResult(
                id=1,
                student=RIYA,
                exam_name="Unit Test",
                subject_name="English",
                recorded_at=NOW - timedelta(days=2),
            )
        ],
        attendance=[
            AttendanceRecord(
                id=9, student=KABIR, date=MIDNIGHT - timedelta(days=1), status="ABSENT"
            )
        ],
    )

    alerts = synthesize_alerts(sources, NOW)

    assert [alert.id for alert in alerts] == [
        "fee-7",
        "homework-due-3",
        "attendance-9",
        "exam-result-1",
    ]
    for newer, older in zip(alerts, alerts[1:]):
        assert newer.created_at >= older.created_at


def test_synthesis_is_deterministic():
    sources = AlertSources(
        fees=[_fee(due_date=MIDNIGHT), _fee(8, due_date=NOW + timedelta(days=3))],
        homework=[_homework(due_date=NOW - timedelta(days=1), status="OVERDUE")],
    )

    assert synthesize_alerts(sources, NOW) == synthesize_alerts(sources, NOW)


def test_sort_keeps_input_order_for_ties():
    first = Alert(
        id="fee-1", title="a", message="a", type=AlertType.WARNING, created_at=NOW
    )
    second = Alert(
        id="fee-2", title="b", message="b", type=AlertType.URGENT, created_at=NOW
    )

    assert [alert.id for alert in sort_alerts([first, second])] == ["fee-1", "fee-2"]


def test_read_state_is_joined_by_id():
    alerts = synthesize_alerts(
        AlertSources(fees=[_fee(due_date=MIDNIGHT), _fee(8, due_date=MIDNIGHT)]), NOW
    )

    annotated = apply_read_state(alerts, {"fee-8", "fee-999"})

    assert {alert.id: alert.read for alert in annotated} == {
        "fee-7": False,
        "fee-8": True,
    }


def test_count_alerts_tracks_unread_per_type():
    alerts = [
        Alert("fee-1", "t", "m", AlertType.URGENT, NOW, read=False),
        Alert("fee-2", "t", "m", AlertType.WARNING, NOW, read=True),
        Alert("exam-result-3", "t", "m", AlertType.INFO, NOW, read=False),
    ]

    summary = count_alerts(alerts)

    assert summary.total == 3
    assert summary.unread == 2
    assert summary.unread_by_type == {
        AlertType.INFO: 1,
        AlertType.WARNING: 0,
        AlertType.URGENT: 1,
    }
