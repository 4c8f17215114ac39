"""Concurrent, read-only collectors feeding the alert synthesizer."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from datetime import datetime, timedelta
from functools import partial
from typing import Any, TypeVar

import anyio
from anyio import to_thread
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from school_alerts.domain.entities import (
    AttendanceRecord,
    Dependent,
    ExamResult,
    FeePayment,
    HomeworkSubmission,
)
from school_alerts.infrastructure.database import SessionFactory
from school_alerts.infrastructure.repositories import (
    AttendanceRepository,
    ExamMarkRepository,
    FeePaymentRepository,
    HomeworkSubmissionRepository,
)
from school_alerts.utils import start_of_app_day

from .errors import AlertError, AlertSourceUnavailableError
from .policy import AlertPolicy
from .synthesis import AlertSources

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_FEES = "fees"
SOURCE_HOMEWORK = "homework"
SOURCE_EXAMS = "exams"
SOURCE_ATTENDANCE = "attendance"


async def run_in_session(
    session_factory: SessionFactory,
    source: str,
    work: Callable[[Session], T],
) -> T:
    """Run ``work`` in a worker thread with a session of its own.

    Database failures are reported as :class:`AlertSourceUnavailableError`
    naming ``source``.
    """

    def _call() -> T:
        session = session_factory()
        try:
            return work(session)
        finally:
            session.close()

    try:
        return await to_thread.run_sync(_call)
    except SQLAlchemyError as exc:
        logger.exception("Alert source '%s' failed: %s", source, exc)
        raise AlertSourceUnavailableError(source) from exc


async def gather_sources(
    calls: Mapping[str, Callable[[], Awaitable[Any]]],
) -> dict[str, Any]:
    """Await every call concurrently and return the results by name.

    When any call fails all results are discarded and the failure of the
    first failing call, in ``calls`` order, is raised. Errors that are not an
    :class:`AlertError` are reported as :class:`AlertSourceUnavailableError`
    naming the call.
    """

    results: dict[str, Any] = {}
    failures: dict[str, AlertError] = {}

    async def _run(name: str, call: Callable[[], Awaitable[Any]]) -> None:
        try:
            results[name] = await call()
        except AlertError as exc:
            failures[name] = exc
        except Exception as exc:
            logger.exception("Alert source '%s' failed unexpectedly", name)
            failure = AlertSourceUnavailableError(name)
            failure.__cause__ = exc
            failures[name] = failure

    async with anyio.create_task_group() as task_group:
        for name, call in calls.items():
            task_group.start_soon(_run, name, call)

    for name in calls:
        if name in failures:
            raise failures[name]
    return results


def collect_fees(
    session: Session, students: Sequence[Dependent], now: datetime, policy: AlertPolicy
) -> Sequence[FeePayment]:
    return FeePaymentRepository(session).list_due_for_students(
        students,
        due_before=start_of_app_day(now)
        + timedelta(days=policy.fee_lookahead_days + 1),
        limit=policy.source_limit,
    )


def collect_homework(
    session: Session, students: Sequence[Dependent], now: datetime, policy: AlertPolicy
) -> Sequence[HomeworkSubmission]:
    return HomeworkSubmissionRepository(session).list_open_for_students(
        students, limit=policy.source_limit
    )


def collect_exams(
    session: Session, students: Sequence[Dependent], now: datetime, policy: AlertPolicy
) -> Sequence[ExamResult]:
    return ExamMarkRepository(session).list_recent_for_students(
        students, limit=policy.source_limit
    )


def collect_attendance(
    session: Session, students: Sequence[Dependent], now: datetime, policy: AlertPolicy
) -> Sequence[AttendanceRecord]:
    return AttendanceRepository(session).latest_for_students(
        students, since=now - timedelta(days=policy.attendance_lookback_days)
    )


COLLECTORS: dict[
    str, Callable[[Session, Sequence[Dependent], datetime, AlertPolicy], Sequence[Any]]
] = {
    SOURCE_FEES: collect_fees,
    SOURCE_HOMEWORK: collect_homework,
    SOURCE_EXAMS: collect_exams,
    SOURCE_ATTENDANCE: collect_attendance,
}


async def collect_alert_sources(
    session_factory: SessionFactory,
    students: Sequence[Dependent],
    *,
    now: datetime,
    policy: AlertPolicy,
) -> AlertSources:
    """Run the four collectors in parallel and wait for all of them."""

    calls = {
        name: partial(
            run_in_session,
            session_factory,
            name,
            partial(collector, students=students, now=now, policy=policy),
        )
        for name, collector in COLLECTORS.items()
    }
    results = await gather_sources(calls)
    logger.debug(
        "Collected alert sources for %d dependents: %s",
        len(students),
        {name: len(records) for name, records in results.items()},
    )
    return AlertSources(
        fees=results[SOURCE_FEES],
        homework=results[SOURCE_HOMEWORK],
        exams=results[SOURCE_EXAMS],
        attendance=results[SOURCE_ATTENDANCE],
    )


__all__ = [
    "COLLECTORS",
    "SOURCE_ATTENDANCE",
    "SOURCE_EXAMS",
    "SOURCE_FEES",
    "SOURCE_HOMEWORK",
    "collect_alert_sources",
    "collect_attendance",
    "collect_exams",
    "collect_fees",
    "collect_homework",
    "gather_sources",
    "run_in_session",
]
