"""Read-only queries over daily attendance."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from sqlalchemy.orm import Session

from school_alerts.domain.entities import AttendanceRecord, Dependent
from school_alerts.infrastructure.models import AttendanceModel
from school_alerts.utils import ensure_app_naive_datetime, ensure_app_timezone


class AttendanceRepository:
    """Fetch recent attendance entries for a set of students."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def latest_for_students(
        self, students: Sequence[Dependent], *, since: datetime
    ) -> Sequence[AttendanceRecord]:
        """Return the most recent record of each student dated on or after ``since``."""

        bound = ensure_app_naive_datetime(since)
        records: list[AttendanceRecord] = []
        for student in students:
            model = (
                self.session.query(AttendanceModel)
                .filter(AttendanceModel.student_id == student.id)
                .filter(AttendanceModel.date >= bound)
                .order_by(AttendanceModel.date.desc(), AttendanceModel.id.desc())
                .first()
            )
            if model is not None:
                records.append(self._to_entity(model, student))
        return records

    @staticmethod
    def _to_entity(model: AttendanceModel, student: Dependent) -> AttendanceRecord:
        return AttendanceRecord(
            id=model.id,
            student=student,
            date=ensure_app_timezone(model.date),
            status=model.status,
        )


__all__ = ["AttendanceRepository"]
