"""Read-only queries over recorded exam marks."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from school_alerts.domain.entities import Dependent, ExamResult
from school_alerts.infrastructure.models import ExamMarkModel
from school_alerts.utils import ensure_app_timezone


class ExamMarkRepository:
    """Fetch the latest exam marks of a set of students."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_recent_for_students(
        self, students: Sequence[Dependent], *, limit: int
    ) -> Sequence[ExamResult]:
        results: list[ExamResult] = []
        for student in students:
            query = (
                self.session.query(ExamMarkModel)
                .filter(ExamMarkModel.student_id == student.id)
                .order_by(ExamMarkModel.created_at.desc(), ExamMarkModel.id.desc())
                .limit(limit)
            )
            results.extend(self._to_entity(model, student) for model in query.all())
        return results

    @staticmethod
    def _to_entity(model: ExamMarkModel, student: Dependent) -> ExamResult:
        return ExamResult(
            id=model.id,
            student=student,
            exam_name=model.exam.name if model.exam else None,
            subject_name=model.subject.name if model.subject else None,
            recorded_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["ExamMarkRepository"]
