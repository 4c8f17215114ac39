"""Read-only queries over homework submissions."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from school_alerts.domain.entities import (
    HOMEWORK_OPEN_STATUSES,
    Dependent,
    HomeworkSubmission,
)
from school_alerts.infrastructure.models import HomeworkSubmissionModel
from school_alerts.utils import ensure_app_timezone


class HomeworkSubmissionRepository:
    """Fetch homework a set of students has not handed in."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_open_for_students(
        self, students: Sequence[Dependent], *, limit: int
    ) -> Sequence[HomeworkSubmission]:
        submissions: list[HomeworkSubmission] = []
        for student in students:
            query = (
                self.session.query(HomeworkSubmissionModel)
                .filter(HomeworkSubmissionModel.student_id == student.id)
                .filter(HomeworkSubmissionModel.status.in_(HOMEWORK_OPEN_STATUSES))
                .order_by(
                    HomeworkSubmissionModel.created_at.desc(),
                    HomeworkSubmissionModel.id.desc(),
                )
                .limit(limit)
            )
            submissions.extend(self._to_entity(model, student) for model in query.all())
        return submissions

    @staticmethod
    def _to_entity(
        model: HomeworkSubmissionModel, student: Dependent
    ) -> HomeworkSubmission:
        return HomeworkSubmission(
            id=model.id,
            student=student,
            title=model.homework.title,
            status=model.status,
            due_date=ensure_app_timezone(model.homework.due_date),
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["HomeworkSubmissionRepository"]
