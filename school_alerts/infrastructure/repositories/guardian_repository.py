"""Persistence helpers to resolve the dependents of a guardian."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from school_alerts.domain.entities import Dependent
from school_alerts.infrastructure.models import (
    GuardianModel,
    StudentModel,
    guardian_student_table,
)


class GuardianRepository:
    """Resolve guardian accounts into the students linked to them."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_dependents(self, user_id: int) -> Sequence[Dependent]:
        """Return the students linked to the guardian owning ``user_id``.

        An empty list is returned both when the user has no guardian profile
        and when the profile has no linked students.
        """

        query = (
            self.session.query(StudentModel)
            .join(
                guardian_student_table,
                guardian_student_table.c.student_id == StudentModel.id,
            )
            .join(GuardianModel, GuardianModel.id == guardian_student_table.c.guardian_id)
            .filter(GuardianModel.user_id == user_id)
            .order_by(StudentModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    @staticmethod
    def _to_entity(model: StudentModel) -> Dependent:
        return Dependent(
            id=model.id,
            first_name=model.first_name,
            last_name=model.last_name,
        )


__all__ = ["GuardianRepository"]
