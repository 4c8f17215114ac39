"""Read-only queries over outstanding fee payments."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from school_alerts.domain.entities import FEE_OPEN_STATUSES, Dependent, FeePayment
from school_alerts.infrastructure.models import FeePaymentModel
from school_alerts.utils import ensure_app_naive_datetime, ensure_app_timezone


class FeePaymentRepository:
    """Fetch unpaid fee instalments for a set of students."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_due_for_students(
        self,
        students: Sequence[Dependent],
        *,
        due_before: datetime,
        limit: int,
    ) -> Sequence[FeePayment]:
        """Return open payments due strictly before ``due_before``.

        Overdue payments are included. At most ``limit`` payments are returned
        per student, latest due date first.
        """

        bound = ensure_app_naive_datetime(due_before)
        payments: list[FeePayment] = []
        for student in students:
            query = (
                self.session.query(FeePaymentModel)
                .filter(FeePaymentModel.student_id == student.id)
                .filter(FeePaymentModel.status.in_(FEE_OPEN_STATUSES))
                .filter(FeePaymentModel.due_date < bound)
                .order_by(FeePaymentModel.due_date.desc(), FeePaymentModel.id.desc())
                .limit(limit)
            )
            payments.extend(self._to_entity(model, student) for model in query.all())
        return payments

    @staticmethod
    def _to_entity(model: FeePaymentModel, student: Dependent) -> FeePayment:
        return FeePayment(
            id=model.id,
            student=student,
            final_amount=Decimal(model.final_amount),
            amount_paid=Decimal(model.amount_paid or 0),
            status=model.status,
            due_date=ensure_app_timezone(model.due_date),
        )


__all__ = ["FeePaymentRepository"]
