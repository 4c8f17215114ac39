"""Domain entity representing an outstanding fee payment."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from .dependent import Dependent

FEE_STATUS_PENDING = "PENDING"
FEE_STATUS_PARTIAL = "PARTIAL"
FEE_STATUS_PAID = "PAID"

FEE_OPEN_STATUSES: tuple[str, ...] = (FEE_STATUS_PENDING, FEE_STATUS_PARTIAL)


@dataclass(frozen=True)
class FeePayment:
    """Fee instalment owed by a student."""

    id: int
    student: Dependent
    final_amount: Decimal
    amount_paid: Decimal
    status: str
    due_date: datetime

    @property
    def amount_due(self) -> Decimal:
        """Return the outstanding amount; it is not clamped at zero."""

        return self.final_amount - self.amount_paid


__all__ = [
    "FeePayment",
    "FEE_OPEN_STATUSES",
    "FEE_STATUS_PAID",
    "FEE_STATUS_PARTIAL",
    "FEE_STATUS_PENDING",
]
