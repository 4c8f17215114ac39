"""Domain entity representing a student's homework submission state."""

from dataclasses import dataclass
from datetime import datetime

from .dependent import Dependent

HOMEWORK_STATUS_PENDING = "PENDING"
HOMEWORK_STATUS_SUBMITTED = "SUBMITTED"
HOMEWORK_STATUS_OVERDUE = "OVERDUE"

HOMEWORK_OPEN_STATUSES: tuple[str, ...] = (
    HOMEWORK_STATUS_PENDING,
    HOMEWORK_STATUS_OVERDUE,
)


@dataclass(frozen=True)
class HomeworkSubmission:
    """Assignment a student has not handed in yet."""

    id: int
    student: Dependent
    title: str
    status: str
    due_date: datetime
    created_at: datetime | None = None


__all__ = [
    "HomeworkSubmission",
    "HOMEWORK_OPEN_STATUSES",
    "HOMEWORK_STATUS_OVERDUE",
    "HOMEWORK_STATUS_PENDING",
    "HOMEWORK_STATUS_SUBMITTED",
]
