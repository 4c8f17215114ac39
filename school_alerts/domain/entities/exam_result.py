"""Domain entity representing a recorded exam mark."""

from dataclasses import dataclass
from datetime import datetime

from .dependent import Dependent


@dataclass(frozen=True)
class ExamResult:
    """Mark obtained by a student in one subject of an exam."""

    id: int
    student: Dependent
    exam_name: str | None
    subject_name: str | None
    recorded_at: datetime


__all__ = ["ExamResult"]
