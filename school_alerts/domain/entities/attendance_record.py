"""Domain entity representing a daily attendance entry."""

from dataclasses import dataclass
from datetime import datetime

from .dependent import Dependent

ATTENDANCE_STATUS_PRESENT = "PRESENT"
ATTENDANCE_STATUS_ABSENT = "ABSENT"
ATTENDANCE_STATUS_LATE = "LATE"


@dataclass(frozen=True)
class AttendanceRecord:
    """Attendance status of a student for one school day."""

    id: int
    student: Dependent
    date: datetime
    status: str


__all__ = [
    "AttendanceRecord",
    "ATTENDANCE_STATUS_ABSENT",
    "ATTENDANCE_STATUS_LATE",
    "ATTENDANCE_STATUS_PRESENT",
]
