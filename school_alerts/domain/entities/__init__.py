"""Domain entities exposed by the application."""

from .alert import (
    ALERT_TAGS,
    ALERT_TAG_ATTENDANCE,
    ALERT_TAG_EXAM_RESULT,
    ALERT_TAG_FEE,
    ALERT_TAG_HOMEWORK_DUE,
    ALERT_TAG_HOMEWORK_OVERDUE,
    Alert,
    AlertSummary,
    AlertType,
    build_alert_id,
)
from .attendance_record import (
    ATTENDANCE_STATUS_ABSENT,
    ATTENDANCE_STATUS_LATE,
    ATTENDANCE_STATUS_PRESENT,
    AttendanceRecord,
)
from .dependent import Dependent
from .exam_result import ExamResult
from .fee_payment import (
    FEE_OPEN_STATUSES,
    FEE_STATUS_PAID,
    FEE_STATUS_PARTIAL,
    FEE_STATUS_PENDING,
    FeePayment,
)
from .homework_submission import (
    HOMEWORK_OPEN_STATUSES,
    HOMEWORK_STATUS_OVERDUE,
    HOMEWORK_STATUS_PENDING,
    HOMEWORK_STATUS_SUBMITTED,
    HomeworkSubmission,
)
from .user import User

__all__ = [
    "ALERT_TAGS",
    "ALERT_TAG_ATTENDANCE",
    "ALERT_TAG_EXAM_RESULT",
    "ALERT_TAG_FEE",
    "ALERT_TAG_HOMEWORK_DUE",
    "ALERT_TAG_HOMEWORK_OVERDUE",
    "Alert",
    "AlertSummary",
    "AlertType",
    "build_alert_id",
    "ATTENDANCE_STATUS_ABSENT",
    "ATTENDANCE_STATUS_LATE",
    "ATTENDANCE_STATUS_PRESENT",
    "AttendanceRecord",
    "Dependent",
    "ExamResult",
    "FEE_OPEN_STATUSES",
    "FEE_STATUS_PAID",
    "FEE_STATUS_PARTIAL",
    "FEE_STATUS_PENDING",
    "FeePayment",
    "HOMEWORK_OPEN_STATUSES",
    "HOMEWORK_STATUS_OVERDUE",
    "HOMEWORK_STATUS_PENDING",
    "HOMEWORK_STATUS_SUBMITTED",
    "HomeworkSubmission",
    "User",
]
