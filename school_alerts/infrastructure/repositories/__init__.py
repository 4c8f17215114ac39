"""Repository implementations for infrastructure layer."""

from .alert_read_repository import AlertReadRepository
from .attendance_repository import AttendanceRepository
from .exam_mark_repository import ExamMarkRepository
from .fee_payment_repository import FeePaymentRepository
from .guardian_repository import GuardianRepository
from .homework_submission_repository import HomeworkSubmissionRepository
from .user_repository import UserRepository

__all__ = [
    "AlertReadRepository",
    "AttendanceRepository",
    "ExamMarkRepository",
    "FeePaymentRepository",
    "GuardianRepository",
    "HomeworkSubmissionRepository",
    "UserRepository",
]
