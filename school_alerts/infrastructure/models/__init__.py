"""ORM models used by the application infrastructure."""

from .user import UserModel
from .guardian import GuardianModel, guardian_student_table
from .student import StudentModel
from .fee_payment import FeePaymentModel
from .homework import HomeworkModel, HomeworkSubmissionModel
from .exam import ExamMarkModel, ExamModel, SubjectModel
from .attendance import AttendanceModel
from .alert_read import AlertReadModel

__all__ = [
    "AlertReadModel",
    "AttendanceModel",
    "ExamMarkModel",
    "ExamModel",
    "FeePaymentModel",
    "GuardianModel",
    "HomeworkModel",
    "HomeworkSubmissionModel",
    "StudentModel",
    "SubjectModel",
    "UserModel",
    "guardian_student_table",
]
