"""SQLAlchemy model for daily attendance."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from school_alerts.infrastructure.database import Base


class AttendanceModel(Base):
    """Attendance status of a student on a given day."""

    __tablename__ = "attendance"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer,
        ForeignKey("student.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    date = Column(DateTime, nullable=False, index=True)
    status = Column(String(20), nullable=False)

    student = relationship("StudentModel")


__all__ = ["AttendanceModel"]
