"""SQLAlchemy models for homework assignments and submissions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from school_alerts.infrastructure.database import Base
from school_alerts.utils import now_in_app_naive_datetime


class HomeworkModel(Base):
    """Assignment published to a class."""

    __tablename__ = "homework"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    due_date = Column(DateTime, nullable=False)


class HomeworkSubmissionModel(Base):
    """Per-student state of a homework assignment."""

    __tablename__ = "homework_submission"

    id = Column(Integer, primary_key=True, index=True)
    homework_id = Column(
        Integer,
        ForeignKey("homework.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    student_id = Column(
        Integer,
        ForeignKey("student.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status = Column(String(20), nullable=False, default="PENDING")
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    homework = relationship("HomeworkModel", lazy="joined")
    student = relationship("StudentModel")


__all__ = ["HomeworkModel", "HomeworkSubmissionModel"]
