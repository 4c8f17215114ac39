"""SQLAlchemy models for exams, subjects and recorded marks."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import relationship

from school_alerts.infrastructure.database import Base
from school_alerts.utils import now_in_app_naive_datetime


class ExamModel(Base):
    __tablename__ = "exam"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)


class SubjectModel(Base):
    __tablename__ = "subject"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(120), nullable=False)


class ExamMarkModel(Base):
    """Mark obtained by a student in one subject of an exam."""

    __tablename__ = "exam_mark"

    id = Column(Integer, primary_key=True, index=True)
    exam_id = Column(Integer, ForeignKey("exam.id", ondelete="CASCADE"), nullable=False)
    subject_id = Column(Integer, ForeignKey("subject.id"), nullable=True)
    student_id = Column(
        Integer,
        ForeignKey("student.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    marks_obtained = Column(Numeric(6, 2), nullable=True)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    exam = relationship("ExamModel", lazy="joined")
    subject = relationship("SubjectModel", lazy="joined")
    student = relationship("StudentModel")


__all__ = ["ExamMarkModel", "ExamModel", "SubjectModel"]
