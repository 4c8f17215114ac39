"""SQLAlchemy model for enrolled students."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from school_alerts.infrastructure.database import Base
from school_alerts.infrastructure.models.guardian import guardian_student_table


class StudentModel(Base):
    """Database representation of a student."""

    __tablename__ = "student"

    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(60), nullable=False)
    last_name = Column(String(60), nullable=False)
    admission_number = Column(String(40), nullable=True, unique=True)

    guardians = relationship(
        "GuardianModel",
        secondary=guardian_student_table,
        back_populates="students",
    )


__all__ = ["StudentModel"]
