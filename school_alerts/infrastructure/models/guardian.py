"""SQLAlchemy models for guardians and their link to students."""

from sqlalchemy import Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import relationship

from school_alerts.infrastructure.database import Base


guardian_student_table = Table(
    "guardian_student",
    Base.metadata,
    Column(
        "guardian_id",
        Integer,
        ForeignKey("guardian.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "student_id",
        Integer,
        ForeignKey("student.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class GuardianModel(Base):
    """Parent or legal guardian profile attached to a user account."""

    __tablename__ = "guardian"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
        index=True,
    )
    phone = Column(String(30), nullable=True)

    user = relationship("UserModel", lazy="joined")
    students = relationship(
        "StudentModel",
        secondary=guardian_student_table,
        back_populates="guardians",
        order_by="StudentModel.id",
    )


__all__ = ["GuardianModel", "guardian_student_table"]
