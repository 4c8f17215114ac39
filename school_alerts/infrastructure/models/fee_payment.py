"""SQLAlchemy model for fee payments."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship

from school_alerts.infrastructure.database import Base


class FeePaymentModel(Base):
    """Fee instalment billed to a student."""

    __tablename__ = "fee_payment"
    __table_args__ = (Index("ix_fee_payment_student_due", "student_id", "due_date"),)

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(
        Integer,
        ForeignKey("student.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    final_amount = Column(Numeric(12, 2), nullable=False)
    amount_paid = Column(Numeric(12, 2), nullable=False, default=0)
    status = Column(String(20), nullable=False, default="PENDING")
    due_date = Column(DateTime, nullable=False)
    payment_date = Column(DateTime, nullable=True)

    student = relationship("StudentModel")


__all__ = ["FeePaymentModel"]
