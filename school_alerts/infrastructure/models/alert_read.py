"""SQLAlchemy model for alert read markers."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint

from school_alerts.infrastructure.database import Base
from school_alerts.utils import now_in_app_naive_datetime


class AlertReadModel(Base):
    """Acknowledgment of a synthesized alert by a user.

    ``alert_id`` has no foreign key: alerts are never stored.
    """

    __tablename__ = "alert_read"
    __table_args__ = (
        UniqueConstraint("user_id", "alert_id", name="uq_alert_read_user_alert"),
    )

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    alert_id = Column(String(120), nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


__all__ = ["AlertReadModel"]
