"""SQLAlchemy model for the user table."""

from sqlalchemy import Boolean, Column, DateTime, Integer, String, func

from school_alerts.infrastructure.database import Base


class UserModel(Base):
    """Database representation of a platform user."""

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(120), nullable=False, unique=True, index=True)
    role = Column(String(20), nullable=False, default="parent")
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())


__all__ = ["UserModel"]
