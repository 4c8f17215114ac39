"""Persistence layer for user data."""

from __future__ import annotations

from sqlalchemy.orm import Session

from school_alerts.domain.entities import User
from school_alerts.infrastructure.models import UserModel
from school_alerts.utils import ensure_app_timezone


class UserRepository:
    """Provide read access to user accounts."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self.session.get(UserModel, user_id)
        return self._to_entity(model) if model else None

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            role=model.role,
            is_active=model.is_active,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["UserRepository"]
