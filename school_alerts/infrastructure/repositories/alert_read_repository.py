"""Persistence helpers for alert read markers."""

from __future__ import annotations

from collections.abc import Iterable

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from school_alerts.infrastructure.models import AlertReadModel
from school_alerts.utils import now_in_app_naive_datetime


class AlertReadRepository:
    """Append-only store of ``(user_id, alert_id)`` acknowledgments.

    Writes never update or delete rows; the unique constraint on the pair
    turns repeated or concurrent writes into no-ops.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_read_alert_ids(self, user_id: int) -> set[str]:
        """Return every alert id acknowledged by ``user_id`` in one query."""

        rows = (
            self.session.query(AlertReadModel.alert_id)
            .filter(AlertReadModel.user_id == user_id)
            .all()
        )
        return {row.alert_id for row in rows}

    def is_read(self, user_id: int, alert_id: str) -> bool:
        return (
            self.session.query(AlertReadModel.id)
            .filter(AlertReadModel.user_id == user_id)
            .filter(AlertReadModel.alert_id == alert_id)
            .first()
            is not None
        )

    def mark_read(self, user_id: int, alert_id: str) -> bool:
        """Store a marker for the pair; return ``False`` when it already existed."""

        if self.is_read(user_id, alert_id):
            return False
        self.session.add(
            AlertReadModel(
                user_id=user_id,
                alert_id=alert_id,
                created_at=now_in_app_naive_datetime(),
            )
        )
        try:
            self.session.commit()
        except IntegrityError:
            # A concurrent request stored the same pair first.
            self.session.rollback()
            return False
        return True

    def mark_read_bulk(self, user_id: int, alert_ids: Iterable[str]) -> int:
        """Add markers for ``alert_ids`` skipping the ones already stored.

        Returns the number of markers created by this call.
        """

        requested: list[str] = []
        seen: set[str] = set()
        for alert_id in alert_ids:
            if not alert_id or alert_id in seen:
                continue
            seen.add(alert_id)
            requested.append(alert_id)
        if not requested:
            return 0

        existing = {
            row.alert_id
            for row in self.session.query(AlertReadModel.alert_id)
            .filter(AlertReadModel.user_id == user_id)
            .filter(AlertReadModel.alert_id.in_(requested))
            .all()
        }
        missing = [alert_id for alert_id in requested if alert_id not in existing]
        if not missing:
            return 0

        created_at = now_in_app_naive_datetime()
        self.session.add_all(
            AlertReadModel(user_id=user_id, alert_id=alert_id, created_at=created_at)
            for alert_id in missing
        )
        try:
            self.session.commit()
        except IntegrityError:
            # Another writer raced on part of the batch; fall back to
            # inserting one pair at a time.
            self.session.rollback()
            return sum(1 for alert_id in missing if self.mark_read(user_id, alert_id))
        return len(missing)


__all__ = ["AlertReadRepository"]
