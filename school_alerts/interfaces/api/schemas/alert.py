"""Pydantic schemas for the guardian alert endpoints."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from school_alerts.domain.entities import AlertType


class AlertRead(BaseModel):
    """Alert delivered to the client together with its read state."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="Stable identifier derived from the source record")
    title: str
    message: str
    type: AlertType = Field(..., description="Urgency: info, warning or urgent")
    created_at: datetime = Field(
        ..., description="Date driving the alert (due, result or absence date)"
    )
    read: bool = False


class AlertSummaryRead(BaseModel):
    total: int = Field(..., ge=0)
    unread: int = Field(..., ge=0)
    unread_by_type: dict[str, int] = Field(default_factory=dict)


class AlertAck(BaseModel):
    """Acknowledgment returned by the mark-as-read endpoints."""

    message: str
    id: str | None = None
    marked: int | None = Field(
        default=None, description="Number of alerts newly marked as read"
    )


__all__ = ["AlertAck", "AlertRead", "AlertSummaryRead"]
