"""Thresholds applied when collecting and synthesizing alerts."""

from __future__ import annotations

from dataclasses import dataclass

from school_alerts.config import Settings


@dataclass(frozen=True)
class AlertPolicy:
    fee_lookahead_days: int = 7
    homework_warning_days: int = 2
    exam_recent_days: int = 7
    attendance_lookback_days: int = 7
    source_limit: int = 5
    currency_symbol: str = "₹"

    @classmethod
    def from_settings(cls, settings: Settings) -> "AlertPolicy":
        return cls(
            fee_lookahead_days=settings.alert_fee_lookahead_days,
            homework_warning_days=settings.alert_homework_warning_days,
            exam_recent_days=settings.alert_exam_recent_days,
            attendance_lookback_days=settings.alert_attendance_lookback_days,
            source_limit=settings.alert_source_limit,
            currency_symbol=settings.currency_symbol,
        )


DEFAULT_ALERT_POLICY = AlertPolicy()


__all__ = ["AlertPolicy", "DEFAULT_ALERT_POLICY"]
