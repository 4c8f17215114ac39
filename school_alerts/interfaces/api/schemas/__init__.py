from .alert import AlertAck, AlertRead, AlertSummaryRead

__all__ = [
    "AlertAck",
    "AlertRead",
    "AlertSummaryRead",
]
