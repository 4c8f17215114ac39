"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an authenticated platform user."""

    id: int | None
    name: str
    email: str
    role: str
    is_active: bool
    created_at: datetime | None


__all__ = ["User"]
