"""Domain entity describing a student linked to a guardian."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Dependent:
    """Student whose records feed the alerts of a guardian."""

    id: int
    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


__all__ = ["Dependent"]
