"""
UserId Value Object - identity of the simulated acting user.

Reported as "from" in event payloads. The backend only issues UUIDs.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("UserId cannot be empty")
        try:
            UUID(self.value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid user ID (UUID): {self.value}") from e

    def __str__(self) -> str:
        return self.value
