"""
ConversationId Value Object - Case-insensitive conversation identity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ConversationId:
    value: str  # identifier exactly as the client sent it

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"Invalid conversation ID: {self.value!r}")

    @property
    def normalized(self) -> str:
        """Lookup key; the backend compares identifiers in lowercase."""
        return self.value.lower()

    def matches(self, other: "ConversationId") -> bool:
        return self.normalized == other.normalized

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value)
