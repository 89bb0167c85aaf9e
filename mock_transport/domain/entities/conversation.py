"""
Conversation Entity - A conversation as the simulated backend stores it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, Optional
from mock_transport.domain.value_objects.conversation_id import ConversationId

# Access tokens that allow a conversation to carry a sharing link
CODE_ACCESS_MODE = frozenset({"invite", "code"})


@dataclass
class Conversation:
    id: ConversationId
    access_role: str = "activated"
    access_mode: list[str] = field(default_factory=list)
    receipt_mode: Optional[int] = None
    link: Optional[str] = None
    name: Optional[str] = None

    @classmethod
    def create(
        cls,
        identifier: str,
        access_role: str = "activated",
        access_mode: Iterable[str] = (),
        receipt_mode: Optional[int] = None,
        link: Optional[str] = None,
        name: Optional[str] = None,
    ) -> Conversation:
        """Factory for seeding a repository from test setup code."""
        return cls(
            id=ConversationId(identifier),
            access_role=access_role,
            access_mode=list(access_mode),
            receipt_mode=receipt_mode,
            link=link,
            name=name,
        )

    @property
    def identifier(self) -> str:
        return self.id.value

    @property
    def allows_link(self) -> bool:
        """True only when the access tokens are exactly invite + code."""
        return set(self.access_mode) == CODE_ACCESS_MODE

    @property
    def has_link(self) -> bool:
        return self.link is not None

    def update_receipt_mode(self, receipt_mode: int) -> bool:
        """Set the receipt mode. Returns False if it already had this value."""
        if receipt_mode == self.receipt_mode:
            return False
        self.receipt_mode = receipt_mode
        return True

    def update_access(self, access_role: str, access_mode: Iterable[str]) -> None:
        self.access_role = access_role
        self.access_mode = list(access_mode)

    def set_link(self, uri: str) -> None:
        if self.link is not None:
            raise ValueError(f"Conversation {self.identifier} already has a link")
        self.link = uri

    def remove_link(self) -> None:
        if self.link is None:
            raise ValueError(f"Conversation {self.identifier} has no link")
        self.link = None
