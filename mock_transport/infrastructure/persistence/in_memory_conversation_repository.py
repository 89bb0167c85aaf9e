"""
In-Memory Conversation Repository Implementation.

- Implements ConversationRepository port from domain layer
- Keyed by the lowercase identifier, so lookups are case-insensitive and
  at most one entity matches a given identifier
- get_all() is ordered by the lowercase identifier (stable sort key)
- No locking: the transport session serializes access
"""

from typing import Iterable, Optional
from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId


class InMemoryConversationRepository(ConversationRepository):
    _store: dict[str, Conversation]

    def __init__(self, conversations: Iterable[Conversation] = ()):
        self._store = {}
        for conversation in conversations:
            self.save(conversation)

    def get_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]:
        """Get conversation by ID (case-insensitive)."""
        return self._store.get(conversation_id.normalized)

    def get_all(self) -> list[Conversation]:
        """All conversations, ordered by identifier."""
        return [self._store[key] for key in sorted(self._store)]

    def save(self, conversation: Conversation) -> None:
        """Save (create or replace) conversation."""
        self._store[conversation.id.normalized] = conversation

    def delete(self, conversation_id: ConversationId) -> bool:
        """Delete conversation by ID. Returns True if deleted."""
        return self._store.pop(conversation_id.normalized, None) is not None

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, identifier: str) -> bool:
        return ConversationId(identifier).normalized in self._store
