"""
Conversation Repository Port - Interface for conversation storage.
Implementation: mock_transport/infrastructure/persistence/in_memory_conversation_repository.py

Lookups are case-insensitive on the conversation identifier.
"""

from abc import ABC, abstractmethod
from typing import Optional
from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.value_objects.conversation_id import ConversationId


class ConversationRepository(ABC):
    @abstractmethod
    def get_by_id(self, conversation_id: ConversationId) -> Optional[Conversation]: ...

    @abstractmethod
    def get_all(self) -> list[Conversation]: ...

    @abstractmethod
    def save(self, conversation: Conversation) -> None: ...

    @abstractmethod
    def delete(self, conversation_id: ConversationId) -> bool: ...
