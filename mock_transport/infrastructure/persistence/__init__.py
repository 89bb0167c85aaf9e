"""
Persistence Layer - Storage implementations.

Contains the in-memory repository the test harness seeds and inspects.
"""

from mock_transport.infrastructure.persistence.in_memory_conversation_repository import (
    InMemoryConversationRepository,
)

__all__ = [
    "InMemoryConversationRepository",
]
