"""
Mock transport for conversation endpoints.

Simulates the backend's conversation resources (receipt mode, access mode,
sharing link) against an in-memory store so client networking code can be
tested offline.

Quick start:
    repository = InMemoryConversationRepository()
    repository.save(Conversation.create("c1", access_mode=["invite", "code"]))
    session = create_mock_transport(repository)
    response = session.handle(TransportRequest("POST", "/conversations/c1/code"))
"""

from mock_transport.domain.entities import Conversation
from mock_transport.domain.value_objects import ConversationId, UserId
from mock_transport.infrastructure.persistence import InMemoryConversationRepository
from mock_transport.presentation.transport import (
    MockTransportSession,
    TransportRequest,
    TransportResponse,
)
from mock_transport.setup.ioc.container import create_mock_transport

__all__ = [
    "Conversation",
    "ConversationId",
    "UserId",
    "InMemoryConversationRepository",
    "MockTransportSession",
    "TransportRequest",
    "TransportResponse",
    "create_mock_transport",
]
