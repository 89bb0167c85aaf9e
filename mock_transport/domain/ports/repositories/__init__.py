"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the handlers need
- Does NOT specify implementation

Infrastructure layer provides implementations.
"""

from mock_transport.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)

__all__ = [
    "ConversationRepository",
]
