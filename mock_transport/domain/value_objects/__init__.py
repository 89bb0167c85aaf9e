"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.domain.value_objects.user_id import UserId

__all__ = [
    "ConversationId",
    "UserId",
]
