"""
ENTITIES - Simulated backend objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from mock_transport.domain.entities.conversation import Conversation

__all__ = [
    "Conversation",
]
