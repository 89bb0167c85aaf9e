"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: In-memory conversation repository
- clock.py: System clock
"""

from mock_transport.infrastructure.clock import SystemClock
from mock_transport.infrastructure.persistence import InMemoryConversationRepository

__all__ = [
    "SystemClock",
    "InMemoryConversationRepository",
]
