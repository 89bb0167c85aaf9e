"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the handlers need,
without specifying HOW it's done.

- repositories/  → Conversation storage (in-memory for tests)
- clock.py       → Source of event timestamps
"""

from mock_transport.domain.ports.clock import Clock

__all__ = [
    "Clock",
]
