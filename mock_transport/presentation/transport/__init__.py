"""
Transport - the mock request/response surface.
"""

from mock_transport.presentation.transport.response import TransportResponse
from mock_transport.presentation.transport.conversations import ConversationEndpoints
from mock_transport.presentation.transport.session import (
    MockTransportSession,
    TransportRequest,
)

__all__ = [
    "TransportResponse",
    "ConversationEndpoints",
    "MockTransportSession",
    "TransportRequest",
]
