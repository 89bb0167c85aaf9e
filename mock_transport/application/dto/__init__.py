"""
DTOs - Data Transfer Objects

- conversation.py → request payload models, event and link payloads

Note: These are different from domain entities.
DTOs describe wire payloads, entities hold the simulated backend state.
"""

from mock_transport.application.dto.conversation import (
    AccessUpdateRequest,
    ConversationDTO,
    ConversationEventDTO,
    ConversationEventType,
    ConversationLinkDTO,
    ConversationListDTO,
    ReceiptModeUpdateRequest,
    parse_payload,
)

__all__ = [
    "AccessUpdateRequest",
    "ConversationDTO",
    "ConversationEventDTO",
    "ConversationEventType",
    "ConversationLinkDTO",
    "ConversationListDTO",
    "ReceiptModeUpdateRequest",
    "parse_payload",
]
