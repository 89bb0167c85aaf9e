"""Conversation-related queries."""

from mock_transport.application.queries.conversations.get_conversation import (
    GetConversationQuery,
    GetConversationHandler,
)
from mock_transport.application.queries.conversations.list_conversations import (
    ListConversationsQuery,
    ListConversationsHandler,
)
from mock_transport.application.queries.conversations.get_link import (
    GetLinkQuery,
    GetLinkHandler,
)

__all__ = [
    "GetConversationQuery",
    "GetConversationHandler",
    "ListConversationsQuery",
    "ListConversationsHandler",
    "GetLinkQuery",
    "GetLinkHandler",
]
