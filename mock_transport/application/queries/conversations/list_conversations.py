"""List Conversations Query."""

from dataclasses import dataclass
from mock_transport.domain.ports.repositories.conversation_repository import (
    ConversationRepository,
)
from mock_transport.application.common.interfaces import Query, QueryHandler
from mock_transport.domain.entities.conversation import Conversation


@dataclass(frozen=True)
class ListConversationsQuery(Query[list[Conversation]]):
    pass


class ListConversationsHandler(QueryHandler[list[Conversation]]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    def execute(self, query: ListConversationsQuery) -> list[Conversation]:
        return self._conversation_repository.get_all()
