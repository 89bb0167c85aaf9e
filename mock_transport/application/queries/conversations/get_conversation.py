"""Get Conversation Query."""

from dataclasses import dataclass
from mock_transport.application.common.interfaces import Query, QueryHandler
from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.exceptions import EntityNotFoundError
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId


@dataclass(frozen=True)
class GetConversationQuery(Query[Conversation]):
    conversation_id: ConversationId


class GetConversationHandler(QueryHandler[Conversation]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    def execute(self, query: GetConversationQuery) -> Conversation:
        conversation = self._conversation_repository.get_by_id(query.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {query.conversation_id.value} not found"
            )
        return conversation
