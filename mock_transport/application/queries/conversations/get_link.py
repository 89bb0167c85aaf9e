"""
GetLink Query - Fetch the sharing link of a conversation.

Error mapping used by the transport layer:
- conversation missing      → 404, no label
- access mode not invite+code → 403, label "invalid-op"
- no link stored            → 404, label "no-conversation-code"
"""

from dataclasses import dataclass, field
from typing import Any, Mapping
from mock_transport.application.common.interfaces import Query, QueryHandler
from mock_transport.application.dto.conversation import ConversationLinkDTO
from mock_transport.config.settings import Config
from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.exceptions import AccessDeniedError, EntityNotFoundError
from mock_transport.domain.exceptions.access_denied import INVALID_OPERATION
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId

NO_CONVERSATION_CODE = "no-conversation-code"


def require_link_access(conversation: Conversation) -> None:
    """Re-checked on every link operation; a stored link proves nothing."""
    if not conversation.allows_link:
        raise AccessDeniedError(
            f"Conversation {conversation.identifier} does not allow links",
            label=INVALID_OPERATION,
        )


@dataclass(frozen=True)
class GetLinkQuery(Query[ConversationLinkDTO]):
    conversation_id: ConversationId
    payload: Mapping[str, Any] = field(default_factory=dict)


class GetLinkHandler(QueryHandler[ConversationLinkDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        link_key: str = Config.CONVERSATION_LINK_KEY,
        link_code: str = Config.CONVERSATION_LINK_CODE,
    ):
        self._conversation_repository = conversation_repository
        self._link_key = link_key
        self._link_code = link_code

    def execute(self, query: GetLinkQuery) -> ConversationLinkDTO:
        conversation = self._conversation_repository.get_by_id(query.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {query.conversation_id.value} not found"
            )
        require_link_access(conversation)

        if not conversation.has_link:
            raise EntityNotFoundError(
                f"Conversation {conversation.identifier} has no link",
                label=NO_CONVERSATION_CODE,
            )

        return ConversationLinkDTO(
            uri=conversation.link, key=self._link_key, code=self._link_code
        )
