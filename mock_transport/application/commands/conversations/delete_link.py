"""Delete Link Command."""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping
from mock_transport.application.common.interfaces import Command, CommandHandler
from mock_transport.application.queries.conversations.get_link import (
    require_link_access,
)
from mock_transport.domain.exceptions import AccessDeniedError, EntityNotFoundError
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteLinkCommand(Command[None]):
    conversation_id: ConversationId
    payload: Mapping[str, Any] = field(default_factory=dict)


class DeleteLinkHandler(CommandHandler[None]):
    def __init__(self, conversation_repository: ConversationRepository):
        self._conversation_repository = conversation_repository

    def execute(self, command: DeleteLinkCommand) -> None:
        conversation = self._conversation_repository.get_by_id(command.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {command.conversation_id.value} not found"
            )
        require_link_access(conversation)

        # The backend answers 403 without a label when there is nothing to delete
        if not conversation.has_link:
            raise AccessDeniedError(
                f"Conversation {conversation.identifier} has no link to delete"
            )

        conversation.remove_link()
        self._conversation_repository.save(conversation)
        logger.info(f"[Link] Deleted link of {conversation.identifier}")
