"""
Update Access Command.

Unlike receipt mode, access updates are never short-circuited: identical
successive updates both write and both return an access-update event.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping
from mock_transport.application.common.interfaces import Command, CommandHandler
from mock_transport.application.dto.conversation import (
    AccessUpdateRequest,
    ConversationEventDTO,
    ConversationEventType,
    parse_payload,
)
from mock_transport.domain.exceptions import EntityNotFoundError
from mock_transport.domain.ports import Clock
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateAccessCommand(Command[ConversationEventDTO]):
    conversation_id: ConversationId
    payload: Mapping[str, Any] = field(default_factory=dict)


class UpdateAccessHandler(CommandHandler[ConversationEventDTO]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        clock: Clock,
        self_user_id: UserId,
    ):
        self._conversation_repository = conversation_repository
        self._clock = clock
        self._self_user_id = self_user_id

    def execute(self, command: UpdateAccessCommand) -> ConversationEventDTO:
        conversation = self._conversation_repository.get_by_id(command.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {command.conversation_id.value} not found"
            )

        request = parse_payload(AccessUpdateRequest, command.payload)

        conversation.update_access(request.access_role, request.access)
        self._conversation_repository.save(conversation)
        logger.info(
            f"[Access] {conversation.identifier} role={conversation.access_role} "
            f"access={conversation.access_mode}"
        )

        return ConversationEventDTO.build(
            conversation=conversation.identifier,
            event_type=ConversationEventType.ACCESS_UPDATE,
            moment=self._clock.now(),
            from_user=self._self_user_id.value,
            data={
                "access_role": conversation.access_role,
                "access": list(conversation.access_mode),
            },
        )
