"""
Create Link Command.

Steps:
1. Load conversation (EntityNotFoundError if missing)
2. Check access mode is exactly {invite, code} (AccessDeniedError "invalid-op")
3. Link already there → return it, created=False (transport answers 200)
4. Otherwise store the simulated URI and return a code-update event,
   created=True (transport answers 201)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from mock_transport.application.common.interfaces import Command, CommandHandler
from mock_transport.application.dto.conversation import (
    ConversationEventDTO,
    ConversationEventType,
    ConversationLinkDTO,
)
from mock_transport.application.queries.conversations.get_link import (
    require_link_access,
)
from mock_transport.config.settings import Config
from mock_transport.domain.exceptions import EntityNotFoundError
from mock_transport.domain.ports import Clock
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class CreateLinkResult:
    link: ConversationLinkDTO
    event: Optional[ConversationEventDTO] = None

    @property
    def created(self) -> bool:
        return self.event is not None


@dataclass(frozen=True)
class CreateLinkCommand(Command[CreateLinkResult]):
    conversation_id: ConversationId
    payload: Mapping[str, Any] = field(default_factory=dict)


class CreateLinkHandler(CommandHandler[CreateLinkResult]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        clock: Clock,
        self_user_id: UserId,
        link_uri: str = Config.CONVERSATION_LINK_URI,
        link_key: str = Config.CONVERSATION_LINK_KEY,
        link_code: str = Config.CONVERSATION_LINK_CODE,
    ):
        self._conversation_repository = conversation_repository
        self._clock = clock
        self._self_user_id = self_user_id
        self._link_uri = link_uri
        self._link_key = link_key
        self._link_code = link_code

    def execute(self, command: CreateLinkCommand) -> CreateLinkResult:
        conversation = self._conversation_repository.get_by_id(command.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {command.conversation_id.value} not found"
            )
        require_link_access(conversation)

        if conversation.has_link:
            return CreateLinkResult(link=self._link_dto(conversation.link))

        conversation.set_link(self._link_uri)
        self._conversation_repository.save(conversation)
        logger.info(f"[Link] Created {conversation.link} for {conversation.identifier}")

        link = self._link_dto(conversation.link)
        event = ConversationEventDTO.build(
            # echo the identifier as requested, not the stored spelling
            conversation=command.conversation_id.value,
            event_type=ConversationEventType.CODE_UPDATE,
            moment=self._clock.now(),
            from_user=self._self_user_id.value,
            data=link.model_dump(),
        )
        return CreateLinkResult(link=link, event=event)

    def _link_dto(self, uri: str) -> ConversationLinkDTO:
        return ConversationLinkDTO(uri=uri, key=self._link_key, code=self._link_code)
