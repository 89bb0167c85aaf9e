"""
Update Receipt Mode Command.

Backend semantics:
- Unknown conversation → EntityNotFoundError
- Missing / non-integer `receipt_mode` → DomainValidationError
- Same value as stored → no event (idempotent, nothing is written)
- Otherwise store the value and return a receipt-mode-update event
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional
from mock_transport.application.common.interfaces import Command, CommandHandler
from mock_transport.application.dto.conversation import (
    ConversationEventDTO,
    ConversationEventType,
    ReceiptModeUpdateRequest,
    parse_payload,
)
from mock_transport.domain.exceptions import EntityNotFoundError
from mock_transport.domain.ports import Clock
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateReceiptModeCommand(Command[Optional[ConversationEventDTO]]):
    conversation_id: ConversationId
    payload: Mapping[str, Any] = field(default_factory=dict)


class UpdateReceiptModeHandler(CommandHandler[Optional[ConversationEventDTO]]):
    def __init__(
        self,
        conversation_repository: ConversationRepository,
        clock: Clock,
        self_user_id: UserId,
    ):
        self._conversation_repository = conversation_repository
        self._clock = clock
        self._self_user_id = self_user_id

    def execute(
        self, command: UpdateReceiptModeCommand
    ) -> Optional[ConversationEventDTO]:
        """Returns None when the receipt mode was already set to the value."""
        conversation = self._conversation_repository.get_by_id(command.conversation_id)
        if not conversation:
            raise EntityNotFoundError(
                f"Conversation {command.conversation_id.value} not found"
            )

        request = parse_payload(ReceiptModeUpdateRequest, command.payload)

        if not conversation.update_receipt_mode(request.receipt_mode):
            logger.debug(
                f"[ReceiptMode] {conversation.identifier} already at {request.receipt_mode}"
            )
            return None

        self._conversation_repository.save(conversation)
        logger.info(
            f"[ReceiptMode] {conversation.identifier} set to {request.receipt_mode}"
        )

        return ConversationEventDTO.build(
            conversation=conversation.identifier,
            event_type=ConversationEventType.RECEIPT_MODE_UPDATE,
            moment=self._clock.now(),
            from_user=self._self_user_id.value,
            data={"receipt_mode": request.receipt_mode},
        )
