"""
Conversation Endpoints - simulated backend endpoints for conversations.

Guidelines:
- Thin layer: only handles transport concerns (status codes, payload shape)
- Delegates state changes to Application layer handlers
- Every input yields a fully formed TransportResponse; domain exceptions
  are mapped here and never escape

Endpoints:
  GET    /conversations                          → process_list_conversations
  GET    /conversations/{id}                     → process_get_conversation
  PUT    /conversations/{id}/receipt-mode        → process_receipt_mode_update
  PUT    /conversations/{id}/access              → process_access_mode_update
  GET    /conversations/{id}/code                → process_fetch_link
  POST   /conversations/{id}/code                → process_create_link
  DELETE /conversations/{id}/code                → process_delete_link
"""

from logging import getLogger
from typing import Any, Mapping, Optional

from mock_transport.application.commands.conversations import (
    CreateLinkCommand,
    CreateLinkHandler,
    DeleteLinkCommand,
    DeleteLinkHandler,
    UpdateAccessCommand,
    UpdateAccessHandler,
    UpdateReceiptModeCommand,
    UpdateReceiptModeHandler,
)
from mock_transport.application.dto.conversation import (
    ConversationDTO,
    ConversationListDTO,
)
from mock_transport.application.queries.conversations import (
    GetConversationHandler,
    GetConversationQuery,
    GetLinkHandler,
    GetLinkQuery,
    ListConversationsHandler,
    ListConversationsQuery,
)
from mock_transport.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.presentation.transport.response import TransportResponse

logger = getLogger(__name__)

REJECTIONS = (EntityNotFoundError, AccessDeniedError, DomainValidationError)


def _rejected(endpoint: str, conversation_id: str, error: Exception) -> TransportResponse:
    response = TransportResponse.from_error(error)
    logger.debug(
        f"[{endpoint}] {conversation_id} rejected with {response.http_status}: {error}"
    )
    return response


class ConversationEndpoints:
    """One method per simulated conversation endpoint."""

    def __init__(
        self,
        get_conversation_handler: GetConversationHandler,
        list_conversations_handler: ListConversationsHandler,
        update_receipt_mode_handler: UpdateReceiptModeHandler,
        update_access_handler: UpdateAccessHandler,
        get_link_handler: GetLinkHandler,
        create_link_handler: CreateLinkHandler,
        delete_link_handler: DeleteLinkHandler,
    ):
        self._get_conversation = get_conversation_handler
        self._list_conversations = list_conversations_handler
        self._update_receipt_mode = update_receipt_mode_handler
        self._update_access = update_access_handler
        self._get_link = get_link_handler
        self._create_link = create_link_handler
        self._delete_link = delete_link_handler

    def process_list_conversations(self) -> TransportResponse:
        conversations = self._list_conversations.execute(ListConversationsQuery())
        dto = ConversationListDTO(
            conversations=[ConversationDTO.from_entity(c) for c in conversations]
        )
        return TransportResponse.ok(dto.model_dump())

    def process_get_conversation(self, conversation_id: str) -> TransportResponse:
        try:
            conversation = self._get_conversation.execute(
                GetConversationQuery(conversation_id=ConversationId(conversation_id))
            )
        except REJECTIONS as e:
            return _rejected("Conversation", conversation_id, e)
        return TransportResponse.ok(ConversationDTO.from_entity(conversation).model_dump())

    def process_receipt_mode_update(
        self, conversation_id: str, payload: Optional[Mapping[str, Any]] = None
    ) -> TransportResponse:
        """
        200 with a receipt-mode-update event, or 204 when nothing changed.
        """
        try:
            event = self._update_receipt_mode.execute(
                UpdateReceiptModeCommand(
                    conversation_id=ConversationId(conversation_id),
                    payload=payload if payload is not None else {},
                )
            )
        except REJECTIONS as e:
            return _rejected("ReceiptMode", conversation_id, e)

        if event is None:
            return TransportResponse.empty(204)
        return TransportResponse.ok(event.to_payload())

    def process_access_mode_update(
        self, conversation_id: str, payload: Optional[Mapping[str, Any]] = None
    ) -> TransportResponse:
        try:
            event = self._update_access.execute(
                UpdateAccessCommand(
                    conversation_id=ConversationId(conversation_id),
                    payload=payload if payload is not None else {},
                )
            )
        except REJECTIONS as e:
            return _rejected("Access", conversation_id, e)
        return TransportResponse.ok(event.to_payload())

    def process_fetch_link(
        self, conversation_id: str, payload: Optional[Mapping[str, Any]] = None
    ) -> TransportResponse:
        try:
            link = self._get_link.execute(
                GetLinkQuery(
                    conversation_id=ConversationId(conversation_id),
                    payload=payload if payload is not None else {},
                )
            )
        except REJECTIONS as e:
            return _rejected("Link", conversation_id, e)
        return TransportResponse.ok(link.model_dump())

    def process_create_link(
        self, conversation_id: str, payload: Optional[Mapping[str, Any]] = None
    ) -> TransportResponse:
        """
        201 with a code-update event for a new link; 200 with the bare link
        when one already exists.
        """
        try:
            result = self._create_link.execute(
                CreateLinkCommand(
                    conversation_id=ConversationId(conversation_id),
                    payload=payload if payload is not None else {},
                )
            )
        except REJECTIONS as e:
            return _rejected("Link", conversation_id, e)

        if result.created:
            return TransportResponse.ok(result.event.to_payload(), http_status=201)
        return TransportResponse.ok(result.link.model_dump())

    def process_delete_link(
        self, conversation_id: str, payload: Optional[Mapping[str, Any]] = None
    ) -> TransportResponse:
        try:
            self._delete_link.execute(
                DeleteLinkCommand(
                    conversation_id=ConversationId(conversation_id),
                    payload=payload if payload is not None else {},
                )
            )
        except REJECTIONS as e:
            return _rejected("Link", conversation_id, e)
        return TransportResponse.empty(200)
