"""
Dishka DI Container Setup.

- Registers the repository, clock and acting user (Scope.APP, one per session)
- Registers handlers and endpoints (Scope.REQUEST, fresh per simulated request)
- Maps abstract ports to concrete implementations

Flow:
  Container → provides → InMemoryConversationRepository → to → CreateLinkHandler
                                    ↓
                            uses ConversationRepository interface
"""

from typing import Optional

from dishka import Provider, Scope, make_container, provide

from mock_transport.application.commands.conversations import (
    CreateLinkHandler,
    DeleteLinkHandler,
    UpdateAccessHandler,
    UpdateReceiptModeHandler,
)
from mock_transport.application.queries.conversations import (
    GetConversationHandler,
    GetLinkHandler,
    ListConversationsHandler,
)
from mock_transport.config.logging_config import setup_logging
from mock_transport.config.settings import Config
from mock_transport.domain.ports import Clock
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.user_id import UserId
from mock_transport.infrastructure.clock import SystemClock
from mock_transport.infrastructure.persistence import InMemoryConversationRepository
from mock_transport.presentation.transport.conversations import ConversationEndpoints
from mock_transport.presentation.transport.session import MockTransportSession


class MockTransportProvider(Provider):
    """
    Mock transport dependency provider.

    The repository is handed in by the test harness, which keeps a
    reference to seed and inspect it.
    """

    def __init__(
        self,
        repository: ConversationRepository,
        self_user_id: UserId,
        clock: Clock,
    ):
        super().__init__()
        self._repository = repository
        self._self_user_id = self_user_id
        self._clock = clock

    # ==================== STATE ====================

    @provide(scope=Scope.APP)
    def get_conversation_repository(self) -> ConversationRepository:
        return self._repository

    @provide(scope=Scope.APP)
    def get_self_user_id(self) -> UserId:
        return self._self_user_id

    @provide(scope=Scope.APP)
    def get_clock(self) -> Clock:
        return self._clock

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_handler(
        self, conversation_repository: ConversationRepository
    ) -> GetConversationHandler:
        return GetConversationHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_conversations_handler(
        self, conversation_repository: ConversationRepository
    ) -> ListConversationsHandler:
        return ListConversationsHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_receipt_mode_handler(
        self,
        conversation_repository: ConversationRepository,
        clock: Clock,
        self_user_id: UserId,
    ) -> UpdateReceiptModeHandler:
        return UpdateReceiptModeHandler(conversation_repository, clock, self_user_id)

    @provide(scope=Scope.REQUEST)
    def get_update_access_handler(
        self,
        conversation_repository: ConversationRepository,
        clock: Clock,
        self_user_id: UserId,
    ) -> UpdateAccessHandler:
        return UpdateAccessHandler(conversation_repository, clock, self_user_id)

    @provide(scope=Scope.REQUEST)
    def get_link_handler(
        self, conversation_repository: ConversationRepository
    ) -> GetLinkHandler:
        return GetLinkHandler(conversation_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_link_handler(
        self,
        conversation_repository: ConversationRepository,
        clock: Clock,
        self_user_id: UserId,
    ) -> CreateLinkHandler:
        return CreateLinkHandler(conversation_repository, clock, self_user_id)

    @provide(scope=Scope.REQUEST)
    def get_delete_link_handler(
        self, conversation_repository: ConversationRepository
    ) -> DeleteLinkHandler:
        return DeleteLinkHandler(conversation_repository)

    # ==================== ENDPOINTS ====================

    @provide(scope=Scope.REQUEST)
    def get_conversation_endpoints(
        self,
        get_conversation_handler: GetConversationHandler,
        list_conversations_handler: ListConversationsHandler,
        update_receipt_mode_handler: UpdateReceiptModeHandler,
        update_access_handler: UpdateAccessHandler,
        get_link_handler: GetLinkHandler,
        create_link_handler: CreateLinkHandler,
        delete_link_handler: DeleteLinkHandler,
    ) -> ConversationEndpoints:
        return ConversationEndpoints(
            get_conversation_handler=get_conversation_handler,
            list_conversations_handler=list_conversations_handler,
            update_receipt_mode_handler=update_receipt_mode_handler,
            update_access_handler=update_access_handler,
            get_link_handler=get_link_handler,
            create_link_handler=create_link_handler,
            delete_link_handler=delete_link_handler,
        )


def create_mock_transport(
    repository: Optional[ConversationRepository] = None,
    self_user_id: Optional[UserId] = None,
    clock: Optional[Clock] = None,
) -> MockTransportSession:
    """
    Build a session backed by a fresh container.

    Args:
        repository: Conversation store; an empty in-memory one if omitted
        self_user_id: Acting user for event payloads (Config.SELF_USER_ID)
        clock: Timestamp source (SystemClock)
    """
    if Config.SETUP_LOGGING:
        setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

    provider = MockTransportProvider(
        repository=repository if repository is not None else InMemoryConversationRepository(),
        self_user_id=self_user_id or UserId(Config.SELF_USER_ID),
        clock=clock or SystemClock(),
    )
    return MockTransportSession(make_container(provider))
