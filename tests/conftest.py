from datetime import datetime, timezone

import pytest

from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.ports.clock import Clock
from mock_transport.domain.value_objects.user_id import UserId
from mock_transport.infrastructure.persistence import InMemoryConversationRepository
from mock_transport.setup.ioc.container import create_mock_transport

SELF_USER_ID = "9aa5c5d4-2c1b-4f1b-9f47-3b8a4c2d7e10"
FIXED_TIME = datetime(2018, 5, 4, 10, 11, 12, 123456, tzinfo=timezone.utc)
FIXED_TIME_STRING = "2018-05-04T10:11:12.123Z"
TEST_LINK = "https://wire-website.com/test-link"


class FixedClock(Clock):
    def __init__(self, moment: datetime = FIXED_TIME):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment


@pytest.fixture()
def clock():
    return FixedClock()


@pytest.fixture()
def self_user_id():
    return UserId(SELF_USER_ID)


@pytest.fixture()
def repository():
    """Seeded store: one conversation per access situation."""
    return InMemoryConversationRepository(
        [
            Conversation.create(
                "c1", access_role="team", access_mode=["invite", "code"]
            ),
            Conversation.create(
                "c-private", access_role="activated", access_mode=["private"]
            ),
            Conversation.create(
                "c-receipts", access_mode=["invite"], receipt_mode=1, name="Receipts"
            ),
        ]
    )


@pytest.fixture()
def session(repository, self_user_id, clock):
    """A session wired through the DI container."""
    with create_mock_transport(repository, self_user_id=self_user_id, clock=clock) as s:
        yield s


@pytest.fixture()
def endpoints(repository, self_user_id, clock):
    """Endpoints wired by hand, without the container."""
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
    from mock_transport.presentation.transport import ConversationEndpoints

    return ConversationEndpoints(
        get_conversation_handler=GetConversationHandler(repository),
        list_conversations_handler=ListConversationsHandler(repository),
        update_receipt_mode_handler=UpdateReceiptModeHandler(
            repository, clock, self_user_id
        ),
        update_access_handler=UpdateAccessHandler(repository, clock, self_user_id),
        get_link_handler=GetLinkHandler(repository),
        create_link_handler=CreateLinkHandler(repository, clock, self_user_id),
        delete_link_handler=DeleteLinkHandler(repository),
    )
