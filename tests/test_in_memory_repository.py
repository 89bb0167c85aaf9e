"""Tests for InMemoryConversationRepository."""

from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.infrastructure.persistence import InMemoryConversationRepository


def test_lookup_is_case_insensitive():
    repository = InMemoryConversationRepository([Conversation.create("abc")])
    found = repository.get_by_id(ConversationId("ABC"))
    assert found is not None
    assert found.identifier == "abc"


def test_missing_returns_none():
    repository = InMemoryConversationRepository()
    assert repository.get_by_id(ConversationId("nope")) is None


def test_get_all_is_sorted_by_identifier():
    repository = InMemoryConversationRepository(
        [Conversation.create("b"), Conversation.create("C"), Conversation.create("a")]
    )
    assert [c.identifier for c in repository.get_all()] == ["a", "b", "C"]


def test_identifiers_differing_only_in_case_share_a_slot():
    repository = InMemoryConversationRepository()
    repository.save(Conversation.create("abc", name="first"))
    repository.save(Conversation.create("ABC", name="second"))
    assert len(repository) == 1
    assert repository.get_by_id(ConversationId("abc")).name == "second"


def test_delete():
    repository = InMemoryConversationRepository([Conversation.create("abc")])
    assert repository.delete(ConversationId("ABC")) is True
    assert repository.delete(ConversationId("abc")) is False
    assert "abc" not in repository
