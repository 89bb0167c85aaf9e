"""
Unit tests for the Conversation entity and its value objects.

Run with: pytest tests/test_conversation_entity.py -v
"""

import pytest

from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.value_objects import ConversationId, UserId


class TestConversationId:
    def test_normalized_is_lowercase(self):
        assert ConversationId("ABC-Def").normalized == "abc-def"

    def test_keeps_original_spelling(self):
        assert str(ConversationId("ABC")) == "ABC"

    def test_matches_ignores_case(self):
        assert ConversationId("ABC").matches(ConversationId("abc"))

    def test_rejects_non_string(self):
        with pytest.raises(ValueError):
            ConversationId(42)


class TestUserId:
    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            UserId("")

    def test_rejects_non_uuid(self):
        with pytest.raises(ValueError):
            UserId("not-a-uuid")


class TestAllowsLink:
    def test_exact_invite_and_code(self):
        assert Conversation.create("c", access_mode=["invite", "code"]).allows_link

    def test_order_and_duplicates_do_not_matter(self):
        conversation = Conversation.create("c", access_mode=["code", "invite", "code"])
        assert conversation.allows_link

    def test_subset_is_rejected(self):
        assert not Conversation.create("c", access_mode=["invite"]).allows_link

    def test_superset_is_rejected(self):
        conversation = Conversation.create(
            "c", access_mode=["invite", "code", "private"]
        )
        assert not conversation.allows_link

    def test_empty_is_rejected(self):
        assert not Conversation.create("c").allows_link


class TestReceiptMode:
    def test_unset_to_value_changes(self):
        conversation = Conversation.create("c")
        assert conversation.update_receipt_mode(0) is True
        assert conversation.receipt_mode == 0

    def test_same_value_is_no_op(self):
        conversation = Conversation.create("c", receipt_mode=1)
        assert conversation.update_receipt_mode(1) is False
        assert conversation.receipt_mode == 1


class TestLink:
    def test_set_and_remove(self):
        conversation = Conversation.create("c")
        conversation.set_link("https://example.com/l")
        assert conversation.has_link
        conversation.remove_link()
        assert not conversation.has_link

    def test_set_twice_raises(self):
        conversation = Conversation.create("c", link="https://example.com/l")
        with pytest.raises(ValueError):
            conversation.set_link("https://example.com/other")

    def test_remove_absent_raises(self):
        with pytest.raises(ValueError):
            Conversation.create("c").remove_link()
