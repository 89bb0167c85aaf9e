"""
Tests for the sharing link endpoints (GET/POST/DELETE /conversations/{id}/code).

Run with: pytest tests/test_conversation_links.py -v
"""

import pytest

from conftest import FIXED_TIME_STRING, SELF_USER_ID, TEST_LINK

LINK_PAYLOAD = {"uri": TEST_LINK, "key": "test-key", "code": "test-code"}


class TestLinkLifecycle:
    def test_create_fetch_delete_delete(self, endpoints):
        created = endpoints.process_create_link("c1")
        assert created.http_status == 201
        assert created.payload["data"]["uri"] == TEST_LINK

        fetched = endpoints.process_fetch_link("c1")
        assert fetched.http_status == 200
        assert fetched.payload["uri"] == TEST_LINK

        deleted = endpoints.process_delete_link("c1")
        assert deleted.http_status == 200
        assert deleted.payload is None

        deleted_again = endpoints.process_delete_link("c1")
        assert deleted_again.http_status == 403
        assert deleted_again.payload is None


class TestCreateLink:
    def test_new_link_returns_code_update_event(self, endpoints):
        response = endpoints.process_create_link("c1")

        assert response.http_status == 201
        assert response.payload == {
            "conversation": "c1",
            "data": LINK_PAYLOAD,
            "type": "conversation.code-update",
            "time": FIXED_TIME_STRING,
            "from": SELF_USER_ID,
        }

    def test_second_create_returns_existing_link(self, endpoints):
        first = endpoints.process_create_link("c1")
        second = endpoints.process_create_link("c1")

        assert first.http_status == 201
        assert second.http_status == 200
        assert second.payload == LINK_PAYLOAD
        assert second.payload["uri"] == first.payload["data"]["uri"]

    def test_event_echoes_requested_identifier(self, endpoints):
        response = endpoints.process_create_link("C1")
        assert response.payload["conversation"] == "C1"

    def test_stores_link(self, endpoints, session):
        endpoints.process_create_link("c1")
        assert session.fetch_conversation("c1").link == TEST_LINK


class TestFetchLink:
    def test_no_link_returns_no_conversation_code(self, endpoints):
        response = endpoints.process_fetch_link("c1")
        assert response.http_status == 404
        assert response.payload == {"label": "no-conversation-code"}

    def test_existing_link(self, endpoints, session):
        session.fetch_conversation("c1").link = "https://example.com/join"
        response = endpoints.process_fetch_link("c1")

        assert response.http_status == 200
        assert response.payload == {
            "uri": "https://example.com/join",
            "key": "test-key",
            "code": "test-code",
        }


class TestAccessModeCheck:
    @pytest.mark.parametrize(
        "operation",
        ["process_fetch_link", "process_create_link", "process_delete_link"],
    )
    @pytest.mark.parametrize("link", [None, TEST_LINK])
    def test_wrong_access_mode_is_invalid_op(self, endpoints, session, operation, link):
        session.fetch_conversation("c-private").link = link

        response = getattr(endpoints, operation)("c-private")

        assert response.http_status == 403
        assert response.payload == {"label": "invalid-op"}
        assert session.fetch_conversation("c-private").link == link

    def test_access_change_after_creation_blocks_link(self, endpoints):
        assert endpoints.process_create_link("c1").http_status == 201
        endpoints.process_access_mode_update(
            "c1", {"access_role": "team", "access": ["invite"]}
        )

        response = endpoints.process_fetch_link("c1")
        assert response.http_status == 403
        assert response.payload == {"label": "invalid-op"}


class TestDeleteLink:
    def test_absent_link_is_forbidden_not_missing(self, endpoints):
        response = endpoints.process_delete_link("c1")
        assert response.http_status == 403
        assert response.payload is None


class TestUnknownConversation:
    @pytest.mark.parametrize(
        "operation",
        [
            "process_fetch_link",
            "process_create_link",
            "process_delete_link",
            "process_receipt_mode_update",
            "process_access_mode_update",
        ],
    )
    @pytest.mark.parametrize("payload", [None, {}, {"receipt_mode": 1}])
    def test_every_handler_returns_404(self, endpoints, operation, payload):
        response = getattr(endpoints, operation)("missing", payload)
        assert response.http_status == 404
        assert response.payload is None
