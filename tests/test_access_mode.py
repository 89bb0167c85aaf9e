"""Tests for PUT /conversations/{id}/access."""

import pytest

from conftest import FIXED_TIME_STRING, SELF_USER_ID


class TestAccessModeUpdate:
    def test_overwrites_role_and_access(self, endpoints, session):
        response = endpoints.process_access_mode_update(
            "c-private", {"access_role": "team", "access": ["invite", "code"]}
        )

        assert response.http_status == 200
        assert response.payload == {
            "conversation": "c-private",
            "type": "conversation.access-update",
            "time": FIXED_TIME_STRING,
            "from": SELF_USER_ID,
            "data": {"access_role": "team", "access": ["invite", "code"]},
        }
        conversation = session.fetch_conversation("c-private")
        assert conversation.access_role == "team"
        assert conversation.access_mode == ["invite", "code"]

    def test_identical_updates_both_return_200(self, endpoints):
        payload = {"access_role": "team", "access": ["invite", "code"]}
        first = endpoints.process_access_mode_update("c1", payload)
        second = endpoints.process_access_mode_update("c1", payload)

        assert first.http_status == 200
        assert second.http_status == 200
        assert first.payload["data"] == second.payload["data"]

    def test_empty_access_list_is_accepted(self, endpoints):
        response = endpoints.process_access_mode_update(
            "c1", {"access_role": "private", "access": []}
        )
        assert response.http_status == 200
        assert response.payload["data"]["access"] == []

    def test_tuple_access_is_accepted(self, endpoints):
        response = endpoints.process_access_mode_update(
            "c1", {"access_role": "team", "access": ("invite",)}
        )
        assert response.http_status == 200
        assert response.payload["data"]["access"] == ["invite"]

    def test_unknown_conversation_returns_404(self, endpoints):
        response = endpoints.process_access_mode_update("missing", {})
        assert response.http_status == 404
        assert response.payload is None

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"access": ["invite"]},
            {"access_role": "team"},
            {"access_role": 1, "access": ["invite"]},
            {"access_role": "team", "access": "invite"},
            {"access_role": "team", "access": ["invite", 2]},
        ],
    )
    def test_invalid_payload_returns_400(self, endpoints, session, payload):
        response = endpoints.process_access_mode_update("c1", payload)

        assert response.http_status == 400
        assert response.payload is None
        conversation = session.fetch_conversation("c1")
        assert conversation.access_role == "team"
        assert conversation.access_mode == ["invite", "code"]
