"""
Mock Transport Session - routes simulated requests to conversation endpoints.

Flow:
  TransportRequest → route match → request scope (dishka) → ConversationEndpoints
                                                                  ↓
  TransportResponse ←──────────────────────────────────────── handler result

One re-entrant lock serializes every request, so each handler's
read-validate-mutate sequence runs against the repository without
interleaving. Handlers themselves never lock.
"""

import itertools
import re
import threading
from dataclasses import dataclass
from logging import getLogger
from typing import Any, Mapping, Optional
from urllib.parse import unquote, urlsplit

from dishka import Container

from mock_transport.config.logging_config import correlation_id_var
from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.ports.repositories import ConversationRepository
from mock_transport.domain.value_objects.conversation_id import ConversationId
from mock_transport.presentation.transport.conversations import ConversationEndpoints
from mock_transport.presentation.transport.response import TransportResponse

logger = getLogger(__name__)


@dataclass(frozen=True)
class TransportRequest:
    method: str
    path: str
    payload: Optional[Mapping[str, Any]] = None


@dataclass(frozen=True)
class Route:
    method: str
    pattern: re.Pattern
    endpoint: str
    takes_payload: bool = True

    def match(self, method: str, path: str) -> Optional[dict[str, str]]:
        if method != self.method:
            return None
        found = self.pattern.fullmatch(path)
        if not found:
            return None
        return {key: unquote(value) for key, value in found.groupdict().items()}


def _route(method: str, path: str, endpoint: str, takes_payload: bool = True) -> Route:
    regex = re.sub(r"\{(\w+)\}", r"(?P<\1>[^/]+)", path)
    return Route(method, re.compile(regex), endpoint, takes_payload)


ROUTES = [
    _route("GET", "/conversations", "process_list_conversations", takes_payload=False),
    _route("GET", "/conversations/{conversation_id}", "process_get_conversation", takes_payload=False),
    _route("PUT", "/conversations/{conversation_id}/receipt-mode", "process_receipt_mode_update"),
    _route("PUT", "/conversations/{conversation_id}/access", "process_access_mode_update"),
    _route("GET", "/conversations/{conversation_id}/code", "process_fetch_link"),
    _route("POST", "/conversations/{conversation_id}/code", "process_create_link"),
    _route("DELETE", "/conversations/{conversation_id}/code", "process_delete_link"),
]


def _normalize_path(path: str) -> str:
    path = urlsplit(path).path
    if len(path) > 1:
        path = path.rstrip("/")
    return path


@dataclass
class ReceivedRequest:
    request: TransportRequest
    correlation_id: str
    response: Optional[TransportResponse] = None


class MockTransportSession:
    """
    Entry point for test code: hand it a request, get the backend's answer.

    The session owns the DI container; call close() (or use it as a context
    manager) when the test is done.
    """

    def __init__(self, container: Container):
        self._container = container
        self._lock = threading.RLock()
        self._request_ids = itertools.count(1)
        self.received_requests: list[ReceivedRequest] = []

    @property
    def repository(self) -> ConversationRepository:
        return self._container.get(ConversationRepository)

    def fetch_conversation(self, identifier: str) -> Optional[Conversation]:
        """Case-insensitive lookup, for test assertions."""
        with self._lock:
            return self.repository.get_by_id(ConversationId(identifier))

    def handle(self, request: TransportRequest) -> TransportResponse:
        with self._lock:
            correlation_id = f"mock-{next(self._request_ids)}"
            token = correlation_id_var.set(correlation_id)
            record = ReceivedRequest(request=request, correlation_id=correlation_id)
            self.received_requests.append(record)
            try:
                record.response = self._dispatch(request)
            finally:
                correlation_id_var.reset(token)
            return record.response

    def _dispatch(self, request: TransportRequest) -> TransportResponse:
        method = request.method.upper()
        path = _normalize_path(request.path)

        for route in ROUTES:
            params = route.match(method, path)
            if params is None:
                continue
            if route.takes_payload:
                params["payload"] = request.payload
            with self._container() as request_container:
                endpoints = request_container.get(ConversationEndpoints)
                response = getattr(endpoints, route.endpoint)(**params)
            logger.debug(f"[Transport] {method} {path} → {response.http_status}")
            return response

        logger.warning(f"[Transport] No mock endpoint for {method} {path}")
        return TransportResponse.empty(404)

    def close(self) -> None:
        self._container.close()

    def __enter__(self) -> "MockTransportSession":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
