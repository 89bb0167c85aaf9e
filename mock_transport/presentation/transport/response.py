"""
Transport response envelope.

Every simulated request ends in one of these: a status code, an optional
JSON-like payload, and a transport error slot that the conversation
endpoints never fill (it is reserved for real transport failures).
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from mock_transport.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)

Payload = Optional[Union[dict[str, Any], list[Any]]]


@dataclass(frozen=True)
class TransportResponse:
    payload: Payload
    http_status: int
    transport_session_error: Optional[Exception] = None

    @property
    def is_success(self) -> bool:
        return 200 <= self.http_status < 300

    @classmethod
    def empty(cls, http_status: int) -> "TransportResponse":
        return cls(payload=None, http_status=http_status)

    @classmethod
    def ok(cls, payload: Payload, http_status: int = 200) -> "TransportResponse":
        return cls(payload=payload, http_status=http_status)

    @classmethod
    def labeled(cls, http_status: int, label: Optional[str]) -> "TransportResponse":
        """Error response; the payload is {"label": ...} when a label is given."""
        payload = {"label": label} if label else None
        return cls(payload=payload, http_status=http_status)

    @classmethod
    def from_error(
        cls, error: Union[EntityNotFoundError, AccessDeniedError, DomainValidationError]
    ) -> "TransportResponse":
        """Map a domain exception to its status code."""
        if isinstance(error, EntityNotFoundError):
            return cls.labeled(404, error.label)
        if isinstance(error, AccessDeniedError):
            return cls.labeled(403, error.label)
        return cls.empty(400)
