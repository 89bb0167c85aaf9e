"""
Conversation DTOs for simulated request/response payloads.

Request models validate the decoded payload once, at the handler boundary.
Strict types mirror the backend: `receipt_mode` must be a real integer (not a
bool or a numeric string) and `access` must be a list of strings.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from mock_transport.domain.entities.conversation import Conversation
from mock_transport.domain.exceptions import DomainValidationError

RequestT = TypeVar("RequestT", bound=BaseModel)


class ConversationEventType(str, Enum):
    """Event type tags emitted by conversation endpoints."""

    RECEIPT_MODE_UPDATE = "conversation.receipt-mode-update"
    ACCESS_UPDATE = "conversation.access-update"
    CODE_UPDATE = "conversation.code-update"


# ==================== REQUESTS ====================


class ReceiptModeUpdateRequest(BaseModel):
    """Body of PUT /conversations/{id}/receipt-mode"""

    receipt_mode: StrictInt


class AccessUpdateRequest(BaseModel):
    """Body of PUT /conversations/{id}/access"""

    access_role: StrictStr
    access: list[StrictStr]


def parse_payload(model: Type[RequestT], payload: Optional[Mapping[str, Any]]) -> RequestT:
    """Validate a decoded payload, raising DomainValidationError on failure."""
    if not isinstance(payload, Mapping):
        raise DomainValidationError(f"{model.__name__}: payload must be an object")
    try:
        return model.model_validate(dict(payload))
    except ValidationError as e:
        # First failing field, in declaration order
        first = e.errors()[0]
        field_name = ".".join(str(part) for part in first["loc"])
        raise DomainValidationError(f"{model.__name__}: invalid '{field_name}'") from e


# ==================== RESPONSES ====================


def transport_timestamp(moment: datetime) -> str:
    """
    Format a timestamp the way the backend does.

    Example: 2018-05-04T10:11:12.123Z
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


class ConversationLinkDTO(BaseModel):
    uri: str
    key: str
    code: str


class ConversationEventDTO(BaseModel):
    """
    Conversation event envelope.

    Matches backend format:
    {
        "conversation": "<conversation id>",
        "type": "conversation.access-update",
        "time": "2018-05-04T10:11:12.123Z",
        "from": "<user id>",
        "data": {...}
    }
    """

    model_config = ConfigDict(populate_by_name=True)

    conversation: str
    type: ConversationEventType
    time: str
    from_: str = Field(alias="from")
    data: dict[str, Any]

    @classmethod
    def build(
        cls,
        conversation: str,
        event_type: ConversationEventType,
        moment: datetime,
        from_user: str,
        data: dict[str, Any],
    ) -> "ConversationEventDTO":
        return cls(
            conversation=conversation,
            type=event_type,
            time=transport_timestamp(moment),
            from_=from_user,
            data=data,
        )

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class ConversationDTO(BaseModel):
    id: str
    name: Optional[str] = None
    access: list[str]
    access_role: str
    receipt_mode: Optional[int] = None

    @classmethod
    def from_entity(cls, conversation: Conversation) -> "ConversationDTO":
        return cls(
            id=conversation.identifier,
            name=conversation.name,
            access=list(conversation.access_mode),
            access_role=conversation.access_role,
            receipt_mode=conversation.receipt_mode,
        )


class ConversationListDTO(BaseModel):
    conversations: list[ConversationDTO]
    has_more: bool = False
