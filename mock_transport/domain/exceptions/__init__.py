"""
DOMAIN EXCEPTIONS - Backend rejections

These exceptions are raised by application handlers and caught by the
transport layer, which maps them to HTTP status codes. An optional `label`
is the backend error label sent back as `{"label": ...}`.
"""

from mock_transport.domain.exceptions.entity_not_found import EntityNotFoundError
from mock_transport.domain.exceptions.access_denied import AccessDeniedError
from mock_transport.domain.exceptions.validation_error import DomainValidationError

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "DomainValidationError",
]
