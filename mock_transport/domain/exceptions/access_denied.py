"""
AccessDeniedError - Raised when an operation is not allowed on a resource.
Maps to: HTTP 403 Forbidden
"""

from typing import Optional

INVALID_OPERATION = "invalid-op"


class AccessDeniedError(Exception):
    """Raised when the conversation state forbids the requested operation"""

    def __init__(self, message: str = "Access denied", label: Optional[str] = None):
        super().__init__(message)
        self.label = label
