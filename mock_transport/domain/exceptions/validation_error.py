"""
DomainValidationError - Raised when a request payload is malformed.
Maps to: HTTP 400 Bad Request
"""


class DomainValidationError(Exception):
    """Exception raised for payload validation errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
