"""
EntityNotFoundError - Raised when a requested resource does not exist.
Maps to: HTTP 404 Not Found
"""

from typing import Optional


class EntityNotFoundError(Exception):
    """Exception raised when a requested entity is not found."""

    def __init__(
        self,
        message: str = "The requested entity was not found.",
        label: Optional[str] = None,
    ):
        super().__init__(message)
        self.label = label
