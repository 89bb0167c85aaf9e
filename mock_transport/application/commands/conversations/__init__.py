"""Conversation commands."""

from .update_receipt_mode import UpdateReceiptModeCommand, UpdateReceiptModeHandler
from .update_access import UpdateAccessCommand, UpdateAccessHandler
from .create_link import CreateLinkCommand, CreateLinkHandler, CreateLinkResult
from .delete_link import DeleteLinkCommand, DeleteLinkHandler

__all__ = [
    "UpdateReceiptModeCommand",
    "UpdateReceiptModeHandler",
    "UpdateAccessCommand",
    "UpdateAccessHandler",
    "CreateLinkCommand",
    "CreateLinkHandler",
    "CreateLinkResult",
    "DeleteLinkCommand",
    "DeleteLinkHandler",
]
