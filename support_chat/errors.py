"""
Caller-visible errors.

Upstream model failures are not here: they never leave the router (see
``support_chat.routing.errors``).
"""


class SupportChatError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500


class ValidationError(SupportChatError):
    """Bad or oversized input. Not retried."""

    status_code = 400


class ConversationNotFoundError(SupportChatError):
    status_code = 404

    def __init__(self, conversation_id: int):
        super().__init__(f"Conversation {conversation_id} not found")
        self.conversation_id = conversation_id


class StoreError(SupportChatError):
    """The conversation store failed. Reported as a generic 500."""


class StoreConfigError(StoreError):
    """The store cannot start, e.g. no connection string is configured."""
