"""
Chat service: validates input, drives the router and persists the exchange.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from support_chat.errors import ConversationNotFoundError, ValidationError
from support_chat.routing import HistoryEntry, ReplyRequest

if TYPE_CHECKING:
    from support_chat.routing import FAQ, ModelFallbackRouter
    from support_chat.store import ConversationStore, StoredMessage


logger = logging.getLogger(__name__)


@dataclass
class ChatReply:
    """Result of one customer message."""

    reply: str
    conversation_id: int

    # None when the reply came from the offline responder
    model_used: str | None = None
    degraded: bool = False
    degraded_reason: str | None = None


class ChatService:
    """
    Orchestrates one chat turn.

    Flow: validate -> resolve conversation -> load FAQs and recent history ->
    persist user message -> route reply -> persist agent message.

    Store errors propagate unchanged; upstream model errors never reach here.
    """

    def __init__(
        self,
        store: "ConversationStore",
        router: "ModelFallbackRouter",
        history_limit: int = 10,
        max_message_length: int = 1000,
    ):
        self.store = store
        self.router = router
        self.history_limit = history_limit
        self.max_message_length = max_message_length

    def validate_message(self, message: object) -> str:
        """Return the trimmed message or raise ValidationError."""
        if not isinstance(message, str):
            raise ValidationError("Message is required and must be a string")

        trimmed = message.strip()
        if not trimmed:
            raise ValidationError("Message cannot be empty")

        if len(trimmed) > self.max_message_length:
            raise ValidationError(
                f"Message is too long. Please keep it under "
                f"{self.max_message_length} characters."
            )
        return trimmed

    async def send_message(
        self, message: object, conversation_id: int | None = None
    ) -> ChatReply:
        """
        Handle one customer message.

        Args:
            message: Raw message text.
            conversation_id: Existing conversation, or None to start one.
                Unknown ids also start a new conversation.

        Returns:
            ChatReply with the agent's reply.
        """
        text = self.validate_message(message)
        conversation_id = await self._resolve_conversation(conversation_id)

        faqs = await self.store.get_faqs()
        recent = await self.store.get_recent_messages(conversation_id, self.history_limit)

        await self.store.append_message(conversation_id, "user", text)

        outcome = await self.router.generate_reply(
            ReplyRequest(
                conversation_id=conversation_id,
                user_message=text,
                history=[HistoryEntry(sender=m.sender, text=m.text) for m in recent],
                faqs=list(faqs),
            )
        )

        await self.store.append_message(conversation_id, "ai", outcome.text)

        if outcome.degraded:
            logger.info(
                f"Conversation {conversation_id}: degraded reply ({outcome.reason})"
            )

        return ChatReply(
            reply=outcome.text,
            conversation_id=conversation_id,
            model_used=outcome.model_used,
            degraded=outcome.degraded,
            degraded_reason=getattr(outcome, "reason", None),
        )

    async def new_conversation(self) -> int:
        return await self.store.create_conversation()

    async def get_history(
        self, conversation_id: int, limit: int = 50
    ) -> list["StoredMessage"]:
        """Messages of an existing conversation, oldest first."""
        if not await self.store.conversation_exists(conversation_id):
            raise ConversationNotFoundError(conversation_id)
        return await self.store.get_messages(conversation_id, limit)

    async def get_faqs(self) -> list["FAQ"]:
        return await self.store.get_faqs()

    async def _resolve_conversation(self, conversation_id: int | None) -> int:
        if conversation_id and await self.store.conversation_exists(conversation_id):
            return conversation_id

        new_id = await self.store.create_conversation()
        if conversation_id:
            logger.info(
                f"Conversation {conversation_id} not found, started {new_id}"
            )
        return new_id


def create_service(settings=None, database_url: str | None = None) -> ChatService:
    """
    Factory function to create a chat service with default components.

    Args:
        settings: Application settings. Defaults to the global settings.
        database_url: Override for the store connection string.

    Returns:
        Configured ChatService instance.
    """
    from support_chat.config.settings import get_settings
    from support_chat.llm import ClientResolver
    from support_chat.routing import AvailabilityTracker, ModelFallbackRouter, RouterConfig
    from support_chat.store import ConversationStore

    settings = settings or get_settings()
    router = ModelFallbackRouter(
        resolver=ClientResolver.from_settings(settings),
        tracker=AvailabilityTracker.from_settings(settings),
        config=RouterConfig.from_settings(settings),
    )
    store = ConversationStore(database_url or settings.database_url)

    return ChatService(
        store=store,
        router=router,
        history_limit=settings.history_limit,
        max_message_length=settings.max_message_length,
    )
