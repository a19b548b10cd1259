"""
Deterministic fallback responder used when no upstream model is usable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .config import FallbackConfig

if TYPE_CHECKING:
    from support_chat.routing.types import FAQ


class FallbackResponder:
    """
    Produces a canned or FAQ-matched answer without any network call.

    Matching precedence:
    1. Contact trigger word in the message -> contact block.
    2. First FAQ whose question prefix appears in the message -> its answer.
    3. First FAQ with a question keyword appearing in the message -> its answer.
    4. Generic apology with contact details.

    Pure and total: never raises, always returns text.
    """

    def __init__(self, config: FallbackConfig | None = None):
        self.config = config or FallbackConfig()

    def respond(self, user_message: str, faqs: Sequence["FAQ"]) -> str:
        """
        Pick the offline reply for ``user_message``.

        Args:
            user_message: The customer's message.
            faqs: FAQ knowledge base, scanned in the given order.

        Returns:
            Reply text.
        """
        message = user_message.lower()

        if self.asks_for_contact(message):
            return self.config.contact_block

        answer = self.match_question_prefix(message, faqs)
        if answer is not None:
            return answer

        answer = self.match_keywords(message, faqs)
        if answer is not None:
            return answer

        return self.config.generic_reply

    def asks_for_contact(self, message: str) -> bool:
        message = message.lower()
        return any(trigger in message for trigger in self.config.contact_triggers)

    def match_question_prefix(
        self, message: str, faqs: Sequence["FAQ"]
    ) -> str | None:
        message = message.lower()
        for faq in faqs:
            prefix = faq.question.lower()[: self.config.question_prefix_length]
            # An empty prefix would match every message
            if prefix.strip() and prefix in message:
                return faq.answer
        return None

    def match_keywords(self, message: str, faqs: Sequence["FAQ"]) -> str | None:
        message = message.lower()
        for faq in faqs:
            for word in faq.question.lower().split(" "):
                if len(word) > self.config.min_keyword_length and word in message:
                    return faq.answer
        return None
