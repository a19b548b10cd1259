"""
Reply prompt builder - assembles the single text prompt sent to every model.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from support_chat.routing.types import FAQ, HistoryEntry


INSTRUCTIONS = """You are a helpful AI support agent for "ShopEase", a modern e-commerce store.
Your role is to assist customers with their questions clearly, concisely, and professionally."""

CONTACT_INFORMATION = """CONTACT INFORMATION:
- Phone: 1-800-SHOP-EASE (1-800-746-7327)
- Email: support@shopease.com
- Hours: Monday-Friday, 9 AM - 6 PM EST
- Live Chat: Available 24/7 (this chat)
- Social Media: @ShopEase on Twitter, Facebook, Instagram"""

GUIDELINES = """GUIDELINES:
- Be friendly, professional, and empathetic
- Answer based on the store information provided above
- When asked for contact info, provide the phone number, email, and hours clearly
- If the customer needs immediate help beyond your scope, provide contact details
- Keep responses concise (2-3 sentences max unless more detail is needed)
- Use a warm, conversational tone
- For questions outside the FAQ scope, provide helpful general guidance"""


class PromptBuilder:
    """
    Builds the reply prompt from FAQs, recent history and the new message.

    Pure and deterministic: the same inputs always give the same text. FAQs
    and history are used exactly as given, in the given order.
    """

    def __init__(
        self,
        instructions: str = INSTRUCTIONS,
        contact_information: str = CONTACT_INFORMATION,
        guidelines: str = GUIDELINES,
    ):
        self.instructions = instructions
        self.contact_information = contact_information
        self.guidelines = guidelines

    def build(
        self,
        faqs: Sequence["FAQ"],
        history: Sequence["HistoryEntry"],
        user_message: str,
    ) -> str:
        """
        Build the complete prompt.

        Args:
            faqs: FAQ knowledge base, in display order.
            history: Recent messages, oldest first.
            user_message: The new customer message.

        Returns:
            The prompt text, ending with the ``Agent:`` cue.
        """
        sections = [
            self.instructions,
            f"STORE INFORMATION:\n{self.format_faqs(faqs)}",
            self.contact_information,
            self.guidelines,
        ]

        history_text = self.format_history(history)
        if history_text:
            sections.append(f"CONVERSATION HISTORY:\n{history_text}")

        sections.append(f"Customer: {user_message}\nAgent:")
        return "\n\n".join(sections)

    @staticmethod
    def format_faqs(faqs: Sequence["FAQ"]) -> str:
        return "\n\n".join(f"Q: {faq.question}\nA: {faq.answer}" for faq in faqs)

    @staticmethod
    def format_history(history: Sequence["HistoryEntry"]) -> str:
        lines = []
        for entry in history:
            speaker = "Customer" if entry.is_user else "Agent"
            lines.append(f"{speaker}: {entry.text}")
        return "\n".join(lines)
