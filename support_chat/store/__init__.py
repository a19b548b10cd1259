"""
Conversation, message and FAQ persistence.
"""

from .models import Base, Conversation, FAQRecord, Message
from .seed import DEFAULT_FAQS
from .store import ConversationStore, StoredMessage

__all__ = [
    "Base",
    "Conversation",
    "ConversationStore",
    "DEFAULT_FAQS",
    "FAQRecord",
    "Message",
    "StoredMessage",
]
