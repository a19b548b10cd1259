"""
Configuration for the deterministic fallback responder.
"""

from dataclasses import dataclass, field


CONTACT_TRIGGERS = (
    "contact",
    "phone",
    "email",
    "call",
    "support number",
    "reach",
)

CONTACT_BLOCK = (
    "You can reach our support team at:\n"
    "📞 Phone: 1-800-SHOP-EASE (1-800-746-7327)\n"
    "📧 Email: support@shopease.com\n"
    "🕒 Hours: Monday-Friday, 9 AM - 6 PM EST\n"
    "💬 Live Chat: Available 24/7 (right here!)\n\n"
    "We typically respond within 2 hours. How else can I help you today?"
)

GENERIC_REPLY = (
    "Thank you for your question! While I'm currently experiencing some technical "
    "difficulties with my AI connection, I'd be happy to help. For immediate "
    "assistance, please contact our support team:\n"
    "📞 1-800-SHOP-EASE (1-800-746-7327)\n"
    "📧 support@shopease.com\n"
    "🕒 Monday-Friday, 9 AM - 6 PM EST"
)


@dataclass
class FallbackConfig:
    """Canned texts and matching thresholds for offline replies."""

    # Case-insensitive substrings that ask for contact details
    contact_triggers: tuple[str, ...] = field(default=CONTACT_TRIGGERS)

    # Returned verbatim when a contact trigger matches
    contact_block: str = CONTACT_BLOCK

    # Returned when nothing matches
    generic_reply: str = GENERIC_REPLY

    # Leading characters of an FAQ question matched against the message
    question_prefix_length: int = 15

    # Question words must be longer than this to count as keywords
    min_keyword_length: int = 4

    def __post_init__(self):
        """Validate configuration."""
        if self.question_prefix_length < 1:
            raise ValueError("question_prefix_length must be >= 1")
        if self.min_keyword_length < 0:
            raise ValueError("min_keyword_length must be >= 0")
        self.contact_triggers = tuple(t.lower() for t in self.contact_triggers)
