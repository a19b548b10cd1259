"""
Unit tests for the deterministic fallback responder.
"""

import pytest

from support_chat.fallback import FallbackConfig, FallbackResponder
from support_chat.fallback.config import CONTACT_BLOCK, GENERIC_REPLY
from support_chat.routing import FAQ
from support_chat.store import DEFAULT_FAQS


@pytest.fixture
def faqs():
    return [FAQ(question=q, answer=a, id=i) for i, (q, a) in enumerate(DEFAULT_FAQS, 1)]


@pytest.fixture
def responder():
    return FallbackResponder()


class TestFallbackResponder:
    """Tests for FallbackResponder."""

    def test_exact_question_returns_answer(self, responder, faqs):
        faqs = [FAQ("What's your return policy?", "30 days, no questions asked.")]

        reply = responder.respond("What's your return policy?", faqs)

        assert reply == "30 days, no questions asked."

    def test_question_prefix_match_is_case_insensitive(self, responder, faqs):
        reply = responder.respond("WHAT IS YOUR SHIPPING cost to Texas", faqs)

        assert reply == DEFAULT_FAQS[0][1]

    def test_prefix_match_takes_first_faq_in_order(self, responder):
        faqs = [
            FAQ("What is your shipping policy?", "first"),
            FAQ("What is your shipping policy for Canada?", "second"),
        ]

        assert responder.respond("what is your shipping policy?", faqs) == "first"

    def test_contact_trigger_beats_faq_match(self, responder, faqs):
        faqs = faqs + [FAQ("What is your phone number?", "Call 555-0100.")]

        assert responder.respond("call me", faqs) == CONTACT_BLOCK
        assert responder.respond("What is your phone number?", faqs) == CONTACT_BLOCK

    @pytest.mark.parametrize(
        "message",
        ["How do I CONTACT you?", "email address please", "can I reach someone", "support number?"],
    )
    def test_contact_triggers(self, responder, faqs, message):
        assert responder.respond(message, faqs) == CONTACT_BLOCK

    def test_keyword_match(self, responder, faqs):
        # "payment" is a >4 char word of the payment methods question
        reply = responder.respond("which payment options are there", faqs)

        assert reply == DEFAULT_FAQS[3][1]

    def test_prefix_match_wins_over_earlier_keyword_match(self, responder):
        faqs = [
            FAQ("Shipping times overseas", "keyword answer"),
            FAQ("Do you ship internationally?", "prefix answer"),
        ]

        # "shipping" would keyword-match the first FAQ, but the second FAQ's
        # prefix "do you ship int" matches and prefix matching runs first
        reply = responder.respond("do you ship internationally and shipping fees", faqs)

        assert reply == "prefix answer"

    def test_short_words_are_not_keywords(self, responder):
        faqs = [FAQ("Can you help me now", "should not match")]

        assert responder.respond("you can help", faqs) == GENERIC_REPLY

    def test_no_match_returns_generic_reply(self, responder, faqs):
        assert responder.respond("hello there", faqs) == GENERIC_REPLY

    def test_empty_faqs(self, responder):
        assert responder.respond("what is your return policy?", []) == GENERIC_REPLY

    def test_empty_question_does_not_match_everything(self, responder):
        faqs = [FAQ("", "blank"), FAQ("Do you ship internationally?", "yes")]

        assert responder.respond("do you ship internationally", faqs) == "yes"

    def test_is_pure(self, responder, faqs):
        first = responder.respond("Do you ship internationally?", faqs)
        second = responder.respond("Do you ship internationally?", faqs)

        assert first == second

    def test_custom_config(self, faqs):
        config = FallbackConfig(
            contact_triggers=("HUMAN",),
            contact_block="Ask for a human at the desk.",
            generic_reply="Sorry!",
        )
        responder = FallbackResponder(config)

        assert responder.respond("I want a human", faqs) == "Ask for a human at the desk."
        assert responder.respond("call me", []) == "Sorry!"

    def test_invalid_config(self):
        with pytest.raises(ValueError, match="question_prefix_length"):
            FallbackConfig(question_prefix_length=0)
