"""
Unit tests for the reply prompt builder.
"""

import pytest

from support_chat.prompt import INSTRUCTIONS, PromptBuilder
from support_chat.routing import FAQ, HistoryEntry


@pytest.fixture
def builder():
    return PromptBuilder()


@pytest.fixture
def faqs():
    return [
        FAQ("What is your shipping policy?", "Free over $50."),
        FAQ("What is your return policy?", "30 days."),
    ]


class TestPromptBuilder:
    """Tests for PromptBuilder."""

    def test_sections_in_order(self, builder, faqs):
        history = [
            HistoryEntry("user", "Hi"),
            HistoryEntry("ai", "Hello! How can I help?"),
        ]

        prompt = builder.build(faqs, history, "Do you ship to Canada?")

        assert prompt.startswith(INSTRUCTIONS)
        positions = [
            prompt.index("STORE INFORMATION:"),
            prompt.index("CONTACT INFORMATION:"),
            prompt.index("GUIDELINES:"),
            prompt.index("CONVERSATION HISTORY:"),
            prompt.index("Customer: Do you ship to Canada?"),
        ]
        assert positions == sorted(positions)

    def test_faq_block_format(self, builder, faqs):
        prompt = builder.build(faqs, [], "hi")

        assert (
            "Q: What is your shipping policy?\nA: Free over $50.\n\n"
            "Q: What is your return policy?\nA: 30 days."
        ) in prompt

    def test_history_lines(self, builder, faqs):
        history = [
            HistoryEntry("user", "first"),
            HistoryEntry("ai", "second"),
            HistoryEntry("user", "third"),
        ]

        prompt = builder.build(faqs, history, "fourth")

        assert (
            "CONVERSATION HISTORY:\nCustomer: first\nAgent: second\nCustomer: third"
        ) in prompt

    def test_history_omitted_when_empty(self, builder, faqs):
        prompt = builder.build(faqs, [], "hello")

        assert "CONVERSATION HISTORY" not in prompt

    def test_ends_with_agent_cue(self, builder, faqs):
        prompt = builder.build(faqs, [], "Where is my order?")

        assert prompt.endswith("Customer: Where is my order?\nAgent:")

    def test_all_entries_kept(self, builder):
        faqs = [FAQ(f"Question {i}?", f"Answer {i}.") for i in range(20)]
        history = [HistoryEntry("user" if i % 2 == 0 else "ai", f"msg {i}") for i in range(10)]

        prompt = builder.build(faqs, history, "new")

        for i in range(20):
            assert f"Q: Question {i}?\nA: Answer {i}." in prompt
        for i in range(10):
            assert f"msg {i}" in prompt
        assert prompt.index("msg 0") < prompt.index("msg 9")

    def test_deterministic(self, builder, faqs):
        history = [HistoryEntry("user", "Hi")]

        assert builder.build(faqs, history, "x") == builder.build(faqs, history, "x")

    def test_format_history_speakers(self):
        history = [HistoryEntry("ai", "Welcome"), HistoryEntry("user", "Thanks")]

        assert [entry.is_user for entry in history] == [False, True]
        assert PromptBuilder.format_history(history) == "Agent: Welcome\nCustomer: Thanks"
