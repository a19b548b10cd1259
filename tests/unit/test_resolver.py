"""
Unit tests for LLM client resolution and the mock-mode latch.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest

from support_chat.config.settings import Settings
from support_chat.llm import ClientResolver, LLMMode, default_client_factory
from support_chat.llm.providers import AnthropicClient, OpenAIClient


class TestClientResolver:
    """Tests for ClientResolver."""

    def test_starts_uninitialized(self):
        resolver = ClientResolver(api_key="key", factory=Mock())

        assert resolver.mode is LLMMode.UNINITIALIZED

    def test_live_when_key_present(self):
        client = Mock()
        factory = Mock(return_value=client)
        resolver = ClientResolver(api_key="key", factory=factory)

        assert resolver.resolve() is client
        assert resolver.mode is LLMMode.LIVE
        factory.assert_called_once_with("key")

    def test_client_constructed_once(self):
        factory = Mock(return_value=Mock())
        resolver = ClientResolver(api_key="key", factory=factory)

        resolver.resolve()
        resolver.resolve()

        assert factory.call_count == 1

    @pytest.mark.parametrize("api_key", ["", "   "])
    def test_missing_key_latches_degraded(self, api_key):
        factory = Mock()
        resolver = ClientResolver(api_key=api_key, factory=factory)

        assert resolver.resolve() is None
        assert resolver.mode is LLMMode.DEGRADED_ONLY
        factory.assert_not_called()

    def test_factory_failure_latches_degraded(self):
        factory = Mock(side_effect=RuntimeError("bad credentials"))
        resolver = ClientResolver(api_key="key", factory=factory)

        assert resolver.resolve() is None
        assert resolver.mode is LLMMode.DEGRADED_ONLY

        # Sticky: the factory is never retried
        assert resolver.resolve() is None
        assert factory.call_count == 1

    def test_from_settings(self):
        settings = Settings(llm_api_key="", database_url="sqlite+aiosqlite:///:memory:")
        resolver = ClientResolver.from_settings(settings)

        assert resolver.resolve() is None
        assert resolver.mode is LLMMode.DEGRADED_ONLY


class TestDefaultClientFactory:
    """Tests for provider selection."""

    def test_openai_compatible(self):
        client = default_client_factory("openai", base_url="https://example.test/v1/")("key")

        assert isinstance(client, OpenAIClient)
        bound = client.for_model("gemma-3-27b")
        assert bound.model_name == "gemma-3-27b"
        assert bound.client is client.client

    def test_anthropic(self):
        client = default_client_factory("anthropic")("key")

        assert isinstance(client, AnthropicClient)
        assert client.for_model("claude-x").model_name == "claude-x"


class TestProviderGenerate:
    """Tests for the request each provider sends."""

    def test_openai_sends_single_user_message(self):
        sdk = Mock()
        sdk.chat.completions.create = AsyncMock(return_value=SimpleNamespace(
            choices=[SimpleNamespace(
                message=SimpleNamespace(content="Hello!"), finish_reason="stop"
            )],
            model="gemma-3-27b",
            usage=SimpleNamespace(prompt_tokens=12, completion_tokens=3),
        ))
        client = OpenAIClient(api_key="", model="gemma-3-27b", client=sdk)

        response = asyncio.run(client.generate("Customer: hi\nAgent:", max_tokens=50))

        assert response.content == "Hello!"
        kwargs = sdk.chat.completions.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "Customer: hi\nAgent:"}]
        assert kwargs["max_tokens"] == 50
        assert kwargs["temperature"] == 0.7

    def test_anthropic_sends_single_user_message(self):
        sdk = Mock()
        sdk.messages.create = AsyncMock(return_value=SimpleNamespace(
            content=[SimpleNamespace(text="Hello!")],
            model="claude-x",
            usage=SimpleNamespace(input_tokens=12, output_tokens=3),
            stop_reason="end_turn",
        ))
        client = AnthropicClient(api_key="", model="claude-x", client=sdk)

        response = asyncio.run(client.generate("Customer: hi\nAgent:"))

        assert response.content == "Hello!"
        kwargs = sdk.messages.create.call_args.kwargs
        assert kwargs["messages"] == [{"role": "user", "content": "Customer: hi\nAgent:"}]
        assert "system" not in kwargs
