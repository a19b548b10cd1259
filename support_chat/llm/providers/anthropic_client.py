"""
Anthropic Claude LLM client.
"""

from __future__ import annotations

from anthropic import AsyncAnthropic

from ..client import LLMClient, LLMResponse


class AnthropicClient(LLMClient):
    """
    Anthropic Claude client implementation.

    Uses the Anthropic Python SDK's async client.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "claude-sonnet-4-20250514",
        client: AsyncAnthropic | None = None,
    ):
        """
        Initialize the Anthropic client.

        Args:
            api_key: Anthropic API key.
            model: Model identifier to use.
            client: Existing SDK client to share (used by ``for_model``).
        """
        if client is None:
            if not api_key:
                raise ValueError("Anthropic API key required.")
            client = AsyncAnthropic(api_key=api_key)

        self.client = client
        self._model = model

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._model

    def for_model(self, model: str) -> "AnthropicClient":
        return AnthropicClient(api_key="", model=model, client=self.client)

    async def generate(
        self,
        prompt: str,
        max_tokens: int = 500,
        temperature: float = 0.7,
    ) -> LLMResponse:
        messages = [{"role": "user", "content": prompt}]

        kwargs = {
            "model": self._model,
            "max_tokens": max_tokens,
            "temperature": temperature,
            "messages": messages,
        }

        response = await self.client.messages.create(**kwargs)

        # Extract content from response
        content = ""
        if response.content:
            content = response.content[0].text

        return LLMResponse(
            content=content,
            model=response.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
            stop_reason=response.stop_reason,
        )
