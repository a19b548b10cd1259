"""
OpenAI-compatible LLM client.

Defaults to Google's OpenAI-compatible Gemini endpoint so the Gemini and
Gemma model identifiers can be used directly.
"""

from __future__ import annotations

from openai import AsyncOpenAI

from ..client import LLMClient, LLMResponse


class OpenAIClient(LLMClient):
    """
    OpenAI-compatible client implementation.

    Uses the OpenAI Python SDK's async client.
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash-lite",
        base_url: str | None = None,
        client: AsyncOpenAI | None = None,
    ):
        """
        Initialize the OpenAI-compatible client.

        Args:
            api_key: API key for the endpoint.
            model: Model identifier to use.
            base_url: Endpoint base URL. None uses the SDK default.
            client: Existing SDK client to share (used by ``for_model``).
        """
        if client is None:
            if not api_key:
                raise ValueError("API key required for the OpenAI-compatible client.")
            client = AsyncOpenAI(api_key=api_key, base_url=base_url or None)

        self.client = client
        self._model = model

    @property
    def model_name(self) -> str:
        """Return the model name."""
        return self._model

    def for_model(self, model: str) -> "OpenAIClient":
        return OpenAIClient(api_key="", model=model, client=self.client)

    async def generate(
        self,
        prompt: str,
        max_tokens: int = 500,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """
        Generate a response using the chat completions API.

        Args:
            prompt: The user prompt.
            max_tokens: Maximum tokens in response.
            temperature: Sampling temperature.

        Returns:
            LLMResponse with generated content.
        """
        messages = [{"role": "user", "content": prompt}]

        response = await self.client.chat.completions.create(
            model=self._model,
            messages=messages,
            max_tokens=max_tokens,
            temperature=temperature,
        )

        # Extract content from response
        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        return LLMResponse(
            content=content,
            model=response.model or self._model,
            input_tokens=response.usage.prompt_tokens if response.usage else 0,
            output_tokens=response.usage.completion_tokens if response.usage else 0,
            stop_reason=response.choices[0].finish_reason if response.choices else None,
        )
