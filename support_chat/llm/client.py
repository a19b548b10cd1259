"""
Abstract LLM client interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class LLMResponse:
    """Response from an LLM."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int
    stop_reason: str | None = None


class LLMClient(ABC):
    """
    Abstract base class for async LLM clients.

    A client instance is bound to exactly one model identifier. Providers
    hand out per-model clients through ``for_model`` so the router can walk
    the priority list while sharing one SDK connection.

    Implementations should handle:
    - API authentication
    - Request formatting
    - Response parsing

    Vendor errors are left to propagate; the router classifies them.
    """

    @property
    @abstractmethod
    def model_name(self) -> str:
        """Return the model name/identifier."""
        pass

    @abstractmethod
    def for_model(self, model: str) -> "LLMClient":
        """Return a client bound to ``model`` sharing this client's connection."""
        pass

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        max_tokens: int = 500,
        temperature: float = 0.7,
    ) -> LLMResponse:
        """
        Generate a response from the LLM.

        Args:
            prompt: The user prompt.
            max_tokens: Maximum tokens in response.
            temperature: Sampling temperature.

        Returns:
            LLMResponse with generated content.
        """
        pass

