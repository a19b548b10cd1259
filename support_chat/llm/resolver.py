"""
Resolves the upstream LLM client once per process.

The resolver owns the mock-mode latch: if no credential is configured, or the
SDK client cannot be constructed, it settles into ``DEGRADED_ONLY`` and stays
there for the rest of the process lifetime.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Callable

from .client import LLMClient

logger = logging.getLogger(__name__)


class LLMMode(str, Enum):
    """Resolution state of the upstream client."""

    UNINITIALIZED = "uninitialized"
    LIVE = "live"
    DEGRADED_ONLY = "degraded_only"


ClientFactory = Callable[[str], LLMClient]


def default_client_factory(
    provider: str = "openai",
    base_url: str | None = None,
) -> ClientFactory:
    """Build a factory that turns an API key into a provider client."""

    def factory(api_key: str) -> LLMClient:
        if provider == "anthropic":
            from .providers import AnthropicClient

            return AnthropicClient(api_key=api_key)

        from .providers import OpenAIClient

        return OpenAIClient(api_key=api_key, base_url=base_url)

    return factory


class ClientResolver:
    """
    Lazily constructs the shared LLM client.

    Transitions are monotonic: UNINITIALIZED -> LIVE or
    UNINITIALIZED -> DEGRADED_ONLY. Neither terminal state is ever left.
    """

    def __init__(self, api_key: str, factory: ClientFactory):
        self._api_key = api_key
        self._factory = factory
        self._mode = LLMMode.UNINITIALIZED
        self._client: LLMClient | None = None
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings) -> "ClientResolver":
        """Create a resolver from application settings."""
        return cls(
            api_key=settings.llm_api_key,
            factory=default_client_factory(
                provider=settings.llm_provider,
                base_url=settings.llm_base_url,
            ),
        )

    @property
    def mode(self) -> LLMMode:
        return self._mode

    def resolve(self) -> LLMClient | None:
        """
        Return the live client, or None when running in mock mode.

        The first call decides the mode; later calls return the cached result.
        """
        with self._lock:
            if self._mode is LLMMode.UNINITIALIZED:
                self._initialize()
            return self._client

    def _initialize(self) -> None:
        if not self._api_key.strip():
            logger.warning("No LLM API key configured, using mock responses")
            self._mode = LLMMode.DEGRADED_ONLY
            return

        try:
            self._client = self._factory(self._api_key)
        except Exception as e:
            logger.error(f"Failed to initialize LLM client: {e}")
            logger.warning("Falling back to mock responses")
            self._client = None
            self._mode = LLMMode.DEGRADED_ONLY
            return

        logger.info("LLM client initialized successfully")
        self._mode = LLMMode.LIVE
