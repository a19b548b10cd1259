"""
LLM provider implementations.
"""

from .anthropic_client import AnthropicClient
from .openai_client import OpenAIClient

__all__ = [
    "AnthropicClient",
    "OpenAIClient",
]
