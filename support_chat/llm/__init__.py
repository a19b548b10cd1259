"""
LLM client module for the support chat.
"""

from .client import LLMClient, LLMResponse
from .resolver import ClientResolver, LLMMode, default_client_factory

__all__ = [
    "ClientResolver",
    "LLMClient",
    "LLMMode",
    "LLMResponse",
    "default_client_factory",
]
