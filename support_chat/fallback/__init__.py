"""
Fallback module for replies produced without an upstream model.

Used when the process runs in mock mode (no LLM credential) or when every
model in the priority list failed or is cooling down.
"""

from .config import FallbackConfig
from .responder import FallbackResponder

__all__ = [
    "FallbackConfig",
    "FallbackResponder",
]
