"""
Prompt assembly for reply generation.
"""

from .builder import CONTACT_INFORMATION, GUIDELINES, INSTRUCTIONS, PromptBuilder

__all__ = [
    "CONTACT_INFORMATION",
    "GUIDELINES",
    "INSTRUCTIONS",
    "PromptBuilder",
]
