"""
Chat turn orchestration.
"""

from .service import ChatReply, ChatService, create_service

__all__ = [
    "ChatReply",
    "ChatService",
    "create_service",
]
