"""
FastAPI dependency providers.
"""

from fastapi import Request

from support_chat.chat import ChatService


def get_chat_service(request: Request) -> ChatService:
    return request.app.state.chat_service
