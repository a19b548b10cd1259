"""
Chat endpoint routes.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from support_chat.chat import ChatService
from support_chat.errors import ValidationError

from .dependencies import get_chat_service
from .schemas import (
    ChatMessageRequest,
    ChatMessageResponse,
    FAQListResponse,
    FAQOut,
    HealthResponse,
    HistoryResponse,
    MessageOut,
    NewConversationResponse,
)

router = APIRouter(
    prefix="/chat",
    tags=["chat"],
    responses={
        400: {"description": "Invalid input"},
        500: {"description": "Store failure"},
    },
)

health_router = APIRouter(tags=["health"])


@router.post("/message", response_model=ChatMessageResponse, response_model_by_alias=True)
async def send_message(
    body: ChatMessageRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatMessageResponse:
    """
    Send a customer message and get the agent's reply.

    Always answers with a usable reply when the input is valid: if no
    upstream model can be used, the reply comes from the offline responder.
    """
    result = await service.send_message(body.message, body.conversation_id)
    return ChatMessageResponse(
        reply=result.reply,
        conversation_id=result.conversation_id,
        model_used=result.model_used,
        degraded=result.degraded,
    )


@router.get(
    "/history/{conversation_id}",
    response_model=HistoryResponse,
    response_model_by_alias=True,
)
async def get_history(
    conversation_id: str,
    service: ChatService = Depends(get_chat_service),
) -> HistoryResponse:
    try:
        parsed_id = int(conversation_id)
    except ValueError:
        raise ValidationError("Invalid conversation ID") from None

    messages = await service.get_history(parsed_id)
    return HistoryResponse(
        conversation_id=parsed_id,
        messages=[MessageOut(**m.to_dict()) for m in messages],
    )


@router.get("/faqs", response_model=FAQListResponse)
async def get_faqs(service: ChatService = Depends(get_chat_service)) -> FAQListResponse:
    faqs = await service.get_faqs()
    return FAQListResponse(
        faqs=[FAQOut(id=f.id, question=f.question, answer=f.answer) for f in faqs]
    )


@router.post("/new", response_model=NewConversationResponse, response_model_by_alias=True)
async def new_conversation(
    service: ChatService = Depends(get_chat_service),
) -> NewConversationResponse:
    return NewConversationResponse(conversation_id=await service.new_conversation())


@health_router.get("/health", response_model=HealthResponse, response_model_by_alias=True)
async def health(service: ChatService = Depends(get_chat_service)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat(),
        llm_mode=service.router.resolver.mode.value,
    )
