"""
Request and response bodies for the chat API.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class ChatMessageRequest(_CamelModel):
    # Validated by the service so that missing and empty both map to 400
    message: Any = None
    conversation_id: int | None = Field(default=None, alias="conversationId")

    @field_validator("conversation_id", mode="before")
    @classmethod
    def _unparseable_id_starts_new(cls, value: Any) -> int | None:
        # Anything that is not a conversation id is treated like an unknown one
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip().isdigit():
            return int(value)
        return None


class ChatMessageResponse(_CamelModel):
    reply: str
    conversation_id: int = Field(alias="conversationId")
    model_used: str | None = Field(default=None, alias="modelUsed")
    degraded: bool = False


class MessageOut(BaseModel):
    id: int
    sender: str
    text: str
    timestamp: str | None = None


class HistoryResponse(_CamelModel):
    conversation_id: int = Field(alias="conversationId")
    messages: list[MessageOut]


class FAQOut(BaseModel):
    id: int | None = None
    question: str
    answer: str


class FAQListResponse(BaseModel):
    faqs: list[FAQOut]


class NewConversationResponse(_CamelModel):
    conversation_id: int = Field(alias="conversationId")


class HealthResponse(_CamelModel):
    status: str
    timestamp: str
    llm_mode: str = Field(alias="llmMode")
