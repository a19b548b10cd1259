"""
Type definitions for reply routing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import ClassVar, Literal, Union


Sender = Literal["user", "ai"]


@dataclass(frozen=True)
class FAQ:
    """One entry of the FAQ knowledge base."""

    question: str
    answer: str
    id: int | None = None


@dataclass(frozen=True)
class HistoryEntry:
    """A prior message in the conversation."""

    sender: Sender
    text: str

    @property
    def is_user(self) -> bool:
        return self.sender == "user"


@dataclass
class ReplyRequest:
    """Everything needed to produce one reply. Not persisted."""

    conversation_id: int
    user_message: str
    history: list[HistoryEntry] = field(default_factory=list)
    faqs: list[FAQ] = field(default_factory=list)


DegradedReason = Literal["mock_mode", "no_models", "exhausted"]


@dataclass
class ReplySuccess:
    """Reply produced by an upstream model."""

    text: str
    model_used: str

    # Models invoked for this request, in order (the last one succeeded)
    attempted: list[str] = field(default_factory=list)

    degraded: ClassVar[bool] = False


@dataclass
class ReplyDegraded:
    """Reply produced by the deterministic fallback responder."""

    text: str
    reason: DegradedReason

    # Text of the last upstream failure, if any model was invoked
    last_error: str | None = None

    attempted: list[str] = field(default_factory=list)

    degraded: ClassVar[bool] = True

    @property
    def model_used(self) -> None:
        return None


ReplyOutcome = Union[ReplySuccess, ReplyDegraded]
