"""
Relational store for conversations, messages and FAQs.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from datetime import datetime
from typing import AsyncIterator

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from support_chat.errors import StoreConfigError, StoreError
from support_chat.routing.types import FAQ, Sender

from .models import Base, Conversation, FAQRecord, Message
from .seed import DEFAULT_FAQS

logger = logging.getLogger(__name__)


@dataclass
class StoredMessage:
    """A persisted chat message."""

    id: int
    conversation_id: int
    sender: Sender
    text: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "sender": self.sender,
            "text": self.text,
            "timestamp": self.timestamp.isoformat() if self.timestamp else None,
        }


class ConversationStore:
    """
    Async SQLAlchemy store.

    Every database error is re-raised as StoreError so callers see one
    failure type regardless of the driver.

    Example:
        >>> store = ConversationStore("postgresql+asyncpg://localhost/shopease")
        >>> await store.init_schema()
        >>> conversation_id = await store.create_conversation()
    """

    def __init__(self, database_url: str, echo: bool = False):
        """
        Initialize the store.

        Args:
            database_url: SQLAlchemy async connection string.
            echo: Log emitted SQL.

        Raises:
            StoreConfigError: If no connection string is given.
        """
        if not database_url:
            raise StoreConfigError("DATABASE_URL environment variable is not set")

        engine_kwargs: dict = {"echo": echo}
        if database_url.startswith("sqlite") and ":memory:" in database_url:
            # One shared connection, or every session sees an empty database
            engine_kwargs.update(
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )

        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._sessions = async_sessionmaker(self.engine, expire_on_commit=False)

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[AsyncSession]:
        try:
            async with self._sessions() as session:
                yield session
        except SQLAlchemyError as e:
            logger.error(f"Database error: {e}")
            raise StoreError(str(e)) from e

    async def init_schema(self) -> None:
        """Create tables and indexes if they do not exist."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except SQLAlchemyError as e:
            raise StoreError(str(e)) from e
        logger.info("Database schema initialized")

    async def seed_faqs(self, faqs: list[tuple[str, str]] | None = None) -> int:
        """
        Insert the default FAQs if the table is empty.

        Returns:
            Number of FAQs inserted.
        """
        faqs = DEFAULT_FAQS if faqs is None else faqs
        async with self._session() as session:
            count = await session.scalar(select(func.count()).select_from(FAQRecord))
            if count:
                logger.info("FAQs already seeded")
                return 0

            session.add_all(FAQRecord(question=q, answer=a) for q, a in faqs)
            await session.commit()

        logger.info(f"Seeded {len(faqs)} FAQs")
        return len(faqs)

    async def get_faqs(self) -> list[FAQ]:
        """All FAQs in insertion order."""
        async with self._session() as session:
            result = await session.scalars(select(FAQRecord).order_by(FAQRecord.id))
            return [FAQ(question=r.question, answer=r.answer, id=r.id) for r in result]

    async def create_conversation(self) -> int:
        async with self._session() as session:
            conversation = Conversation(meta={})
            session.add(conversation)
            await session.commit()
            return conversation.id

    async def get_conversation(self, conversation_id: int) -> Conversation | None:
        async with self._session() as session:
            return await session.get(Conversation, conversation_id)

    async def conversation_exists(self, conversation_id: int) -> bool:
        return await self.get_conversation(conversation_id) is not None

    async def append_message(
        self, conversation_id: int, sender: Sender, text: str
    ) -> StoredMessage:
        """Persist one message and return it."""
        async with self._session() as session:
            message = Message(conversation_id=conversation_id, sender=sender, text=text)
            session.add(message)
            await session.commit()
            return self._to_stored(message)

    async def get_messages(
        self, conversation_id: int, limit: int = 50
    ) -> list[StoredMessage]:
        """The first ``limit`` messages of a conversation, oldest first."""
        stmt = (
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(Message.timestamp.asc(), Message.id.asc())
            .limit(limit)
        )
        async with self._session() as session:
            result = await session.scalars(stmt)
            return [self._to_stored(m) for m in result]

    async def get_recent_messages(
        self, conversation_id: int, limit: int = 10
    ) -> list[StoredMessage]:
        """The newest ``limit`` messages, returned oldest first."""
        stmt = (
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(Message.timestamp.desc(), Message.id.desc())
            .limit(limit)
        )
        async with self._session() as session:
            result = await session.scalars(stmt)
            messages = [self._to_stored(m) for m in result]
        messages.reverse()
        return messages

    async def close(self) -> None:
        await self.engine.dispose()

    @staticmethod
    def _to_stored(message: Message) -> StoredMessage:
        return StoredMessage(
            id=message.id,
            conversation_id=message.conversation_id,
            sender=message.sender,
            text=message.text,
            timestamp=message.timestamp,
        )
