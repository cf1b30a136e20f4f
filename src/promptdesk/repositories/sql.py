"""SQLAlchemy-backed storage."""

import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncEngine

from ..database import Base, MessageRecord, PromptRecord, UserRecord, make_session_factory
from ..models import Message, Prompt, User
from .base import Storage

logger = logging.getLogger(__name__)


class SqlStorage(Storage):
    """Repository over the users, prompts and messages tables."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.session_factory = make_session_factory(engine)

    async def init(self) -> None:
        """Create missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables ready")

    async def close(self) -> None:
        await self.engine.dispose()

    # User operations

    async def get_user(self, user_id: int) -> Optional[User]:
        async with self.session_factory() as session:
            record = await session.get(UserRecord, user_id)
            return User.model_validate(record) if record else None

    async def get_user_by_username(self, username: str) -> Optional[User]:
        async with self.session_factory() as session:
            stmt = select(UserRecord).where(UserRecord.username == username)
            result = await session.execute(stmt)
            record = result.scalar_one_or_none()
            return User.model_validate(record) if record else None

    async def create_user(self, username: str, password: str, is_admin: bool = False) -> User:
        async with self.session_factory() as session:
            record = UserRecord(username=username, password=password, is_admin=is_admin)
            session.add(record)
            await session.commit()
            return User.model_validate(record)

    # Prompt operations

    async def list_prompts(self) -> List[Prompt]:
        async with self.session_factory() as session:
            result = await session.execute(select(PromptRecord).order_by(PromptRecord.id))
            return [Prompt.model_validate(r) for r in result.scalars().all()]

    async def get_prompt(self, prompt_id: int) -> Optional[Prompt]:
        async with self.session_factory() as session:
            record = await session.get(PromptRecord, prompt_id)
            return Prompt.model_validate(record) if record else None

    async def create_prompt(self, fields: Dict[str, Any], api_key: Optional[str] = None) -> Prompt:
        async with self.session_factory() as session:
            record = PromptRecord(api_key=api_key, **fields)
            session.add(record)
            await session.commit()
            return Prompt.model_validate(record)

    async def update_prompt(self, prompt_id: int, fields: Dict[str, Any]) -> Optional[Prompt]:
        async with self.session_factory() as session:
            record = await session.get(PromptRecord, prompt_id)
            if record is None:
                return None
            for key, value in fields.items():
                setattr(record, key, value)
            await session.commit()
            return Prompt.model_validate(record)

    async def delete_prompt(self, prompt_id: int) -> bool:
        async with self.session_factory() as session:
            record = await session.get(PromptRecord, prompt_id)
            if record is None:
                return False
            await session.delete(record)
            await session.commit()
            return True

    # Message operations

    async def list_messages(self, prompt_id: int) -> List[Message]:
        async with self.session_factory() as session:
            stmt = (
                select(MessageRecord)
                .where(MessageRecord.prompt_id == prompt_id)
                .order_by(MessageRecord.id)
            )
            result = await session.execute(stmt)
            return [Message.model_validate(r) for r in result.scalars().all()]

    async def create_message(
        self, prompt_id: int, content: str, is_user: bool, timestamp: str
    ) -> Message:
        async with self.session_factory() as session:
            record = MessageRecord(
                prompt_id=prompt_id, content=content, is_user=is_user, timestamp=timestamp
            )
            session.add(record)
            await session.commit()
            return Message.model_validate(record)

    async def clear_messages(self, prompt_id: int) -> int:
        async with self.session_factory() as session:
            result = await session.execute(
                delete(MessageRecord).where(MessageRecord.prompt_id == prompt_id)
            )
            await session.commit()
            return result.rowcount or 0
