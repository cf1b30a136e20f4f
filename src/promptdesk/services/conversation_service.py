"""Conversation history management service."""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from ..models import Message
from ..repositories import Storage

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ConversationService:
    """
    Append/read access to the ordered messages of each prompt.

    Does not check that the prompt exists; the dispatcher does that first.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    async def get_messages(self, prompt_id: int) -> List[Message]:
        """Get messages for a prompt, ascending by id."""
        return await self.storage.list_messages(prompt_id)

    async def add_message(
        self,
        prompt_id: int,
        content: str,
        is_user: bool,
        timestamp: Optional[str] = None,
    ) -> Message:
        """Append a message to a prompt's conversation."""
        message = await self.storage.create_message(
            prompt_id, content, is_user, timestamp or utc_timestamp()
        )
        logger.info(
            f"Stored {'user' if is_user else 'assistant'} message {message.id} "
            f"for prompt {prompt_id}"
        )
        return message

    async def clear_conversation(self, prompt_id: int) -> int:
        """Clear a conversation. Clearing an empty one is not an error."""
        removed = await self.storage.clear_messages(prompt_id)
        logger.info(f"Cleared {removed} message(s) for prompt {prompt_id}")
        return removed
