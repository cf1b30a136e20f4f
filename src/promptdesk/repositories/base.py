"""Storage interface shared by the in-memory and SQL backends."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models import Message, Prompt, User


class Storage(ABC):
    """
    Narrow CRUD contract over users, prompts and messages.

    Implementations do not validate fields or check that a message's
    prompt exists; callers are responsible for that.
    """

    async def init(self) -> None:
        """Prepare the backend (create tables, open pools). No-op by default."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""

    # User operations
    @abstractmethod
    async def get_user(self, user_id: int) -> Optional[User]:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    @abstractmethod
    async def create_user(self, username: str, password: str, is_admin: bool = False) -> User:
        ...

    # Prompt operations
    @abstractmethod
    async def list_prompts(self) -> List[Prompt]:
        ...

    @abstractmethod
    async def get_prompt(self, prompt_id: int) -> Optional[Prompt]:
        ...

    @abstractmethod
    async def create_prompt(self, fields: Dict[str, Any], api_key: Optional[str] = None) -> Prompt:
        """Insert a prompt. ``api_key`` only feeds the legacy column for seed rows."""

    @abstractmethod
    async def update_prompt(self, prompt_id: int, fields: Dict[str, Any]) -> Optional[Prompt]:
        ...

    @abstractmethod
    async def delete_prompt(self, prompt_id: int) -> bool:
        ...

    # Message operations
    @abstractmethod
    async def list_messages(self, prompt_id: int) -> List[Message]:
        """Messages of one prompt, ascending by id."""

    @abstractmethod
    async def create_message(
        self, prompt_id: int, content: str, is_user: bool, timestamp: str
    ) -> Message:
        ...

    @abstractmethod
    async def clear_messages(self, prompt_id: int) -> int:
        """Delete every message of a prompt, returning how many were removed."""
