"""In-memory storage with per-relation incrementing ids."""

from typing import Any, Dict, List, Optional

from ..models import Message, Prompt, User
from .base import Storage


class MemoryStorage(Storage):
    """Dict-backed storage; contents are lost when the process exits."""

    def __init__(self):
        self.users: Dict[int, User] = {}
        self.prompts: Dict[int, Prompt] = {}
        self.prompt_api_keys: Dict[int, Optional[str]] = {}
        self.messages: Dict[int, Message] = {}
        self.user_id = 1
        self.prompt_id = 1
        self.message_id = 1

    async def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    async def get_user_by_username(self, username: str) -> Optional[User]:
        for user in self.users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, username: str, password: str, is_admin: bool = False) -> User:
        user = User(id=self.user_id, username=username, password=password, is_admin=is_admin)
        self.users[user.id] = user
        self.user_id += 1
        return user

    async def list_prompts(self) -> List[Prompt]:
        return list(self.prompts.values())

    async def get_prompt(self, prompt_id: int) -> Optional[Prompt]:
        return self.prompts.get(prompt_id)

    async def create_prompt(self, fields: Dict[str, Any], api_key: Optional[str] = None) -> Prompt:
        prompt = Prompt(id=self.prompt_id, **fields)
        self.prompts[prompt.id] = prompt
        self.prompt_api_keys[prompt.id] = api_key
        self.prompt_id += 1
        return prompt

    async def update_prompt(self, prompt_id: int, fields: Dict[str, Any]) -> Optional[Prompt]:
        prompt = self.prompts.get(prompt_id)
        if prompt is None:
            return None
        updated = prompt.model_copy(update=fields)
        self.prompts[prompt_id] = updated
        return updated

    async def delete_prompt(self, prompt_id: int) -> bool:
        if prompt_id not in self.prompts:
            return False
        del self.prompts[prompt_id]
        self.prompt_api_keys.pop(prompt_id, None)
        return True

    async def list_messages(self, prompt_id: int) -> List[Message]:
        found = [m for m in self.messages.values() if m.prompt_id == prompt_id]
        return sorted(found, key=lambda m: m.id)

    async def create_message(
        self, prompt_id: int, content: str, is_user: bool, timestamp: str
    ) -> Message:
        message = Message(
            id=self.message_id,
            prompt_id=prompt_id,
            content=content,
            is_user=is_user,
            timestamp=timestamp,
        )
        self.messages[message.id] = message
        self.message_id += 1
        return message

    async def clear_messages(self, prompt_id: int) -> int:
        doomed = [mid for mid, m in self.messages.items() if m.prompt_id == prompt_id]
        for mid in doomed:
            del self.messages[mid]
        return len(doomed)
