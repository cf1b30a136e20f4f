"""Chat service: persists user turns, calls the provider, persists replies."""

import asyncio
import logging
from collections import defaultdict
from contextlib import asynccontextmanager
from enum import Enum
from functools import partial
from typing import AsyncIterator, Awaitable, Callable, Dict, List, Optional, Tuple

from ..config import Settings
from ..errors import ProviderError, UnknownPromptError
from ..models import ChatTurn, Message, Prompt
from ..providers import ProviderFactory
from ..repositories import Storage
from .conversation_service import ConversationService
from .prompt_service import PromptService
from .reconstructor import build_opening_turns, build_turns

logger = logging.getLogger(__name__)


class DispatchState(str, Enum):
    """Stages of one send-message or initialize request."""

    IDLE = "idle"
    SAVING_USER_MESSAGE = "saving_user_message"
    BUILDING_CONTEXT = "building_context"
    INVOKING = "invoking"
    FAILED = "failed"
    SAVING_ASSISTANT_MESSAGE = "saving_assistant_message"
    DONE = "done"


class ChatService:
    """
    Runs conversation turns against the provider configured on a prompt.

    Provider failures never escape: their text becomes the assistant
    message, so every accepted request stores a reply.
    """

    def __init__(
        self,
        storage: Storage,
        settings: Settings,
        provider_factory: Optional[ProviderFactory] = None,
    ):
        self.settings = settings
        self.prompt_service = PromptService(storage)
        self.conversation_service = ConversationService(storage)
        self.provider_factory = provider_factory or ProviderFactory(settings)
        self._locks: Dict[int, asyncio.Lock] = defaultdict(asyncio.Lock)

    @asynccontextmanager
    async def _prompt_turn(self, prompt_id: int) -> AsyncIterator[None]:
        if not self.settings.serialize_prompt_turns:
            yield
            return
        async with self._locks[prompt_id]:
            yield

    def _transition(self, prompt_id: int, state: DispatchState) -> None:
        logger.debug(f"Prompt {prompt_id}: {state.value}")

    async def _save_reply(self, prompt_id: int, reply: str) -> Message:
        # The prompt may have been deleted while the provider was running
        if await self.prompt_service.storage.get_prompt(prompt_id) is None:
            logger.warning(f"Prompt {prompt_id} was deleted mid-turn; dropping reply")
            raise UnknownPromptError(prompt_id)
        self._transition(prompt_id, DispatchState.SAVING_ASSISTANT_MESSAGE)
        return await self.conversation_service.add_message(prompt_id, reply, is_user=False)

    async def delete_prompt(self, prompt_id: int) -> bool:
        """
        Delete a prompt once any turn in progress on it has finished.

        Returns:
            True if the prompt existed, False otherwise
        """
        async with self._prompt_turn(prompt_id):
            deleted = await self.prompt_service.delete(prompt_id)
        self._locks.pop(prompt_id, None)
        return deleted

    async def send_message(self, prompt_id: int, content: str) -> Tuple[Message, Message]:
        """
        Add a user message to a prompt's conversation and store the reply.

        Returns:
            The persisted user message and the persisted assistant message

        Raises:
            UnknownPromptError: the prompt does not exist, or was deleted
                before the reply could be stored
        """
        self._transition(prompt_id, DispatchState.IDLE)
        prompt = await self.prompt_service.get(prompt_id)

        async with self._prompt_turn(prompt_id):
            self._transition(prompt_id, DispatchState.SAVING_USER_MESSAGE)
            user_message = await self.conversation_service.add_message(
                prompt_id, content, is_user=True
            )

            reply = await self._generate(
                prompt, partial(self._history_turns, prompt, user_message)
            )

            ai_message = await self._save_reply(prompt_id, reply)

        self._transition(prompt_id, DispatchState.DONE)
        return user_message, ai_message

    async def initialize(self, prompt_id: int) -> Message:
        """
        Seed a conversation with an opening assistant message.

        Only the system instruction is sent; no user message is stored.

        Raises:
            UnknownPromptError: the prompt does not exist, or was deleted
                before the reply could be stored
        """
        self._transition(prompt_id, DispatchState.IDLE)
        prompt = await self.prompt_service.get(prompt_id)

        async with self._prompt_turn(prompt_id):
            reply = await self._generate(prompt, partial(self._opening_turns, prompt))

            message = await self._save_reply(prompt_id, reply)

        self._transition(prompt_id, DispatchState.DONE)
        return message

    async def _history_turns(self, prompt: Prompt, user_message: Message) -> List[ChatTurn]:
        # History is everything stored before the new user message
        messages = await self.conversation_service.get_messages(prompt.id)
        history = [m for m in messages if m.id < user_message.id]
        return build_turns(prompt.content, history, user_message.content)

    async def _opening_turns(self, prompt: Prompt) -> List[ChatTurn]:
        return build_opening_turns(prompt.content)

    async def _generate(
        self, prompt: Prompt, build: Callable[[], Awaitable[List[ChatTurn]]]
    ) -> str:
        """
        Resolve the provider, build the turns and invoke it.

        Any failure is turned into the reply text.
        """
        try:
            provider = self.provider_factory.create(prompt.provider)

            self._transition(prompt.id, DispatchState.BUILDING_CONTEXT)
            turns = await build()

            self._transition(prompt.id, DispatchState.INVOKING)
            return await provider.complete(turns, prompt.model, prompt.temperature)
        except ProviderError as e:
            self._transition(prompt.id, DispatchState.FAILED)
            logger.error(f"Provider error for prompt {prompt.id} ({prompt.provider}): {e}")
            return e.user_message
        except Exception as e:
            self._transition(prompt.id, DispatchState.FAILED)
            logger.exception(f"AI API error for prompt {prompt.id}")
            detail = str(e) or "There was an error communicating with the AI service."
            return f"Error: {detail}"
