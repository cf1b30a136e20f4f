"""Prompt registry: CRUD over prompt configurations."""

import logging
from typing import Any, Dict, List, Union

from ..errors import UnknownPromptError
from ..models import Prompt, PromptCreate, PromptUpdate, validate_fields
from ..repositories import Storage

logger = logging.getLogger(__name__)


class PromptService:
    """
    Validates and stores prompt configurations.

    Authorization-agnostic: callers decide who may create, edit or delete.
    """

    def __init__(self, storage: Storage):
        self.storage = storage

    async def list(self) -> List[Prompt]:
        return await self.storage.list_prompts()

    async def get(self, prompt_id: int) -> Prompt:
        prompt = await self.storage.get_prompt(prompt_id)
        if prompt is None:
            raise UnknownPromptError(prompt_id)
        return prompt

    async def create(self, fields: Union[Dict[str, Any], PromptCreate]) -> Prompt:
        """
        Create a prompt from request fields.

        Any ``apiKey`` is accepted and dropped. ``createdBy`` is not checked
        against the user table.
        """
        data = validate_fields(PromptCreate, fields)
        prompt = await self.storage.create_prompt(data.stored_fields())
        logger.info(f"Created prompt {prompt.id} ({prompt.name!r}, {prompt.provider})")
        return prompt

    async def update(self, prompt_id: int, fields: Union[Dict[str, Any], PromptUpdate]) -> Prompt:
        """Validate the supplied fields and merge them onto an existing prompt."""
        data = validate_fields(PromptUpdate, fields)
        prompt = await self.storage.update_prompt(prompt_id, data.stored_fields())
        if prompt is None:
            raise UnknownPromptError(prompt_id)
        logger.info(f"Updated prompt {prompt_id}")
        return prompt

    async def delete(self, prompt_id: int) -> bool:
        """Delete a prompt and its conversation. False if the id is unknown."""
        if not await self.storage.delete_prompt(prompt_id):
            return False
        await self.storage.clear_messages(prompt_id)
        logger.info(f"Deleted prompt {prompt_id}")
        return True
