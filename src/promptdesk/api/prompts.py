"""Prompt registry endpoints."""

from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, Response, status

from ..errors import UnknownPromptError
from ..models import Prompt
from ..services.chat_service import ChatService
from ..services.prompt_service import PromptService
from .deps import (
    current_identity,
    get_chat_service,
    get_prompt_service,
    parse_prompt_id,
    require_admin,
)

router = APIRouter()


@router.get("/prompts", response_model=List[Prompt], dependencies=[Depends(current_identity)])
async def list_prompts(prompt_service: PromptService = Depends(get_prompt_service)):
    return await prompt_service.list()


@router.get("/prompts/{prompt_id}", response_model=Prompt, dependencies=[Depends(current_identity)])
async def get_prompt(prompt_id: str, prompt_service: PromptService = Depends(get_prompt_service)):
    return await prompt_service.get(parse_prompt_id(prompt_id))


@router.post(
    "/prompts",
    response_model=Prompt,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_prompt(
    request: Dict[str, Any] = Body(...),
    prompt_service: PromptService = Depends(get_prompt_service),
):
    """Create a prompt. An ``apiKey`` in the body is accepted and discarded."""
    return await prompt_service.create(request)


@router.put("/prompts/{prompt_id}", response_model=Prompt, dependencies=[Depends(require_admin)])
async def update_prompt(
    prompt_id: str,
    request: Dict[str, Any] = Body(...),
    prompt_service: PromptService = Depends(get_prompt_service),
):
    return await prompt_service.update(parse_prompt_id(prompt_id), request)


@router.delete(
    "/prompts/{prompt_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_prompt(prompt_id: str, chat_service: ChatService = Depends(get_chat_service)):
    """Delete a prompt and its conversation, after any turn in progress."""
    pid = parse_prompt_id(prompt_id)
    if not await chat_service.delete_prompt(pid):
        raise UnknownPromptError(pid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
