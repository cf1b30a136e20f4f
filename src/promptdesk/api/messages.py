"""Conversation endpoints: history, send, initialize, clear."""

import logging
from typing import Any, Dict, List
from fastapi import APIRouter, Body, Depends, Response, status

from ..models import (
    InitializeResponse,
    Message,
    MessageCreate,
    SendMessageResponse,
    validate_fields,
)
from ..services.chat_service import ChatService
from ..services.conversation_service import ConversationService
from ..services.prompt_service import PromptService
from .deps import (
    current_identity,
    get_chat_service,
    get_conversation_service,
    get_prompt_service,
    parse_prompt_id,
    require_admin,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/prompts/{prompt_id}/messages",
    response_model=List[Message],
    dependencies=[Depends(current_identity)],
)
async def list_messages(
    prompt_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
):
    return await conversation_service.get_messages(parse_prompt_id(prompt_id))


@router.delete(
    "/prompts/{prompt_id}/messages",
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def clear_messages(
    prompt_id: str,
    conversation_service: ConversationService = Depends(get_conversation_service),
):
    await conversation_service.clear_conversation(parse_prompt_id(prompt_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/prompts/{prompt_id}/messages",
    response_model=SendMessageResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(current_identity)],
)
async def send_message(
    prompt_id: str,
    request: Dict[str, Any] = Body(...),
    prompt_service: PromptService = Depends(get_prompt_service),
    chat_service: ChatService = Depends(get_chat_service),
):
    """
    Store a user message, get the provider's reply and store it too.

    Provider failures still answer 201; the failure text is the reply.

    Request body:
    {
        "content": "Hello"
    }
    """
    pid = parse_prompt_id(prompt_id)
    # Unknown prompt wins over a bad body
    await prompt_service.get(pid)
    body = validate_fields(MessageCreate, request)
    logger.info(f"Received message for prompt {pid} ({len(body.content)} chars)")

    user_message, ai_message = await chat_service.send_message(pid, body.content)
    return SendMessageResponse(user_message=user_message, ai_message=ai_message)


@router.post(
    "/prompts/{prompt_id}/initialize",
    response_model=InitializeResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(current_identity)],
)
async def initialize_conversation(
    prompt_id: str,
    chat_service: ChatService = Depends(get_chat_service),
):
    """Seed the conversation with an opening assistant message."""
    message = await chat_service.initialize(parse_prompt_id(prompt_id))
    return InitializeResponse(message=message)
