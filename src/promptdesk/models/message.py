"""Conversation message models."""

from pydantic import Field

from .base import CamelModel


class Message(CamelModel):
    """One stored conversation message."""

    id: int
    prompt_id: int
    content: str
    is_user: bool
    timestamp: str = Field(..., description="ISO-8601 creation time, informational only")


class MessageCreate(CamelModel):
    """Body of a send-message request."""

    content: str = Field(..., description="User's message; may be empty")


class SendMessageResponse(CamelModel):
    user_message: Message
    ai_message: Message


class InitializeResponse(CamelModel):
    message: Message
