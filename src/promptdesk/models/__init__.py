"""Data models for PromptDesk."""

from .base import validate_fields
from .chat import ChatTurn
from .message import InitializeResponse, Message, MessageCreate, SendMessageResponse
from .prompt import Prompt, PromptCreate, PromptUpdate
from .user import User, UserOut

__all__ = [
    "ChatTurn",
    "InitializeResponse",
    "Message",
    "MessageCreate",
    "SendMessageResponse",
    "Prompt",
    "PromptCreate",
    "PromptUpdate",
    "User",
    "UserOut",
    "validate_fields",
]
