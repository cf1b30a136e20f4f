"""Database module for PromptDesk."""

from .base import Base, create_engine_for, make_session_factory
from .enums import ProviderEnum
from .models import MessageRecord, PromptRecord, UserRecord

__all__ = [
    "Base",
    "create_engine_for",
    "make_session_factory",
    "ProviderEnum",
    "MessageRecord",
    "PromptRecord",
    "UserRecord",
]
