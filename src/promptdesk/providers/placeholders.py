"""Providers that answer with a fixed text instead of calling a service."""

from typing import Sequence

from ..models import ChatTurn
from .base import CompletionProvider


class FixedReplyProvider(CompletionProvider):
    def __init__(self, name: str, reply: str):
        self.name = name
        self.reply = reply

    async def complete(self, turns: Sequence[ChatTurn], model: str, temperature: float) -> str:
        return self.reply


class ComingSoonProvider(FixedReplyProvider):
    """A recognized provider without an integration yet."""

    def __init__(self, name: str, label: str):
        super().__init__(
            name,
            f"Support for {label} is coming soon. Please use OpenAI provider for now.",
        )


class UnknownProvider(FixedReplyProvider):
    def __init__(self, name: str):
        super().__init__(name, f"Unknown provider: {name}")
