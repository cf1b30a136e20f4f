"""Completion provider interface."""

from abc import ABC, abstractmethod
from typing import Sequence

from ..models import ChatTurn

FALLBACK_RESPONSE = "Sorry, I couldn't generate a response."


class CompletionProvider(ABC):
    """
    One large-language-model backend.

    ``complete`` receives the full turn sequence, system instruction first,
    and returns the assistant text. Failures are raised as
    :class:`~promptdesk.errors.ProviderError`.
    """

    name: str = ""

    @abstractmethod
    async def complete(self, turns: Sequence[ChatTurn], model: str, temperature: float) -> str:
        ...
