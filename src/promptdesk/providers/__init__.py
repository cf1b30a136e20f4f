"""Completion providers for PromptDesk."""

from .base import FALLBACK_RESPONSE, CompletionProvider
from .factory import ProviderFactory
from .openai import OpenAIProvider
from .placeholders import ComingSoonProvider, UnknownProvider

__all__ = [
    "FALLBACK_RESPONSE",
    "CompletionProvider",
    "ProviderFactory",
    "OpenAIProvider",
    "ComingSoonProvider",
    "UnknownProvider",
]
