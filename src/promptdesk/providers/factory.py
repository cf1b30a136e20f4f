"""Provider lookup by the name stored on a prompt."""

from typing import Any, Callable, Optional

from ..config import Settings
from ..errors import MissingCredentialError
from .base import CompletionProvider
from .openai import OpenAIProvider
from .placeholders import ComingSoonProvider, UnknownProvider

COMING_SOON_LABELS = {
    "google": "Google AI",
    "anthropic": "Anthropic AI",
}


class ProviderFactory:
    """
    Resolves a provider name to a ready-to-call provider.

    Recognized providers need a credential from settings; a missing one
    raises :class:`MissingCredentialError`. Unrecognized names get a
    provider that only reports the unknown name.
    """

    def __init__(self, settings: Settings, llm_factory: Optional[Callable[..., Any]] = None):
        self.settings = settings
        self.llm_factory = llm_factory

    def create(self, provider: str) -> CompletionProvider:
        if provider != "openai" and provider not in COMING_SOON_LABELS:
            return UnknownProvider(provider)

        api_key = self.settings.provider_api_key(provider)
        if not api_key:
            raise MissingCredentialError(provider)

        if provider == "openai":
            options = {"base_url": self.settings.openai_base_url}
            if self.llm_factory is not None:
                options["llm_factory"] = self.llm_factory
            return OpenAIProvider(api_key, **options)
        return ComingSoonProvider(provider, COMING_SOON_LABELS[provider])
