"""Exception types shared by services and the HTTP layer."""

from typing import Any, Dict, List, Optional


class PromptDeskError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(PromptDeskError):
    """Malformed or missing fields; surfaced as 400."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(PromptDeskError):
    """Unknown record id; surfaced as 404."""


class UnknownPromptError(NotFoundError):
    def __init__(self, prompt_id: int):
        super().__init__("Prompt not found")
        self.prompt_id = prompt_id


class AuthError(PromptDeskError):
    """Missing or bad credentials; surfaced as 401."""


class InvalidCredentialsError(AuthError):
    def __init__(self):
        super().__init__("Invalid credentials")


class PermissionDeniedError(PromptDeskError):
    """Authenticated identity lacks the admin role; surfaced as 403."""


class ProviderError(PromptDeskError):
    """
    Failure while talking to a completion provider.

    Never reaches the HTTP layer: the dispatcher persists ``user_message``
    as the assistant turn instead.
    """

    @property
    def user_message(self) -> str:
        return f"Error: {self.message}"


class MissingCredentialError(ProviderError):
    def __init__(self, provider: str):
        super().__init__(f"API key not found for provider: {provider}")
        self.provider = provider


class InvalidProviderCredentialError(ProviderError):
    def __init__(self):
        super().__init__(
            "Invalid API key. Please ask the administrator to update the OpenAI API key."
        )


class ProviderRateLimitError(ProviderError):
    def __init__(self):
        super().__init__("Rate limit exceeded. Please try again in a few moments.")


class ProviderCommunicationError(ProviderError):
    def __init__(self, provider_label: str, detail: Optional[str]):
        super().__init__(detail or "Unknown error")
        self.provider_label = provider_label

    @property
    def user_message(self) -> str:
        return f"Error communicating with {self.provider_label}: {self.message}"
