"""Database enums."""

from enum import Enum


class ProviderEnum(str, Enum):
    """Completion providers a prompt may be configured with."""

    OPENAI = "openai"
    GOOGLE = "google"
    ANTHROPIC = "anthropic"
