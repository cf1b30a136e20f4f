"""PromptDesk: admin-managed LLM prompts with persisted conversations."""

__version__ = "0.1.0"
