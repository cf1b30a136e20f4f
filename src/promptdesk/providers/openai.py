"""OpenAI chat-completion provider built on LangChain."""

import logging
from typing import Any, Callable, List, Optional, Sequence

import openai
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from ..errors import (
    InvalidProviderCredentialError,
    ProviderCommunicationError,
    ProviderError,
    ProviderRateLimitError,
)
from ..models import ChatTurn
from .base import FALLBACK_RESPONSE, CompletionProvider

logger = logging.getLogger(__name__)

_MESSAGE_TYPES = {
    "system": SystemMessage,
    "user": HumanMessage,
    "assistant": AIMessage,
}


def to_langchain_messages(turns: Sequence[ChatTurn]) -> List[BaseMessage]:
    """Convert role-tagged turns to LangChain message objects."""
    return [_MESSAGE_TYPES[turn.role](content=turn.content) for turn in turns]


def map_openai_error(error: Exception) -> ProviderError:
    """Translate an OpenAI SDK exception into the user-facing provider error."""
    code = getattr(error, "code", None)
    if code == "invalid_api_key" or (
        code is None and isinstance(error, openai.AuthenticationError)
    ):
        return InvalidProviderCredentialError()
    if code == "rate_limit_exceeded" or (
        code is None and isinstance(error, openai.RateLimitError)
    ):
        return ProviderRateLimitError()
    detail = getattr(error, "message", None) or str(error)
    return ProviderCommunicationError("OpenAI", detail)


def _response_text(content: Any) -> str:
    # Content may arrive as a list of content blocks
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return content or ""


class OpenAIProvider(CompletionProvider):
    """Sends the turn sequence to the OpenAI chat-completions API."""

    name = "openai"

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        llm_factory: Callable[..., Any] = ChatOpenAI,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.llm_factory = llm_factory

    def _create_llm(self, model: str, temperature: float):
        llm_params = {
            "model": model,
            "temperature": temperature,
            "openai_api_key": self.api_key,
            "max_retries": 0,
        }

        # Add base URL if configured
        if self.base_url:
            llm_params["base_url"] = self.base_url

        return self.llm_factory(**llm_params)

    async def complete(self, turns: Sequence[ChatTurn], model: str, temperature: float) -> str:
        llm = self._create_llm(model, temperature)
        try:
            response = await llm.ainvoke(to_langchain_messages(turns))
        except Exception as e:
            logger.error(f"OpenAI API error: {e}")
            raise map_openai_error(e) from e

        text = _response_text(getattr(response, "content", None))
        return text or FALLBACK_RESPONSE
