"""Chat turn model used to build completion requests."""

from typing import Literal
from pydantic import BaseModel, Field


class ChatTurn(BaseModel):
    """Individual role-tagged turn of a completion request."""

    role: Literal["system", "user", "assistant"] = Field(
        ..., description="Turn role: 'system', 'user' or 'assistant'"
    )
    content: str = Field(..., description="Turn content")
