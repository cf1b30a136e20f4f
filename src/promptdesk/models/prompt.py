"""Prompt configuration models."""

from typing import Any, Optional
from pydantic import Field, field_validator, model_validator

from ..database.enums import ProviderEnum
from .base import CamelModel


def _check_temperature(value: Any) -> Any:
    # bool is an int subclass; "true" is not a temperature
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError("temperature must be a number")
    return value


class Prompt(CamelModel):
    """Stored prompt configuration. The legacy api_key column is never exposed."""

    id: int
    name: str
    provider: str
    model: str
    temperature: float
    content: str = Field(..., description="System instruction text")
    created_by: int


class PromptCreate(CamelModel):
    """Fields accepted when creating a prompt."""

    name: str = Field(..., min_length=1)
    provider: ProviderEnum
    api_key: Optional[str] = Field(None, description="Accepted but never stored")
    model: str = Field(..., min_length=1)
    temperature: float = Field(..., ge=0.0, le=2.0)
    content: str = Field(..., min_length=1)
    created_by: int

    class Config:
        use_enum_values = True

    @field_validator("temperature", mode="before")
    @classmethod
    def temperature_is_number(cls, value: Any) -> Any:
        return _check_temperature(value)

    def stored_fields(self) -> dict:
        return self.model_dump(exclude={"api_key"})


class PromptUpdate(CamelModel):
    """Partial update; only supplied fields are validated and merged."""

    name: Optional[str] = Field(None, min_length=1)
    provider: Optional[ProviderEnum] = None
    api_key: Optional[str] = None
    model: Optional[str] = Field(None, min_length=1)
    temperature: Optional[float] = Field(None, ge=0.0, le=2.0)
    content: Optional[str] = Field(None, min_length=1)
    created_by: Optional[int] = None

    class Config:
        use_enum_values = True

    @model_validator(mode="before")
    @classmethod
    def reject_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            nulls = [key for key, value in data.items() if value is None and key not in ("apiKey", "api_key")]
            if nulls:
                raise ValueError(f"fields may not be null: {', '.join(sorted(nulls))}")
        return data

    @field_validator("temperature", mode="before")
    @classmethod
    def temperature_is_number(cls, value: Any) -> Any:
        if value is None:
            return value
        return _check_temperature(value)

    def stored_fields(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude={"api_key"})
