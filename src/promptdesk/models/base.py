"""Shared base model for the JSON wire format."""

from typing import Any, Dict, Type, TypeVar, Union

import pydantic
from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Serializes as camelCase, accepts both camelCase and snake_case."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def validate_fields(model: Type[ModelT], fields: Union[Dict[str, Any], ModelT]) -> ModelT:
    """
    Validate raw request fields into ``model``.

    Raises:
        ValidationError: with one ``{"field", "message"}`` entry per problem
    """
    if isinstance(fields, model):
        return fields
    if not isinstance(fields, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return model.model_validate(fields)
    except pydantic.ValidationError as e:
        errors = [
            {
                "field": ".".join(str(part) for part in err["loc"]) or None,
                "message": err["msg"],
            }
            for err in e.errors()
        ]
        summary = "; ".join(
            f"{err['field']}: {err['message']}" if err["field"] else err["message"]
            for err in errors
        )
        raise ValidationError(summary, errors) from e
