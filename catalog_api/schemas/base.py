"""Shared Pydantic configuration for request/response schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case in Python.

    Undeclared request fields are dropped rather than rejected.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )


class MessageResponse(BaseModel):
    """Fixed confirmation returned by update and delete."""

    message: str
