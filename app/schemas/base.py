"""Shared base for API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys (the frontend's JSON convention)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
