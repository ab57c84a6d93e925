"""Shared pydantic configuration for request and response schemas."""
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel


class ApiSchema(BaseModel):
    """Base schema: camelCase JSON keys, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _accept_pascal_case(cls, data: Any) -> Any:
        # "RegionId" -> "regionId"; camelCase and snake_case keys pass through
        if isinstance(data, dict):
            return {
                (key[0].lower() + key[1:] if isinstance(key, str) and key[:1].isupper() else key): value
                for key, value in data.items()
            }
        return data
