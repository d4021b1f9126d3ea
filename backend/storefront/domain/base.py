"""
Base model for entities scoped to a site

The remote endpoints never return the site (or parent order) identifier, so
mappers pass them through the pydantic validation context and they are
filled in here before field validation runs.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, model_validator


class SiteScopedModel(BaseModel):
    """Entity whose identity includes the site it belongs to"""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _inject_context(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict) or not info.context:
            return data

        injected = {
            key: value
            for key, value in info.context.items()
            if key in cls.model_fields and key not in data
        }
        if not injected:
            return data
        return {**data, **injected}
