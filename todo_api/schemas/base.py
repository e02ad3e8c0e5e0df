from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel
from sqlalchemy import inspect as sa_inspect

from todo_api.database import Base


class RequestModel(BaseModel):
    """Request body: camelCase keys only, no coercion, unknown keys rejected."""

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid", strict=True)


class ORMModel(BaseModel):
    """Response body built from an ORM row, serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

    @model_validator(mode="before")
    @classmethod
    def _loaded_attributes_only(cls, data: Any) -> Any:
        # Relations that were not eagerly loaded are left out instead of
        # triggering a lazy load outside the async context.
        if isinstance(data, Base):
            unloaded = sa_inspect(data).unloaded
            return {name: getattr(data, name) for name in cls.model_fields if name not in unloaded}
        return data


class UserRecord(ORMModel):
    id: int
    name: str
    created_at: datetime
    updated_at: datetime


class TodoRecord(ORMModel):
    id: int
    title: str
    completed: bool
    user_id: int
    created_at: datetime
    updated_at: datetime
