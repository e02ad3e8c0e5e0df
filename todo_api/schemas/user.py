from typing import Optional

from pydantic import Field, field_validator

from todo_api.schemas.base import RequestModel, TodoRecord, UserRecord


class UserCreate(RequestModel):
    name: str = Field(min_length=1, examples=["John Doe"])


class UserUpdate(RequestModel):
    name: Optional[str] = Field(default=None, min_length=1)

    @field_validator("name", mode="before")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class UserOut(UserRecord):
    todos: Optional[list[TodoRecord]] = None
