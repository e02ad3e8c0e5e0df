from typing import Optional

from pydantic import Field, field_validator

from todo_api.schemas.base import RequestModel, TodoRecord, UserRecord
from todo_api.schemas.params import SQL_INT_MAX


class TodoCreate(RequestModel):
    title: str = Field(min_length=1, examples=["Buy groceries"])
    completed: bool = False
    user_id: int = Field(gt=0, le=SQL_INT_MAX, examples=[1])


class TodoUpdate(RequestModel):
    title: Optional[str] = Field(default=None, min_length=1)
    completed: Optional[bool] = None
    user_id: Optional[int] = Field(default=None, gt=0, le=SQL_INT_MAX)

    @field_validator("*", mode="before")
    @classmethod
    def _reject_null(cls, value):
        if value is None:
            raise ValueError("must not be null")
        return value


class TodoOut(TodoRecord):
    user: Optional[UserRecord] = None
