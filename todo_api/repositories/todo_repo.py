from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from todo_api.models.todo import Todo
from todo_api.repositories.base import BaseRepository


def _user_option(include_user: bool) -> Sequence[LoaderOption]:
    return (selectinload(Todo.user),) if include_user else ()


class TodoRepository(BaseRepository[Todo]):
    def __init__(self) -> None:
        super().__init__(Todo)

    async def get_todo(self, db: AsyncSession, todo_id: int, *, include_user: bool = True) -> Todo | None:
        return await self.get(db, todo_id, options=_user_option(include_user))

    async def list_todos(
        self,
        db: AsyncSession,
        *,
        user_id: Optional[int] = None,
        include_user: bool = True,
    ) -> list[Todo]:
        return await self.list(
            db,
            where={"user_id": user_id} if user_id is not None else None,
            order_by=(Todo.created_at.desc(), Todo.id.desc()),
            options=_user_option(include_user),
        )
