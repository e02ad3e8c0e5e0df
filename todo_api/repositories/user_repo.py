from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.interfaces import LoaderOption

from todo_api.models.todo import Todo  # noqa: F401  (registers User.todos target)
from todo_api.models.user import User
from todo_api.repositories.base import BaseRepository


def _todos_option(include_todos: bool) -> Sequence[LoaderOption]:
    return (selectinload(User.todos),) if include_todos else ()


class UserRepository(BaseRepository[User]):
    def __init__(self) -> None:
        super().__init__(User)

    async def get_user(self, db: AsyncSession, user_id: int, *, include_todos: bool = False) -> User | None:
        return await self.get(db, user_id, options=_todos_option(include_todos))

    async def list_users(self, db: AsyncSession, *, include_todos: bool = False) -> list[User]:
        return await self.list(
            db,
            order_by=(User.created_at.desc(), User.id.desc()),
            options=_todos_option(include_todos),
        )
