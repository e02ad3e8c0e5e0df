import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.exceptions import NotFoundError, UserReferenceError
from todo_api.models.todo import Todo
from todo_api.models.user import User
from todo_api.repositories.todo_repo import TodoRepository
from todo_api.repositories.user_repo import UserRepository
from todo_api.schemas.todo import TodoCreate, TodoUpdate

logger = logging.getLogger(__name__)


class TodoService:
    """
    Todo operations. Every write that names a user checks that the user
    exists first, and the returned todo carries its owner.
    """

    def __init__(
        self,
        repo: Optional[TodoRepository] = None,
        user_repo: Optional[UserRepository] = None,
    ):
        self.repo = repo or TodoRepository()
        self.user_repo = user_repo or UserRepository()

    async def _require_user(self, db: AsyncSession, user_id: int) -> User:
        user = await self.user_repo.get(db, user_id)
        if user is None:
            logger.info("Rejected todo write for unknown user_id=%s", user_id)
            raise UserReferenceError(user_id)
        return user

    async def create_todo(self, db: AsyncSession, todo_in: TodoCreate) -> Todo:
        user = await self._require_user(db, todo_in.user_id)
        todo = Todo(title=todo_in.title, completed=todo_in.completed, user_id=user.id)
        todo.user = user
        await self.repo.create(db, todo)
        await db.commit()
        logger.info("Created todo id=%s user_id=%s", todo.id, todo.user_id)
        return todo

    async def list_todos(
        self,
        db: AsyncSession,
        user_id: Optional[int] = None,
        include_user: bool = True,
    ) -> list[Todo]:
        return await self.repo.list_todos(db, user_id=user_id, include_user=include_user)

    async def get_todo(self, db: AsyncSession, todo_id: int, include_user: bool = True) -> Todo:
        todo = await self.repo.get_todo(db, todo_id, include_user=include_user)
        if todo is None:
            raise NotFoundError("Todo", todo_id)
        return todo

    async def update_todo(self, db: AsyncSession, todo_id: int, todo_in: TodoUpdate) -> Todo:
        todo = await self.get_todo(db, todo_id)
        values = todo_in.model_dump(exclude_unset=True)
        if "user_id" in values:
            values["user"] = await self._require_user(db, values["user_id"])
        await self.repo.update(db, todo, values)
        await db.commit()
        logger.info("Updated todo id=%s fields=%s", todo.id, sorted(todo_in.model_fields_set))
        return todo

    async def remove_todo(self, db: AsyncSession, todo_id: int) -> Todo:
        todo = await self.get_todo(db, todo_id, include_user=False)
        await self.repo.delete(db, todo)
        await db.commit()
        logger.info("Deleted todo id=%s", todo_id)
        return todo
