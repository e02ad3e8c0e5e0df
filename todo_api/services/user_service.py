import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from todo_api.exceptions import NotFoundError
from todo_api.models.user import User
from todo_api.repositories.user_repo import UserRepository
from todo_api.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, repo: Optional[UserRepository] = None):
        self.repo = repo or UserRepository()

    async def create_user(self, db: AsyncSession, user_in: UserCreate) -> User:
        user = User(name=user_in.name)
        await self.repo.create(db, user)
        await db.commit()
        logger.info("Created user id=%s", user.id)
        return user

    async def list_users(self, db: AsyncSession, include_todos: bool = False) -> list[User]:
        return await self.repo.list_users(db, include_todos=include_todos)

    async def get_user(self, db: AsyncSession, user_id: int, include_todos: bool = False) -> User:
        user = await self.repo.get_user(db, user_id, include_todos=include_todos)
        if user is None:
            raise NotFoundError("User", user_id)
        return user

    async def update_user(self, db: AsyncSession, user_id: int, user_in: UserUpdate) -> User:
        user = await self.get_user(db, user_id)
        await self.repo.update(db, user, user_in.model_dump(exclude_unset=True))
        await db.commit()
        logger.info("Updated user id=%s", user.id)
        return user

    async def remove_user(self, db: AsyncSession, user_id: int) -> User:
        """Delete a user; the database cascades the delete to the user's todos."""
        user = await self.get_user(db, user_id)
        await self.repo.delete(db, user)
        await db.commit()
        logger.info("Deleted user id=%s", user_id)
        return user
