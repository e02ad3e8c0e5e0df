from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from todo_api.database import Base
from todo_api.models.types import TimestampMixin

if TYPE_CHECKING:
    from todo_api.models.todo import Todo


class User(TimestampMixin, Base):
    __tablename__ = "User"
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, nullable=False)

    # rows are removed by the FK's ON DELETE CASCADE, not by the ORM
    todos: Mapped[list["Todo"]] = relationship(
        back_populates="user",
        cascade="all, delete",
        passive_deletes=True,
        order_by="Todo.id",
    )
