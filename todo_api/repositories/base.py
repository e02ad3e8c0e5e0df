from __future__ import annotations

from typing import Any, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.inspection import inspect as sa_inspect
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.orm.interfaces import LoaderOption

from todo_api.models.types import TimestampMixin

T = TypeVar("T")  # SQLAlchemy declarative model


class BaseRepository(Generic[T]):
    """
    Shared async repository for a single model.

    - Only model instances are accepted for writes (no dicts / pydantic).
    - Writes flush but never commit; the calling service owns the transaction.
    """

    def __init__(self, model: type[T]) -> None:
        self.model = model

    # ------------------------ Read ------------------------

    async def get(
        self,
        session: AsyncSession,
        pk: Any,
        *,
        options: Sequence[LoaderOption] = (),
    ) -> T | None:
        """Fetch one row by primary key, optionally eager-loading relations."""
        # an identity-map hit would skip the loader options otherwise
        return await session.get(self.model, pk, options=options, populate_existing=bool(options))

    async def exists(self, session: AsyncSession, **filters: Any) -> bool:
        """Equality-filter existence check."""
        stmt = select(func.count()).select_from(self.model).filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one()) > 0

    async def list(
        self,
        session: AsyncSession,
        *,
        where: Mapping[str, Any] | None = None,
        order_by: Sequence[InstrumentedAttribute] | None = None,
        options: Sequence[LoaderOption] = (),
    ) -> list[T]:
        stmt = select(self.model)
        if where:
            stmt = stmt.filter_by(**where)
        if order_by:
            stmt = stmt.order_by(*order_by)
        if options:
            stmt = stmt.options(*options)
        res = await session.execute(stmt)
        return list(res.scalars().all())

    async def count(self, session: AsyncSession, **filters: Any) -> int:
        stmt = select(func.count()).select_from(self.model)
        if filters:
            stmt = stmt.filter_by(**filters)
        res = await session.execute(stmt)
        return int(res.scalar_one())

    # ------------------------ Write ------------------------

    async def create(self, session: AsyncSession, obj: T) -> T:
        """
        Insert a new row. The instance must be transient; the primary key is
        assigned on flush.
        """
        state = sa_inspect(obj)
        if not state.transient:
            raise ValueError("create(): expected a transient (new) SQLAlchemy model instance")
        if isinstance(obj, TimestampMixin):
            obj.stamp_created()
        session.add(obj)
        await session.flush()
        return obj

    async def update(self, session: AsyncSession, obj: T, values: Mapping[str, Any]) -> T:
        """
        Apply a partial update to a persistent row.

        Primary key columns are never touched and updated_at is refreshed even
        when ``values`` is empty.
        """
        mapper = sa_inspect(self.model)
        pk_names = {c.key for c in mapper.primary_key}
        for name, value in values.items():
            if name in pk_names:
                continue
            setattr(obj, name, value)
        if isinstance(obj, TimestampMixin):
            obj.touch()
        await session.flush()
        return obj

    async def delete(self, session: AsyncSession, obj: T) -> T:
        """Delete a persistent row and return the instance as it was loaded."""
        await session.delete(obj)
        await session.flush()
        return obj
