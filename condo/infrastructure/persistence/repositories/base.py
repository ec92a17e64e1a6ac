"""Base repository: generic CRUD with explicit soft-delete handling.

Every read takes an explicit include_deleted flag; nothing filters
soft-deleted rows implicitly.
"""

from typing import Any

from sqlalchemy import ColumnElement, delete, func, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from condo.infrastructure.persistence.database import Base
from condo.shared.utils.datetime import utc_now


class BaseRepository[ModelType: Base]:
    """Base repository with get, paginate, create, update, soft delete, restore, purge.

    Models must carry id and deleted_at (see SoftDeletableModel).
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    def _visible(self, include_deleted: bool) -> ColumnElement[bool]:
        """WHERE clause hiding soft-deleted rows unless include_deleted."""
        model: Any = self.model
        return true() if include_deleted else model.deleted_at.is_(None)

    async def get_entity(
        self, entity_id: str, include_deleted: bool = False
    ) -> ModelType | None:
        """Return a single ORM record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(
            select(self.model).where(model.id == entity_id, self._visible(include_deleted))
        )
        return result.scalar_one_or_none()

    async def paginate(
        self,
        *criteria: ColumnElement[bool],
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[ModelType], int]:
        """Return one page (newest first) matching criteria and the total count."""
        model: Any = self.model
        total = await self.db.scalar(
            select(func.count()).select_from(self.model).where(*criteria)
        )
        result = await self.db.execute(
            select(self.model)
            .where(*criteria)
            .order_by(model.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all()), int(total or 0)

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush pending changes on an attached record and reload server defaults."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def soft_delete_entity(self, obj: ModelType) -> ModelType:
        model_obj: Any = obj
        model_obj.deleted_at = utc_now()
        return await self.update(obj)

    async def restore_entity(self, obj: ModelType) -> ModelType:
        model_obj: Any = obj
        model_obj.deleted_at = None
        return await self.update(obj)

    async def purge_by_id(self, entity_id: str) -> bool:
        """Hard delete by primary key. Returns True if a row was removed."""
        model: Any = self.model
        result: Any = await self.db.execute(delete(self.model).where(model.id == entity_id))
        await self.db.flush()
        return bool(result.rowcount)

    async def commit(self) -> None:
        """Commit the session so other readers see the changes."""
        await self.db.commit()
