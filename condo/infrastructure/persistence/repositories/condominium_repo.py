"""Condominium repository (tenant store) and account memberships."""

from typing import Any

from sqlalchemy import delete, exists, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from condo.application.dtos.condominium import CondominiumCreate, CondominiumResult
from condo.infrastructure.persistence.models.condominium import (
    Condominium,
    account_condominium,
)
from condo.infrastructure.persistence.repositories.base import BaseRepository

_UPDATABLE_FIELDS = frozenset(
    {
        "name",
        "description",
        "address",
        "city",
        "country",
        "postal_code",
        "phone",
        "email",
        "website",
        "tax_id",
        "is_active",
    }
)


def _condominium_to_result(c: Condominium) -> CondominiumResult:
    """Map ORM Condominium to application CondominiumResult."""
    return CondominiumResult(
        id=c.id,
        name=c.name,
        description=c.description,
        address=c.address,
        city=c.city,
        country=c.country,
        postal_code=c.postal_code,
        phone=c.phone,
        email=c.email,
        website=c.website,
        tax_id=c.tax_id,
        is_active=c.is_active,
        created_at=c.created_at,
        updated_at=c.updated_at,
        deleted_at=c.deleted_at,
    )


class CondominiumRepository(BaseRepository[Condominium]):
    """Condominium repository. Memberships live in account_condominium."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Condominium)

    async def get_by_id(
        self, condominium_id: str, include_deleted: bool = False
    ) -> CondominiumResult | None:
        condominium = await self.get_entity(condominium_id, include_deleted)
        return _condominium_to_result(condominium) if condominium else None

    async def list_condominiums(
        self, skip: int = 0, limit: int = 10, include_deleted: bool = False
    ) -> tuple[list[CondominiumResult], int]:
        rows, total = await self.paginate(
            self._visible(include_deleted), skip=skip, limit=limit
        )
        return [_condominium_to_result(c) for c in rows], total

    async def list_active(self) -> list[CondominiumResult]:
        result = await self.db.execute(
            select(Condominium)
            .where(Condominium.deleted_at.is_(None))
            .order_by(Condominium.name)
        )
        return [_condominium_to_result(c) for c in result.scalars().all()]

    async def list_for_account(self, account_id: str) -> list[CondominiumResult]:
        result = await self.db.execute(
            select(Condominium)
            .join(
                account_condominium,
                account_condominium.c.condominium_id == Condominium.id,
            )
            .where(
                account_condominium.c.account_id == account_id,
                Condominium.deleted_at.is_(None),
            )
            .order_by(Condominium.name)
        )
        return [_condominium_to_result(c) for c in result.scalars().all()]

    async def is_member(self, account_id: str, condominium_id: str) -> bool:
        stmt = select(
            exists()
            .where(
                account_condominium.c.account_id == account_id,
                account_condominium.c.condominium_id == condominium_id,
                Condominium.id == account_condominium.c.condominium_id,
                Condominium.deleted_at.is_(None),
            )
        )
        return bool(await self.db.scalar(stmt))

    async def create_condominium(self, data: CondominiumCreate) -> CondominiumResult:
        condominium = Condominium(
            name=data.name,
            description=data.description,
            address=data.address,
            city=data.city,
            country=data.country,
            postal_code=data.postal_code,
            phone=data.phone,
            email=data.email,
            website=data.website,
            tax_id=data.tax_id,
            is_active=data.is_active,
        )
        return _condominium_to_result(await self.create(condominium))

    async def update_condominium(
        self, condominium_id: str, changes: dict[str, Any]
    ) -> CondominiumResult | None:
        condominium = await self.get_entity(condominium_id)
        if condominium is None:
            return None
        for name, value in changes.items():
            if name not in _UPDATABLE_FIELDS:
                raise ValueError(f"Condominium field {name!r} cannot be updated")
            setattr(condominium, name, value)
        return _condominium_to_result(await self.update(condominium))

    async def soft_delete(self, condominium_id: str) -> bool:
        condominium = await self.get_entity(condominium_id)
        if condominium is None:
            return False
        await self.soft_delete_entity(condominium)
        return True

    async def restore(self, condominium_id: str) -> CondominiumResult | None:
        condominium = await self.get_entity(condominium_id, include_deleted=True)
        if condominium is None or condominium.deleted_at is None:
            return None
        return _condominium_to_result(await self.restore_entity(condominium))

    async def add_member(self, condominium_id: str, account_id: str) -> None:
        await self.db.execute(
            insert(account_condominium)
            .values(account_id=account_id, condominium_id=condominium_id)
            .on_conflict_do_nothing()
        )
        await self.db.flush()

    async def remove_member(self, condominium_id: str, account_id: str) -> bool:
        result: Any = await self.db.execute(
            delete(account_condominium).where(
                account_condominium.c.account_id == account_id,
                account_condominium.c.condominium_id == condominium_id,
            )
        )
        await self.db.flush()
        return bool(result.rowcount)
