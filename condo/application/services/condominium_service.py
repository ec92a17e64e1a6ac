"""Condominium application service: tenant administration and memberships."""

from __future__ import annotations

import asyncio
import logging

from condo.application.dtos.common import Page
from condo.application.dtos.condominium import (
    CondominiumCreate,
    CondominiumResult,
    CondominiumUpdate,
)
from condo.application.interfaces.repositories import (
    IAccountRepository,
    ICondominiumRepository,
)
from condo.core.config import Settings, get_settings
from condo.domain.exceptions import NotFoundException, ValidationException
from condo.infrastructure.cache.cache_protocol import CacheProtocol
from condo.infrastructure.cache.keys import (
    condominium_key,
    condominium_list_key,
    condominium_list_pattern,
)

logger = logging.getLogger(__name__)


def _page_to_cache(page: Page[CondominiumResult]) -> dict:
    return page.to_cache(CondominiumResult.to_cache)


def _page_from_cache(data: dict) -> Page[CondominiumResult]:
    return Page.from_cache(data, CondominiumResult.from_cache)


class CondominiumService:
    """Create, read, update, soft delete and restore condominiums; manage members."""

    def __init__(
        self,
        condominium_repo: ICondominiumRepository,
        account_repo: IAccountRepository,
        cache: CacheProtocol,
        settings: Settings | None = None,
    ) -> None:
        self._repo = condominium_repo
        self._account_repo = account_repo
        self._cache = cache
        self._settings = settings or get_settings()

    async def create(self, data: CondominiumCreate) -> CondominiumResult:
        condominium = await self._repo.create_condominium(data)
        await self._repo.commit()
        await self._cache.invalidate_pattern(condominium_list_pattern())
        logger.info("Condominium created: %s", condominium.id)
        return condominium

    async def find_all(
        self, page: int = 1, limit: int = 10, include_deleted: bool = False
    ) -> Page[CondominiumResult]:
        """Return one page of condominiums. Cached unless include_deleted."""

        async def load() -> Page[CondominiumResult]:
            items, total = await self._repo.list_condominiums(
                skip=(page - 1) * limit, limit=limit, include_deleted=include_deleted
            )
            return Page(items=items, total=total)

        if include_deleted:
            return await load()
        return await self._cache.get_or_set(
            condominium_list_key(page, limit),
            load,
            self._settings.cache_ttl_list,
            encode=_page_to_cache,
            decode=_page_from_cache,
        )

    async def find_one(
        self, condominium_id: str, include_deleted: bool = False
    ) -> CondominiumResult:
        """Return condominium by id; include_deleted reads bypass the cache."""

        async def load() -> CondominiumResult:
            condominium = await self._repo.get_by_id(
                condominium_id, include_deleted=include_deleted
            )
            if condominium is None:
                raise NotFoundException("Condominium", condominium_id)
            return condominium

        if include_deleted:
            return await load()
        return await self._cache.get_or_set(
            condominium_key(condominium_id),
            load,
            self._settings.cache_ttl_entity,
            encode=CondominiumResult.to_cache,
            decode=CondominiumResult.from_cache,
        )

    async def update(
        self, condominium_id: str, data: CondominiumUpdate
    ) -> CondominiumResult:
        changes = data.changes()
        if not changes:
            raise ValidationException("At least one field is required")
        updated = await self._repo.update_condominium(condominium_id, changes)
        if updated is None:
            raise NotFoundException("Condominium", condominium_id)
        await self._commit_and_invalidate(condominium_id)
        logger.info("Condominium updated: %s", condominium_id)
        return updated

    async def remove(self, condominium_id: str) -> None:
        if not await self._repo.soft_delete(condominium_id):
            raise NotFoundException("Condominium", condominium_id)
        await self._commit_and_invalidate(condominium_id)
        logger.info("Condominium soft deleted: %s", condominium_id)

    async def restore(self, condominium_id: str) -> CondominiumResult:
        existing = await self._repo.get_by_id(condominium_id, include_deleted=True)
        if existing is None:
            raise NotFoundException("Condominium", condominium_id)
        if not existing.is_deleted:
            raise NotFoundException("Deleted condominium", condominium_id)
        restored = await self._repo.restore(condominium_id)
        if restored is None:
            raise NotFoundException("Deleted condominium", condominium_id)
        await self._commit_and_invalidate(condominium_id)
        logger.info("Condominium restored: %s", condominium_id)
        return restored

    async def add_member(self, condominium_id: str, account_id: str) -> None:
        """Link a live account to a live condominium (idempotent)."""
        if await self._repo.get_by_id(condominium_id) is None:
            raise NotFoundException("Condominium", condominium_id)
        if await self._account_repo.get_by_id(account_id) is None:
            raise NotFoundException("Account", account_id)
        await self._repo.add_member(condominium_id, account_id)
        await self._repo.commit()
        logger.info("Account %s added to condominium %s", account_id, condominium_id)

    async def remove_member(self, condominium_id: str, account_id: str) -> None:
        if not await self._repo.remove_member(condominium_id, account_id):
            raise NotFoundException("Membership", f"{condominium_id}/{account_id}")
        await self._repo.commit()
        logger.info("Account %s removed from condominium %s", account_id, condominium_id)

    async def _commit_and_invalidate(self, condominium_id: str) -> None:
        await self._repo.commit()
        await asyncio.gather(
            self._cache.invalidate(condominium_key(condominium_id)),
            self._cache.invalidate_pattern(condominium_list_pattern()),
        )
