"""Account application service: administration with cache-aside reads.

Single-entity and list reads go through CacheService.get_or_set; every
mutation commits, then invalidates the account key and every cached list page.
"""

from __future__ import annotations

import asyncio
import logging

from condo.application.dtos.account import AccountCreate, AccountResult, AccountUpdate
from condo.application.dtos.common import Page
from condo.application.interfaces.repositories import IAccountRepository
from condo.core.config import Settings, get_settings
from condo.domain.enums import Role
from condo.domain.exceptions import AlreadyExistsException, NotFoundException
from condo.domain.roles import ensure_can_assign_role, ensure_can_manage_account
from condo.infrastructure.cache.cache_protocol import CacheProtocol
from condo.infrastructure.cache.keys import (
    account_key,
    account_list_key,
    account_list_pattern,
)

logger = logging.getLogger(__name__)


def _page_to_cache(page: Page[AccountResult]) -> dict:
    return page.to_cache(AccountResult.to_cache)


def _page_from_cache(data: dict) -> Page[AccountResult]:
    return Page.from_cache(data, AccountResult.from_cache)


class AccountService:
    """Create, read, update, soft delete, restore and purge accounts."""

    def __init__(
        self,
        account_repo: IAccountRepository,
        cache: CacheProtocol,
        settings: Settings | None = None,
    ) -> None:
        self._repo = account_repo
        self._cache = cache
        self._settings = settings or get_settings()

    async def create(
        self, data: AccountCreate, caller_role: Role | None = None
    ) -> AccountResult:
        """Create an account, or revive a soft-deleted one with the same email.

        caller_role is the acting administrator's role; None means a
        self-registration, for which the auth service already forces USER.

        Raises:
            ForbiddenException: caller may not assign data.role.
            AlreadyExistsException: a live account already has the email.
        """
        if caller_role is not None:
            ensure_can_assign_role(caller_role, data.role)
        existing = await self._repo.get_by_email(data.email, include_deleted=True)
        if existing is not None and not existing.is_deleted:
            raise AlreadyExistsException("Email")
        if existing is not None:
            account = await self._revive(existing.id, data)
        else:
            account = await self._repo.create_account(data)
            logger.info("Account created: %s", account.id)
        await self._commit_and_invalidate(account.id)
        return account

    async def _revive(self, account_id: str, data: AccountCreate) -> AccountResult:
        await self._repo.restore(account_id)
        account = await self._repo.update_account(
            account_id,
            {
                "password": data.password,
                "first_name": data.first_name,
                "last_name": data.last_name,
                "role": data.role,
                "is_active": data.is_active,
            },
        )
        if account is None:
            raise NotFoundException("Account", account_id)
        logger.info("Account restored on re-registration: %s", account_id)
        return account

    async def find_all(
        self, page: int = 1, limit: int = 10, include_deleted: bool = False
    ) -> Page[AccountResult]:
        """Return one page of accounts. Cached unless include_deleted."""

        async def load() -> Page[AccountResult]:
            items, total = await self._repo.list_accounts(
                skip=(page - 1) * limit, limit=limit, include_deleted=include_deleted
            )
            return Page(items=items, total=total)

        if include_deleted:
            return await load()
        return await self._cache.get_or_set(
            account_list_key(page, limit),
            load,
            self._settings.cache_ttl_list,
            encode=_page_to_cache,
            decode=_page_from_cache,
        )

    async def find_deleted(self, page: int = 1, limit: int = 10) -> Page[AccountResult]:
        items, total = await self._repo.list_deleted(skip=(page - 1) * limit, limit=limit)
        return Page(items=items, total=total)

    async def find_one(self, account_id: str, include_deleted: bool = False) -> AccountResult:
        """Return account by id; include_deleted reads bypass the cache.

        Raises:
            NotFoundException: no matching account.
        """

        async def load() -> AccountResult:
            account = await self._repo.get_by_id(account_id, include_deleted=include_deleted)
            if account is None:
                raise NotFoundException("Account", account_id)
            return account

        if include_deleted:
            return await load()
        return await self._cache.get_or_set(
            account_key(account_id),
            load,
            self._settings.cache_ttl_entity,
            encode=AccountResult.to_cache,
            decode=AccountResult.from_cache,
        )

    async def update(
        self, account_id: str, data: AccountUpdate, caller_role: Role | None = None
    ) -> AccountResult:
        """Apply a partial update.

        Raises:
            ForbiddenException: the account outranks caller_role, or caller
                may not assign data.role.
            AlreadyExistsException: the new email belongs to another account.
            NotFoundException: no live account with account_id.
        """
        changes = data.changes()
        if caller_role is not None:
            await self._ensure_can_manage(account_id, caller_role)
        if data.role is not None and caller_role is not None:
            ensure_can_assign_role(caller_role, data.role)
        if data.email is not None:
            other = await self._repo.get_by_email(data.email, include_deleted=True)
            if other is not None and other.id != account_id:
                raise AlreadyExistsException("Email")
        updated = await self._repo.update_account(account_id, changes)
        if updated is None:
            raise NotFoundException("Account", account_id)
        await self._commit_and_invalidate(account_id)
        logger.info("Account updated: %s (fields=%s)", account_id, sorted(changes))
        return updated

    async def remove(self, account_id: str, caller_role: Role | None = None) -> None:
        """Soft delete.

        Raises:
            ForbiddenException: the account outranks caller_role.
            NotFoundException: no live account matched.
        """
        if caller_role is not None:
            await self._ensure_can_manage(account_id, caller_role)
        if not await self._repo.soft_delete(account_id):
            raise NotFoundException("Account", account_id)
        await self._commit_and_invalidate(account_id)
        logger.info("Account soft deleted: %s", account_id)

    async def restore(self, account_id: str) -> AccountResult:
        """Clear deleted_at.

        Raises:
            NotFoundException: account missing or not soft-deleted.
        """
        existing = await self._repo.get_by_id(account_id, include_deleted=True)
        if existing is None:
            raise NotFoundException("Account", account_id)
        if not existing.is_deleted:
            raise NotFoundException("Deleted account", account_id)
        restored = await self._repo.restore(account_id)
        if restored is None:
            raise NotFoundException("Deleted account", account_id)
        await self._commit_and_invalidate(account_id)
        logger.info("Account restored: %s", account_id)
        return restored

    async def purge(self, account_id: str) -> None:
        """Remove the row irreversibly (live or soft-deleted)."""
        if not await self._repo.purge(account_id):
            raise NotFoundException("Account", account_id)
        await self._commit_and_invalidate(account_id)
        logger.warning("Account purged: %s", account_id)

    async def _ensure_can_manage(self, account_id: str, caller_role: Role) -> None:
        target = await self._repo.get_by_id(account_id)
        if target is None:
            raise NotFoundException("Account", account_id)
        ensure_can_manage_account(caller_role, target.role)

    async def _commit_and_invalidate(self, account_id: str) -> None:
        await self._repo.commit()
        await asyncio.gather(
            self._cache.invalidate(account_key(account_id)),
            self._cache.invalidate_pattern(account_list_pattern()),
        )
