"""Account repository (credential store). Interface methods return application DTOs."""

import asyncio
from typing import Any

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from condo.application.dtos.account import (
    AccountCreate,
    AccountCredentials,
    AccountResult,
)
from condo.domain.enums import Role
from condo.domain.exceptions import AlreadyExistsException
from condo.infrastructure.persistence.models.account import Account
from condo.infrastructure.persistence.repositories.base import BaseRepository
from condo.infrastructure.security.password import get_password_hash

_UPDATABLE_FIELDS = frozenset(
    {"email", "first_name", "last_name", "role", "is_active", "password"}
)


def _account_to_result(a: Account) -> AccountResult:
    """Map ORM Account to application AccountResult (no secrets)."""
    return AccountResult(
        id=a.id,
        email=a.email,
        first_name=a.first_name,
        last_name=a.last_name,
        role=Role(a.role),
        is_active=a.is_active,
        created_at=a.created_at,
        updated_at=a.updated_at,
        deleted_at=a.deleted_at,
    )


def _account_to_credentials(a: Account) -> AccountCredentials:
    return AccountCredentials(
        account=_account_to_result(a),
        hashed_password=a.hashed_password,
        refresh_token_hash=a.refresh_token_hash,
    )


async def _hash_password(password: str) -> str:
    """Hash in the thread pool so bcrypt does not block the event loop."""
    return await asyncio.to_thread(get_password_hash, password)


class AccountRepository(BaseRepository[Account]):
    """Account repository: lookups, credentials, refresh-token hash, soft delete lifecycle."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Account)

    async def _get_by_email(self, email: str, include_deleted: bool) -> Account | None:
        result = await self.db.execute(
            select(Account).where(Account.email == email, self._visible(include_deleted))
        )
        return result.scalar_one_or_none()

    async def get_by_id(
        self, account_id: str, include_deleted: bool = False
    ) -> AccountResult | None:
        account = await self.get_entity(account_id, include_deleted)
        return _account_to_result(account) if account else None

    async def get_by_email(
        self, email: str, include_deleted: bool = False
    ) -> AccountResult | None:
        account = await self._get_by_email(email, include_deleted)
        return _account_to_result(account) if account else None

    async def get_credentials_by_email(
        self, email: str, include_deleted: bool = False
    ) -> AccountCredentials | None:
        account = await self._get_by_email(email, include_deleted)
        return _account_to_credentials(account) if account else None

    async def get_credentials_by_id(self, account_id: str) -> AccountCredentials | None:
        account = await self.get_entity(account_id)
        return _account_to_credentials(account) if account else None

    async def create_account(self, data: AccountCreate) -> AccountResult:
        """Create account; raise AlreadyExistsException on unique email violation."""
        account = Account(
            email=data.email,
            hashed_password=await _hash_password(data.password),
            first_name=data.first_name,
            last_name=data.last_name,
            role=data.role.value,
            is_active=data.is_active,
        )
        try:
            created = await self.create(account)
        except IntegrityError as e:
            raise AlreadyExistsException("Email") from e
        return _account_to_result(created)

    async def update_account(
        self, account_id: str, changes: dict[str, Any], include_deleted: bool = False
    ) -> AccountResult | None:
        """Apply changes; raise AlreadyExistsException when the new email is taken."""
        account = await self.get_entity(account_id, include_deleted)
        if account is None:
            return None
        for name, value in changes.items():
            if name not in _UPDATABLE_FIELDS:
                raise ValueError(f"Account field {name!r} cannot be updated")
            if name == "password":
                account.hashed_password = await _hash_password(value)
            elif name == "role":
                account.role = Role(value).value
            else:
                setattr(account, name, value)
        try:
            updated = await self.update(account)
        except IntegrityError as e:
            raise AlreadyExistsException("Email") from e
        return _account_to_result(updated)

    async def set_refresh_token_hash(self, account_id: str, token_hash: str | None) -> None:
        await self.db.execute(
            update(Account)
            .where(Account.id == account_id)
            .values(refresh_token_hash=token_hash)
        )
        await self.db.flush()

    async def soft_delete(self, account_id: str) -> bool:
        account = await self.get_entity(account_id)
        if account is None:
            return False
        account.refresh_token_hash = None
        await self.soft_delete_entity(account)
        return True

    async def restore(self, account_id: str) -> AccountResult | None:
        account = await self.get_entity(account_id, include_deleted=True)
        if account is None or account.deleted_at is None:
            return None
        return _account_to_result(await self.restore_entity(account))

    async def purge(self, account_id: str) -> bool:
        return await self.purge_by_id(account_id)

    async def list_accounts(
        self, skip: int = 0, limit: int = 10, include_deleted: bool = False
    ) -> tuple[list[AccountResult], int]:
        rows, total = await self.paginate(
            self._visible(include_deleted), skip=skip, limit=limit
        )
        return [_account_to_result(a) for a in rows], total

    async def list_deleted(
        self, skip: int = 0, limit: int = 10
    ) -> tuple[list[AccountResult], int]:
        rows, total = await self.paginate(
            Account.deleted_at.is_not(None), skip=skip, limit=limit
        )
        return [_account_to_result(a) for a in rows], total
