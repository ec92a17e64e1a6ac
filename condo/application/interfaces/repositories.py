"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from condo.application.dtos.account import (
        AccountCreate,
        AccountCredentials,
        AccountResult,
    )
    from condo.application.dtos.condominium import CondominiumCreate, CondominiumResult


class IAccountRepository(Protocol):
    """Protocol for the credential store (DIP)."""

    async def get_by_id(
        self, account_id: str, include_deleted: bool = False
    ) -> AccountResult | None:
        """Return account by id; soft-deleted rows only when include_deleted."""

    async def get_by_email(
        self, email: str, include_deleted: bool = False
    ) -> AccountResult | None:
        """Return account by email; soft-deleted rows only when include_deleted."""

    async def get_credentials_by_email(
        self, email: str, include_deleted: bool = False
    ) -> AccountCredentials | None:
        """Return account with password and refresh-token hashes, by email."""

    async def get_credentials_by_id(self, account_id: str) -> AccountCredentials | None:
        """Return non-deleted account with password and refresh-token hashes, by id."""

    async def create_account(self, data: AccountCreate) -> AccountResult:
        """Create account (password hashed); raise AlreadyExistsException on duplicate email."""

    async def update_account(
        self, account_id: str, changes: dict[str, Any], include_deleted: bool = False
    ) -> AccountResult | None:
        """Apply changes (a "password" key is hashed). Return None if not found."""

    async def set_refresh_token_hash(self, account_id: str, token_hash: str | None) -> None:
        """Overwrite (or clear, with None) the stored refresh-token hash."""

    async def soft_delete(self, account_id: str) -> bool:
        """Set deleted_at. Return False if no live account matched."""

    async def restore(self, account_id: str) -> AccountResult | None:
        """Clear deleted_at. Return None if no soft-deleted account matched."""

    async def purge(self, account_id: str) -> bool:
        """Remove the row irreversibly. Return False if it did not exist."""

    async def list_accounts(
        self, skip: int = 0, limit: int = 10, include_deleted: bool = False
    ) -> tuple[list[AccountResult], int]:
        """Return one page of accounts (newest first) and the total count."""

    async def list_deleted(
        self, skip: int = 0, limit: int = 10
    ) -> tuple[list[AccountResult], int]:
        """Return one page of soft-deleted accounts and the total count."""

    async def commit(self) -> None:
        """Make pending writes durable and visible to other sessions."""


class ICondominiumRepository(Protocol):
    """Protocol for the tenant store and account memberships (DIP)."""

    async def get_by_id(
        self, condominium_id: str, include_deleted: bool = False
    ) -> CondominiumResult | None:
        """Return condominium by id; soft-deleted rows only when include_deleted."""

    async def list_condominiums(
        self, skip: int = 0, limit: int = 10, include_deleted: bool = False
    ) -> tuple[list[CondominiumResult], int]:
        """Return one page of condominiums (newest first) and the total count."""

    async def list_active(self) -> list[CondominiumResult]:
        """Return every non-deleted condominium (implicit memberships of super_admin)."""

    async def list_for_account(self, account_id: str) -> list[CondominiumResult]:
        """Return the non-deleted condominiums the account is explicitly a member of."""

    async def is_member(self, account_id: str, condominium_id: str) -> bool:
        """Return True if an association row links account and non-deleted condominium."""

    async def create_condominium(self, data: CondominiumCreate) -> CondominiumResult:
        """Persist a new condominium."""

    async def update_condominium(
        self, condominium_id: str, changes: dict[str, Any]
    ) -> CondominiumResult | None:
        """Apply changes to a non-deleted condominium. Return None if not found."""

    async def soft_delete(self, condominium_id: str) -> bool:
        """Set deleted_at. Return False if no live condominium matched."""

    async def restore(self, condominium_id: str) -> CondominiumResult | None:
        """Clear deleted_at. Return None if no soft-deleted condominium matched."""

    async def add_member(self, condominium_id: str, account_id: str) -> None:
        """Link account to condominium (idempotent)."""

    async def remove_member(self, condominium_id: str, account_id: str) -> bool:
        """Unlink account from condominium. Return False if no link existed."""

    async def commit(self) -> None:
        """Make pending writes durable and visible to other sessions."""
