"""Auth session manager: register, login, condominium selection, refresh, logout.

A session is an access/refresh JWT pair. Only a bcrypt hash of the latest
refresh token is persisted per account, so issuing a new pair revokes the
previous refresh token and logout revokes all of them.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from typing import Any

from condo.application.dtos.account import AccountCreate, AccountResult
from condo.application.dtos.auth import AuthResult, LoginResult, TokenPair
from condo.application.dtos.condominium import CondominiumResult
from condo.application.interfaces.repositories import (
    IAccountRepository,
    ICondominiumRepository,
)
from condo.application.interfaces.services import ITokenIssuer
from condo.application.services.account_service import AccountService
from condo.domain.enums import Role
from condo.domain.exceptions import AlreadyExistsException, UnauthorizedException
from condo.infrastructure.cache.cache_protocol import CacheProtocol
from condo.infrastructure.cache.keys import account_key
from condo.infrastructure.security.password import get_password_hash, verify_password

logger = logging.getLogger(__name__)

# Lazy dummy hash for constant-time comparison when the account is not found.
# Computed on first use in a thread to avoid blocking the event loop at import.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


class AuthService:
    """Session lifecycle over the credential store, token issuer and cache."""

    def __init__(
        self,
        account_repo: IAccountRepository,
        condominium_repo: ICondominiumRepository,
        account_service: AccountService,
        token_issuer: ITokenIssuer,
        cache: CacheProtocol,
    ) -> None:
        self._accounts = account_repo
        self._condominiums = condominium_repo
        self._account_service = account_service
        self._tokens = token_issuer
        self._cache = cache

    async def register(self, data: AccountCreate) -> AuthResult:
        """Create a USER account and issue its first session.

        Any requested role is ignored. A soft-deleted account holding the
        email is revived with the new data.

        Raises:
            AlreadyExistsException: a live account already has the email.
        """
        if await self._accounts.get_by_email(data.email) is not None:
            raise AlreadyExistsException("Email")
        account = await self._account_service.create(replace(data, role=Role.USER))
        pair = await self._issue_session(account)
        logger.info("Account registered: %s", account.id)
        return AuthResult(
            account=account,
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
        )

    async def login(self, email: str, password: str) -> LoginResult:
        """Authenticate by email and password.

        The active flag is checked before the password is compared.

        Raises:
            UnauthorizedException: unknown email, inactive account, or wrong password.
        """
        credentials = await self._accounts.get_credentials_by_email(email)
        if credentials is None:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            raise UnauthorizedException("Invalid credentials")
        account = credentials.account
        if not account.is_active:
            raise UnauthorizedException("User is inactive")
        if not await asyncio.to_thread(
            verify_password, password, credentials.hashed_password
        ):
            raise UnauthorizedException("Invalid credentials")

        condominiums = await self._memberships(account)
        pair = await self._issue_session(account)
        logger.info("Login: account %s (%d condominiums)", account.id, len(condominiums))
        return LoginResult(
            account=account,
            condominiums=condominiums,
            access_token=pair.access_token,
            refresh_token=pair.refresh_token,
        )

    async def select_condominium(self, account_id: str, condominium_id: str) -> TokenPair:
        """Issue a pair scoped to condominium_id.

        Raises:
            UnauthorizedException: account missing or not a member of the condominium.
        """
        account = await self._accounts.get_by_id(account_id)
        if account is None:
            raise UnauthorizedException("User not found")
        if not await self._has_access(account, condominium_id):
            raise UnauthorizedException("User does not have access to this condominium")
        pair = await self._issue_session(account, condominium_id)
        logger.info("Account %s selected condominium %s", account_id, condominium_id)
        return pair

    async def refresh(self, account_id: str, refresh_token: str) -> TokenPair:
        """Rotate the session: verify the presented token against the stored hash.

        The new pair carries no condominium claim; the client selects again.

        Raises:
            UnauthorizedException: account missing, logged out, or token not the latest.
        """
        credentials = await self._accounts.get_credentials_by_id(account_id)
        if credentials is None or not credentials.refresh_token_hash:
            raise UnauthorizedException("Invalid refresh token")
        if not await asyncio.to_thread(
            verify_password, refresh_token, credentials.refresh_token_hash
        ):
            raise UnauthorizedException("Invalid refresh token")
        return await self._issue_session(credentials.account)

    async def logout(self, account_id: str) -> None:
        """Clear the stored refresh-token hash. Store errors propagate."""
        await self._accounts.set_refresh_token_hash(account_id, None)
        await self._accounts.commit()
        await self._cache.invalidate(account_key(account_id))
        logger.info("Logout: account %s", account_id)

    async def _memberships(self, account: AccountResult) -> list[CondominiumResult]:
        if account.role == Role.SUPER_ADMIN:
            return await self._condominiums.list_active()
        return await self._condominiums.list_for_account(account.id)

    async def _has_access(self, account: AccountResult, condominium_id: str) -> bool:
        if account.role == Role.SUPER_ADMIN:
            return await self._condominiums.get_by_id(condominium_id) is not None
        return await self._condominiums.is_member(account.id, condominium_id)

    async def _issue_session(
        self, account: AccountResult, condominium_id: str | None = None
    ) -> TokenPair:
        """Mint a pair, then persist the refresh-token hash, replacing the previous one."""
        pair, token_hash = await self._generate_tokens(account, condominium_id)
        await self._accounts.set_refresh_token_hash(account.id, token_hash)
        await self._accounts.commit()
        await self._cache.invalidate(account_key(account.id))
        return pair

    async def _generate_tokens(
        self, account: AccountResult, condominium_id: str | None
    ) -> tuple[TokenPair, str]:
        """Sign access and refresh concurrently; hash the refresh token once both exist."""
        claims: dict[str, Any] = {
            "sub": account.id,
            "email": account.email,
            "role": account.role.value,
        }
        if condominium_id is not None:
            claims["condominium_id"] = condominium_id
        access_token, refresh_token = await asyncio.gather(
            asyncio.to_thread(self._tokens.sign_access, claims),
            asyncio.to_thread(self._tokens.sign_refresh, claims),
        )
        token_hash = await asyncio.to_thread(get_password_hash, refresh_token)
        return TokenPair(access_token=access_token, refresh_token=refresh_token), token_hash
