"""Current-principal dependency: bearer access token -> live account."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from condo.application.interfaces.repositories import IAccountRepository
from condo.domain.enums import Role
from condo.domain.exceptions import UnauthorizedException
from condo.infrastructure.security.jwt import TokenIssuer

from .db import get_account_repo
from .services import get_token_issuer

_http_bearer = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Principal:
    """The authenticated caller. role is read from the store, not from the token."""

    account_id: str
    email: str
    role: Role
    condominium_id: str | None = None


async def get_current_principal(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_http_bearer)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    account_repo: Annotated[IAccountRepository, Depends(get_account_repo)],
) -> Principal:
    """Return the caller; raise UnauthorizedException if the token or account is not valid."""
    if credentials is None:
        raise UnauthorizedException("Not authenticated")
    try:
        payload = token_issuer.verify_access(credentials.credentials)
    except ValueError as e:
        raise UnauthorizedException("Invalid or expired token") from e
    account = await account_repo.get_by_id(payload["sub"])
    if account is None or not account.is_active:
        raise UnauthorizedException("User not found or inactive")
    return Principal(
        account_id=account.id,
        email=account.email,
        role=account.role,
        condominium_id=payload.get("condominium_id"),
    )
