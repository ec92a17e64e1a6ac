"""Application service dependencies (composition root).

Cache is owned by the app lifespan (app.state.cache); token issuer is built
from settings. Routes depend only on these, never on infrastructure directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from condo.application.interfaces.repositories import (
    IAccountRepository,
    ICondominiumRepository,
)
from condo.application.services import (
    AccountService,
    AuthService,
    CondominiumService,
)
from condo.core.config import get_settings
from condo.infrastructure.cache.redis_cache import CacheService
from condo.infrastructure.security.jwt import TokenIssuer

from .db import (
    get_account_repo,
    get_account_repo_for_write,
    get_condominium_repo,
    get_condominium_repo_for_write,
)


def get_cache(request: Request) -> CacheService:
    """Lifespan-owned cache; an unconnected (always-miss) cache when the lifespan did not run."""
    cache = getattr(request.app.state, "cache", None)
    if cache is None:
        cache = CacheService(settings=get_settings())
        request.app.state.cache = cache
    return cache


def get_token_issuer() -> TokenIssuer:
    return TokenIssuer.from_settings(get_settings())


def get_account_service(
    repo: Annotated[IAccountRepository, Depends(get_account_repo)],
    cache: Annotated[CacheService, Depends(get_cache)],
) -> AccountService:
    """Account service for read endpoints."""
    return AccountService(repo, cache)


def get_account_service_for_write(
    repo: Annotated[IAccountRepository, Depends(get_account_repo_for_write)],
    cache: Annotated[CacheService, Depends(get_cache)],
) -> AccountService:
    """Account service for mutating endpoints (transactional session)."""
    return AccountService(repo, cache)


def get_condominium_service(
    repo: Annotated[ICondominiumRepository, Depends(get_condominium_repo)],
    account_repo: Annotated[IAccountRepository, Depends(get_account_repo)],
    cache: Annotated[CacheService, Depends(get_cache)],
) -> CondominiumService:
    return CondominiumService(repo, account_repo, cache)


def get_condominium_service_for_write(
    repo: Annotated[ICondominiumRepository, Depends(get_condominium_repo_for_write)],
    account_repo: Annotated[IAccountRepository, Depends(get_account_repo_for_write)],
    cache: Annotated[CacheService, Depends(get_cache)],
) -> CondominiumService:
    return CondominiumService(repo, account_repo, cache)


def get_auth_service(
    account_repo: Annotated[IAccountRepository, Depends(get_account_repo_for_write)],
    condominium_repo: Annotated[ICondominiumRepository, Depends(get_condominium_repo_for_write)],
    account_service: Annotated[AccountService, Depends(get_account_service_for_write)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
    cache: Annotated[CacheService, Depends(get_cache)],
) -> AuthService:
    """Auth service; every session operation writes the refresh-token hash."""
    return AuthService(
        account_repo=account_repo,
        condominium_repo=condominium_repo,
        account_service=account_service,
        token_issuer=token_issuer,
        cache=cache,
    )
