"""Presentation-layer dependency injection (composition root)."""

from .auth import Principal, get_current_principal
from .db import (
    get_account_repo,
    get_account_repo_for_write,
    get_condominium_repo,
    get_condominium_repo_for_write,
)
from .services import (
    get_account_service,
    get_account_service_for_write,
    get_auth_service,
    get_cache,
    get_condominium_service,
    get_condominium_service_for_write,
    get_token_issuer,
)

__all__ = [
    "Principal",
    "get_account_repo",
    "get_account_repo_for_write",
    "get_account_service",
    "get_account_service_for_write",
    "get_auth_service",
    "get_cache",
    "get_condominium_repo",
    "get_condominium_repo_for_write",
    "get_condominium_service",
    "get_condominium_service_for_write",
    "get_current_principal",
    "get_token_issuer",
]
