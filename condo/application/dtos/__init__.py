"""Application DTOs (no dependency on ORM or HTTP schemas)."""

from condo.application.dtos.account import (
    AccountCreate,
    AccountCredentials,
    AccountResult,
    AccountUpdate,
)
from condo.application.dtos.auth import AuthResult, LoginResult, TokenPair
from condo.application.dtos.common import Page
from condo.application.dtos.condominium import (
    CondominiumCreate,
    CondominiumResult,
    CondominiumUpdate,
)

__all__ = [
    "AccountCreate",
    "AccountCredentials",
    "AccountResult",
    "AccountUpdate",
    "AuthResult",
    "CondominiumCreate",
    "CondominiumResult",
    "CondominiumUpdate",
    "LoginResult",
    "Page",
    "TokenPair",
]
