"""DTOs for the auth session lifecycle."""

from dataclasses import dataclass, field

from condo.application.dtos.account import AccountResult
from condo.application.dtos.condominium import CondominiumResult


@dataclass(frozen=True)
class TokenPair:
    """Access + refresh JWTs minted together."""

    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class AuthResult:
    """Result of register: the new account and its first token pair."""

    account: AccountResult
    access_token: str
    refresh_token: str


@dataclass(frozen=True)
class LoginResult:
    """Result of login: account, its condominium memberships, and a token pair."""

    account: AccountResult
    access_token: str
    refresh_token: str
    condominiums: list[CondominiumResult] = field(default_factory=list)
