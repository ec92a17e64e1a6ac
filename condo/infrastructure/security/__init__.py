"""Security: JWT signing/verification and password hashing."""

from condo.infrastructure.security.jwt import TokenIssuer, sign_token, verify_token
from condo.infrastructure.security.password import (
    get_password_hash,
    verify_password,
)

__all__ = [
    "TokenIssuer",
    "get_password_hash",
    "sign_token",
    "verify_password",
    "verify_token",
]
