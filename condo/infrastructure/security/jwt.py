"""JWT signing and verification for access and refresh tokens.

Access and refresh tokens are signed with distinct secrets and carry a
"type" claim so one can never be accepted in place of the other. Every
token carries a random "jti" so two tokens minted in the same second for
the same claims still differ.
"""

import uuid
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any, cast

from jose import JWTError, jwt

from condo.core.config import Settings, get_settings
from condo.core.constants import TOKEN_TYPE_ACCESS, TOKEN_TYPE_REFRESH


def sign_token(
    claims: dict[str, Any],
    secret: str,
    expires_delta: timedelta,
    algorithm: str = "HS256",
) -> str:
    """Sign claims into a JWT expiring after expires_delta.

    Adds iat, exp and a fresh jti; the caller's dict is not modified.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(UTC)
    to_encode = claims.copy()
    to_encode["iat"] = now
    to_encode["exp"] = now + expires_delta
    to_encode["jti"] = uuid.uuid4().hex
    encoded = jwt.encode(to_encode, secret, algorithm=algorithm)
    return cast(str, encoded)


def verify_token(
    token: str,
    secret: str,
    algorithm: str = "HS256",
    expected_type: str | None = None,
) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub, and the "type" claim when
    expected_type is given.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    if expected_type is not None and payload.get("type") != expected_type:
        raise ValueError(f"Token type mismatch: expected {expected_type}")
    return payload


@dataclass(frozen=True)
class TokenIssuer:
    """Signs and verifies the access/refresh pair with their own secrets and lifetimes."""

    access_secret: str
    refresh_secret: str
    access_ttl: timedelta
    refresh_ttl: timedelta
    algorithm: str = "HS256"

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "TokenIssuer":
        settings = settings or get_settings()
        return cls(
            access_secret=settings.jwt_secret.get_secret_value(),
            refresh_secret=settings.jwt_refresh_secret.get_secret_value(),
            access_ttl=timedelta(minutes=settings.access_token_expire_minutes),
            refresh_ttl=timedelta(days=settings.refresh_token_expire_days),
            algorithm=settings.jwt_algorithm,
        )

    def sign_access(self, claims: dict[str, Any]) -> str:
        return sign_token(
            {**claims, "type": TOKEN_TYPE_ACCESS},
            self.access_secret,
            self.access_ttl,
            self.algorithm,
        )

    def sign_refresh(self, claims: dict[str, Any]) -> str:
        return sign_token(
            {**claims, "type": TOKEN_TYPE_REFRESH},
            self.refresh_secret,
            self.refresh_ttl,
            self.algorithm,
        )

    def verify_access(self, token: str) -> dict[str, Any]:
        """Decode an access token; raise ValueError if invalid, expired, or a refresh token."""
        return verify_token(token, self.access_secret, self.algorithm, TOKEN_TYPE_ACCESS)

    def verify_refresh(self, token: str) -> dict[str, Any]:
        """Decode a refresh token; raise ValueError if invalid, expired, or an access token."""
        return verify_token(token, self.refresh_secret, self.algorithm, TOKEN_TYPE_REFRESH)
