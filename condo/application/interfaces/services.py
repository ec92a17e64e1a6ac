"""Service interfaces (ports) for infrastructure services used by the application."""

from typing import Any, Protocol


class ITokenIssuer(Protocol):
    """Protocol for JWT signing/verification of the access/refresh pair."""

    def sign_access(self, claims: dict[str, Any]) -> str:
        """Return a signed access token for claims."""
        ...

    def sign_refresh(self, claims: dict[str, Any]) -> str:
        """Return a signed refresh token for claims."""
        ...

    def verify_access(self, token: str) -> dict[str, Any]:
        """Return access token payload; raise ValueError if invalid."""
        ...

    def verify_refresh(self, token: str) -> dict[str, Any]:
        """Return refresh token payload; raise ValueError if invalid."""
        ...
