"""Cache protocol for the service layer (DIP)."""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis). Used by entity and auth services."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds."""
        ...

    async def get_or_set[T](
        self,
        key: str,
        populate: Callable[[], Awaitable[T]],
        ttl: int = 300,
        *,
        encode: Callable[[T], Any] | None = None,
        decode: Callable[[Any], T] | None = None,
    ) -> T:
        """Return cached value or populate, store and return it."""
        ...

    async def invalidate(self, key: str) -> None:
        """Best-effort removal of one key."""
        ...

    async def invalidate_pattern(self, pattern: str) -> None:
        """Best-effort removal of every key matching pattern."""
        ...
