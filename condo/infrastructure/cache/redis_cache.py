"""Redis-based cache service and the cache-aside read path.

Provides async Redis caching with TTL support for account and condominium
reads. Every backend failure is logged and swallowed: a broken cache
degrades to a miss, never to an error. Key format lives in
condo.infrastructure.cache.keys.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import redis.asyncio as redis

from condo.core.config import Settings, get_settings

logger = logging.getLogger(__name__)

_DELETE_CHUNK_SIZE = 500


class CacheService:
    """Async Redis cache service with TTL support.

    Constructed in the app lifespan and stored on app.state.cache. Call
    connect() at startup and disconnect() at shutdown. A client passed to
    the constructor is treated as already connected.
    """

    def __init__(
        self,
        redis_client: redis.Redis | None = None,
        settings: Settings | None = None,
    ) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI.
            settings: Optional settings; defaults to get_settings().
        """
        self.redis = redis_client
        self.settings = settings or get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        if not self.settings.redis_enabled:
            logger.info("Redis cache disabled by configuration")
            return
        try:
            password = self.settings.redis_password
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=password.get_secret_value() if password else None,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    async def _reconnect(self) -> bool:
        """Attempt to reconnect after a dropped connection. Returns True if reconnected."""
        if self.redis is None:
            return False
        try:
            await self.redis.aclose()
        except redis.RedisError:
            logger.debug("Error closing stale Redis connection", exc_info=True)
        self.redis = None
        self._connected = False
        await self.connect()
        return self._connected

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def _execute[T](
        self,
        operation: str,
        target: str,
        call: Callable[[redis.Redis], Awaitable[T]],
        default: T,
    ) -> T:
        """Run call against the client, retrying once after a reconnect.

        Returns default when the cache is unavailable or the call fails.
        """
        if not self.is_available() or self.redis is None:
            return default
        try:
            return await call(self.redis)
        except (redis.ConnectionError, redis.TimeoutError):
            if await self._reconnect() and self.redis is not None:
                try:
                    return await call(self.redis)
                except redis.RedisError:
                    logger.exception("Cache %s error for %s after reconnect", operation, target)
                    return default
            logger.warning("Cache %s unavailable for %s (Redis disconnected)", operation, target)
            return default
        except redis.RedisError:
            logger.exception("Cache %s error for %s", operation, target)
            return default

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable.

        Args:
            key: Cache key (use condo.infrastructure.cache.keys builders).

        Returns:
            Cached value or None.
        """
        raw = await self._execute("get", key, lambda client: client.get(key), None)
        if raw is None:
            logger.debug("Cache MISS: %s", key)
            return None
        try:
            value = json.loads(raw)
        except ValueError:
            logger.warning("Cache entry for %s is not valid JSON; ignoring", key)
            return None
        logger.debug("Cache HIT: %s", key)
        return value

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success.

        Args:
            key: Cache key.
            value: Value to cache (JSON-serializable).
            ttl: Time-to-live in seconds (default 300).

        Returns:
            True if stored, False otherwise.
        """
        try:
            serialized = json.dumps(value)
        except (TypeError, ValueError):
            logger.warning("Cache value for %s is not JSON-serializable; skipping", key)
            return False

        async def _setex(client: redis.Redis) -> bool:
            await client.setex(key, ttl, serialized)
            return True

        stored = await self._execute("set", key, _setex, False)
        if stored:
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
        return stored

    async def delete(self, key: str) -> bool:
        """Remove key from cache. Returns True if the command ran.

        Args:
            key: Cache key to delete.
        """

        async def _delete(client: redis.Redis) -> bool:
            await client.delete(key)
            return True

        deleted = await self._execute("delete", key, _delete, False)
        if deleted:
            logger.debug("Cache DELETE: %s", key)
        return deleted

    async def delete_pattern(self, pattern: str) -> int:
        """Delete all keys matching pattern using SCAN + chunked UNLINK (non-blocking).

        Uses scan_iter to avoid KEYS blocking the server.

        Args:
            pattern: Redis SCAN match pattern (e.g. accounts:list:*).

        Returns:
            Number of keys deleted.
        """

        async def _scan_and_unlink(client: redis.Redis) -> int:
            deleted = 0
            chunk: list[str] = []
            async for key in client.scan_iter(match=pattern):
                chunk.append(key)
                if len(chunk) >= _DELETE_CHUNK_SIZE:
                    deleted += int(await client.unlink(*chunk) or 0)
                    chunk = []
            if chunk:
                deleted += int(await client.unlink(*chunk) or 0)
            return deleted

        deleted = await self._execute("delete_pattern", pattern, _scan_and_unlink, 0)
        if deleted > 0:
            logger.info("Cache INVALIDATE: %s (%s keys)", pattern, deleted)
        return deleted

    async def exists(self, key: str) -> bool:
        """Return True if key is present in the cache."""
        count = await self._execute("exists", key, lambda client: client.exists(key), 0)
        return bool(count)

    async def get_ttl(self, key: str) -> int:
        """Return remaining TTL in seconds (-2 missing, -1 no expiry or unavailable)."""
        return int(await self._execute("ttl", key, lambda client: client.ttl(key), -1))

    async def extend_ttl(self, key: str, ttl: int) -> bool:
        """Reset the TTL of an existing key. Returns True if the key exists."""
        result = await self._execute("expire", key, lambda client: client.expire(key, ttl), False)
        return bool(result)

    async def get_or_set[T](
        self,
        key: str,
        populate: Callable[[], Awaitable[T]],
        ttl: int = 300,
        *,
        encode: Callable[[T], Any] | None = None,
        decode: Callable[[Any], T] | None = None,
    ) -> T:
        """Cache-aside read: return the cached value or populate, store and return it.

        On a hit, populate is not called. On a miss or any cache failure,
        populate is awaited, its result stored under key with ttl, and
        returned. Exceptions raised by populate propagate unchanged and
        nothing is stored.

        Args:
            key: Cache key.
            populate: Zero-argument coroutine function loading the value.
            ttl: Time-to-live in seconds.
            encode: Optional converter from value to a JSON-serializable form.
            decode: Optional converter from the cached JSON form back to a value.

        Returns:
            The cached or freshly loaded value.
        """
        cached = await self.get(key)
        if cached is not None:
            if decode is None:
                return cached
            try:
                return decode(cached)
            except (KeyError, TypeError, ValueError):
                logger.warning("Cache entry for %s could not be decoded; repopulating", key)
        value = await populate()
        await self.set(key, encode(value) if encode else value, ttl)
        return value

    async def invalidate(self, key: str) -> None:
        """Best-effort removal of a single key."""
        await self.delete(key)

    async def invalidate_pattern(self, pattern: str) -> None:
        """Best-effort removal of every key matching pattern."""
        await self.delete_pattern(pattern)
