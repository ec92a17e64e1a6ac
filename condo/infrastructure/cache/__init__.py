"""Cache: Redis service and cache key utilities.

Used by the entity services for the cache-aside read path and by the auth
service for session invalidation. Key format is in keys.py (DRY).
"""

from condo.infrastructure.cache.cache_protocol import CacheProtocol
from condo.infrastructure.cache.keys import (
    account_key,
    account_list_key,
    account_list_pattern,
    condominium_key,
    condominium_list_key,
    condominium_list_pattern,
)
from condo.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "account_key",
    "account_list_key",
    "account_list_pattern",
    "condominium_key",
    "condominium_list_key",
    "condominium_list_pattern",
]
