"""Core constants: cache key prefixes and shared literal values.

Single source of truth for cache key structure (DRY). Used by
infrastructure cache key builders and the entity services.
"""

# Single-entity prefixes (used with :id:<id>)
CACHE_PREFIX_ACCOUNT = "account"
CACHE_PREFIX_CONDOMINIUM = "condominium"

# List prefixes (one namespace per entity type so a single pattern covers every page)
CACHE_PREFIX_ACCOUNT_LIST = "accounts"
CACHE_PREFIX_CONDOMINIUM_LIST = "condominiums"

# Delimiter for composite keys
CACHE_KEY_SEP = ":"

# Token types carried in the "type" claim
TOKEN_TYPE_ACCESS = "access"
TOKEN_TYPE_REFRESH = "refresh"
