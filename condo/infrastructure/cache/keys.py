"""Cache key builders. Single place for key format (DRY).

Key components (ids) must not contain CACHE_KEY_SEP to avoid ambiguous or
colliding keys. Every list key lives under "<prefix>:list:" so one SCAN
pattern per entity type invalidates every cached page.
"""

from condo.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_ACCOUNT,
    CACHE_PREFIX_ACCOUNT_LIST,
    CACHE_PREFIX_CONDOMINIUM,
    CACHE_PREFIX_CONDOMINIUM_LIST,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator.

    Args:
        value: String component used in a cache key.
        name: Name of the component (for error message).

    Raises:
        ValueError: If value contains CACHE_KEY_SEP.
    """
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def _list_key(prefix: str, page: int, limit: int, include_deleted: bool) -> str:
    flag = "true" if include_deleted else "false"
    return CACHE_KEY_SEP.join([prefix, "list", str(page), str(limit), flag])


def account_key(account_id: str) -> str:
    """Cache key for account by ID."""
    _validate_key_component(account_id, "account_id")
    return f"{CACHE_PREFIX_ACCOUNT}{CACHE_KEY_SEP}id{CACHE_KEY_SEP}{account_id}"


def account_list_key(page: int, limit: int, include_deleted: bool = False) -> str:
    """Cache key for one page of the account list."""
    return _list_key(CACHE_PREFIX_ACCOUNT_LIST, page, limit, include_deleted)


def account_list_pattern() -> str:
    """SCAN pattern matching every cached account list page."""
    return f"{CACHE_PREFIX_ACCOUNT_LIST}{CACHE_KEY_SEP}list{CACHE_KEY_SEP}*"


def condominium_key(condominium_id: str) -> str:
    """Cache key for condominium by ID."""
    _validate_key_component(condominium_id, "condominium_id")
    return (
        f"{CACHE_PREFIX_CONDOMINIUM}{CACHE_KEY_SEP}id{CACHE_KEY_SEP}{condominium_id}"
    )


def condominium_list_key(page: int, limit: int, include_deleted: bool = False) -> str:
    """Cache key for one page of the condominium list."""
    return _list_key(CACHE_PREFIX_CONDOMINIUM_LIST, page, limit, include_deleted)


def condominium_list_pattern() -> str:
    """SCAN pattern matching every cached condominium list page."""
    return f"{CACHE_PREFIX_CONDOMINIUM_LIST}{CACHE_KEY_SEP}list{CACHE_KEY_SEP}*"
