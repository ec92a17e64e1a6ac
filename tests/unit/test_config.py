"""Tests for Settings validation (required fields, distinct JWT secrets)."""

import pytest
from pydantic import ValidationError

from condo.core.config import Settings

_BASE = {
    "database_url": "postgresql+asyncpg://u:p@localhost/db",
    "jwt_secret": "access-secret",
    "jwt_refresh_secret": "refresh-secret",
}


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **{**_BASE, **overrides})


def test_defaults() -> None:
    settings = _settings()
    assert settings.access_token_expire_minutes == 15
    assert settings.refresh_token_expire_days == 7
    assert settings.jwt_algorithm == "HS256"


@pytest.mark.parametrize("missing", ["database_url", "jwt_secret", "jwt_refresh_secret"])
def test_required_fields(missing: str) -> None:
    with pytest.raises(ValidationError):
        _settings(**{missing: ""})


def test_secrets_must_differ() -> None:
    with pytest.raises(ValidationError, match="must differ"):
        _settings(jwt_refresh_secret="access-secret")


def test_token_lifetimes_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        _settings(access_token_expire_minutes=0)


def test_cache_ttls_are_per_read_kind() -> None:
    settings = _settings()
    assert settings.cache_ttl_entity == 300
    assert settings.cache_ttl_list == 60
    assert {name for name in Settings.model_fields if name.startswith("cache_ttl")} == {
        "cache_ttl_entity",
        "cache_ttl_list",
    }
