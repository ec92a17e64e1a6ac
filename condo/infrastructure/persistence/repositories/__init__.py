"""Repositories: SQLAlchemy implementations of the application ports."""

from condo.infrastructure.persistence.repositories.account_repo import AccountRepository
from condo.infrastructure.persistence.repositories.base import BaseRepository
from condo.infrastructure.persistence.repositories.condominium_repo import (
    CondominiumRepository,
)

__all__ = ["AccountRepository", "BaseRepository", "CondominiumRepository"]
