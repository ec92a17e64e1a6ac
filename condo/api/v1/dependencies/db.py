"""Repository dependencies over the request's DB session (composition root).

Read dependencies use get_db; *_for_write dependencies share the single
transactional session of the request (FastAPI caches Depends per request).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from condo.infrastructure.persistence.database import get_db, get_db_transactional
from condo.infrastructure.persistence.repositories import (
    AccountRepository,
    CondominiumRepository,
)


async def get_account_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AccountRepository:
    """Account repository for read operations."""
    return AccountRepository(db)


async def get_account_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> AccountRepository:
    """Account repository for writes (transactional)."""
    return AccountRepository(db)


async def get_condominium_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CondominiumRepository:
    """Condominium repository for read operations."""
    return CondominiumRepository(db)


async def get_condominium_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CondominiumRepository:
    """Condominium repository for writes (transactional)."""
    return CondominiumRepository(db)
