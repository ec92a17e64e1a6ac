"""Application lifespan: startup and shutdown.

Owns the CacheService (app.state.cache) and disposes the SQL engine on exit.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from condo.core.config import get_settings
from condo.infrastructure.cache.redis_cache import CacheService
from condo.infrastructure.persistence.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Connect the cache, yield, then disconnect it and dispose the engine.

    The cache is always constructed; with Redis disabled or unreachable it
    reports is_available() == False and every read falls through to the store.
    """
    settings = get_settings()

    # ---- Startup ----
    cache = CacheService(settings=settings)
    await cache.connect()
    app.state.cache = cache
    logger.info("%s %s started (cache available: %s)", settings.app_name, settings.app_version, cache.is_available())

    yield

    # ---- Shutdown ----
    await cache.disconnect()
    await dispose_engine()
    logger.info("Shutdown complete")
