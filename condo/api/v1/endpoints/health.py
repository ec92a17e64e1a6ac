"""Health check endpoint. Used for liveness checks."""

from typing import Annotated

from fastapi import APIRouter, Depends

from condo.api.v1.dependencies import get_cache
from condo.api.v1.policies import require
from condo.core.config import get_settings
from condo.infrastructure.cache.redis_cache import CacheService
from condo.schemas.health import HealthResponse

router = APIRouter()


@router.get("", response_model=HealthResponse, dependencies=[Depends(require("health.check"))])
def health_check(cache: Annotated[CacheService, Depends(get_cache)]) -> HealthResponse:
    """Return ok plus the cache state; a missing cache does not make the service unhealthy."""
    settings = get_settings()
    if not settings.redis_enabled:
        cache_state = "disabled"
    else:
        cache_state = "up" if cache.is_available() else "down"
    return HealthResponse(status="ok", version=settings.app_version, cache=cache_state)
