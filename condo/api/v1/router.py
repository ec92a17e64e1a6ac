"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. Access rules
live in condo.api.v1.policies.
"""

from fastapi import APIRouter

from condo.api.v1.endpoints import auth, condominiums, health, users

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(users.router, prefix="/users", tags=["users"])
api_router.include_router(
    condominiums.router, prefix="/condominiums", tags=["condominiums"]
)
