"""API v1: auth, users, condominiums, health."""

from condo.api.v1.router import api_router

__all__ = ["api_router"]
