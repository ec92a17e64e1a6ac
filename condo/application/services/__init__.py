"""Application services."""

from condo.application.services.account_service import AccountService
from condo.application.services.auth_service import AuthService
from condo.application.services.condominium_service import CondominiumService

__all__ = ["AccountService", "AuthService", "CondominiumService"]
