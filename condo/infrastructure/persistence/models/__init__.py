"""ORM models. Import here so Alembic autogenerate sees every table."""

from condo.infrastructure.persistence.models.account import Account
from condo.infrastructure.persistence.models.condominium import (
    Condominium,
    account_condominium,
)

__all__ = ["Account", "Condominium", "account_condominium"]
