"""DTOs for account use cases (no dependency on ORM)."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from condo.application.dtos.common import dump_datetime, load_datetime
from condo.domain.enums import Role


@dataclass(frozen=True)
class AccountResult:
    """Account read-model. Never carries the password or refresh-token hash."""

    id: str
    email: str
    first_name: str
    last_name: str
    role: Role
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_cache(self) -> dict[str, Any]:
        """JSON-safe form stored by the cache-aside read path."""
        return {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "role": self.role.value,
            "is_active": self.is_active,
            "created_at": dump_datetime(self.created_at),
            "updated_at": dump_datetime(self.updated_at),
            "deleted_at": dump_datetime(self.deleted_at),
        }

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> "AccountResult":
        return cls(
            id=data["id"],
            email=data["email"],
            first_name=data["first_name"],
            last_name=data["last_name"],
            role=Role(data["role"]),
            is_active=bool(data["is_active"]),
            created_at=load_datetime(data.get("created_at")),
            updated_at=load_datetime(data.get("updated_at")),
            deleted_at=load_datetime(data.get("deleted_at")),
        )


@dataclass(frozen=True)
class AccountCredentials:
    """Account plus its secrets. Only the auth service reads this; never cached."""

    account: AccountResult
    hashed_password: str
    refresh_token_hash: str | None = None


@dataclass(frozen=True)
class AccountCreate:
    """Input for account creation. password is plaintext and hashed by the repository."""

    email: str
    password: str
    first_name: str
    last_name: str
    role: Role = Role.USER
    is_active: bool = True


@dataclass(frozen=True)
class AccountUpdate:
    """Partial account update. None means "leave unchanged"."""

    email: str | None = None
    password: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    role: Role | None = None
    is_active: bool | None = None

    def changes(self) -> dict[str, Any]:
        """Return only the fields that were set."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
