"""DTOs for condominium (tenant) use cases (no dependency on ORM)."""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any

from condo.application.dtos.common import dump_datetime, load_datetime

_TIMESTAMPS = ("created_at", "updated_at", "deleted_at")


@dataclass(frozen=True)
class CondominiumResult:
    """Condominium read-model."""

    id: str
    name: str
    address: str
    city: str
    country: str
    description: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    tax_id: str | None = None
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def to_cache(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = dump_datetime(value) if f.name in _TIMESTAMPS else value
        return data

    @classmethod
    def from_cache(cls, data: dict[str, Any]) -> "CondominiumResult":
        values = {f.name: data.get(f.name) for f in fields(cls)}
        for name in _TIMESTAMPS:
            values[name] = load_datetime(values[name])
        values["is_active"] = bool(values["is_active"])
        return cls(**values)


@dataclass(frozen=True)
class CondominiumCreate:
    name: str
    address: str
    city: str
    country: str
    description: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    tax_id: str | None = None
    is_active: bool = True


@dataclass(frozen=True)
class CondominiumUpdate:
    """Partial condominium update. None means "leave unchanged"."""

    name: str | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    description: str | None = None
    postal_code: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    tax_id: str | None = None
    is_active: bool | None = None

    def changes(self) -> dict[str, Any]:
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
