"""Shared DTOs: pagination and timestamp (de)serialization for cached reads."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from condo.shared.utils.datetime import ensure_utc


def dump_datetime(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


def load_datetime(value: str | None) -> datetime | None:
    return ensure_utc(datetime.fromisoformat(value)) if value is not None else None


@dataclass(frozen=True)
class Page[T]:
    """One page of a list read plus the total row count."""

    items: list[T]
    total: int

    def to_cache(self, encode_item: Callable[[T], dict[str, Any]]) -> dict[str, Any]:
        return {"items": [encode_item(item) for item in self.items], "total": self.total}

    @classmethod
    def from_cache(
        cls, data: dict[str, Any], decode_item: Callable[[dict[str, Any]], T]
    ) -> "Page[T]":
        return cls(items=[decode_item(item) for item in data["items"]], total=int(data["total"]))
