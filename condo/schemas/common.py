"""Shared API schemas: pagination."""

from typing import Generic, TypeVar

from pydantic import BaseModel

ItemT = TypeVar("ItemT")


class PageResponse(BaseModel, Generic[ItemT]):
    """One page of a list endpoint."""

    data: list[ItemT]
    total: int
    page: int
    limit: int
