from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class Page(BaseModel, Generic[T]):
    """One page of results with 1-based ``current_page`` metadata."""

    current_page: int
    size: int
    total_items: int
    total_pages: int
    items: list[T] = Field(default_factory=list)
