from __future__ import annotations

import math
from typing import Sequence

from pydantic import BaseModel

from ..core.config import settings
from ..schemas.page import Page


def to_page_index(page: int) -> int:
    """Translate a caller-facing 1-based page number into a 0-based storage index."""

    if page < 1:
        raise ValueError("page must be >= 1")
    return page - 1


def clamp_size(size: int | None) -> int:
    if size is None:
        return settings.DEFAULT_PAGE_SIZE
    if size < 1:
        raise ValueError("size must be >= 1")
    return min(size, settings.MAX_PAGE_SIZE)


def build_page(rows: Sequence[object], total: int, *, page: int, size: int, schema: type[BaseModel]) -> Page:
    return Page(
        current_page=page,
        size=size,
        total_items=total,
        total_pages=math.ceil(total / size),
        items=[schema.model_validate(row) for row in rows],
    )
