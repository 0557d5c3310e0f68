"""Offset/limit pagination applied after all predicate filters"""

from typing import Any

from pydantic import BaseModel


class Page(BaseModel):
    items: list[Any]
    total: int  # filtered count before slicing
    limit: int
    offset: int
    has_more: bool


def paginate(items: list, limit: int, offset: int = 0) -> Page:
    total = len(items)
    return Page(
        items=items[offset : offset + limit],
        total=total,
        limit=limit,
        offset=offset,
        has_more=offset + limit < total,
    )
