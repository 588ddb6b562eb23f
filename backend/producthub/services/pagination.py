"""Page container returned by listing queries."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class PagedResult(Generic[T]):
    page_number: int
    page_size: int
    total_count: int
    total_pages: int
    items: list[T] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.page_number > 1

    @property
    def has_next(self) -> bool:
        return self.page_number < self.total_pages

    @classmethod
    def build(
        cls, items: list[T], total_count: int, page_number: int, page_size: int
    ) -> "PagedResult[T]":
        """Assemble a page, deriving total_pages from the unpaged count."""
        total_pages = math.ceil(total_count / page_size) if page_size else 0
        return cls(
            page_number=page_number,
            page_size=page_size,
            total_count=total_count,
            total_pages=total_pages,
            items=list(items),
        )
