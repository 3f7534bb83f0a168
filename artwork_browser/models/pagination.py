"""Generic page-of-results container."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Page(Generic[T]):
    """One fetched page of items plus the collection's pagination meta-data."""

    items: Sequence[T]
    total: int           # total items in the remote collection
    pages: int           # total number of pages
    page: int            # page number (1-based)

    per_page: int        # fixed page size for the session

    @classmethod
    def empty(cls, page: int = 1, per_page: int = 10) -> "Page[T]":
        return cls(items=(), total=0, pages=1, page=page, per_page=per_page)

    # ------------- helpers -------------
    def has_next(self) -> bool:
        return self.page < self.pages

    def has_prev(self) -> bool:
        return self.page > 1

    def first_index(self) -> int:
        """1-based position of the first item on this page, 0 when empty."""
        if not self.items:
            return 0
        return (self.page - 1) * self.per_page + 1

    def last_index(self) -> int:
        if not self.items:
            return 0
        return self.first_index() + len(self.items) - 1
