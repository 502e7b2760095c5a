# core/pagination.py
import math
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from core.errors import ValidationError

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
# Largest row offset the store accepts (signed 64-bit)
MAX_OFFSET = 2 ** 63 - 1

T = TypeVar("T")


@dataclass(frozen=True)
class Pagination:
    """Page/limit pair with the derived store offset.

    ``page`` is 1-based. Absent or falsy values fall back to the defaults,
    so ``page=0`` means the first page and ``limit=0`` means ten items.
    A page reaching past ``MAX_OFFSET`` raises ``ValidationError``.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(cls, page: Optional[int] = None, limit: Optional[int] = None) -> "Pagination":
        pagination = cls(page=page or DEFAULT_PAGE, limit=limit or DEFAULT_LIMIT)
        if pagination.page < 0 or pagination.limit < 0:
            raise ValidationError("page and limit must not be negative")
        if pagination.skip + pagination.limit > MAX_OFFSET:
            raise ValidationError(f"page {pagination.page} with limit {pagination.limit} is out of range")
        return pagination

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    def total_pages(self, total_entries: int) -> int:
        return math.ceil(total_entries / self.limit)


@dataclass
class Page(Generic[T]):
    """One page of results plus the size of the full matching set"""

    items: List[T] = field(default_factory=list)
    total_entries: int = 0
    pagination: Pagination = field(default_factory=Pagination)

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages(self.total_entries)
