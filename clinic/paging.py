"""Pagination value types shared by controllers and repositories."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class PageRequest:
    """A request for one page of results.

    ``page`` is zero-based.  Callers holding a 1-based page number from a
    URL must subtract one before building the request.
    """
    page: int
    size: int

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError('page index must not be negative')
        if self.size < 1:
            raise ValueError('page size must be at least 1')

    @classmethod
    def of(cls, page: int, size: int) -> PageRequest:
        return cls(page=page, size=size)

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """One slice of a larger result together with the overall totals."""
    content: list[T] = field(default_factory=list)
    page_request: Optional[PageRequest] = None
    total: Optional[int] = None

    def __post_init__(self) -> None:
        if self.total is None:
            self.total = len(self.content)

    def __iter__(self) -> Iterator[T]:
        return iter(self.content)

    def __len__(self) -> int:
        return len(self.content)

    @property
    def total_elements(self) -> int:
        return self.total

    @property
    def total_pages(self) -> int:
        if self.page_request is None:
            return 1
        return math.ceil(self.total / self.page_request.size)

    @property
    def number(self) -> int:
        return self.page_request.page if self.page_request else 0

    @property
    def size(self) -> int:
        return self.page_request.size if self.page_request else len(self.content)

    def is_empty(self) -> bool:
        return not self.content
