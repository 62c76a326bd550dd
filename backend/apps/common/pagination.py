from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Generic, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    """0-based page index, page size and a Django-style ``order_by`` tuple."""

    page_number: int
    page_size: int
    ordering: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def offset(self) -> int:
        return self.page_number * self.page_size


@dataclass
class Page(Generic[T]):
    items: List[T]
    page_number: int
    page_size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total_elements / self.page_size)

    @property
    def is_last(self) -> bool:
        # Pages past the end count as last, same as an empty result.
        return self.page_number + 1 >= self.total_pages

    @property
    def is_empty(self) -> bool:
        return not self.items


def paginate(source: Sequence[T], request: PageRequest) -> Page[T]:
    """Slice an already ordered queryset (or list) into a :class:`Page`."""
    if isinstance(source, (list, tuple)):
        total = len(source)
    else:
        total = source.count()
    start = request.offset
    items = list(source[start:start + request.page_size]) if start < total else []
    return Page(
        items=items,
        page_number=request.page_number,
        page_size=request.page_size,
        total_elements=total,
    )

