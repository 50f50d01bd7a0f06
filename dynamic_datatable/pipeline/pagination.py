"""Fixed-size page windows over an ordered sequence."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Sequence


def total_pages_for(total_items: int, page_size: int) -> int:
    """Number of pages needed for ``total_items``; never less than 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, -(-total_items // page_size))


@dataclass(frozen=True)
class Page:
    """One window of rows plus the metadata describing it."""

    items: List[Any] = field(default_factory=list)
    page: int = 1
    page_size: int = 10
    total_items: int = 0
    total_pages: int = 1

    @property
    def start_index(self) -> int:
        """1-based position of the first row shown, 0 when nothing is shown."""
        if not self.items:
            return 0
        return (self.page - 1) * self.page_size + 1

    @property
    def end_index(self) -> int:
        """1-based position of the last row shown, 0 when nothing is shown."""
        if not self.items:
            return 0
        return self.start_index + len(self.items) - 1

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def paginate(records: Sequence[Any], page: int, page_size: int) -> Page:
    """Slice ``records`` to the rows of ``page``.

    Out-of-range pages produce an empty slice; clamping is the caller's job.

    Raises:
        ValueError: if ``page_size`` is not positive
    """
    total_items = len(records)
    total_pages = total_pages_for(total_items, page_size)

    start = max(page - 1, 0) * page_size
    items = list(records[start : start + page_size]) if page >= 1 else []

    return Page(
        items=items,
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
    )
