"""Public paging-window contracts."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass

PAGE_PREV = "pagePrev"
PAGE_NEXT = "pageNext"
PAGE_TEXT = "pageText"


@dataclass(frozen=True, slots=True)
class ItemExtent:
    """Measured span of one legend item along the primary axis."""

    index: Hashable | None
    start: float
    end: float


@dataclass(frozen=True, slots=True)
class PageInfo:
    """Paging state of one layout pass.

    `page_index` is None only for an empty item list. Neighbour indices are None
    when there is no page in that direction.
    """

    content_offset: tuple[float, float]
    page_count: int
    page_index: int | None
    prev_index: Hashable | None = None
    next_index: Hashable | None = None

    @property
    def has_prev(self) -> bool:
        return self.prev_index is not None

    @property
    def has_next(self) -> bool:
        return self.next_index is not None


EMPTY_PAGE_INFO = PageInfo(content_offset=(0.0, 0.0), page_count=0, page_index=None)
