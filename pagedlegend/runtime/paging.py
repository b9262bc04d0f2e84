"""Paging-window calculation over measured legend items.

Pages are sized by item extent rather than item count, so page boundaries are
found by scanning outwards from the anchor item in both directions:

- pages always start at the leading edge of an item;
- an item cut by the trailing edge of a window starts the next page, so every item
  is fully shown on some page unless it is larger than the window itself;
- a window holding a single item larger than the container still flips to its
  neighbour, so paging never gets stuck.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence

from pagedlegend.api.paging import EMPTY_PAGE_INFO, ItemExtent, PageInfo
from pagedlegend.ui_runtime.geometry import Orient, orient_axis

logger = logging.getLogger(__name__)


def compute_page_info(
    items: Sequence[ItemExtent],
    container_size: float,
    anchor_index: Hashable | None,
    *,
    orient: Orient = "horizontal",
    base_offset: tuple[float, float] = (0.0, 0.0),
) -> PageInfo:
    """Return paging state for the window whose first item is `anchor_index`.

    `base_offset` supplies the cross-axis component of the content offset; the
    primary component aligns the anchor item with the viewport's leading edge.
    """
    if not items:
        logger.debug("legend_paging_empty anchor=%r", anchor_index)
        return EMPTY_PAGE_INFO
    if container_size <= 0:
        logger.debug("legend_paging_no_room container_size=%.1f items=%d", container_size, len(items))
    anchor_pos = resolve_anchor_position(items, anchor_index)
    if anchor_pos is None:
        return PageInfo(content_offset=base_offset, page_count=1, page_index=0)

    offset = list(base_offset)
    offset[orient_axis(orient)] = -items[anchor_pos].start
    next_index, pages_after = _scan_forward(items, anchor_pos, container_size)
    prev_index, pages_before = _scan_backward(items, anchor_pos, container_size)
    return PageInfo(
        content_offset=(offset[0], offset[1]),
        page_count=1 + pages_before + pages_after,
        page_index=pages_before,
        prev_index=prev_index,
        next_index=next_index,
    )


def resolve_anchor_position(items: Sequence[ItemExtent], anchor_index: Hashable | None) -> int | None:
    """Return display position of `anchor_index`, else of the first indexed item."""
    fallback: int | None = None
    for pos, item in enumerate(items):
        if item.index is None:
            continue
        if item.index == anchor_index:
            return pos
        if fallback is None:
            fallback = pos
    if fallback is not None:
        logger.debug("legend_anchor_fallback anchor=%r position=%d", anchor_index, fallback)
    return fallback


def _intersects(item: ItemExtent, window_start: float, container_size: float) -> bool:
    return item.end >= window_start and item.start <= window_start + container_size


def _scan_forward(
    items: Sequence[ItemExtent], anchor_pos: int, container_size: float
) -> tuple[Hashable | None, int]:
    count = len(items)
    next_index: Hashable | None = None
    pages = 0
    win_start = win_end = anchor_pos
    # Position `count` is the past-the-end sentinel.
    for pos in range(anchor_pos + 1, count + 1):
        window_origin = items[win_start].start
        if pos == count:
            boundary = items[win_end].end > window_origin + container_size
        else:
            boundary = not _intersects(items[pos], window_origin, container_size)
        if boundary:
            win_start = win_end if win_end > win_start else pos
            if win_start < count:
                if next_index is None:
                    next_index = items[win_start].index
                pages += 1
        win_end = pos
    return next_index, pages


def _scan_backward(
    items: Sequence[ItemExtent], anchor_pos: int, container_size: float
) -> tuple[Hashable | None, int]:
    prev_index: Hashable | None = None
    pages = 0
    win_start = win_end = anchor_pos
    # Position -1 is the before-the-beginning sentinel.
    for pos in range(anchor_pos - 1, -2, -1):
        settled = pos < 0 or not _intersects(items[win_end], items[pos].start, container_size)
        if settled and win_start < win_end:
            win_end = win_start
            if prev_index is None:
                prev_index = items[win_start].index
            pages += 1
        win_start = pos
    return prev_index, pages
