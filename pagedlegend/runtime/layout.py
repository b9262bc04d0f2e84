"""Layout and clipping of legend items and page controls."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass

from pagedlegend.api.options import LegendOptions
from pagedlegend.api.paging import PAGE_TEXT, ItemExtent, PageInfo
from pagedlegend.runtime.paging import compute_page_info
from pagedlegend.runtime.transition import ContentTransition
from pagedlegend.ui_runtime.box_layout import box_layout
from pagedlegend.ui_runtime.geometry import Rect, orient_axis, rect_on_axes
from pagedlegend.ui_runtime.nodes import SceneGroup

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LayoutResult:
    """Outcome of one layout pass."""

    main_rect: Rect
    show_controls: bool
    container_size: float
    clip_rect: Rect | None
    page_info: PageInfo
    animated: bool


def item_extents_from_nodes(content: SceneGroup, axis: int) -> list[ItemExtent]:
    """Measure item spans along `axis` in content-group space, in display order."""
    extents: list[ItemExtent] = []
    for child in content:
        rect = child.placed_rect()
        start = rect.origin(axis)
        extents.append(ItemExtent(index=child.data_index, start=start, end=start + rect.extent(axis)))
    return extents


def layout_content_and_controls(
    *,
    content: SceneGroup,
    container: SceneGroup,
    controls: SceneGroup,
    options: LegendOptions,
    max_size: tuple[float, float],
    anchor_index: Hashable | None,
    is_first_render: bool,
    transition: ContentTransition,
    transition_seconds: float,
) -> LayoutResult:
    """Flow items and controls, decide on paging, clip overflow and move content.

    `content` lives inside `container`; `controls` is laid out independently.
    Control nodes are never removed: when paging is not needed they are kept as
    invisible, silent placeholders.
    """
    axis = orient_axis(options.orient)
    cross = 1 - axis

    box_layout(options.orient, content, options.item_gap)
    # Buttons in the control cluster always flow horizontally.
    box_layout("horizontal", controls, options.page_button_item_gap)

    content_rect = content.bounding_rect()
    controls_rect = controls.bounding_rect()
    available = max_size[axis]
    show_controls = content_rect.extent(axis) > available

    content_pos = [-content_rect.x, -content_rect.y]
    # Keep the current offset so an in-flight transition continues from where it is.
    if not is_first_render:
        content_pos[axis] = content.position[axis]
    container_pos = [0.0, 0.0]
    controls_pos = [-controls_rect.x, -controls_rect.y]
    button_gap = options.resolved_page_button_gap

    if show_controls:
        if options.page_button_position == "end":
            controls_pos[axis] += available - controls_rect.extent(axis)
        else:
            container_pos[axis] += controls_rect.extent(axis) + button_gap

    controls_pos[cross] += content_rect.extent(cross) / 2 - controls_rect.extent(cross) / 2

    content.set_position(content_pos)
    container.set_position(container_pos)
    controls.set_position(controls_pos)

    main_cross = max(content_rect.extent(cross), controls_rect.extent(cross))
    main_rect = rect_on_axes(
        axis,
        primary_origin=0.0,
        primary_extent=available if show_controls else content_rect.extent(axis),
        cross_origin=min(0.0, controls_rect.origin(cross) + controls_pos[cross]),
        cross_extent=main_cross,
    )

    clip_rect: Rect | None = None
    container_size = available
    if show_controls:
        clip_rect = rect_on_axes(
            axis,
            primary_origin=0.0,
            primary_extent=max(available - controls_rect.extent(axis) - button_gap, 0.0),
            cross_origin=0.0,
            cross_extent=main_cross,
        )
        container_size = clip_rect.extent(axis)
    container.clip = clip_rect
    _set_controls_active(controls, show_controls)

    extents = item_extents_from_nodes(content, axis)
    if not show_controls:
        # Everything fits: the only page starts at the first item.
        anchor_index = extents[0].index if extents else None
    page_info = compute_page_info(
        extents,
        container_size,
        anchor_index,
        orient=options.orient,
        base_offset=content.position,
    )

    animated = show_controls and transition_seconds > 0.0
    if page_info.page_index is not None:
        if animated:
            transition.retarget(page_info.content_offset, transition_seconds)
        else:
            # Sliding while the controls disappear looks broken; snap instead.
            transition.jump(page_info.content_offset)

    logger.debug(
        "legend_layout show_controls=%s container_size=%.1f pages=%d page_index=%s",
        show_controls,
        container_size,
        page_info.page_count,
        page_info.page_index,
    )
    return LayoutResult(
        main_rect=main_rect,
        show_controls=show_controls,
        container_size=container_size,
        clip_rect=clip_rect,
        page_info=page_info,
        animated=animated,
    )


def _set_controls_active(controls: SceneGroup, active: bool) -> None:
    for child in controls:
        child.invisible = not active
        child.silent = not active or child.name == PAGE_TEXT
