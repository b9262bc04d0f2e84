"""Scrollable piecewise legend view: one render pass per call."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from pagedlegend.api.actions import ActionDispatcher
from pagedlegend.api.options import LegendOptions
from pagedlegend.api.paging import PAGE_NEXT, PAGE_PREV, PAGE_TEXT
from pagedlegend.runtime.anchor_state import AnchorSnapshot, LegendModel
from pagedlegend.runtime.config import LegendRuntimeConfig, get_runtime_config, transition_seconds
from pagedlegend.runtime.layout import LayoutResult, layout_content_and_controls
from pagedlegend.runtime.scroll_controller import ScrollController
from pagedlegend.runtime.transition import ContentTransition
from pagedlegend.ui_runtime.box_layout import get_layout_rect
from pagedlegend.ui_runtime.geometry import Rect
from pagedlegend.ui_runtime.nodes import SceneGroup, SceneNode
from pagedlegend.ui_runtime.page_text import PAGE_TEXT_PLACEHOLDER, TextMeasure, estimate_text_bounds

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LegendPiece:
    """Measured legend entry supplied by the scene graph."""

    data_index: Hashable | None
    width: float
    height: float
    label: str = ""


@dataclass(frozen=True, slots=True)
class Viewport:
    width: float
    height: float


class ScrollableLegendView:
    """Retained node tree plus the paging state of one legend instance.

    Tree: ``group -> (container -> content -> items, controls -> buttons/text)``.
    The container and control groups are created once and reused so toggling
    overflow never resets the content position.
    """

    def __init__(
        self,
        legend_id: str,
        dispatcher: ActionDispatcher,
        *,
        runtime_config: LegendRuntimeConfig | None = None,
        measure_text: TextMeasure = estimate_text_bounds,
    ) -> None:
        self.legend_id = legend_id
        self.group = SceneGroup(name=f"legend:{legend_id}")
        self.container = SceneGroup(name="container")
        self.content = SceneGroup(name="content")
        self.controls = SceneGroup(name="controls")
        self.container.add(self.content)
        self.group.add(self.container)
        self.group.add(self.controls)
        self.transition = ContentTransition(self.content)
        self.controller = ScrollController(legend_id, dispatcher, self.controls)
        self._runtime_config = runtime_config
        self._measure_text = measure_text
        self._is_first_render = True
        self._last_layout: LayoutResult | None = None

    @property
    def last_layout(self) -> LayoutResult | None:
        return self._last_layout

    def render(
        self,
        model: LegendModel,
        anchor: AnchorSnapshot,
        pieces: Sequence[LegendPiece],
        viewport: Viewport,
    ) -> LayoutResult:
        """Run one full pass: layout, paging, control refresh, placement.

        `anchor` is read once by the caller before the pass; scroll requests made
        during the pass only take effect on a later one.
        """
        is_first_render = self._is_first_render
        self._is_first_render = False
        options = model.options
        anchor_index = anchor.scroll_data_index
        config = self._runtime_config or get_runtime_config()

        self._build_items(pieces, options)
        self._sync_controls(options)

        max_rect = get_layout_rect(
            options.box_position(), viewport.width, viewport.height, options.padding
        )
        result = layout_content_and_controls(
            content=self.content,
            container=self.container,
            controls=self.controls,
            options=options,
            max_size=(max_rect.w, max_rect.h),
            anchor_index=anchor_index,
            is_first_render=is_first_render,
            transition=self.transition,
            transition_seconds=transition_seconds(options, config),
        )
        self.controller.refresh(result.page_info, options)
        self._place(result.main_rect, options, viewport)
        self._last_layout = result
        logger.debug(
            "legend_rendered legend_id=%s items=%d anchor=%r revision=%d page=%s/%d",
            self.legend_id,
            len(pieces),
            anchor_index,
            anchor.revision,
            result.page_info.page_index,
            result.page_info.page_count,
        )
        return result

    def tick(self, delta_seconds: float) -> bool:
        """Advance the content transition; return whether it is still running."""
        return self.transition.advance(delta_seconds)

    def click(self, control_name: str) -> bool:
        """Route a pointer click on a control node; silent or hidden nodes ignore it."""
        node = self.controls.child_of_name(control_name)
        if node is None or node.silent or node.invisible:
            return False
        return self.controller.trigger(control_name)

    def _build_items(self, pieces: Sequence[LegendPiece], options: LegendOptions) -> None:
        self.content.remove_all()
        silent = not options.selected_mode
        for piece in pieces:
            self.content.add(
                SceneNode(
                    name=piece.label or None,
                    bounds=Rect(0.0, 0.0, piece.width, piece.height),
                    text=piece.label or None,
                    data_index=piece.data_index,
                    silent=silent,
                    cursor="default" if silent else "pointer",
                )
            )

    def _sync_controls(self, options: LegendOptions) -> None:
        icon_w, icon_h = options.page_icon_size_pair
        icon_bounds = Rect(-icon_w / 2, -icon_h / 2, icon_w, icon_h)
        prev_path, next_path = options.page_icons.for_orient(options.orient)
        text_style = options.page_text_style
        if not self.controls.children:
            self.controls.add(SceneNode(name=PAGE_PREV))
            self.controls.add(SceneNode(name=PAGE_TEXT, text=PAGE_TEXT_PLACEHOLDER, silent=True))
            self.controls.add(SceneNode(name=PAGE_NEXT))
        for name, path in ((PAGE_PREV, prev_path), (PAGE_NEXT, next_path)):
            icon = self.controls.child_of_name(name)
            icon.bounds = icon_bounds
            icon.path = path
        text = self.controls.child_of_name(PAGE_TEXT)
        # Measure the placeholder so the cluster size does not depend on the page numbers.
        text.bounds = self._measure_text(PAGE_TEXT_PLACEHOLDER, text_style.font_size)
        text.fill = text_style.color
        text.font = text_style.font

    def _place(self, main_rect: Rect, options: LegendOptions, viewport: Viewport) -> None:
        layout_rect = get_layout_rect(
            options.box_position(width=main_rect.w, height=main_rect.h),
            viewport.width,
            viewport.height,
            options.padding,
        )
        self.group.set_position((layout_rect.x - main_rect.x, layout_rect.y - main_rect.y))
