"""Prev/next page triggers and control-state refresh."""

from __future__ import annotations

import logging
from collections.abc import Hashable

from pagedlegend.api.actions import ActionDispatcher, LegendScrollAction
from pagedlegend.api.options import LegendOptions
from pagedlegend.api.paging import EMPTY_PAGE_INFO, PAGE_NEXT, PAGE_PREV, PAGE_TEXT, PageInfo
from pagedlegend.ui_runtime.nodes import SceneGroup
from pagedlegend.ui_runtime.page_text import format_page_text

logger = logging.getLogger(__name__)


class ScrollController:
    """Turns page requests into scroll actions for one legend."""

    def __init__(self, legend_id: str, dispatcher: ActionDispatcher, controls: SceneGroup) -> None:
        self._legend_id = legend_id
        self._dispatcher = dispatcher
        self._controls = controls
        self._page_info = EMPTY_PAGE_INFO

    @property
    def page_info(self) -> PageInfo:
        """Page info of the most recent layout pass."""
        return self._page_info

    def page_back(self) -> bool:
        return self._request(self._page_info.prev_index)

    def page_forward(self) -> bool:
        return self._request(self._page_info.next_index)

    def trigger(self, control_name: str) -> bool:
        """Route a control activation by node name."""
        if control_name == PAGE_PREV:
            return self.page_back()
        if control_name == PAGE_NEXT:
            return self.page_forward()
        return False

    def refresh(self, page_info: PageInfo, options: LegendOptions) -> None:
        """Store `page_info` and restyle buttons and indicator text from it."""
        self._page_info = page_info
        for name, can_jump in ((PAGE_PREV, page_info.has_prev), (PAGE_NEXT, page_info.has_next)):
            icon = self._controls.child_of_name(name)
            if icon is None:
                continue
            icon.fill = options.page_icon_color if can_jump else options.page_icon_inactive_color
            icon.cursor = "pointer" if can_jump else "default"

        text = self._controls.child_of_name(PAGE_TEXT)
        if text is None:
            return
        if options.page_formatter is None:
            text.invisible = True
            return
        text.text = format_page_text(options.page_formatter, page_info.page_index, page_info.page_count)

    def _request(self, target: Hashable | None) -> bool:
        if target is None:
            logger.debug("legend_page_unavailable legend_id=%s", self._legend_id)
            return False
        return self._dispatcher.dispatch(
            LegendScrollAction(scroll_data_index=target, legend_id=self._legend_id)
        )
