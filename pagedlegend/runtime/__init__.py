"""Legend runtime modules."""

from pagedlegend.runtime.action_dispatch import ActionDispatcher
from pagedlegend.runtime.anchor_state import (
    SCROLL_PIECEWISE,
    AnchorSnapshot,
    LegendModel,
    LegendModelRegistry,
    apply_scroll_action,
    install_scroll_action,
)
from pagedlegend.runtime.config import (
    LegendRuntimeConfig,
    get_runtime_config,
    load_runtime_config,
    transition_seconds,
)
from pagedlegend.runtime.events import EventBus
from pagedlegend.runtime.host import LegendHost
from pagedlegend.runtime.layout import LayoutResult, item_extents_from_nodes, layout_content_and_controls
from pagedlegend.runtime.legend_view import LegendPiece, ScrollableLegendView, Viewport
from pagedlegend.runtime.logging import configure_legend_logging, setup_legend_logging
from pagedlegend.runtime.paging import compute_page_info, resolve_anchor_position
from pagedlegend.runtime.scroll_controller import ScrollController
from pagedlegend.runtime.time import FrameClock, TimeContext
from pagedlegend.runtime.transition import ContentTransition, cubic_out

__all__ = [
    "ActionDispatcher",
    "AnchorSnapshot",
    "ContentTransition",
    "EventBus",
    "FrameClock",
    "LayoutResult",
    "LegendHost",
    "LegendModel",
    "LegendModelRegistry",
    "LegendPiece",
    "LegendRuntimeConfig",
    "SCROLL_PIECEWISE",
    "ScrollController",
    "ScrollableLegendView",
    "TimeContext",
    "Viewport",
    "apply_scroll_action",
    "compute_page_info",
    "configure_legend_logging",
    "cubic_out",
    "get_runtime_config",
    "install_scroll_action",
    "item_extents_from_nodes",
    "layout_content_and_controls",
    "load_runtime_config",
    "resolve_anchor_position",
    "setup_legend_logging",
    "transition_seconds",
]
