"""Public legend API contracts."""

from pagedlegend.api.actions import (
    LEGEND_SCROLL_ACTION,
    Action,
    ActionDispatcher,
    ActionHandler,
    LegendScrollAction,
    create_action_dispatcher,
)
from pagedlegend.api.events import (
    EventBus,
    LegendScrolled,
    Subscription,
    create_event_bus,
)
from pagedlegend.api.logging import LegendLoggingConfig
from pagedlegend.api.options import (
    DEFAULT_LEGEND_OPTIONS,
    PAGE_BUTTON_POSITIONS,
    LegendOptions,
    PageIcons,
    PageTextStyle,
    resolve_legend_options,
)
from pagedlegend.api.paging import (
    EMPTY_PAGE_INFO,
    PAGE_NEXT,
    PAGE_PREV,
    PAGE_TEXT,
    ItemExtent,
    PageInfo,
)

__all__ = [
    "Action",
    "ActionDispatcher",
    "ActionHandler",
    "DEFAULT_LEGEND_OPTIONS",
    "EMPTY_PAGE_INFO",
    "EventBus",
    "ItemExtent",
    "LEGEND_SCROLL_ACTION",
    "LegendLoggingConfig",
    "LegendOptions",
    "LegendScrollAction",
    "LegendScrolled",
    "PAGE_BUTTON_POSITIONS",
    "PAGE_NEXT",
    "PAGE_PREV",
    "PAGE_TEXT",
    "PageIcons",
    "PageInfo",
    "PageTextStyle",
    "Subscription",
    "create_action_dispatcher",
    "create_event_bus",
    "resolve_legend_options",
]
