"""Legend-owned UI runtime helpers."""

from pagedlegend.ui_runtime.box_layout import (
    box_layout,
    get_layout_rect,
    normalize_padding,
    parse_percent,
)
from pagedlegend.ui_runtime.geometry import (
    EMPTY_RECT,
    ORIENTS,
    Orient,
    Rect,
    orient_axis,
    rect_on_axes,
)
from pagedlegend.ui_runtime.nodes import SceneGroup, SceneNode
from pagedlegend.ui_runtime.page_text import (
    PAGE_TEXT_PLACEHOLDER,
    PageFormatter,
    estimate_text_bounds,
    format_page_text,
)

__all__ = [
    "EMPTY_RECT",
    "ORIENTS",
    "Orient",
    "PAGE_TEXT_PLACEHOLDER",
    "PageFormatter",
    "Rect",
    "SceneGroup",
    "SceneNode",
    "box_layout",
    "estimate_text_bounds",
    "format_page_text",
    "get_layout_rect",
    "normalize_padding",
    "orient_axis",
    "parse_percent",
    "rect_on_axes",
]
