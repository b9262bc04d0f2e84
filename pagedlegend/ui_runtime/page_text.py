"""Page-indicator text formatting and rough text measurement."""

from __future__ import annotations

from collections.abc import Callable, Mapping

from pagedlegend.ui_runtime.geometry import Rect

PageFormatterFn = Callable[[Mapping[str, int | None]], str]
PageFormatter = str | PageFormatterFn
TextMeasure = Callable[[str, float], Rect]

PAGE_TEXT_PLACEHOLDER = "xx/xx"


def format_page_text(formatter: PageFormatter, page_index: int | None, page_count: int) -> str:
    """Render the page indicator from a `{current}`/`{total}` template or a callable."""
    current = page_index + 1 if page_index is not None else None
    if isinstance(formatter, str):
        return formatter.replace("{current}", "" if current is None else str(current)).replace(
            "{total}", str(page_count)
        )
    return formatter({"current": current, "total": page_count})


def estimate_text_bounds(text: str, font_size: float) -> Rect:
    """Approximate centre/middle-aligned text bounds without a font backend."""
    width = len(text) * font_size * 0.6
    height = font_size * 1.2
    return Rect(-width / 2, -height / 2, width, height)
