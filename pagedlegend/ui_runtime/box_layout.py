"""Box flow and viewport box-positioning helpers."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from pagedlegend.ui_runtime.geometry import Orient, Rect, orient_axis
from pagedlegend.ui_runtime.nodes import SceneGroup

PositionValue = float | int | str | None
Padding = float | int | Sequence[float]

_KEYWORD_PERCENT = {
    "left": 0.0,
    "top": 0.0,
    "center": 0.5,
    "middle": 0.5,
    "right": 1.0,
    "bottom": 1.0,
}


def box_layout(orient: Orient | str, group: SceneGroup, gap: float) -> None:
    """Flow children along the orientation axis, separated by `gap`.

    Each child's leading edge lands on the flow cursor. Children keep a zero
    cross-axis position so centred nodes stay centred on the flow line.
    """
    axis = orient_axis(orient)
    cursor = 0.0
    for child in group:
        rect = child.bounding_rect()
        position = [0.0, 0.0]
        position[axis] = cursor - rect.origin(axis)
        child.set_position(position)
        cursor += rect.extent(axis) + gap


def normalize_padding(padding: Padding) -> tuple[float, float, float, float]:
    """Expand CSS-like padding into (top, right, bottom, left)."""
    if isinstance(padding, (int, float)):
        value = float(padding)
        return (value, value, value, value)
    values = [float(item) for item in padding]
    if len(values) == 1:
        return (values[0], values[0], values[0], values[0])
    if len(values) == 2:
        return (values[0], values[1], values[0], values[1])
    if len(values) == 3:
        return (values[0], values[1], values[2], values[1])
    if len(values) == 4:
        return (values[0], values[1], values[2], values[3])
    raise ValueError(f"padding must have 1 to 4 values, got {len(values)}")


def parse_percent(value: PositionValue, total: float) -> float:
    """Resolve a number, percent string or keyword into an absolute length.

    Returns NaN for missing or unparseable values.
    """
    if value is None:
        return math.nan
    if isinstance(value, (int, float)):
        return float(value)
    text = value.strip().lower()
    if text in _KEYWORD_PERCENT:
        return _KEYWORD_PERCENT[text] * total
    try:
        if text.endswith("%"):
            return float(text[:-1]) / 100.0 * total
        return float(text)
    except ValueError:
        return math.nan


def get_layout_rect(
    position: Mapping[str, PositionValue],
    container_width: float,
    container_height: float,
    padding: Padding = 0.0,
) -> Rect:
    """Resolve a box inside a container from left/top/right/bottom/width/height.

    The returned rectangle excludes padding. Missing width/height fill the space
    left by the opposite edges.
    """
    pad_top, pad_right, pad_bottom, pad_left = normalize_padding(padding)
    horizontal_margin = pad_left + pad_right
    vertical_margin = pad_top + pad_bottom

    left = parse_percent(position.get("left"), container_width)
    top = parse_percent(position.get("top"), container_height)
    right = parse_percent(position.get("right"), container_width)
    bottom = parse_percent(position.get("bottom"), container_height)
    width = parse_percent(position.get("width"), container_width)
    height = parse_percent(position.get("height"), container_height)

    if math.isnan(width):
        width = container_width - right - horizontal_margin - left
    if math.isnan(height):
        height = container_height - bottom - vertical_margin - top

    if math.isnan(left):
        left = container_width - right - width - horizontal_margin
    if math.isnan(top):
        top = container_height - bottom - height - vertical_margin

    horizontal_keyword = position.get("left") or position.get("right")
    if horizontal_keyword == "center":
        left = container_width / 2 - width / 2 - pad_left
    elif horizontal_keyword == "right":
        left = container_width - width - horizontal_margin

    vertical_keyword = position.get("top") or position.get("bottom")
    if vertical_keyword in ("middle", "center"):
        top = container_height / 2 - height / 2 - pad_top
    elif vertical_keyword == "bottom":
        top = container_height - height - vertical_margin

    left = 0.0 if math.isnan(left) else left
    top = 0.0 if math.isnan(top) else top

    if math.isnan(width):
        width = container_width - horizontal_margin - left - (0.0 if math.isnan(right) else right)
    if math.isnan(height):
        height = container_height - vertical_margin - top - (0.0 if math.isnan(bottom) else bottom)

    return Rect(left + pad_left, top + pad_top, width, height)
