"""Public legend option contracts and defaults."""

from __future__ import annotations

import logging
from collections.abc import Collection, Hashable, Mapping
from dataclasses import dataclass, field, fields, replace

from pagedlegend.ui_runtime.box_layout import Padding, PositionValue
from pagedlegend.ui_runtime.geometry import ORIENTS, Orient
from pagedlegend.ui_runtime.page_text import PageFormatter

logger = logging.getLogger(__name__)

PAGE_BUTTON_POSITIONS: tuple[str, ...] = ("start", "end")
_BOX_KEYS: tuple[str, ...] = ("left", "top", "right", "bottom", "width", "height")


@dataclass(frozen=True, slots=True)
class PageTextStyle:
    """Resolved page-indicator text style."""

    color: str = "#333"
    font_size: float = 12.0
    font_family: str = "sans-serif"
    font_weight: str = "normal"

    @property
    def font(self) -> str:
        return f"{self.font_weight} {self.font_size:g}px {self.font_family}"


@dataclass(frozen=True, slots=True)
class PageIcons:
    """SVG path glyphs for (previous, next) controls per orientation."""

    horizontal: tuple[str, str] = ("M0,0L12,-10L12,10z", "M0,0L-12,-10L-12,10z")
    vertical: tuple[str, str] = ("M0,0L20,0L10,-20z", "M0,0L20,0L10,20z")

    def for_orient(self, orient: str) -> tuple[str, str]:
        return self.vertical if orient == "vertical" else self.horizontal


@dataclass(frozen=True, slots=True)
class LegendOptions:
    """Scrollable piecewise legend options with library defaults."""

    orient: Orient = "vertical"
    item_gap: float = 10.0
    scroll_data_index: Hashable | None = 0
    page_button_item_gap: float = 5.0
    page_button_gap: float | None = None
    page_button_position: str = "end"
    page_formatter: PageFormatter | None = "{current}/{total}"
    page_icons: PageIcons = field(default_factory=PageIcons)
    page_icon_color: str = "#2f4554"
    page_icon_inactive_color: str = "#aaa"
    page_icon_size: float | tuple[float, float] = 15.0
    page_text_style: PageTextStyle = field(default_factory=PageTextStyle)
    selected_mode: bool = True
    animation: bool = True
    animation_duration_update: float = 800.0
    left: PositionValue = 0
    top: PositionValue = None
    right: PositionValue = None
    bottom: PositionValue = 0
    width: PositionValue = None
    height: PositionValue = None
    padding: Padding = 5.0

    @property
    def resolved_page_button_gap(self) -> float:
        """Gap between controls and items; falls back to `item_gap`."""
        return self.item_gap if self.page_button_gap is None else self.page_button_gap

    @property
    def page_icon_size_pair(self) -> tuple[float, float]:
        size = self.page_icon_size
        if isinstance(size, (int, float)):
            return (float(size), float(size))
        return (float(size[0]), float(size[1]))

    def box_position(self, **overrides: PositionValue) -> dict[str, PositionValue]:
        """Return box-positioning params, with explicit overrides applied."""
        position = {key: getattr(self, key) for key in _BOX_KEYS}
        position.update(overrides)
        return position


DEFAULT_LEGEND_OPTIONS = LegendOptions()
_FIELD_NAMES = frozenset(item.name for item in fields(LegendOptions))
_TEXT_STYLE_FIELDS = frozenset(item.name for item in fields(PageTextStyle))


def resolve_legend_options(
    overrides: Mapping[str, object] | None = None,
    *,
    base: LegendOptions = DEFAULT_LEGEND_OPTIONS,
) -> LegendOptions:
    """Merge user overrides over `base`, falling back on unrecognized values."""
    if not overrides:
        return base
    changes: dict[str, object] = {}
    for key, value in overrides.items():
        if key not in _FIELD_NAMES:
            logger.warning("legend_option_ignored key=%s", key)
            continue
        changes[key] = value

    orient = changes.get("orient")
    if orient is not None and orient not in ORIENTS:
        logger.warning("legend_option_fallback key=orient value=%r", orient)
        changes["orient"] = base.orient
    position = changes.get("page_button_position")
    if position is not None and position not in PAGE_BUTTON_POSITIONS:
        logger.warning("legend_option_fallback key=page_button_position value=%r", position)
        changes["page_button_position"] = base.page_button_position

    icons = changes.get("page_icons")
    if isinstance(icons, Mapping):
        changes["page_icons"] = replace(
            base.page_icons,
            **{k: tuple(v) for k, v in _known_keys(icons, ORIENTS, "page_icons").items()},
        )
    text_style = changes.get("page_text_style")
    if isinstance(text_style, Mapping):
        changes["page_text_style"] = replace(
            base.page_text_style, **_known_keys(text_style, _TEXT_STYLE_FIELDS, "page_text_style")
        )
    icon_size = changes.get("page_icon_size")
    if isinstance(icon_size, (list, tuple)):
        if len(icon_size) < 2:
            logger.warning("legend_option_fallback key=page_icon_size value=%r", icon_size)
            changes["page_icon_size"] = base.page_icon_size
        else:
            changes["page_icon_size"] = (float(icon_size[0]), float(icon_size[1]))
    return replace(base, **changes)


def _known_keys(values: Mapping[str, object], allowed: Collection[str], prefix: str) -> dict[str, object]:
    known: dict[str, object] = {}
    for key, value in values.items():
        if key not in allowed:
            logger.warning("legend_option_ignored key=%s.%s", prefix, key)
            continue
        known[key] = value
    return known
