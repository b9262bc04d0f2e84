"""Legend host: owns models, action queue and views, and drives passes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from pagedlegend.api.actions import create_action_dispatcher
from pagedlegend.api.events import LegendScrolled, create_event_bus
from pagedlegend.api.options import LegendOptions, resolve_legend_options
from pagedlegend.runtime.anchor_state import LegendModelRegistry, install_scroll_action
from pagedlegend.runtime.config import LegendRuntimeConfig, get_runtime_config
from pagedlegend.runtime.layout import LayoutResult
from pagedlegend.runtime.legend_view import LegendPiece, ScrollableLegendView, Viewport
from pagedlegend.runtime.logging import setup_legend_logging
from pagedlegend.runtime.time import FrameClock, TimeContext

logger = logging.getLogger(__name__)


class LegendHost:
    """Single-threaded coordinator for a set of scrollable legends.

    Clicks only queue scroll actions. `process_actions` applies them between
    passes and re-renders the legends whose anchor changed.
    """

    def __init__(
        self,
        *,
        viewport: Viewport,
        runtime_config: LegendRuntimeConfig | None = None,
        clock: FrameClock | None = None,
    ) -> None:
        self._config = runtime_config or get_runtime_config()
        setup_legend_logging(self._config.logging)
        self._viewport = viewport
        self._clock = clock or FrameClock(max_delta_seconds=self._config.max_frame_delta_seconds)
        self.event_bus = create_event_bus()
        self.registry = LegendModelRegistry(event_bus=self.event_bus)
        self.dispatcher = create_action_dispatcher()
        install_scroll_action(self.dispatcher, self.registry)
        self._views: dict[str, ScrollableLegendView] = {}
        self._pieces: dict[str, tuple[LegendPiece, ...]] = {}
        self._dirty: set[str] = set()
        self.event_bus.subscribe(LegendScrolled, self._on_scrolled)

    @property
    def viewport(self) -> Viewport:
        return self._viewport

    def add_legend(
        self,
        legend_id: str,
        pieces: Sequence[LegendPiece],
        options: LegendOptions | Mapping[str, object] | None = None,
        *,
        name: str | None = None,
    ) -> ScrollableLegendView:
        """Register a legend and create its view; it renders on the next pass."""
        if legend_id in self._views:
            raise ValueError(f"legend already registered: {legend_id!r}")
        resolved = options if isinstance(options, LegendOptions) else resolve_legend_options(options)
        self.registry.register(legend_id, resolved, name=name)
        view = ScrollableLegendView(legend_id, self.dispatcher, runtime_config=self._config)
        self._views[legend_id] = view
        self._pieces[legend_id] = tuple(pieces)
        self._dirty.add(legend_id)
        return view

    def view(self, legend_id: str) -> ScrollableLegendView:
        return self._views[legend_id]

    def set_pieces(self, legend_id: str, pieces: Sequence[LegendPiece]) -> None:
        self._pieces[legend_id] = tuple(pieces)
        self._dirty.add(legend_id)

    def resize(self, width: float, height: float) -> None:
        self._viewport = Viewport(width=width, height=height)
        self._dirty.update(self._views)

    def render(self, legend_id: str) -> LayoutResult:
        self._dirty.discard(legend_id)
        return self._views[legend_id].render(
            self.registry.get(legend_id),
            self.registry.anchor(legend_id),
            self._pieces[legend_id],
            self._viewport,
        )

    def render_dirty(self) -> dict[str, LayoutResult]:
        """Render every legend invalidated since its last pass."""
        pending = [legend_id for legend_id in self._views if legend_id in self._dirty]
        return {legend_id: self.render(legend_id) for legend_id in pending}

    def click(self, legend_id: str, control_name: str) -> bool:
        """Forward a control click; returns whether a scroll action was queued."""
        return self._views[legend_id].click(control_name)

    def process_actions(self) -> int:
        """Apply queued actions, then re-render affected legends."""
        applied = self.dispatcher.flush()
        if applied:
            self.render_dirty()
        return len(applied)

    def tick(self, delta_seconds: float) -> bool:
        """Advance all content transitions; return whether any is still running."""
        running = False
        for view in self._views.values():
            running = view.tick(delta_seconds) or running
        return running

    def advance_frame(self, frame_index: int) -> TimeContext:
        """Read the frame clock and advance transitions by its bounded delta."""
        context = self._clock.next(frame_index)
        self.tick(context.delta_seconds)
        return context

    def _on_scrolled(self, event: LegendScrolled) -> None:
        logger.debug(
            "legend_scrolled legend_id=%s index=%r revision=%d",
            event.legend_id,
            event.scroll_data_index,
            event.revision,
        )
        self._dirty.add(event.legend_id)
