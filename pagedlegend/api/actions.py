"""Public action-dispatch API contracts."""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Protocol

LEGEND_SCROLL_ACTION = "legendScroll"


class Action(Protocol):
    """Anything carrying a registered action type."""

    @property
    def type(self) -> str: ...


@dataclass(frozen=True, slots=True)
class LegendScrollAction:
    """Request to move a legend's anchor to `scroll_data_index`.

    `legend_id`, `legend_name` and `legend_index` form the query selecting which
    legends the request applies to. With no query fields it applies to all.
    """

    scroll_data_index: Hashable | None
    legend_id: str | None = None
    legend_name: str | None = None
    legend_index: int | None = None
    type: str = LEGEND_SCROLL_ACTION


ActionHandler = Callable[[Action], bool]


class ActionDispatcher(Protocol):
    """Queue actions and apply them between render passes."""

    def register(self, action_type: str, handler: ActionHandler) -> None:
        """Register handler for an action type."""

    def dispatch(self, action: Action) -> bool:
        """Queue action. Return False when no handler is registered."""

    def flush(self) -> tuple[Action, ...]:
        """Apply queued actions and return the ones whose handler reported a change."""

    @property
    def pending_count(self) -> int:
        """Return number of queued actions."""


def create_action_dispatcher() -> ActionDispatcher:
    """Create default dispatcher implementation."""
    from pagedlegend.runtime.action_dispatch import RuntimeActionDispatcher

    return RuntimeActionDispatcher()
