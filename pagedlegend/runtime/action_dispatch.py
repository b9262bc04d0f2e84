"""Queued action dispatch between legend render passes."""

from __future__ import annotations

import logging
from collections import deque

from pagedlegend.api.actions import Action, ActionHandler

logger = logging.getLogger(__name__)


class RuntimeActionDispatcher:
    """Resolve actions by type; queue them until the next `flush`.

    Handlers never run inside `dispatch`, so a render pass that issues a request
    cannot observe its own model change.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, ActionHandler] = {}
        self._queue: deque[Action] = deque()

    @property
    def pending_count(self) -> int:
        return len(self._queue)

    def register(self, action_type: str, handler: ActionHandler) -> None:
        """Register handler for an action type."""
        if not action_type:
            raise ValueError("action_type must not be empty")
        if action_type in self._handlers:
            raise ValueError(f"action already registered: {action_type!r}")
        self._handlers[action_type] = handler

    def dispatch(self, action: Action) -> bool:
        """Queue action. Return False when no handler exists."""
        if action.type not in self._handlers:
            logger.debug("legend_action_unhandled type=%s", action.type)
            return False
        self._queue.append(action)
        return True

    def flush(self) -> tuple[Action, ...]:
        """Apply queued actions in order; return those that changed the model."""
        applied: list[Action] = []
        while self._queue:
            action = self._queue.popleft()
            if self._handlers[action.type](action):
                applied.append(action)
        if applied:
            logger.debug("legend_actions_applied count=%d", len(applied))
        return tuple(applied)


ActionDispatcher = RuntimeActionDispatcher
