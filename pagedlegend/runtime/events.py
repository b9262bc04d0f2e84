"""Lightweight event bus for legend runtime coordination."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pagedlegend.api.events import Subscription

TEvent = TypeVar("TEvent")
EventHandler = Callable[[Any], None]

logger = logging.getLogger(__name__)


class RuntimeEventBus:
    """Synchronous in-process pub/sub with type-based subscriptions."""

    def __init__(self) -> None:
        self._next_id = 1
        self._subscriptions: dict[int, tuple[type[object], EventHandler]] = {}

    @property
    def subscription_count(self) -> int:
        return len(self._subscriptions)

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for an event type and its subclasses."""
        sub_id = self._next_id
        self._next_id += 1
        self._subscriptions[sub_id] = (event_type, handler)
        return Subscription(sub_id)

    def unsubscribe(self, subscription: Subscription) -> None:
        """Remove a subscription if present."""
        self._subscriptions.pop(subscription.id, None)

    def publish(self, event: object) -> int:
        """Publish one event and return number of invoked handlers."""
        invoked = 0
        # Snapshot so handlers may (un)subscribe while the event is delivered.
        for subscribed_type, handler in tuple(self._subscriptions.values()):
            if isinstance(event, subscribed_type):
                handler(event)
                invoked += 1
        logger.debug("legend_event_published type=%s handlers=%d", type(event).__name__, invoked)
        return invoked


EventBus = RuntimeEventBus
