"""Versioned ownership of legend models and their persisted anchor index."""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass, replace
from functools import partial

from pagedlegend.api.actions import (
    LEGEND_SCROLL_ACTION,
    ActionDispatcher,
    LegendScrollAction,
)
from pagedlegend.api.events import EventBus, LegendScrolled
from pagedlegend.api.options import LegendOptions

SCROLL_PIECEWISE = "scrollPiecewise"

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LegendModel:
    """One registered legend instance."""

    legend_id: str
    component_index: int
    options: LegendOptions
    name: str | None = None
    sub_type: str = SCROLL_PIECEWISE

    @property
    def scroll_data_index(self) -> Hashable | None:
        return self.options.scroll_data_index


@dataclass(frozen=True, slots=True)
class AnchorSnapshot:
    """Anchor value read once at the start of a render pass."""

    legend_id: str
    scroll_data_index: Hashable | None
    revision: int


class LegendModelRegistry:
    """Owns legend models; anchors change only through scroll actions."""

    def __init__(self, *, event_bus: EventBus | None = None) -> None:
        self._models: dict[str, LegendModel] = {}
        self._revision = 0
        self._event_bus = event_bus

    def register(
        self,
        legend_id: str,
        options: LegendOptions,
        *,
        name: str | None = None,
        sub_type: str = SCROLL_PIECEWISE,
    ) -> LegendModel:
        """Register a legend, or replace its options while keeping its position."""
        existing = self._models.get(legend_id)
        component_index = existing.component_index if existing is not None else len(self._models)
        model = LegendModel(
            legend_id=legend_id,
            component_index=component_index,
            options=options,
            name=name,
            sub_type=sub_type,
        )
        self._models[legend_id] = model
        self._revision += 1
        return model

    def get(self, legend_id: str) -> LegendModel:
        try:
            return self._models[legend_id]
        except KeyError:
            raise KeyError(f"unknown legend: {legend_id!r}") from None

    def models(self) -> tuple[LegendModel, ...]:
        return tuple(self._models.values())

    def anchor(self, legend_id: str) -> AnchorSnapshot:
        """Return the persisted anchor together with the registry revision."""
        return AnchorSnapshot(
            legend_id=legend_id,
            scroll_data_index=self.get(legend_id).scroll_data_index,
            revision=self._revision,
        )

    def query(
        self,
        *,
        legend_id: str | None = None,
        legend_name: str | None = None,
        legend_index: int | None = None,
        sub_type: str | None = SCROLL_PIECEWISE,
    ) -> list[LegendModel]:
        """Return models matching every given query field."""
        matched: list[LegendModel] = []
        for model in self._models.values():
            if sub_type is not None and model.sub_type != sub_type:
                continue
            if legend_id is not None and model.legend_id != legend_id:
                continue
            if legend_name is not None and model.name != legend_name:
                continue
            if legend_index is not None and model.component_index != legend_index:
                continue
            matched.append(model)
        return matched

    def set_scroll_data_index(self, legend_id: str, scroll_data_index: Hashable) -> LegendModel:
        model = self.get(legend_id)
        updated = replace(model, options=replace(model.options, scroll_data_index=scroll_data_index))
        self._models[legend_id] = updated
        self._revision += 1
        if self._event_bus is not None:
            self._event_bus.publish(
                LegendScrolled(
                    legend_id=legend_id,
                    scroll_data_index=scroll_data_index,
                    revision=self._revision,
                )
            )
        return updated


def apply_scroll_action(registry: LegendModelRegistry, action: LegendScrollAction) -> bool:
    """Write the requested anchor into every matching legend.

    Requests without a target index are ignored.
    """
    if action.scroll_data_index is None:
        return False
    matched = registry.query(
        legend_id=action.legend_id,
        legend_name=action.legend_name,
        legend_index=action.legend_index,
    )
    if not matched:
        logger.debug("legend_scroll_unmatched legend_id=%s", action.legend_id)
    for model in matched:
        registry.set_scroll_data_index(model.legend_id, action.scroll_data_index)
    return bool(matched)


def install_scroll_action(dispatcher: ActionDispatcher, registry: LegendModelRegistry) -> None:
    """Register the scroll action handler for `registry` on `dispatcher`."""
    dispatcher.register(LEGEND_SCROLL_ACTION, partial(apply_scroll_action, registry))
