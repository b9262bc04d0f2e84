from __future__ import annotations

from collections.abc import Sequence

import pytest

from pagedlegend.api.logging import LegendLoggingConfig
from pagedlegend.api.paging import ItemExtent
from pagedlegend.runtime.config import LegendRuntimeConfig
from pagedlegend.runtime.legend_view import LegendPiece


def make_items(sizes: Sequence[float], *, gap: float = 0.0, start: float = 0.0) -> list[ItemExtent]:
    """Lay out items back to back; item `i` carries index `i`."""
    items: list[ItemExtent] = []
    cursor = start
    for index, size in enumerate(sizes):
        items.append(ItemExtent(index=index, start=cursor, end=cursor + size))
        cursor += size + gap
    return items


def make_pieces(count: int, *, width: float = 40.0, height: float = 14.0) -> list[LegendPiece]:
    return [
        LegendPiece(data_index=index, width=width, height=height, label=f"piece-{index}")
        for index in range(count)
    ]


def make_runtime_config(
    *,
    animation_enabled: bool = True,
    animation_duration_ms: float | None = None,
    logging_config: LegendLoggingConfig | None = None,
) -> LegendRuntimeConfig:
    return LegendRuntimeConfig(
        animation_enabled=animation_enabled,
        animation_duration_ms=animation_duration_ms,
        max_frame_delta_seconds=0.25,
        logging=logging_config or LegendLoggingConfig(),
    )


@pytest.fixture
def runtime_config() -> LegendRuntimeConfig:
    return make_runtime_config()
