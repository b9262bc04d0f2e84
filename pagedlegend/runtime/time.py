"""Frame timing used to drive content transitions."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from time import monotonic


@dataclass(frozen=True, slots=True)
class TimeContext:
    """Per-frame timing context."""

    frame_index: int
    delta_seconds: float
    elapsed_seconds: float


class FrameClock:
    """Monotonic frame clock with bounded frame deltas."""

    def __init__(
        self,
        *,
        time_source: Callable[[], float] | None = None,
        max_delta_seconds: float = 0.25,
    ) -> None:
        if max_delta_seconds <= 0.0:
            raise ValueError("max_delta_seconds must be > 0")
        self._time_source = time_source or monotonic
        self._max_delta_seconds = max_delta_seconds
        self._last_seconds: float | None = None
        self._elapsed_seconds = 0.0

    def next(self, frame_index: int) -> TimeContext:
        """Advance the clock and return the next frame context."""
        now = self._time_source()
        if self._last_seconds is None:
            delta = 0.0
        else:
            delta = min(max(0.0, now - self._last_seconds), self._max_delta_seconds)
        self._last_seconds = now
        self._elapsed_seconds += delta
        return TimeContext(
            frame_index=frame_index,
            delta_seconds=delta,
            elapsed_seconds=self._elapsed_seconds,
        )
