"""Animated content-offset transitions."""

from __future__ import annotations

import numpy as np

from pagedlegend.ui_runtime.nodes import SceneNode


def cubic_out(progress: float) -> float:
    """Cubic ease-out over [0, 1]."""
    k = progress - 1.0
    return k * k * k + 1.0


class ContentTransition:
    """Interpolates a node's position towards a target offset.

    A new `retarget` starts from the node's current position and supersedes any
    transition still in flight.
    """

    def __init__(self, node: SceneNode) -> None:
        self._node = node
        self._start = np.zeros(2, dtype=np.float64)
        self._target = np.zeros(2, dtype=np.float64)
        self._duration_seconds = 0.0
        self._elapsed_seconds = 0.0
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def target(self) -> tuple[float, float]:
        return (float(self._target[0]), float(self._target[1]))

    def jump(self, target: tuple[float, float]) -> None:
        """Apply `target` immediately and cancel any running transition."""
        self._target = np.asarray(target, dtype=np.float64)
        self._active = False
        self._node.set_position(self._target)

    def retarget(self, target: tuple[float, float], duration_seconds: float) -> None:
        """Start moving towards `target` over `duration_seconds`."""
        if duration_seconds < 0.0:
            raise ValueError("duration_seconds must be >= 0")
        current = np.asarray(self._node.position, dtype=np.float64)
        goal = np.asarray(target, dtype=np.float64)
        if duration_seconds == 0.0 or np.allclose(current, goal):
            self.jump(target)
            return
        self._start = current
        self._target = goal
        self._duration_seconds = duration_seconds
        self._elapsed_seconds = 0.0
        self._active = True

    def advance(self, delta_seconds: float) -> bool:
        """Advance time; return whether the transition is still running."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        if not self._active:
            return False
        self._elapsed_seconds += delta_seconds
        progress = min(1.0, self._elapsed_seconds / self._duration_seconds)
        position = self._start + (self._target - self._start) * cubic_out(progress)
        self._node.set_position(position)
        if progress >= 1.0:
            self._active = False
        return self._active
