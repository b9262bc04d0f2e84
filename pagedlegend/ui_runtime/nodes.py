"""Minimal retained node tree for legend items and page controls.

Nodes carry what layout and paging need (local bounds, position, clip) plus the
presentation flags the scroll controller toggles. Drawing them is the host
renderer's job.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass, field

from pagedlegend.ui_runtime.geometry import EMPTY_RECT, Rect


@dataclass(slots=True, eq=False)
class SceneNode:
    """Retained leaf node positioned inside its parent group."""

    name: str | None = None
    bounds: Rect = EMPTY_RECT
    x: float = 0.0
    y: float = 0.0
    invisible: bool = False
    silent: bool = False
    fill: str | None = None
    cursor: str = "default"
    text: str | None = None
    font: str | None = None
    path: str | None = None
    data_index: Hashable | None = None

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    def set_position(self, position: Sequence[float]) -> None:
        self.x = float(position[0])
        self.y = float(position[1])

    def bounding_rect(self) -> Rect:
        """Return local bounds, ignoring this node's own position."""
        return self.bounds

    def placed_rect(self) -> Rect:
        """Return bounds in parent space."""
        return self.bounding_rect().translated(self.x, self.y)


@dataclass(slots=True, eq=False)
class SceneGroup(SceneNode):
    """Retained container node with ordered children and optional clip."""

    children: list[SceneNode] = field(default_factory=list)
    clip: Rect | None = None

    def add(self, child: SceneNode) -> SceneNode:
        self.children.append(child)
        return child

    def remove_all(self) -> None:
        self.children.clear()

    def child_of_name(self, name: str) -> SceneNode | None:
        for child in self.children:
            if child.name == name:
                return child
        return None

    def __iter__(self) -> Iterator[SceneNode]:
        return iter(self.children)

    def bounding_rect(self) -> Rect:
        """Return union of children bounds in group space.

        The clip is not applied: overflowing content still reports its full extent.
        """
        rect: Rect | None = None
        for child in self.children:
            placed = child.placed_rect()
            rect = placed if rect is None else rect.union(placed)
        return rect if rect is not None else EMPTY_RECT
