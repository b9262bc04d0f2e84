"""Scrollable, paginated chart legend runtime and API boundary modules."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pagedlegend.runtime.host import LegendHost
    from pagedlegend.runtime.legend_view import Viewport


def create_legend_host(*, width: float, height: float) -> "LegendHost":
    """Create a legend host for a chart viewport of the given size."""
    from pagedlegend.runtime.host import LegendHost
    from pagedlegend.runtime.legend_view import Viewport

    return LegendHost(viewport=Viewport(width=width, height=height))


__all__ = ["create_legend_host"]
