from __future__ import annotations

import pytest

from pagedlegend.api.options import LegendOptions
from pagedlegend.api.paging import PAGE_NEXT, PAGE_PREV, PAGE_TEXT
from pagedlegend.runtime.layout import item_extents_from_nodes, layout_content_and_controls
from pagedlegend.runtime.transition import ContentTransition
from pagedlegend.ui_runtime.geometry import Rect
from pagedlegend.ui_runtime.nodes import SceneGroup, SceneNode


def _scene(
    item_sizes: list[float], *, item_cross: float = 14.0, vertical: bool = False
) -> tuple[SceneGroup, SceneGroup, SceneGroup]:
    content = SceneGroup(name="content")
    for index, size in enumerate(item_sizes):
        bounds = Rect(0, 0, item_cross, size) if vertical else Rect(0, 0, size, item_cross)
        content.add(SceneNode(bounds=bounds, data_index=index))
    container = SceneGroup(name="container", children=[content])
    controls = SceneGroup(name="controls")
    controls.add(SceneNode(name=PAGE_PREV, bounds=Rect(-5, -5, 10, 10)))
    controls.add(SceneNode(name=PAGE_TEXT, bounds=Rect(-10, -4, 20, 8), silent=True))
    controls.add(SceneNode(name=PAGE_NEXT, bounds=Rect(-5, -5, 10, 10)))
    return content, container, controls


def _layout(
    content: SceneGroup,
    container: SceneGroup,
    controls: SceneGroup,
    options: LegendOptions,
    *,
    max_size: tuple[float, float],
    anchor_index: object = 0,
    is_first_render: bool = True,
    transition_seconds: float = 0.0,
    transition: ContentTransition | None = None,
):
    return layout_content_and_controls(
        content=content,
        container=container,
        controls=controls,
        options=options,
        max_size=max_size,
        anchor_index=anchor_index,
        is_first_render=is_first_render,
        transition=transition or ContentTransition(content),
        transition_seconds=transition_seconds,
    )


def test_content_that_fits_hides_controls_without_removing_them() -> None:
    content, container, controls = _scene([20, 20, 20])
    options = LegendOptions(orient="horizontal", item_gap=5)

    result = _layout(content, container, controls, options, max_size=(200, 50), anchor_index=2)

    assert result.show_controls is False
    assert result.clip_rect is None
    assert container.clip is None
    assert result.container_size == 200
    assert [child.name for child in controls] == [PAGE_PREV, PAGE_TEXT, PAGE_NEXT]
    assert all(child.invisible and child.silent for child in controls)
    # Without paging the only page starts at the first item.
    assert result.page_info.page_index == 0
    assert result.page_info.page_count == 1
    assert content.position == (0.0, 0.0)
    assert result.main_rect.w == 70


def test_overflow_shows_controls_at_end_and_clips_container() -> None:
    content, container, controls = _scene([20, 20, 20, 20, 20])
    options = LegendOptions(orient="horizontal", item_gap=0, page_button_item_gap=5, page_button_gap=4)

    result = _layout(content, container, controls, options, max_size=(60, 50))

    assert result.show_controls is True
    # Cluster is 10 + 5 + 20 + 5 + 10 = 50 wide, so 60 - 50 - 4 remain for items.
    assert result.clip_rect == Rect(0, 0, 6, 14)
    assert container.clip == result.clip_rect
    assert result.container_size == 6
    # Flow already puts the cluster origin at 0, so it ends flush with the 60 wide box.
    assert controls.x == pytest.approx(60 - 50)
    assert container.position == (0.0, 0.0)
    assert result.main_rect.w == 60
    assert not any(child.invisible for child in controls)
    assert controls.child_of_name(PAGE_TEXT).silent is True
    assert controls.child_of_name(PAGE_PREV).silent is False
    assert result.page_info.page_count == 5


def test_start_position_shifts_container_past_the_cluster() -> None:
    content, container, controls = _scene([20, 20, 20, 20, 20])
    options = LegendOptions(
        orient="horizontal", item_gap=0, page_button_item_gap=5, page_button_position="start"
    )

    result = _layout(content, container, controls, options, max_size=(90, 50))

    # Gap between cluster and items falls back to item_gap.
    assert container.x == 50
    assert controls.x == 0
    assert result.container_size == 40
    assert result.page_info.next_index == 2


def test_content_exactly_filling_the_space_does_not_page() -> None:
    content, container, controls = _scene([20, 20, 20, 20, 20])
    options = LegendOptions(orient="horizontal", item_gap=0)

    result = _layout(content, container, controls, options, max_size=(100, 50))

    assert result.show_controls is False


def test_controls_are_centred_on_content_cross_axis() -> None:
    content, container, controls = _scene([20, 20, 20, 20, 20], item_cross=30)
    options = LegendOptions(orient="horizontal", item_gap=0, page_button_item_gap=5)

    result = _layout(content, container, controls, options, max_size=(60, 50))

    # Cluster cross extent is 10 (-5..5): shifted by 5 to normalise then 10 to centre.
    assert controls.y == pytest.approx(15)
    assert result.main_rect.h == 30
    assert result.main_rect.y == 0


def test_vertical_layout_uses_height_as_primary_axis() -> None:
    content, container, controls = _scene([14, 14, 14, 14], item_cross=40, vertical=True)
    options = LegendOptions(orient="vertical", item_gap=6, page_button_item_gap=5)

    result = _layout(content, container, controls, options, max_size=(100, 40), anchor_index=1)

    assert [child.y for child in content] == [0, 20, 40, 60]
    assert result.show_controls is True
    assert result.main_rect.h == 40
    # Buttons still flow horizontally, so the 50 wide cluster sets the cross extent.
    assert result.clip_rect.w == 50
    assert result.clip_rect.h == pytest.approx(40 - 10 - 6)
    # Cross-axis flow leaves the icons centred on y=0, so the -5 top edge is normalised here.
    assert controls.y == pytest.approx(5 + 40 - 10)
    assert result.page_info.content_offset[1] == -20
    assert content.y == -20


def test_page_offset_is_animated_only_while_controls_are_shown() -> None:
    content, container, controls = _scene([20, 20, 20, 20, 20])
    options = LegendOptions(orient="horizontal", item_gap=0, page_button_item_gap=5)
    transition = ContentTransition(content)

    shown = _layout(
        content, container, controls, options,
        max_size=(80, 50), anchor_index=2, transition=transition, transition_seconds=0.8,
    )
    assert shown.animated is True
    assert transition.active is True
    assert transition.target == (-40.0, 0.0)
    assert content.x == 0.0

    transition.advance(0.4)
    midway = content.x
    assert -40.0 < midway < 0.0

    fits = _layout(
        content, container, controls, options,
        max_size=(500, 50), anchor_index=2, transition=transition,
        transition_seconds=0.8, is_first_render=False,
    )
    assert fits.animated is False
    assert transition.active is False
    assert content.x == 0.0


def test_non_first_render_keeps_in_flight_position_as_start() -> None:
    content, container, controls = _scene([20, 20, 20, 20, 20])
    options = LegendOptions(orient="horizontal", item_gap=0, page_button_item_gap=5)
    transition = ContentTransition(content)
    content.set_position((-13.0, 0.0))

    _layout(
        content, container, controls, options,
        max_size=(80, 50), anchor_index=0, transition=transition,
        transition_seconds=1.0, is_first_render=False,
    )

    assert content.x == -13.0
    assert transition.target == (0.0, 0.0)
    transition.advance(1.0)
    assert content.x == pytest.approx(0.0)


def test_empty_content_does_not_move() -> None:
    content, container, controls = _scene([])
    options = LegendOptions(orient="horizontal")
    content.set_position((3.0, 3.0))

    result = _layout(content, container, controls, options, max_size=(80, 50), is_first_render=False)

    assert result.page_info.page_count == 0
    assert result.page_info.page_index is None
    assert result.show_controls is False
    assert content.x == 3.0


def test_item_extents_follow_node_positions() -> None:
    content = SceneGroup()
    content.add(SceneNode(bounds=Rect(2, 0, 10, 5), x=0, y=0, data_index="a"))
    content.add(SceneNode(bounds=Rect(0, 0, 8, 5), x=20, y=7, data_index="b"))

    horizontal = item_extents_from_nodes(content, 0)
    vertical = item_extents_from_nodes(content, 1)

    assert [(e.index, e.start, e.end) for e in horizontal] == [("a", 2, 12), ("b", 20, 28)]
    assert [(e.start, e.end) for e in vertical] == [(0, 5), (7, 12)]
