from __future__ import annotations

from pagedlegend.api.paging import EMPTY_PAGE_INFO, ItemExtent
from pagedlegend.runtime.paging import compute_page_info, resolve_anchor_position
from tests.pagedlegend.conftest import make_items


def test_five_equal_items_split_into_three_pages() -> None:
    items = make_items([10, 10, 10, 10, 10])

    info = compute_page_info(items, 25, 0)

    assert info.content_offset == (0.0, 0.0)
    assert info.page_count == 3
    assert info.page_index == 0
    assert info.prev_index is None
    assert info.next_index == 2


def test_middle_anchor_has_both_neighbours() -> None:
    items = make_items([10, 10, 10, 10, 10])

    info = compute_page_info(items, 25, 2)

    assert info.content_offset == (-20.0, 0.0)
    assert info.page_count == 3
    assert info.page_index == 1
    assert info.prev_index == 0
    assert info.next_index == 4


def test_last_anchor_pages_back_to_partially_cut_item() -> None:
    items = make_items([10, 10, 10, 10, 10])

    info = compute_page_info(items, 25, 4)

    assert info.page_count == 3
    assert info.page_index == 2
    assert info.prev_index == 2
    assert info.next_index is None


def test_empty_sequence_is_degenerate() -> None:
    info = compute_page_info([], 100, 3)

    assert info == EMPTY_PAGE_INFO
    assert info.page_count == 0
    assert info.page_index is None
    assert info.prev_index is None
    assert info.next_index is None


def test_single_oversized_item_is_one_page() -> None:
    info = compute_page_info([ItemExtent(index="only", start=0, end=80)], 25, "only")

    assert info.page_count == 1
    assert info.page_index == 0
    assert info.prev_index is None
    assert info.next_index is None


def test_oversized_items_still_page_one_by_one() -> None:
    items = make_items([30, 30, 30])

    first = compute_page_info(items, 25, 0)
    last = compute_page_info(items, 25, 2)

    assert (first.page_count, first.next_index, first.prev_index) == (3, 1, None)
    assert (last.page_count, last.page_index, last.prev_index, last.next_index) == (3, 2, 1, None)


def test_stale_anchor_falls_back_to_first_remaining_item() -> None:
    items = make_items([10, 10, 10, 10, 10])
    without_anchor = [item for item in items if item.index != 3]

    info = compute_page_info(without_anchor, 25, 3)

    assert info.page_index == 0
    assert info.prev_index is None
    assert info.content_offset == (0.0, 0.0)


def test_fallback_skips_items_without_index() -> None:
    items = [ItemExtent(index=None, start=0, end=5), *make_items([10, 10], start=5)]

    assert resolve_anchor_position(items, "missing") == 1
    info = compute_page_info(items, 100, "missing")
    assert info.content_offset == (-5.0, 0.0)


def test_items_without_any_index_yield_one_inert_page() -> None:
    items = [ItemExtent(index=None, start=0, end=50), ItemExtent(index=None, start=50, end=100)]

    info = compute_page_info(items, 25, 0, base_offset=(3.0, 4.0))

    assert info.page_count == 1
    assert info.page_index == 0
    assert info.content_offset == (3.0, 4.0)
    assert info.prev_index is None and info.next_index is None


def test_zero_and_negative_container_make_one_page_per_item() -> None:
    items = make_items([10, 10, 10, 10])

    assert compute_page_info(items, 0, 0).page_count == 4
    assert compute_page_info(items, -5, 0).page_count == 4


def test_vertical_orientation_offsets_y_and_keeps_cross_offset() -> None:
    items = make_items([10, 10, 10], start=2)

    info = compute_page_info(items, 15, 1, orient="vertical", base_offset=(7.0, 99.0))

    assert info.content_offset == (7.0, -12.0)


def test_last_item_of_a_window_opens_the_next_page() -> None:
    items = make_items([10, 10, 10, 10], gap=5)

    info = compute_page_info(items, 25, 0)

    # Window 0..25 reaches item 0 (0-10) and item 1 (15-25); item 2 starts at 30.
    assert info.next_index == 1
    assert info.page_count == 3


def test_indices_need_not_follow_display_order() -> None:
    items = [
        ItemExtent(index="c", start=0, end=10),
        ItemExtent(index="a", start=10, end=20),
        ItemExtent(index="b", start=20, end=30),
    ]

    info = compute_page_info(items, 15, "c")

    assert info.next_index == "a"
    assert info.page_count == 3


def test_first_anchor_never_has_prev_and_last_never_has_next() -> None:
    for sizes in ([5], [10, 40, 3, 8], [30, 30, 30], [1, 1, 1, 1, 1, 1]):
        items = make_items(sizes, gap=2)
        for size in (0, 4, 12, 35, 200):
            assert compute_page_info(items, size, items[0].index).prev_index is None
            assert compute_page_info(items, size, items[-1].index).next_index is None


def test_page_count_positive_for_non_empty_sequences() -> None:
    for sizes in ([5], [10, 40, 3, 8], [100, 1]):
        items = make_items(sizes)
        for anchor in range(len(sizes)):
            assert compute_page_info(items, 20, anchor).page_count >= 1


def test_calculation_is_idempotent() -> None:
    items = make_items([12, 7, 30, 4, 18], gap=3)

    assert compute_page_info(items, 20, 2) == compute_page_info(items, 20, 2)


def test_page_count_non_increasing_as_container_grows() -> None:
    items = make_items([12, 7, 30, 4, 18, 9, 9, 22], gap=3)

    counts = [compute_page_info(items, size, 0).page_count for size in range(0, 160, 5)]

    assert all(later <= earlier for earlier, later in zip(counts, counts[1:]))
    assert counts[-1] == 1
