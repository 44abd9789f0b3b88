import pytest

from histsearch.history_list import PREFIX_LENGTH, ListState, index_marker, items_bounds


def test_list_state_select():
    state = ListState()
    state.select(7)
    assert state.selected == 7
    assert state.offset == 0


def test_prefix_length_fits_marker_and_longest_times():
    marker = index_marker(0, 0, 0)
    assert len(marker) == 3
    assert len(marker + "123ms 59s ago") == PREFIX_LENGTH


def test_bounds_at_top():
    assert items_bounds(100, 0, 0, 20) == (0, 20)


@pytest.mark.parametrize(
    "selected,offset,height",
    [(50, 0, 20), (5, 30, 20), (0, 0, 20), (15, 0, 20), (3, 0, 5), (99, 90, 8)],
)
def test_bounds_invariants(selected, offset, height):
    start, end = items_bounds(100, selected, offset, height)
    assert end - start == height
    assert start <= selected < end


def test_bounds_scroll_back_to_selection():
    start, end = items_bounds(100, 5, 30, 20)
    assert start == 5
    assert end == 25


def test_bounds_keep_context_below_selection():
    start, end = items_bounds(100, 50, 0, 20)
    assert end - 50 == 10
    assert end - start == 20


def test_bounds_clamp_offset_to_history():
    start, end = items_bounds(3, 0, 10, 5)
    assert (start, end) == (0, 5)


def test_index_marker_selected():
    assert index_marker(0, 0, 0) == " > "


def test_index_marker_numbers():
    assert index_marker(3, 0, 0) == " 3 "
    assert index_marker(1, 8, 0) == " 9 "


def test_index_marker_blank():
    assert index_marker(15, 0, 0) == "   "
    assert index_marker(0, 0, 5) == "   "