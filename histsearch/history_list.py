"""Scrolling logic for the interactive list of history results."""

from __future__ import annotations

from dataclasses import dataclass

# The longest line prefix: index marker, duration and relative time.
PREFIX_LENGTH = len(" > 123ms 59s ago")

# Encodes " > ", " 1 " .. " 9 " and "   " as overlapping three-character slices.
_INDEX_SLICES = " > 1 2 3 4 5 6 7 8 9   "


@dataclass
class ListState:
    """Scroll offset, selected row and number of visible rows."""

    offset: int = 0
    selected: int = 0
    max_entries: int = 0

    def select(self, index: int) -> None:
        self.selected = index


def items_bounds(history_len: int, selected: int, offset: int, height: int) -> tuple[int, int]:
    """Return the ``(start, end)`` slice of results visible in ``height`` rows.

    The view scrolls so that a few rows of context stay beyond the selection.
    """
    offset = min(offset, max(history_len - 1, 0))
    max_scroll_space = min(height, 10)
    if offset + height < selected + max_scroll_space:
        end = selected + max_scroll_space
        return end - height, end
    if selected < offset:
        return selected, selected + height
    return offset, offset + height


def index_marker(row: int, offset: int, selected: int) -> str:
    """The three-character marker shown before a row.

    The selected row gets ``" > "``, the next nine their distance, the rest blanks.
    """
    distance = row + offset - selected
    if distance < 0:
        distance = 10
    i = min(distance, 10) * 2
    return _INDEX_SLICES[i : i + 3]