"""Drag-selection tracking over a word-search grid."""

from __future__ import annotations

from sciquest.core.puzzle_generator import WordGrid


def is_adjacent(first: int, second: int, size: int) -> bool:
    """True when two cell indices are Chebyshev distance 1 apart."""
    first_row, first_col = divmod(first, size)
    second_row, second_col = divmod(second, size)
    return max(abs(first_row - second_row), abs(first_col - second_col)) == 1


class SelectionTracker:
    """Records one drag gesture at a time and derives the candidate answer.

    Any 8-neighbour step is accepted, so a selection may bend (zig-zag) instead
    of following a straight line through the grid.
    """

    def __init__(self, grid: WordGrid) -> None:
        self._grid = grid
        self._selection: list[int] = []
        self._dragging: bool = False
        self._candidate: str = ""

    @property
    def selection(self) -> list[int]:
        return list(self._selection)

    @property
    def candidate(self) -> str:
        return self._candidate

    @property
    def is_dragging(self) -> bool:
        return self._dragging

    def selected_word(self) -> str:
        return "".join(self._grid.letter_at(index) for index in self._selection)

    def on_cell_down(self, index: int) -> None:
        self._check_index(index)
        self._dragging = True
        self._selection = [index]
        self._candidate = ""

    def on_cell_enter(self, index: int) -> bool:
        """Extend the selection; returns whether the cell was accepted."""
        if not self._dragging or not 0 <= index < self._cell_count():
            return False
        if index in self._selection:
            return False
        if not is_adjacent(self._selection[-1], index, self._grid.size):
            return False
        self._selection.append(index)
        return True

    def on_drag_end(self) -> str | None:
        """Commit the selected letters; returns the new candidate, or None without a drag."""
        if not self._dragging:
            return None
        self._dragging = False
        self._candidate = self.selected_word()
        return self._candidate

    def reset(self) -> None:
        self._selection = []
        self._dragging = False
        self._candidate = ""

    def _cell_count(self) -> int:
        return self._grid.size * self._grid.size

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._cell_count():
            raise IndexError(f"Cell index {index} out of range")
