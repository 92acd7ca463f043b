import random

from sciquest.core.puzzle_generator import WordGrid
from sciquest.core.selection_tracker import SelectionTracker, is_adjacent


def _grid(size=10):
    rows = tuple(
        tuple(chr(ord("A") + (row * size + col) % 26) for col in range(size))
        for row in range(size)
    )
    return WordGrid(size=size, rows=rows, placement=None)


class TestAdjacency:
    def test_eight_neighbours(self):
        centre = 55
        neighbours = [44, 45, 46, 54, 56, 64, 65, 66]
        assert all(is_adjacent(centre, other, 10) for other in neighbours)

    def test_same_cell_and_far_cells_are_not_adjacent(self):
        assert not is_adjacent(55, 55, 10)
        assert not is_adjacent(55, 57, 10)

    def test_row_wrap_is_not_adjacent(self):
        # End of row 0 and start of row 1 are consecutive indices only.
        assert not is_adjacent(9, 10, 10)


class TestSelectionTracker:
    def test_drag_builds_candidate_in_selection_order(self):
        grid = _grid()
        tracker = SelectionTracker(grid)
        tracker.on_cell_down(0)
        assert tracker.on_cell_enter(1)
        assert tracker.on_cell_enter(2)
        assert tracker.candidate == ""
        assert tracker.on_drag_end() == "ABC"
        assert tracker.candidate == "ABC"

    def test_non_adjacent_and_repeated_cells_are_ignored(self):
        tracker = SelectionTracker(_grid())
        tracker.on_cell_down(0)
        assert not tracker.on_cell_enter(5)
        assert tracker.on_cell_enter(11)
        assert not tracker.on_cell_enter(0)
        assert not tracker.on_cell_enter(11)
        assert tracker.selection == [0, 11]

    def test_zig_zag_paths_are_accepted(self):
        tracker = SelectionTracker(_grid())
        tracker.on_cell_down(0)
        assert tracker.on_cell_enter(11)
        assert tracker.on_cell_enter(2)
        assert tracker.on_cell_enter(13)
        assert tracker.selection == [0, 11, 2, 13]

    def test_enter_without_drag_is_noop(self):
        tracker = SelectionTracker(_grid())
        assert not tracker.on_cell_enter(3)
        assert tracker.selection == []

    def test_drag_end_is_idempotent(self):
        tracker = SelectionTracker(_grid())
        assert tracker.on_drag_end() is None
        tracker.on_cell_down(4)
        assert tracker.on_drag_end() == "E"
        assert tracker.on_drag_end() is None
        assert tracker.candidate == "E"

    def test_new_drag_clears_previous_candidate(self):
        tracker = SelectionTracker(_grid())
        tracker.on_cell_down(0)
        tracker.on_cell_enter(1)
        tracker.on_drag_end()
        tracker.on_cell_down(20)
        assert tracker.candidate == ""
        assert tracker.selection == [20]

    def test_random_gestures_keep_selection_invariants(self):
        rng = random.Random(2024)
        tracker = SelectionTracker(_grid())
        for _ in range(200):
            tracker.on_cell_down(rng.randrange(100))
            for _ in range(30):
                tracker.on_cell_enter(rng.randrange(100))
            selection = tracker.selection
            assert len(selection) == len(set(selection))
            assert all(is_adjacent(a, b, 10) for a, b in zip(selection, selection[1:]))
            tracker.on_drag_end()
