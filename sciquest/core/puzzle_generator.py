"""Word-search grid generation for the board-game variant.

A grid always embeds the cleaned answer along one of the eight straight
directions when it fits. Placement is deliberately biased: directions are
shuffled and the first one with any feasible start cell wins, then a start is
drawn uniformly among that direction's starts. This is not uniform over all
(direction, start) pairs.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
import re

from sciquest.constants.quiz_constants import DEFAULT_GRID_SIZE, GRID_ALPHABET

logger = logging.getLogger(__name__)

_NON_LETTER = re.compile(r"[^A-Z]")

DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (-1, 1),
)


@dataclass(slots=True, frozen=True)
class Placement:
    """Where the answer was written: start cell plus a unit step."""

    word: str
    row: int
    col: int
    d_row: int
    d_col: int

    def cells(self) -> list[tuple[int, int]]:
        return [
            (self.row + step * self.d_row, self.col + step * self.d_col)
            for step in range(len(self.word))
        ]


@dataclass(slots=True, frozen=True)
class WordGrid:
    """Fully populated square letter grid."""

    size: int
    rows: tuple[tuple[str, ...], ...]
    placement: Placement | None

    @property
    def is_degenerate(self) -> bool:
        return self.placement is None

    def letter_at(self, index: int) -> str:
        row, col = divmod(index, self.size)
        return self.rows[row][col]

    def flat(self) -> list[str]:
        return [letter for row in self.rows for letter in row]

    def read(self, row: int, col: int, d_row: int, d_col: int, length: int) -> str:
        """Read ``length`` letters from a start cell along a direction."""
        return "".join(self.rows[row + i * d_row][col + i * d_col] for i in range(length))


def clean_answer(answer: str) -> str:
    return _NON_LETTER.sub("", answer.upper())


def generate_grid(
    answer: str,
    size: int = DEFAULT_GRID_SIZE,
    rng: random.Random | None = None,
) -> WordGrid:
    """Build a ``size`` x ``size`` grid hiding ``answer``.

    Args:
        answer: Expected answer text. Only its letters are placed.
        size: Grid edge length.
        rng: Random source; pass a seeded ``random.Random`` for reproducible grids.

    Returns:
        A ``WordGrid``. When the cleaned answer is empty or cannot fit, the grid
        is pure filler and ``placement`` is ``None``.
    """
    if size <= 0:
        raise ValueError("Grid size must be a positive integer.")
    rng = rng or random.Random()
    word = clean_answer(answer)

    if not word or len(word) > size * size:
        logger.info("Answer %r cannot be placed on a %dx%d grid; using filler grid", answer, size, size)
        return _freeze(size, [[_random_letter(rng) for _ in range(size)] for _ in range(size)], None)

    cells: list[list[str | None]] = [[None] * size for _ in range(size)]
    placement = _place_word(word, size, rng)
    if placement is None:
        placement = _place_in_row(word, size, rng)

    if placement is not None:
        for (row, col), letter in zip(placement.cells(), placement.word):
            cells[row][col] = letter
    else:
        logger.warning("No placement found for %r on a %dx%d grid", word, size, size)

    filled = [[letter or _random_letter(rng) for letter in row] for row in cells]
    return _freeze(size, filled, placement)


def _place_word(word: str, size: int, rng: random.Random) -> Placement | None:
    directions = list(DIRECTIONS)
    # Fisher-Yates, drawn from the injected source.
    for i in range(len(directions) - 1, 0, -1):
        j = rng.randrange(i + 1)
        directions[i], directions[j] = directions[j], directions[i]

    span = len(word) - 1
    for d_row, d_col in directions:
        starts = [
            (row, col)
            for row in range(size)
            for col in range(size)
            if 0 <= row + span * d_row < size and 0 <= col + span * d_col < size
        ]
        if starts:
            row, col = starts[rng.randrange(len(starts))]
            return Placement(word=word, row=row, col=col, d_row=d_row, d_col=d_col)
    return None


def _place_in_row(word: str, size: int, rng: random.Random) -> Placement | None:
    if len(word) > size:
        return None
    row = rng.randrange(size)
    col = rng.randrange(size - len(word) + 1)
    return Placement(word=word, row=row, col=col, d_row=0, d_col=1)


def _random_letter(rng: random.Random) -> str:
    return GRID_ALPHABET[rng.randrange(len(GRID_ALPHABET))]


def _freeze(size: int, cells: list[list[str]], placement: Placement | None) -> WordGrid:
    return WordGrid(size=size, rows=tuple(tuple(row) for row in cells), placement=placement)
