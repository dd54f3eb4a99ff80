"""Data models for the word-search grid."""

from typing import Dict, List, Literal, NamedTuple, Sequence, Tuple
from pydantic import BaseModel, ConfigDict, field_validator


DEFAULT_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

Direction = Literal['H', 'V', 'D']

# (row delta, col delta) for each placement direction
DIRECTION_VECTORS: Dict[str, Tuple[int, int]] = {
    'H': (0, 1),
    'V': (1, 0),
    'D': (1, 1),
}


class Cell(NamedTuple):
    """A (row, col) coordinate in the grid."""
    row: int
    col: int


class Placement(NamedTuple):
    """Where a word was written during synthesis."""
    word: str
    row: int
    col: int
    direction: str

    def cells(self) -> List[Cell]:
        """All cells the word occupies, in letter order."""
        dr, dc = DIRECTION_VECTORS[self.direction]
        return [Cell(self.row + dr * i, self.col + dc * i) for i in range(len(self.word))]


class Grid(BaseModel):
    """
    A fully populated N x N letter matrix.

    Frozen once built: synthesis works on a scratch list of lists and
    hands back a Grid, which search and rendering only ever read.
    """

    model_config = ConfigDict(frozen=True)

    rows: Tuple[Tuple[str, ...], ...]

    @field_validator('rows')
    @classmethod
    def _check_square(cls, rows: Tuple[Tuple[str, ...], ...]) -> Tuple[Tuple[str, ...], ...]:
        size = len(rows)
        for r, row in enumerate(rows):
            if len(row) != size:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {size}")
            for c, letter in enumerate(row):
                if len(letter) != 1:
                    raise ValueError(f"Cell ({r}, {c}) must hold exactly one letter, got {letter!r}")
        return rows

    @classmethod
    def from_strings(cls, rows: Sequence[str]) -> "Grid":
        """Build a grid from row strings, e.g. ``["CAT", "XYZ", "QRS"]``."""
        return cls(rows=tuple(tuple(row.upper()) for row in rows))

    @property
    def size(self) -> int:
        return len(self.rows)

    def letter_at(self, cell: Tuple[int, int]) -> str:
        return self.rows[cell[0]][cell[1]]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def letters(self) -> List[str]:
        """All letters in row-major order."""
        return [letter for row in self.rows for letter in row]
