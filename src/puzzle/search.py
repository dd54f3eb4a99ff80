"""
Path search over a letter grid.

A trail is a sequence of distinct cells, each 8-adjacent to the next,
spelling a word. The search is an exhaustive depth-first walk with
backtracking: start cells are tried in row-major order and neighbours
in the fixed order of NEIGHBOR_OFFSETS, so the same grid and word
always give the same trail.
"""

from typing import List, Optional, Sequence, Tuple

from .models import Cell, Grid


# (row delta, col delta), tried in this order from every cell
NEIGHBOR_OFFSETS: List[Tuple[int, int]] = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0), (1, 0),
    (-1, 1), (0, 1), (1, 1),
]


def find_path(grid: Grid, word: str) -> Optional[List[Cell]]:
    """
    Find one trail spelling ``word`` in the grid.

    Returns the ordered cells of the first trail found, or None.
    The grid is never modified; visited state lives only for the call.
    """
    word = word.upper()
    size = grid.size
    rows = grid.rows

    if not word:
        return []

    visited = [[False] * size for _ in range(size)]
    path: List[Cell] = []

    def dfs(row: int, col: int, idx: int) -> bool:
        if idx == len(word):
            return True
        if not (0 <= row < size and 0 <= col < size):
            return False
        if visited[row][col] or rows[row][col] != word[idx]:
            return False

        visited[row][col] = True
        path.append(Cell(row, col))

        for dr, dc in NEIGHBOR_OFFSETS:
            if dfs(row + dr, col + dc, idx + 1):
                return True

        visited[row][col] = False
        path.pop()
        return False

    for row in range(size):
        for col in range(size):
            if dfs(row, col, 0):
                return list(path)

    return None


def is_adjacent(a: Tuple[int, int], b: Tuple[int, int]) -> bool:
    """True if two distinct cells touch horizontally, vertically or diagonally."""
    return a != b and abs(a[0] - b[0]) <= 1 and abs(a[1] - b[1]) <= 1


def is_valid_trail(grid: Grid, word: str, trail: Sequence[Tuple[int, int]]) -> bool:
    """Check that ``trail`` is a non-revisiting adjacent path spelling ``word``."""
    word = word.upper()
    if len(trail) != len(word):
        return False
    if len(set(map(tuple, trail))) != len(trail):
        return False

    for i, cell in enumerate(trail):
        if not grid.in_bounds(cell[0], cell[1]):
            return False
        if grid.letter_at(cell) != word[i]:
            return False
        if i > 0 and not is_adjacent(trail[i - 1], cell):
            return False

    return True
