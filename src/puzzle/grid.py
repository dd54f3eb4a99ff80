"""Grid building and rendering utilities."""

from typing import Iterable, List, Optional, Set, Tuple

from .models import Grid


EMPTY = ''


def empty_grid(size: int) -> List[List[str]]:
    """Scratch grid of empty markers used while words are being placed."""
    if size < 0:
        raise ValueError(f"Grid size must be non-negative, got {size}")
    return [[EMPTY for _ in range(size)] for _ in range(size)]


def freeze(rows: List[List[str]]) -> Grid:
    """Turn a completed scratch grid into an immutable Grid."""
    return Grid(rows=tuple(tuple(row) for row in rows))


def render_grid(grid: Grid, highlight: Optional[Iterable[Tuple[int, int]]] = None) -> str:
    """
    Render the grid to a string, one row per line.

    Cells in ``highlight`` are wrapped in brackets so a hint trail
    stands out in a terminal.
    """
    marked: Set[Tuple[int, int]] = {tuple(cell) for cell in highlight} if highlight else set()

    lines = []
    for r, row in enumerate(grid.rows):
        parts = []
        for c, letter in enumerate(row):
            parts.append(f"[{letter}]" if (r, c) in marked else f" {letter} ")
        lines.append(''.join(parts).rstrip())

    return '\n'.join(lines)
