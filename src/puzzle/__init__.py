"""Word-search grid synthesis and path search."""

from .models import Cell, Direction, DIRECTION_VECTORS, DEFAULT_ALPHABET, Grid, Placement
from .grid import empty_grid, freeze, render_grid
from .synthesis import synthesize, place_word, can_place, fill_empty, MAX_PLACEMENT_ATTEMPTS
from .search import find_path, is_valid_trail, is_adjacent, NEIGHBOR_OFFSETS

__all__ = [
    # Models
    "Cell",
    "Direction",
    "DIRECTION_VECTORS",
    "DEFAULT_ALPHABET",
    "Grid",
    "Placement",
    # Grid utilities
    "empty_grid",
    "freeze",
    "render_grid",
    # Synthesis
    "synthesize",
    "place_word",
    "can_place",
    "fill_empty",
    "MAX_PLACEMENT_ATTEMPTS",
    # Search
    "find_path",
    "is_valid_trail",
    "is_adjacent",
    "NEIGHBOR_OFFSETS",
]
