"""
Test suite for path search.

Covers straight and bent trails, the fixed neighbour order, backtracking,
the no-revisit rule, determinism and non-mutation.
"""

import random

import pytest
from src.puzzle import Cell, Grid, find_path, is_valid_trail, render_grid, synthesize


class TestFindPath:
    """Test cases for find_path()."""

    def test_horizontal_word(self):
        grid = Grid.from_strings(["CAT", "XXX", "XXX"])
        assert find_path(grid, "CAT") == [(0, 0), (0, 1), (0, 2)]

    def test_diagonal_word(self):
        grid = Grid.from_strings(["DXX", "XOX", "XXG"])
        assert find_path(grid, "DOG") == [(0, 0), (1, 1), (2, 2)]

    def test_bent_trail(self):
        """Trails may turn at every step."""
        grid = Grid.from_strings(["CX", "AT"])
        assert find_path(grid, "CAT") == [(0, 0), (1, 0), (1, 1)]

    def test_reversed_word(self):
        """Trails may run right to left."""
        grid = Grid.from_strings(["TAC", "XXX", "XXX"])
        assert find_path(grid, "CAT") == [(0, 2), (0, 1), (0, 0)]

    def test_neighbor_order_is_fixed(self):
        """The cell below is tried before the cell to the right."""
        grid = Grid.from_strings(["AB", "BX"])
        assert find_path(grid, "AB") == [(0, 0), (1, 0)]

    def test_backtracks_from_dead_end(self):
        """A failed branch is undone before the next neighbour is tried."""
        grid = Grid.from_strings(["CAX", "AXT", "XXX"])
        assert find_path(grid, "CAT") == [(0, 0), (0, 1), (1, 2)]

    def test_cells_are_not_reused(self):
        grid = Grid.from_strings(["AB", "XX"])
        assert find_path(grid, "ABA") is None

    def test_cells_reused_across_start_cells(self):
        """A cell rejected from one start can still serve another."""
        grid = Grid.from_strings(["AAB", "XXX", "XXX"])
        assert find_path(grid, "AB") == [(0, 1), (0, 2)]

    def test_not_found(self):
        grid = Grid.from_strings(["CAT", "XXX", "XXX"])
        assert find_path(grid, "DOG") is None

    def test_word_longer_than_grid_cells(self):
        grid = Grid.from_strings(["AB", "CD"])
        assert find_path(grid, "ABCDA") is None

    def test_lower_case_word(self):
        grid = Grid.from_strings(["CAT", "XXX", "XXX"])
        assert find_path(grid, "cat") == [(0, 0), (0, 1), (0, 2)]

    def test_empty_word(self):
        grid = Grid.from_strings(["AB", "CD"])
        assert find_path(grid, "") == []

    def test_returns_cells(self):
        grid = Grid.from_strings(["CAT", "XXX", "XXX"])
        trail = find_path(grid, "CAT")
        assert all(isinstance(cell, Cell) for cell in trail)
        assert trail[2].row == 0 and trail[2].col == 2


class TestSearchProperties:
    """Property checks on generated grids."""

    @pytest.mark.parametrize("seed", range(10))
    def test_trails_are_valid(self, seed):
        grid = synthesize(5, ["CAT", "DOG", "SUN"], rng=random.Random(seed))
        for word in ["CAT", "DOG", "SUN"]:
            trail = find_path(grid, word)
            if trail is not None:
                assert len(trail) == len(word)
                assert is_valid_trail(grid, word, trail)

    @pytest.mark.parametrize("seed", range(5))
    def test_deterministic(self, seed):
        grid = synthesize(5, ["CAT", "DOG"], rng=random.Random(seed))
        assert find_path(grid, "CAT") == find_path(grid, "CAT")
        assert find_path(grid, "QQQQ") == find_path(grid, "QQQQ")

    def test_grid_not_mutated(self):
        grid = synthesize(5, ["CAT", "DOG"], rng=random.Random(9))
        before = grid.model_dump()
        find_path(grid, "CAT")
        find_path(grid, "ZZZZZZ")
        assert grid.model_dump() == before


class TestIsValidTrail:
    """Test cases for is_valid_trail()."""

    def setup_method(self):
        self.grid = Grid.from_strings(["CAT", "XOX", "DXG"])

    def test_valid(self):
        assert is_valid_trail(self.grid, "CAT", [(0, 0), (0, 1), (0, 2)]) is True

    def test_wrong_length(self):
        assert is_valid_trail(self.grid, "CAT", [(0, 0), (0, 1)]) is False

    def test_repeated_cell(self):
        assert is_valid_trail(self.grid, "CAC", [(0, 0), (0, 1), (0, 0)]) is False

    def test_not_adjacent(self):
        assert is_valid_trail(self.grid, "DOG", [(2, 0), (1, 1), (2, 2)]) is True
        assert is_valid_trail(self.grid, "DG", [(2, 0), (2, 2)]) is False

    def test_wrong_letter(self):
        assert is_valid_trail(self.grid, "COT", [(0, 0), (1, 1), (0, 2)]) is True
        assert is_valid_trail(self.grid, "CAG", [(0, 0), (0, 1), (0, 2)]) is False

    def test_out_of_bounds(self):
        assert is_valid_trail(self.grid, "TX", [(0, 2), (0, 3)]) is False


class TestRenderGrid:
    """Test cases for render_grid()."""

    def test_plain(self):
        grid = Grid.from_strings(["AB", "CD"])
        assert render_grid(grid) == " A  B\n C  D"

    def test_highlight(self):
        grid = Grid.from_strings(["AB", "CD"])
        assert render_grid(grid, highlight=[(0, 0), (1, 1)]) == "[A] B\n C [D]"
