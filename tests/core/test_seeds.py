"""Tests for the seeding functions."""

import numpy as np
import pytest

from lifegrid.core.cell import Cell
from lifegrid.core.grid import Grid
from lifegrid.core.seeds import random_seed, reference_seed


class TestReferenceSeed:
    """Test cases for the modulo-based reference seed."""

    @pytest.mark.parametrize("index", [0, 4, 5, 7, 8, 10, 14, 15, 16, 20, 21, 28, 35])
    def test_alive_indices(self, index):
        """Test indices divisible by 7, by 5, or by 4 but not 3 come alive."""
        cell = Cell()
        reference_seed(index, cell)
        assert cell.alive is True

    @pytest.mark.parametrize("index", [1, 2, 3, 6, 9, 11, 12, 13, 24, 36])
    def test_dead_indices(self, index):
        """Test other indices are left dead."""
        cell = Cell()
        reference_seed(index, cell)
        assert cell.alive is False

    def test_leaves_non_matching_cells_untouched(self):
        """Test the seed never kills a cell."""
        cell = Cell(True)
        reference_seed(1, cell)
        assert cell.alive is True

    def test_seed_grid(self):
        """Test seeding a grid through modify."""
        grid = Grid(4, 3)
        grid.modify(reference_seed)

        assert grid.to_list() == [
            [1, 0, 0, 0],
            [1, 1, 0, 1],
            [1, 0, 1, 0],
        ]


class TestRandomSeed:
    """Test cases for the random seed."""

    def test_extreme_probabilities(self):
        """Test probability 0 and 1 give empty and full grids."""
        grid = Grid(10, 10)

        grid.modify(random_seed(0.0))
        assert grid.population == 0

        grid.modify(random_seed(1.0))
        assert grid.population == 100

    def test_intermediate_probability(self):
        """Test roughly half the cells come alive at 0.5."""
        grid = Grid(20, 20)
        grid.modify(random_seed(0.5, np.random.default_rng(1)))
        assert 120 <= grid.population <= 280

    def test_reproducible(self):
        """Test the same generator seed gives the same grid."""
        first = Grid(8, 8)
        second = Grid(8, 8)

        first.modify(random_seed(0.3, np.random.default_rng(42)))
        second.modify(random_seed(0.3, np.random.default_rng(42)))

        assert first == second

    def test_invalid_probability(self):
        """Test probabilities outside [0, 1] are rejected."""
        with pytest.raises(ValueError):
            random_seed(-0.1)

        with pytest.raises(ValueError):
            random_seed(1.5)
