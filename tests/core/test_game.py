"""Tests for the GameOfLife class."""

import pytest

from lifegrid.core.game import GameOfLife
from lifegrid.core.grid import Grid


class TestGameOfLife:
    """Test cases for the GameOfLife class."""

    def test_initialization(self):
        """Test game initialization."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        assert game.grid is grid
        assert game.generation == 0
        assert game.population == 0
        assert game.population_history == [0]

    def test_still_life_block(self):
        """Test that a block pattern is stable (still life)."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        for row, col in [(4, 4), (4, 5), (5, 4), (5, 5)]:
            grid.set_alive(row, col)

        for _ in range(5):
            game.step()

        assert game.population == 4
        assert grid.is_alive(4, 4)
        assert grid.is_alive(4, 5)
        assert grid.is_alive(5, 4)
        assert grid.is_alive(5, 5)
        assert game.generation == 5

    def test_oscillator_blinker(self):
        """Test blinker oscillator (period 2)."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        grid.set_alive(4, 5)
        grid.set_alive(5, 5)
        grid.set_alive(6, 5)

        game.step()
        assert game.population == 3
        assert grid.is_alive(5, 4)
        assert grid.is_alive(5, 5)
        assert grid.is_alive(5, 6)
        assert not grid.is_alive(4, 5)
        assert not grid.is_alive(6, 5)

        game.step()
        assert grid.is_alive(4, 5)
        assert grid.is_alive(5, 5)
        assert grid.is_alive(6, 5)

    def test_extinction(self):
        """Test pattern that goes extinct."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)

        grid.set_alive(5, 5)
        game.step()

        assert game.population == 0
        assert game.generation == 1

    def test_population_history(self):
        """Test population history tracking."""
        grid = Grid(10, 10)
        grid.set_alive(5, 5)
        grid.set_alive(5, 6)
        grid.set_alive(6, 5)
        game = GameOfLife(grid)

        assert game.population_history == [3]

        # The L-tromino becomes a block
        game.step()
        game.step()
        assert game.population_history == [3, 4, 4]

    def test_population_history_is_bounded(self):
        """Test only the last 100 populations are kept."""
        game = GameOfLife(Grid(3, 3))

        game.run(150)

        assert len(game.population_history) == 100

    def test_run(self):
        """Test running a fixed number of generations."""
        grid = Grid(5, 5)
        for col in (1, 2, 3):
            grid.set_alive(2, col)
        game = GameOfLife(grid)

        assert game.run(3) == 3
        assert game.generation == 3
        assert grid.is_alive(1, 2)
        assert grid.is_alive(3, 2)
        assert not grid.is_alive(2, 1)

    def test_run_negative(self):
        """Test negative generation counts are rejected."""
        game = GameOfLife(Grid(3, 3))

        with pytest.raises(ValueError):
            game.run(-1)

    def test_reset(self):
        """Test simulation reset."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)
        grid.set_alive(5, 5)
        grid.set_alive(5, 6)
        game.step()

        game.reset()
        assert game.generation == 0
        assert game.population == 0
        assert game.population_history == [0]

    def test_reset_keep_grid(self):
        """Test reset without clearing the grid."""
        grid = Grid(10, 10)
        game = GameOfLife(grid)
        for row, col in [(1, 1), (1, 2), (2, 1), (2, 2)]:
            grid.set_alive(row, col)
        game.step()

        game.reset(clear_grid=False)
        assert game.generation == 0
        assert game.population == 4
        assert game.population_history == [4]

    def test_get_statistics(self):
        """Test statistics calculation."""
        grid = Grid(10, 5)
        for row, col in [(1, 2), (1, 3), (2, 2), (2, 3)]:
            grid.set_alive(row, col)
        game = GameOfLife(grid)
        game.step()

        stats = game.get_statistics()
        assert stats["generation"] == 1
        assert stats["population"] == 4
        assert stats["population_history"] == [4, 4]
        assert stats["grid_size"] == (5, 10)
        assert stats["population_density"] == pytest.approx(4 / 50)
        assert stats["bounding_box"] == (1, 2, 2, 3)
        assert stats["bounding_box_size"] == (2, 2)

    def test_get_statistics_empty_grid(self):
        """Test statistics on empty grid."""
        game = GameOfLife(Grid(0, 0))

        stats = game.get_statistics()
        assert stats["population"] == 0
        assert stats["population_density"] == 0.0
        assert stats["bounding_box"] is None
        assert stats["bounding_box_size"] == (0, 0)
