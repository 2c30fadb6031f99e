"""Conway's Game of Life simulation state."""

import logging
from collections import deque
from typing import Deque, Dict

from .grid import Grid

logger = logging.getLogger(__name__)


class GameOfLife:
    """Game of Life simulation engine around a bounded grid.

    The grid applies the rules:
    - Any cell with exactly 3 neighbors is alive in the next generation
    - Any cell with 0-1 or 4+ neighbors is dead in the next generation
    - A cell with exactly 2 neighbors keeps its current state

    This class keeps track of the generation number and population history.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The cellular grid to simulate
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self.grid.update()
        self._generation += 1
        self._update_population_history()

    def run(self, generations: int) -> int:
        """Advance the simulation by a fixed number of generations.

        Args:
            generations: Number of generations to run

        Returns:
            Generation number after the run

        Raises:
            ValueError: If generations is negative
        """
        if generations < 0:
            raise ValueError(f"Number of generations must be non-negative, got {generations}")

        for _ in range(generations):
            self.step()

        logger.debug("Ran %d generations, now at generation %d", generations, self._generation)
        return self._generation

    def _update_population_history(self) -> None:
        """Update the population history."""
        self._population_history.append(self.population)

    def reset(self, clear_grid: bool = True) -> None:
        """Reset the simulation.

        Args:
            clear_grid: Whether to clear the grid as well
        """
        if clear_grid:
            self.grid.clear()

        self._generation = 0
        self._population_history.clear()
        self._update_population_history()

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with generation, population and bounding box data
        """
        area = self.grid.width * self.grid.height
        bbox = self.grid.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_history": list(self._population_history),
            "grid_size": self.grid.shape,
            "population_density": self.population / area if area else 0.0,
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_height = bbox[2] - bbox[0] + 1
            box_width = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_height, box_width)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
