"""Conway's Game of Life on a bounded grid, rendered to the terminal."""

__version__ = "0.1.0"

from .core.cell import Cell
from .core.grid import Grid
from .core.game import GameOfLife
from .core.patterns import Pattern, PatternLibrary
from .config import SimulationConfig

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary", "SimulationConfig"]
