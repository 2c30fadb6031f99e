"""Core cellular automata logic."""

from .cell import Cell
from .grid import Grid
from .game import GameOfLife
from .patterns import Pattern, PatternLibrary
from .seeds import random_seed, reference_seed

__all__ = ["Cell", "Grid", "GameOfLife", "Pattern", "PatternLibrary", "random_seed", "reference_seed"]
