"""Simulation configuration and reference defaults."""

from dataclasses import dataclass
from typing import Optional

from .core.cell import ALIVE_SYMBOL, DEAD_SYMBOL

DEFAULT_WIDTH = 50
DEFAULT_HEIGHT = 100
DEFAULT_INTERVAL = 0.1
DEFAULT_WARMUP = 1
DEFAULT_POPULATION_RATE = 0.3

SEED_CHOICES = ("reference", "random")


@dataclass
class SimulationConfig:
    """Configuration for a terminal simulation run."""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    interval: float = DEFAULT_INTERVAL
    max_generations: Optional[int] = None
    seed: str = "reference"
    population_rate: float = DEFAULT_POPULATION_RATE
    random_seed: Optional[int] = None
    pattern: Optional[str] = None
    pattern_row: Optional[int] = None
    pattern_col: Optional[int] = None
    warmup: int = DEFAULT_WARMUP
    alive_symbol: str = ALIVE_SYMBOL
    dead_symbol: str = DEAD_SYMBOL
