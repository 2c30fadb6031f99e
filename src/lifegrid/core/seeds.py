"""Initial population transforms for ``Grid.modify``."""

from typing import Callable, Optional

import numpy as np

from .cell import Cell

SeedFunction = Callable[[int, Cell], None]


def reference_seed(index: int, cell: Cell) -> None:
    """Mark the cell alive when its flat index is divisible by 7, by 5, or by 4 but not 3.

    Cells that don't match are left as they are.
    """
    if index % 7 == 0 or index % 5 == 0 or (index % 4 == 0 and index % 3 != 0):
        cell.alive = True


def random_seed(probability: float = 0.3, rng: Optional[np.random.Generator] = None) -> SeedFunction:
    """Build a seed that sets every cell alive with the given probability.

    Args:
        probability: Chance each cell will be alive (0.0 to 1.0)
        rng: Random generator to draw from; a fresh default one if omitted

    Returns:
        Function suitable for ``Grid.modify``

    Raises:
        ValueError: If probability is outside [0, 1]
    """
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Probability must be between 0.0 and 1.0, got {probability}")

    generator = rng if rng is not None else np.random.default_rng()

    def seed(index: int, cell: Cell) -> None:
        cell.alive = bool(generator.random() < probability)

    return seed
