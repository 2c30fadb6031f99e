"""Grid data structure for Conway's Game of Life."""

import logging
from typing import Callable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cell import ALIVE_SYMBOL, DEAD_SYMBOL, Cell

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
CellMatrix = List[List[Cell]]

_NEIGHBOR_OFFSETS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)]


class Grid:
    """A bounded 2D grid of cells addressed by ``(row, col)``.

    The grid never wraps: cells on the border simply have fewer neighbors.
    Each generation is computed in two passes. The evaluation pass writes every
    cell's ``pending`` status from a snapshot of the current generation, and the
    commit pass then applies all of them, so no cell ever sees a neighbor that
    has already moved on to the next generation.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize a grid of dead cells.

        Args:
            width: Number of columns
            height: Number of rows

        Raises:
            ValueError: If either dimension is negative
        """
        if width < 0 or height < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {width}x{height}")

        self.width = width
        self.height = height
        self._cells: CellMatrix = [[Cell(False, (row, col)) for col in range(width)] for row in range(height)]

        # Single intra-op thread; the simulation is strictly sequential
        torch.set_num_threads(1)

        self._torch_kernel = (
            torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)
        )

        logger.debug("Created %dx%d grid", width, height)

    @property
    def cells(self) -> CellMatrix:
        """Row-major cell storage."""
        return self._cells

    @property
    def shape(self) -> Tuple[int, int]:
        """Grid dimensions as (height, width)."""
        return (self.height, self.width)

    @property
    def population(self) -> int:
        """Number of living cells."""
        return sum(cell.alive for row in self._cells for cell in row)

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def modify(self, func: Callable[[int, Cell], None]) -> None:
        """Apply ``func(index, cell)`` to every cell in row-major order.

        ``index`` is the flattened position ``row * width + col``.
        """
        for index, cell in enumerate(cell for row in self._cells for cell in row):
            func(index, cell)

    def load_map(self, matrix: Sequence[Sequence[Cell]]) -> bool:
        """Replace the grid contents with a copy of ``matrix``.

        Args:
            matrix: Rows of cells; all rows must have the same length

        Returns:
            True if the matrix was loaded, False if it was jagged (the grid is
            left untouched in that case)
        """
        width = len(matrix[0]) if len(matrix) > 0 else 0
        for index, row in enumerate(matrix):
            if len(row) != width:
                logger.debug("Rejected map: row %d has %d cells, expected %d", index, len(row), width)
                return False

        self._cells = [[cell.copy() for cell in row] for row in matrix]
        self.width = width
        self.height = len(matrix)
        return True

    def node_ref(self, position: Position) -> Optional[Cell]:
        """Get the cell at ``position``, or None if it is out of bounds.

        The returned cell is the grid's own; changes to it are visible in the grid.
        """
        row, col = position
        if not self.in_bounds(row, col):
            return None
        return self._cells[row][col]

    def set_node(self, position: Position, cell: Cell) -> bool:
        """Replace the cell at ``position``.

        Returns:
            True if the cell was replaced, False if ``position`` is out of bounds
        """
        row, col = position
        if not self.in_bounds(row, col):
            return False
        self._cells[row][col] = cell
        return True

    def is_alive(self, row: int, col: int) -> bool:
        """Get the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        cell = self.node_ref((row, col))
        if cell is None:
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        return cell.alive

    def set_alive(self, row: int, col: int, alive: bool = True) -> None:
        """Set the state of a cell.

        Raises:
            IndexError: If coordinates are out of bounds
        """
        cell = self.node_ref((row, col))
        if cell is None:
            raise IndexError(f"Coordinates ({row}, {col}) out of bounds")
        cell.alive = alive

    def clear(self) -> None:
        """Kill every cell and drop any pending status."""
        for row in self._cells:
            for cell in row:
                cell.alive = False
                cell.pending = None

    def neighbor_positions(self, row: int, col: int) -> List[Position]:
        """In-bounds Moore neighbors of a cell."""
        return [
            (row + dr, col + dc) for dr, dc in _NEIGHBOR_OFFSETS if self.in_bounds(row + dr, col + dc)
        ]

    def count_neighbors(self, row: int, col: int) -> int:
        """Count living neighbors of a single cell (0-8)."""
        return sum(self._cells[r][c].alive for r, c in self.neighbor_positions(row, col))

    def alive_array(self) -> np.ndarray:
        """Snapshot of the alive flags as a (height, width) boolean array."""
        snapshot = np.zeros((self.height, self.width), dtype=bool)
        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                snapshot[r, c] = cell.alive
        return snapshot

    def count_all_neighbors(self, alive: Optional[np.ndarray] = None) -> np.ndarray:
        """Count living neighbors for every cell with a 3x3 convolution.

        Zero padding makes out-of-bounds neighbors count as absent.

        Args:
            alive: Boolean snapshot to count from; taken from the grid if omitted

        Returns:
            (height, width) array of neighbor counts
        """
        if alive is None:
            alive = self.alive_array()
        if alive.size == 0:
            return np.zeros(alive.shape, dtype=np.int8)

        board = torch.from_numpy(alive.astype(np.float32)).unsqueeze(0).unsqueeze(0)
        neighbors = F.conv2d(board, self._torch_kernel, padding=1)
        return neighbors[0, 0].numpy().astype(np.int8)

    @staticmethod
    def next_status(alive_neighbors: int) -> Optional[bool]:
        """Pending status for a cell with the given number of living neighbors.

        Two neighbors yields None: the cell keeps whatever status it has.
        """
        if alive_neighbors == 3:
            return True
        if alive_neighbors <= 1 or alive_neighbors >= 4:
            return False
        return None

    def update(self) -> None:
        """Advance the grid by one generation."""
        counts = self.count_all_neighbors(self.alive_array())

        for r, row in enumerate(self._cells):
            for c, cell in enumerate(row):
                cell.pending = self.next_status(int(counts[r, c]))

        for row in self._cells:
            for cell in row:
                cell.commit()

    def step_iterations(self, num_iter: int) -> CellMatrix:
        """Apply ``num_iter`` updates and return the resulting cells.

        Raises:
            ValueError: If ``num_iter`` is negative
        """
        if num_iter < 0:
            raise ValueError(f"Number of iterations must be non-negative, got {num_iter}")

        for _ in range(num_iter):
            self.update()

        logger.debug("Advanced %d generations", num_iter)
        return self._cells

    def rows(self) -> Iterator[List[bool]]:
        """Iterate over rows as lists of alive flags."""
        for row in self._cells:
            yield [cell.alive for cell in row]

    def render(self, alive_symbol: str = ALIVE_SYMBOL, dead_symbol: str = DEAD_SYMBOL) -> str:
        """Text view of the grid, one line per row."""
        return "\n".join("".join(cell.char(alive_symbol, dead_symbol) for cell in row) for row in self._cells)

    def to_list(self) -> List[List[int]]:
        """Convert grid to a nested 0/1 list."""
        return [[int(alive) for alive in row] for row in self.rows()]

    def from_list(self, data: Sequence[Sequence[int]]) -> None:
        """Load grid from a nested 0/1 list, resizing to match it.

        Raises:
            ValueError: If rows have different lengths
        """
        matrix = [[Cell(bool(value), (r, c)) for c, value in enumerate(row)] for r, row in enumerate(data)]
        if not self.load_map(matrix):
            raise ValueError("All rows must have the same length")

    def get_bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        """Get bounding box of living cells.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col) or None if no living cells
        """
        living = np.argwhere(self.alive_array())
        if len(living) == 0:
            return None

        min_row, min_col = (int(v) for v in living.min(axis=0))
        max_row, max_col = (int(v) for v in living.max(axis=0))
        return (min_row, min_col, max_row, max_col)

    def __eq__(self, other: object) -> bool:
        """Check if two grids hold the same alive pattern."""
        if not isinstance(other, Grid):
            return False
        return self.shape == other.shape and self.to_list() == other.to_list()

    def __str__(self) -> str:
        """String representation showing living cells as '*' and dead as '.'."""
        return self.render("*", ".")
