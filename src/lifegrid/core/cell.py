"""Single cell of a Game of Life grid."""

from dataclasses import dataclass
from typing import Optional, Tuple

ALIVE_SYMBOL = "@"
DEAD_SYMBOL = " "


@dataclass
class Cell:
    """One grid element.

    ``pending`` holds the status computed for the next generation so that the
    whole grid can be evaluated against a stable snapshot before any cell's
    ``alive`` flag changes. ``None`` means no directive was computed this tick.

    ``position`` is the ``(row, col)`` the cell was created at. It is kept for
    debugging only and is not consulted by the update rule.
    """

    alive: bool = False
    position: Tuple[int, int] = (0, 0)
    pending: Optional[bool] = None

    def char(self, alive_symbol: str = ALIVE_SYMBOL, dead_symbol: str = DEAD_SYMBOL) -> str:
        """Glyph for this cell."""
        return alive_symbol if self.alive else dead_symbol

    def commit(self) -> None:
        """Apply the pending status, if any, and clear it."""
        if self.pending is not None:
            self.alive = self.pending
        self.pending = None

    def copy(self) -> "Cell":
        """Return an independent copy of this cell."""
        return Cell(alive=self.alive, position=self.position, pending=self.pending)
