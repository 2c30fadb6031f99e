"""Frontend interfaces for the Game of Life."""

from .cli import TerminalGameOfLife, TerminalRenderer, run_loop

__all__ = ["TerminalGameOfLife", "TerminalRenderer", "run_loop"]
