"""Terminal interface for Conway's Game of Life."""

import argparse
import logging
import sys
import time
from typing import Callable, List, Optional, TextIO

import numpy as np

from ..config import (
    DEFAULT_HEIGHT,
    DEFAULT_INTERVAL,
    DEFAULT_POPULATION_RATE,
    DEFAULT_WARMUP,
    DEFAULT_WIDTH,
    SEED_CHOICES,
    SimulationConfig,
)
from ..core.cell import ALIVE_SYMBOL, DEAD_SYMBOL
from ..core.game import GameOfLife
from ..core.grid import Grid
from ..core.patterns import PatternLibrary
from ..core.seeds import random_seed, reference_seed

logger = logging.getLogger(__name__)

CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"


class TerminalRenderer:
    """Paints grid generations onto a text stream."""

    def __init__(
        self,
        out: Optional[TextIO] = None,
        alive_symbol: str = ALIVE_SYMBOL,
        dead_symbol: str = DEAD_SYMBOL,
    ) -> None:
        self.out = out if out is not None else sys.stdout
        self.alive_symbol = alive_symbol
        self.dead_symbol = dead_symbol

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.out.write(CLEAR_SCREEN)

    def draw(self, grid: Grid, generation: int) -> None:
        """Write one frame: the grid followed by the generation counter."""
        self.out.write("\n")
        self.out.write(grid.render(self.alive_symbol, self.dead_symbol))
        self.out.write(f"\niter: {generation}\n")
        self.out.flush()


def run_loop(
    game: GameOfLife,
    renderer: TerminalRenderer,
    interval: float,
    max_generations: Optional[int] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Display, advance and wait, repeatedly.

    The frame is always drawn from a fully committed generation.

    Args:
        game: Simulation to drive
        renderer: Where frames are painted
        interval: Seconds to wait between frames
        max_generations: Number of frames to run, or None to run until interrupted
        sleep: Wait function

    Returns:
        Number of frames drawn
    """
    frames = 0
    while max_generations is None or frames < max_generations:
        renderer.clear()
        renderer.draw(game.grid, game.generation)
        game.step()
        frames += 1
        sleep(interval)
    return frames


class TerminalGameOfLife:
    """Builds and runs terminal simulations from a configuration."""

    def __init__(self) -> None:
        self.pattern_library = PatternLibrary()

    def build_grid(self, config: SimulationConfig) -> Grid:
        """Create and seed a grid for the given configuration.

        Args:
            config: Simulation configuration

        Returns:
            Seeded grid, already advanced by ``config.warmup`` generations

        Raises:
            ValueError: If the pattern or seed name is unknown
        """
        grid = Grid(config.width, config.height)

        if config.pattern:
            pattern = self.pattern_library.get_pattern(config.pattern)
            if pattern is None:
                raise ValueError(f"Pattern '{config.pattern}' not found")

            # Center the pattern unless an offset was given
            height, width = pattern.get_size()
            row = config.pattern_row if config.pattern_row is not None else max(0, (config.height - height) // 2)
            col = config.pattern_col if config.pattern_col is not None else max(0, (config.width - width) // 2)
            placed = pattern.apply_to_grid(grid, row, col)
            logger.debug("Placed %d cells of pattern '%s' at (%d, %d)", placed, pattern.name, row, col)
        elif config.seed == "reference":
            grid.modify(reference_seed)
        elif config.seed == "random":
            grid.modify(random_seed(config.population_rate, np.random.default_rng(config.random_seed)))
        else:
            raise ValueError(f"Unknown seed '{config.seed}'")

        if config.warmup:
            grid.load_map(grid.step_iterations(config.warmup))

        logger.debug("Initial population: %d cells", grid.population)
        return grid

    def run(
        self,
        config: SimulationConfig,
        out: Optional[TextIO] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> int:
        """Run a terminal simulation.

        Returns:
            Number of frames drawn
        """
        game = GameOfLife(self.build_grid(config))
        renderer = TerminalRenderer(out, config.alive_symbol, config.dead_symbol)
        return run_loop(game, renderer, config.interval, config.max_generations, sleep)

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    height, width = pattern.get_size()
                    print(f"  {pattern_name}: {width}x{height}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Run Conway's Game of Life in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the reference 50x100 seed until interrupted
  lifegrid

  # Run a glider on a 20x20 grid for 60 generations
  lifegrid -W 20 -H 20 --pattern Glider -g 60

  # Random 30% population, reproducible, 50ms per frame
  lifegrid --seed random -p 0.3 --random-seed 42 -i 0.05

  # List available patterns
  lifegrid --list-patterns
        """,
    )

    # Grid configuration
    parser.add_argument(
        "-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Grid width (default: {DEFAULT_WIDTH})"
    )

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Grid height (default: {DEFAULT_HEIGHT})"
    )

    # Seeding
    parser.add_argument(
        "--seed",
        type=str,
        default="reference",
        choices=SEED_CHOICES,
        help="Initial population when no pattern is given (default: reference)",
    )

    parser.add_argument(
        "-p",
        "--population",
        type=float,
        default=DEFAULT_POPULATION_RATE,
        help=f"Population rate 0.0-1.0 for the random seed (default: {DEFAULT_POPULATION_RATE})",
    )

    parser.add_argument(
        "--random-seed",
        type=int,
        help="Random generator seed for reproducible runs",
    )

    parser.add_argument(
        "--pattern",
        type=str,
        help="Load a specific pattern instead of a seed",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        help="Row offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        help="Column offset for pattern placement (default: centered)",
    )

    parser.add_argument(
        "--warmup",
        type=int,
        default=DEFAULT_WARMUP,
        help=f"Generations to advance before the first frame (default: {DEFAULT_WARMUP})",
    )

    # Simulation configuration
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=DEFAULT_INTERVAL,
        help=f"Seconds between frames (default: {DEFAULT_INTERVAL})",
    )

    parser.add_argument(
        "-g",
        "--generations",
        type=int,
        help="Stop after this many frames (default: run until interrupted)",
    )

    # Output configuration
    parser.add_argument(
        "--alive-symbol",
        type=str,
        default=ALIVE_SYMBOL,
        help=f"Glyph for living cells (default: '{ALIVE_SYMBOL}')",
    )

    parser.add_argument(
        "--dead-symbol",
        type=str,
        default=DEAD_SYMBOL,
        help="Glyph for dead cells (default: space)",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug information to stderr",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List all available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width <= 0:
        errors.append("Width must be positive")

    if args.height <= 0:
        errors.append("Height must be positive")

    if not 0.0 <= args.population <= 1.0:
        errors.append("Population rate must be between 0.0 and 1.0")

    if args.interval < 0:
        errors.append("Interval must be non-negative")

    if args.generations is not None and args.generations <= 0:
        errors.append("Generations must be positive")

    if args.warmup < 0:
        errors.append("Warmup generations must be non-negative")

    if args.pattern_row is not None and args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col is not None and args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if len(args.alive_symbol) != 1 or len(args.dead_symbol) != 1:
        errors.append("Cell symbols must be single characters")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """Build a simulation configuration from parsed arguments."""
    return SimulationConfig(
        width=args.width,
        height=args.height,
        interval=args.interval,
        max_generations=args.generations,
        seed=args.seed,
        population_rate=args.population,
        random_seed=args.random_seed,
        pattern=args.pattern,
        pattern_row=args.pattern_row,
        pattern_col=args.pattern_col,
        warmup=args.warmup,
        alive_symbol=args.alive_symbol,
        dead_symbol=args.dead_symbol,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the terminal interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    cli = TerminalGameOfLife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.pattern and cli.pattern_library.get_pattern(args.pattern) is None:
        available = cli.pattern_library.list_patterns()
        print(f"Error: Pattern '{args.pattern}' not found")
        print(f"Available patterns: {', '.join(available)}")
        print("Use --list-patterns to see detailed information")
        return 1

    try:
        frames = cli.run(config_from_args(args))
        logger.info("Drew %d frames", frames)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 0
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
