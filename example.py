#!/usr/bin/env python3
"""
Example usage of the lifegrid package.
"""

from lifegrid import GameOfLife, Grid, PatternLibrary
from lifegrid.core.seeds import reference_seed


def main():
    """Demonstrate programmatic usage of the lifegrid package."""
    # Seed a small grid the same way the terminal driver does
    grid = Grid(12, 6)
    grid.modify(reference_seed)
    print("Reference seed:")
    print(grid)
    print()

    grid.step_iterations(3)
    print("After 3 generations:")
    print(grid)
    print()

    # Run a glider until it hits the bottom-right corner
    grid = Grid(12, 12)
    game = GameOfLife(grid)
    glider = PatternLibrary().get_pattern("Glider")

    if glider:
        glider.apply_to_grid(grid, offset_row=1, offset_col=1)

        for _ in range(32):
            game.step()
            if game.generation % 8 == 0:
                print(f"Generation {game.generation}:")
                print(grid.render("#", "."))
                print(f"Population: {game.population}")
                print()

    stats = game.get_statistics()
    print("Final statistics:")
    for key, value in stats.items():
        print(f"  {key}: {value}")


if __name__ == "__main__":
    main()
