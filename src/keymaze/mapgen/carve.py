# src/keymaze/mapgen/carve.py
# Wall layout for one generation attempt: closed outer ring, random interior.

from typing import Iterable

from ..grid import Grid, Position, dimensions, make_grid, wall_ring
from ..tiles import FLOOR, WALL

MIN_SIDE = 5


def ring_grid(rows: int, cols: int) -> Grid:
    """Return a fresh all-floor grid whose outer ring is wall."""
    grid = make_grid(rows, cols, FLOOR)
    wall_ring(grid)
    return grid


def scatter_walls(grid: Grid, rng, density: float, keep: Iterable[Position] = ()) -> None:
    """
    One Bernoulli draw per interior cell, row-major: the cell becomes wall
    when rng.random() < density. Cells listed in `keep` are skipped and
    consume no draw.
    """
    rows, cols = dimensions(grid)
    keep = set(keep)
    for r in range(1, rows - 1):
        for c in range(1, cols - 1):
            if (r, c) in keep:
                continue
            if rng.random() < density:
                grid[r][c] = WALL


def carve_attempt(rows: int, cols: int, rng, density: float, start: Position) -> Grid:
    grid = ring_grid(rows, cols)
    scatter_walls(grid, rng, density, keep=(start,))
    return grid
