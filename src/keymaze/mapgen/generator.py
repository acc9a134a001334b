# src/keymaze/mapgen/generator.py
# Solvable maze generator: random walls, key/goal placement, reachability check.

import logging
import random
from typing import Optional

from ..config import GeneratorConfig, DEFAULTS
from ..grid import Grid, Position, copy_grid
from .carve import MIN_SIDE, carve_attempt
from .placement import choose_floor_cell, interior_floor_cells, place_markers
from .reach import is_reachable

logger = logging.getLogger(__name__)

# Spawn is always just inside the top-left corner.
START_POS: Position = (1, 1)

# Hand-authored 7×10 layout returned when every attempt is rejected.
FALLBACK_GRID = (
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
    (1, 2, 0, 0, 0, 1, 0, 0, 0, 1),
    (1, 0, 1, 0, 0, 1, 0, 1, 0, 1),
    (1, 0, 1, 0, 4, 0, 0, 1, 0, 1),
    (1, 0, 0, 0, 1, 1, 0, 1, 0, 1),
    (1, 0, 0, 0, 0, 0, 0, 0, 3, 1),
    (1, 1, 1, 1, 1, 1, 1, 1, 1, 1),
)


def fallback_grid() -> Grid:
    return copy_grid(FALLBACK_GRID)


def try_generate(rows: int, cols: int, wall_density: float, rng) -> Optional[Grid]:
    """
    Run a single attempt. Returns the finished grid, or None when the
    attempt is rejected (too little floor, or key/goal cut off).
    """
    grid = carve_attempt(rows, cols, rng, wall_density, START_POS)

    floor = interior_floor_cells(grid)
    if len(floor) < 3:
        logger.debug("attempt rejected: only %d floor cells", len(floor))
        return None

    key = choose_floor_cell(floor, rng, exclude=(START_POS,))
    goal = choose_floor_cell(floor, rng, exclude=(START_POS, key)) if key is not None else None
    if key is None or goal is None:
        logger.debug("attempt rejected: no room for key/goal")
        return None

    if not is_reachable(grid, START_POS, key):
        logger.debug("attempt rejected: key %s unreachable", key)
        return None
    if not is_reachable(grid, key, goal):
        logger.debug("attempt rejected: goal %s unreachable from key", goal)
        return None

    place_markers(grid, START_POS, key, goal)
    return grid


def generate_grid(
    rows: int,
    cols: int,
    wall_density: float = DEFAULTS.wall_density,
    max_attempts: int = DEFAULTS.max_attempts,
    rng=None,
) -> Grid:
    """
    Produce a rows×cols grid with one start, key and goal such that the key
    is reachable from the start and the goal from the key.

    rows/cols below 5 are raised to 5. `rng` is any object with
    ``random()`` and ``randrange(n)``; pass a seeded ``random.Random`` or
    ``PMRandom`` for a reproducible layout. Never fails: once
    `max_attempts` attempts are rejected the fixed fallback grid is returned.
    """
    if not 0.0 <= wall_density <= 1.0:
        raise ValueError("wall_density must be within [0, 1]")
    if max_attempts < 1:
        raise ValueError("max_attempts must be positive")
    rows = max(MIN_SIDE, rows)
    cols = max(MIN_SIDE, cols)
    if rng is None:
        rng = random.Random()

    for attempt in range(max_attempts):
        grid = try_generate(rows, cols, wall_density, rng)
        if grid is not None:
            logger.debug("generated %dx%d maze on attempt %d", rows, cols, attempt + 1)
            return grid

    logger.warning(
        "no solvable %dx%d maze at density %.2f after %d attempts; using fallback",
        rows, cols, wall_density, max_attempts,
    )
    return fallback_grid()


def generate_level(config: GeneratorConfig = DEFAULTS, rng=None) -> Grid:
    return generate_grid(config.rows, config.cols, config.wall_density, config.max_attempts, rng=rng)
