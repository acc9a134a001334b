# src/keymaze/mapgen/placement.py
from typing import Iterable, List, Optional

from ..grid import Grid, Position, dimensions
from ..tiles import FLOOR, GOAL, KEY, START


def interior_floor_cells(grid: Grid) -> List[Position]:
    rows, cols = dimensions(grid)
    return [
        (r, c)
        for r in range(1, rows - 1)
        for c in range(1, cols - 1)
        if grid[r][c] == FLOOR
    ]


def choose_floor_cell(
    cells: List[Position],
    rng,
    exclude: Iterable[Position] = (),
) -> Optional[Position]:
    """
    Uniform pick among `cells` minus `exclude`, or None when nothing is left.
    Filtering first keeps this a single draw no matter how many cells are
    excluded.
    """
    banned = set(exclude)
    candidates = [p for p in cells if p not in banned]
    if not candidates:
        return None
    return candidates[rng.randrange(len(candidates))]


def place_markers(grid: Grid, start: Position, key: Position, goal: Position) -> None:
    grid[start[0]][start[1]] = START
    grid[key[0]][key[1]] = KEY
    grid[goal[0]][goal[1]] = GOAL
