# src/keymaze/level.py
# One playable maze: tile queries, key pickup, spawn point.

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .grid import Grid, Position, copy_grid, dimensions, find_first, find_tiles
from .tiles import CellTag, FLOOR, GOAL, KEY, START, WALL


class Level:
    """
    Wraps a finished grid and answers the questions movement and drawing
    code ask about it.

    The grid passed in is owned by the Level from then on: every start tile
    is rewritten to floor at construction (the first in row-major order is
    kept as the spawn) and the key tile is rewritten to floor when collected.
    Use ``Level.from_grid`` to build from authored data
    that must stay untouched.

    Rows are assumed to be of equal length; ragged input is not detected
    here (``levels.validate_grid`` does that for pack files).
    """

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.start: Optional[Position] = find_first(grid, START)
        for r, c in find_tiles(grid, START):
            self.grid[r][c] = FLOOR

    @classmethod
    def from_grid(cls, grid: Sequence[Sequence[int]]) -> "Level":
        return cls(copy_grid(grid))

    # ----- Size helpers -----

    def rows(self) -> int:
        return len(self.grid)

    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def bounds(self) -> Tuple[int, int]:
        return dimensions(self.grid)

    # ----- Tile queries -----

    def in_bounds(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows() and 0 <= c < self.cols()

    def classify(self, r: int, c: int) -> CellTag:
        """
        Tag at (r, c). Callers check ``in_bounds`` first; out-of-range
        coordinates behave like list indexing (negative wraps, too large
        raises IndexError).
        """
        return CellTag(self.grid[r][c])

    def is_wall(self, r: int, c: int) -> bool:
        return self.classify(r, c) == WALL

    def is_goal(self, r: int, c: int) -> bool:
        return self.classify(r, c) == GOAL

    def is_key(self, r: int, c: int) -> bool:
        return self.classify(r, c) == KEY

    def collect_key(self, r: int, c: int) -> bool:
        """Turn a key tile into floor. Returns True only if a key was there."""
        if self.in_bounds(r, c) and self.is_key(r, c):
            self.grid[r][c] = FLOOR
            return True
        return False

    # ----- Positions -----

    def start_position(self) -> Optional[Position]:
        return self.start

    def spawn_position(self, fallback: Position = (1, 1)) -> Position:
        return self.start if self.start is not None else fallback

    def key_position(self) -> Optional[Position]:
        return find_first(self.grid, KEY)

    def goal_position(self) -> Optional[Position]:
        return find_first(self.grid, GOAL)

    def as_matrix(self) -> Grid:
        return copy_grid(self.grid)
