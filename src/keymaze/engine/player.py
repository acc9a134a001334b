# src/keymaze/engine/player.py
# Tile-by-tile player: one step per move request, walls and edges block.

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..level import Level

XY = Tuple[int, int]  # (row, col)

DIRS = {
    "left": (0, -1),
    "right": (0, 1),
    "up": (-1, 0),
    "down": (1, 0),
}


@dataclass
class Player:
    r: int = 0
    c: int = 0
    has_key: bool = False

    @property
    def pos(self) -> XY:
        return (self.r, self.c)

    def set_cell(self, r: int, c: int) -> None:
        self.r, self.c = r, c

    def can_move(self, level: Level, dr: int, dc: int) -> bool:
        nr, nc = self.r + dr, self.c + dc
        return level.in_bounds(nr, nc) and not level.is_wall(nr, nc)

    def try_move(self, level: Level, dr: int, dc: int) -> bool:
        """Step by (dr, dc) if the target is inside the level and not a wall."""
        if not self.can_move(level, dr, dc):
            return False
        self.r += dr
        self.c += dc
        return True


def direction_delta(direction: str) -> Optional[XY]:
    return DIRS.get(direction)
