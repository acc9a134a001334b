# src/keymaze/engine/state.py
# GameState: level list, current index and player held explicitly (no globals).

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..config import DEFAULTS
from ..grid import Grid, Position, copy_grid
from ..level import Level
from .player import Player, direction_delta

PLAYING = "playing"
WON = "won"


@dataclass
class StepResult:
    moved: bool = False
    key_collected: bool = False
    need_key: bool = False   # stood on the goal without the key
    advanced: bool = False   # moved on to the next level
    won: bool = False        # finished the last level


class GameState:
    """
    Headless play-through of a pack of levels. Every Level is rebuilt from a
    copy of the authored grids on ``restart`` so collected keys come back
    and the authored data is never touched.
    """

    def __init__(
        self,
        grids: Sequence[Sequence[Sequence[int]]],
        *,
        fallback_spawn: Position = DEFAULTS.fallback_spawn,
    ) -> None:
        if not grids:
            raise ValueError("GameState needs at least one level")
        self._authored: List[Grid] = [copy_grid(g) for g in grids]
        self.fallback_spawn = fallback_spawn
        self.player = Player()
        self.levels: List[Level] = []
        self.index = 0
        self.status = PLAYING
        self.restart()

    # ---- Lifecycle ----
    def restart(self) -> None:
        self.levels = [Level.from_grid(g) for g in self._authored]
        self.status = PLAYING
        self.load_level(0)

    def load_level(self, idx: int) -> None:
        self.index = idx
        r, c = self.level.spawn_position(self.fallback_spawn)
        self.player.set_cell(r, c)
        self.player.has_key = False

    def next_level(self) -> bool:
        """Advance; returns False (and marks the game won) past the last level."""
        nxt = self.index + 1
        if nxt >= len(self.levels):
            self.status = WON
            return False
        self.load_level(nxt)
        return True

    @property
    def level(self) -> Level:
        return self.levels[self.index]

    # ---- Input ----
    def step(self, direction: str) -> StepResult:
        """Apply one move request ("left"/"right"/"up"/"down")."""
        delta: Optional[Position] = direction_delta(direction)
        if delta is None or self.status != PLAYING:
            return StepResult()
        return self.move(*delta)

    def move(self, dr: int, dc: int) -> StepResult:
        out = StepResult()
        if self.status != PLAYING:
            return out
        level = self.level
        out.moved = self.player.try_move(level, dr, dc)
        if not out.moved:
            return out

        r, c = self.player.pos
        if level.is_key(r, c):
            self.player.has_key = True
            out.key_collected = level.collect_key(r, c)

        if level.is_goal(r, c):
            if self.player.has_key:
                # key is spent on the exit
                self.player.has_key = False
                out.advanced = self.next_level()
                out.won = self.status == WON
            else:
                out.need_key = True
        return out
