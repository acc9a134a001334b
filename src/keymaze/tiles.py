# Canonical tile IDs (level source encoding)

from enum import IntEnum


class CellTag(IntEnum):
    FLOOR = 0
    WALL = 1
    START = 2
    GOAL = 3
    KEY = 4


FLOOR = CellTag.FLOOR
WALL = CellTag.WALL
START = CellTag.START
GOAL = CellTag.GOAL
KEY = CellTag.KEY

VALID_TILES = frozenset(int(t) for t in CellTag)

def is_open(tile: int) -> bool:
    # Anything but a wall can be walked on.
    return tile != WALL

def is_valid_tile(tile: int) -> bool:
    return tile in VALID_TILES
