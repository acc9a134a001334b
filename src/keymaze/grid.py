from typing import Iterator, List, Optional, Sequence, Tuple

from .tiles import FLOOR, WALL

Grid = List[List[int]]
Position = Tuple[int, int]  # (row, col)

# 4-directional steps: down, up, right, left
STEPS: Tuple[Position, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


def make_grid(rows: int, cols: int, fill: int = FLOOR) -> Grid:
    return [[int(fill) for _ in range(cols)] for _ in range(rows)]


def copy_grid(grid: Sequence[Sequence[int]]) -> Grid:
    """New outer list, new list per row. Levels mutate their copy, never the source."""
    return [list(row) for row in grid]


def dimensions(grid: Sequence[Sequence[int]]) -> Tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def in_bounds(grid: Sequence[Sequence[int]], r: int, c: int) -> bool:
    rows, cols = dimensions(grid)
    return 0 <= r < rows and 0 <= c < cols


def is_rectangular(grid: Sequence[Sequence[int]]) -> bool:
    rows, cols = dimensions(grid)
    return rows > 0 and cols > 0 and all(len(row) == cols for row in grid)


def neighbors(grid: Sequence[Sequence[int]], r: int, c: int) -> Iterator[Position]:
    for dr, dc in STEPS:
        nr, nc = r + dr, c + dc
        if in_bounds(grid, nr, nc):
            yield (nr, nc)


def find_tiles(grid: Sequence[Sequence[int]], tile: int) -> List[Position]:
    """Every position holding `tile`, in row-major order."""
    return [(r, c) for r, row in enumerate(grid) for c, t in enumerate(row) if t == tile]


def find_first(grid: Sequence[Sequence[int]], tile: int) -> Optional[Position]:
    for r, row in enumerate(grid):
        for c, t in enumerate(row):
            if t == tile:
                return (r, c)
    return None


def wall_ring(grid: Grid) -> None:
    """Force row 0, the last row, column 0 and the last column to wall."""
    rows, cols = dimensions(grid)
    for r in range(rows):
        grid[r][0] = WALL
        grid[r][cols - 1] = WALL
    for c in range(cols):
        grid[0][c] = WALL
        grid[rows - 1][c] = WALL


def has_wall_ring(grid: Sequence[Sequence[int]]) -> bool:
    rows, cols = dimensions(grid)
    edge = [(0, c) for c in range(cols)] + [(rows - 1, c) for c in range(cols)]
    edge += [(r, 0) for r in range(rows)] + [(r, cols - 1) for r in range(rows)]
    return all(grid[r][c] == WALL for r, c in edge)
