# src/keymaze/mapgen/reach.py
# Breadth-first reachability over the 4-connected, wall-free cells of a grid.

from collections import deque
from typing import Dict, Optional, Sequence, Set

from ..grid import Position, find_tiles, in_bounds, neighbors
from ..tiles import GOAL, KEY, START, is_open


def _open(grid: Sequence[Sequence[int]], pos: Position) -> bool:
    r, c = pos
    return in_bounds(grid, r, c) and is_open(grid[r][c])


def is_reachable(grid: Sequence[Sequence[int]], source: Position, target: Position) -> bool:
    """
    True if `target` can be walked to from `source` using up/down/left/right
    steps through non-wall cells. The source itself is not checked for being
    a wall; a search from a wall only ever reaches its open neighbours.
    """
    seen: Set[Position] = {source}
    frontier = deque([source])
    while frontier:
        cur = frontier.popleft()
        if cur == target:
            return True
        for nxt in neighbors(grid, *cur):
            if nxt in seen or not _open(grid, nxt):
                continue
            seen.add(nxt)
            frontier.append(nxt)
    return False


def reachable_cells(grid: Sequence[Sequence[int]], source: Position) -> Set[Position]:
    """Flood fill: every cell reachable from `source` (source included)."""
    seen: Set[Position] = {source}
    frontier = deque([source])
    while frontier:
        cur = frontier.popleft()
        for nxt in neighbors(grid, *cur):
            if nxt not in seen and _open(grid, nxt):
                seen.add(nxt)
                frontier.append(nxt)
    return seen


def shortest_path_length(grid: Sequence[Sequence[int]], source: Position, target: Position) -> Optional[int]:
    """Number of steps on a shortest walk from source to target, or None."""
    dist: Dict[Position, int] = {source: 0}
    frontier = deque([source])
    while frontier:
        cur = frontier.popleft()
        if cur == target:
            return dist[cur]
        for nxt in neighbors(grid, *cur):
            if nxt not in dist and _open(grid, nxt):
                dist[nxt] = dist[cur] + 1
                frontier.append(nxt)
    return None


def is_solvable(grid: Sequence[Sequence[int]]) -> bool:
    """
    A grid is solvable when it carries exactly one start, key and goal and
    the key can be walked to from the start and the goal from the key.
    """
    starts = find_tiles(grid, START)
    keys = find_tiles(grid, KEY)
    goals = find_tiles(grid, GOAL)
    if len(starts) != 1 or len(keys) != 1 or len(goals) != 1:
        return False
    start, key, goal = starts[0], keys[0], goals[0]
    return is_reachable(grid, start, key) and is_reachable(grid, key, goal)
