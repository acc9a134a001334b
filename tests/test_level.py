import pytest

from keymaze.grid import copy_grid
from keymaze.level import Level
from keymaze.mapgen.generator import FALLBACK_GRID
from keymaze.mapgen.reach import is_reachable
from keymaze.tiles import CellTag


def fallback_level():
    return Level.from_grid(FALLBACK_GRID)


def test_fallback_end_to_end():
    lvl = fallback_level()
    assert lvl.bounds() == (7, 10)
    assert lvl.start_position() == (1, 1)
    goals = [(r, c) for r in range(7) for c in range(10) if lvl.is_goal(r, c)]
    assert goals == [(5, 8)]
    assert is_reachable(lvl.grid, (1, 1), goals[0])


def test_start_is_normalized_to_floor():
    lvl = fallback_level()
    assert lvl.classify(1, 1) == CellTag.FLOOR
    rows, cols = lvl.bounds()
    assert all(lvl.classify(r, c) != CellTag.START for r in range(rows) for c in range(cols))


def test_first_start_in_row_major_order_wins():
    g = [
        [1, 1, 1, 1],
        [1, 0, 2, 1],
        [1, 2, 0, 1],
        [1, 1, 1, 1],
    ]
    lvl = Level(g)
    assert lvl.start_position() == (1, 2)
    assert lvl.classify(1, 2) == CellTag.FLOOR
    # the extra start is floor too
    assert lvl.classify(2, 1) == CellTag.FLOOR


def test_no_start_left_after_construction_with_duplicates():
    lvl = Level([[1, 1, 1, 1], [1, 2, 2, 1], [1, 1, 1, 1]])
    assert lvl.start_position() == (1, 1)
    rows, cols = lvl.bounds()
    assert all(lvl.classify(r, c) != CellTag.START for r in range(rows) for c in range(cols))


def test_missing_start_uses_caller_fallback():
    g = [
        [1, 1, 1, 1, 1],
        [1, 0, 4, 3, 1],
        [1, 1, 1, 1, 1],
    ]
    lvl = Level(g)
    assert lvl.start_position() is None
    assert lvl.spawn_position() == (1, 1)
    assert lvl.spawn_position((1, 2)) == (1, 2)
    assert g[1][1] == 0


def test_in_bounds_edges():
    lvl = fallback_level()
    rows, cols = lvl.bounds()
    assert not lvl.in_bounds(-1, 0)
    assert not lvl.in_bounds(rows, 0)
    assert not lvl.in_bounds(0, -1)
    assert not lvl.in_bounds(0, cols)
    assert lvl.in_bounds(0, 0) and lvl.in_bounds(rows - 1, cols - 1)


def test_classify_out_of_range_behaves_like_indexing():
    lvl = fallback_level()
    with pytest.raises(IndexError):
        lvl.classify(7, 0)


def test_tile_queries():
    lvl = fallback_level()
    assert lvl.is_wall(0, 0)
    assert not lvl.is_wall(1, 2)
    assert lvl.is_key(3, 4)
    assert not lvl.is_key(3, 5)
    assert lvl.key_position() == (3, 4)
    assert lvl.goal_position() == (5, 8)


def test_collect_key_is_idempotent():
    lvl = fallback_level()
    assert lvl.collect_key(3, 4) is True
    once = lvl.as_matrix()
    assert lvl.collect_key(3, 4) is False
    assert lvl.as_matrix() == once
    assert lvl.classify(3, 4) == CellTag.FLOOR
    assert lvl.key_position() is None


def test_collect_key_elsewhere_is_a_no_op():
    lvl = fallback_level()
    before = lvl.as_matrix()
    assert lvl.collect_key(1, 2) is False
    assert lvl.collect_key(-1, 0) is False
    assert lvl.collect_key(99, 99) is False
    assert lvl.as_matrix() == before


def test_levels_from_same_source_are_independent():
    authored = copy_grid(FALLBACK_GRID)
    a = Level.from_grid(authored)
    b = Level.from_grid(authored)
    a.collect_key(3, 4)
    assert b.is_key(3, 4)
    assert authored[1][1] == 2 and authored[3][4] == 4


def test_plain_constructor_takes_ownership():
    g = copy_grid(FALLBACK_GRID)
    lvl = Level(g)
    assert lvl.grid is g
    assert g[1][1] == 0
