from keymaze.mapgen.generator import fallback_grid
from keymaze.mapgen.reach import is_reachable, is_solvable, reachable_cells, shortest_path_length

# Two rooms split by a wall column; no way across.
SPLIT = [
    [1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 1, 0, 0, 1],
    [1, 0, 0, 1, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1],
]

def test_same_room_reachable_other_room_not():
    assert is_reachable(SPLIT, (1, 1), (2, 2))
    assert not is_reachable(SPLIT, (1, 1), (1, 4))

def test_source_equals_target():
    assert is_reachable(SPLIT, (1, 4), (1, 4))
    assert shortest_path_length(SPLIT, (1, 4), (1, 4)) == 0

def test_no_diagonal_steps():
    g = [
        [0, 1],
        [1, 0],
    ]
    assert not is_reachable(g, (0, 0), (1, 1))

def test_open_grid_with_cycles_terminates():
    g = [[0] * 30 for _ in range(30)]
    assert is_reachable(g, (0, 0), (29, 29))
    assert shortest_path_length(g, (0, 0), (29, 29)) == 58
    assert len(reachable_cells(g, (0, 0))) == 900

def test_flood_fill_stays_in_room():
    assert reachable_cells(SPLIT, (1, 1)) == {(1, 1), (1, 2), (2, 1), (2, 2)}

def test_fallback_distances():
    g = fallback_grid()
    assert shortest_path_length(g, (1, 1), (3, 4)) == 5
    assert shortest_path_length(g, (3, 4), (5, 8)) == 6
    assert shortest_path_length(SPLIT, (1, 1), (1, 4)) is None

def test_is_solvable_needs_one_of_each():
    g = fallback_grid()
    assert is_solvable(g)
    g[5][8] = 0  # drop the goal
    assert not is_solvable(g)
    g = fallback_grid()
    g[1][6] = 4  # second key
    assert not is_solvable(g)

def test_is_solvable_rejects_walled_off_goal():
    g = fallback_grid()
    g[5][7] = 1
    g[4][8] = 1
    assert not is_solvable(g)
