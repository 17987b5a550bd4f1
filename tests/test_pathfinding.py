import random
from collections import deque

import pytest

from maze.errors import UnreachableGoalError
from maze.generator import carve_maze
from maze.maze_core import MazeGrid
from maze.pathfinding import (
    astar_shortest_path, bfs_distances, find_route, is_contiguous, join_routes, neighbors_open
)
from utils.constants import CELL_PATH, CELL_TREASURE_FOUND, CELL_WALL

OPEN_ROOM = [
    "#######",
    "#.....#",
    "#.#.#.#",
    "#.....#",
    "#.#.#.#",
    "#.....#",
    "#######",
]

SPLIT = [
    "#######",
    "#..#..#",
    "#..#..#",
    "#######",
]


def brute_force_steps(grid, start, goal):
    """Plain BFS over path cells, independent of the module under test"""
    seen = {start: 0}
    q = deque([start])
    while q:
        cur = q.popleft()
        if cur == goal:
            return seen[cur]
        x, y = cur
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if n not in seen and grid.cell_type(*n) != CELL_WALL:
                seen[n] = seen[cur] + 1
                q.append(n)
    return None


def assert_valid_route(grid, route, start, goal):
    assert route[0] == start
    assert route[-1] == goal
    assert is_contiguous(route)
    assert len(set(route)) == len(route)
    assert all(grid.cell_type(x, y) != CELL_WALL for x, y in route)


def test_astar_matches_bfs_in_a_room_with_loops():
    grid = MazeGrid.from_rows(OPEN_ROOM)
    cells = list(grid.iter_positions(CELL_PATH))
    for start in cells[:6]:
        for goal in cells:
            route = astar_shortest_path(grid, start, goal)
            assert_valid_route(grid, route, start, goal)
            assert len(route) - 1 == brute_force_steps(grid, start, goal)


def test_astar_matches_bfs_on_carved_mazes():
    for seed in range(4):
        rng = random.Random(seed)
        grid = MazeGrid(15, 11)
        carve_maze(grid, rng)
        cells = list(grid.iter_positions(CELL_PATH))
        for _ in range(20):
            start, goal = rng.choice(cells), rng.choice(cells)
            route = astar_shortest_path(grid, start, goal)
            assert_valid_route(grid, route, start, goal)
            assert len(route) - 1 == brute_force_steps(grid, start, goal)


def test_start_equals_goal():
    grid = MazeGrid.from_rows(OPEN_ROOM)
    assert astar_shortest_path(grid, (1, 1), (1, 1)) == [(1, 1)]


def test_disconnected_goal():
    grid = MazeGrid.from_rows(SPLIT)
    assert astar_shortest_path(grid, (1, 1), (5, 2)) is None
    with pytest.raises(UnreachableGoalError) as info:
        find_route(grid, (1, 1), (5, 2))
    assert info.value.start == (1, 1)
    assert info.value.goal == (5, 2)


def test_treasure_found_cells_block_unless_included():
    grid = MazeGrid.from_rows(["#####", "#...#", "#####"])
    grid.set_type(2, 1, CELL_TREASURE_FOUND)
    assert astar_shortest_path(grid, (1, 1), (3, 1)) is None
    assert astar_shortest_path(grid, (1, 1), (3, 1), include_found=True) == [(1, 1), (2, 1), (3, 1)]
    assert neighbors_open(grid, 1, 1) == []


def test_bfs_distances_only_reach_own_half():
    grid = MazeGrid.from_rows(SPLIT)
    dist = bfs_distances(grid, (1, 1))
    assert set(dist) == {(1, 1), (2, 1), (1, 2), (2, 2)}
    assert dist[(2, 2)] == 2


def test_join_routes():
    a = [(1, 1), (2, 1), (3, 1)]
    b = [(3, 1), (3, 2)]
    assert join_routes(a, b) == [(1, 1), (2, 1), (3, 1), (3, 2)]
    assert join_routes([], b) == b
    with pytest.raises(ValueError):
        join_routes(a, [(5, 5)])


def test_is_contiguous():
    assert is_contiguous([(1, 1), (1, 2), (2, 2)])
    assert not is_contiguous([(1, 1), (2, 2)])
    assert is_contiguous([])
