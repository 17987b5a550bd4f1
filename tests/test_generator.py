import random
from collections import deque

import pytest

from maze.generator import carve_maze, gen_dfs_backtracker
from maze.maze_core import MazeGrid
from utils.constants import CELL_PATH

SIZES = [(5, 5), (7, 7), (9, 15), (21, 11), (31, 31)]


def path_cells(grid):
    return {(x, y) for y in range(grid.height) for x in range(grid.width)
            if grid.cell_type(x, y) == CELL_PATH}


def reachable(cells, start):
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for n in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if n in cells and n not in seen:
                seen.add(n)
                q.append(n)
    return seen


def edge_count(cells):
    return sum(1 for (x, y) in cells for n in ((x + 1, y), (x, y + 1)) if n in cells)


@pytest.mark.parametrize("width,height", SIZES)
def test_every_room_is_carved_and_connected(width, height):
    for seed in range(5):
        g = MazeGrid(width, height)
        carve_maze(g, random.Random(seed))
        cells = path_cells(g)
        rooms = {(x, y) for y in range(1, height - 1, 2) for x in range(1, width - 1, 2)}
        assert rooms <= cells
        assert reachable(cells, (1, 1)) == cells


@pytest.mark.parametrize("width,height", SIZES)
def test_carved_maze_is_a_tree(width, height):
    for seed in range(5):
        g = MazeGrid(width, height)
        links = carve_maze(g, random.Random(seed))
        cells = path_cells(g)
        assert len(cells) == 1 + 2 * links
        assert edge_count(cells) == len(cells) - 1


def test_border_stays_wall_and_even_even_cells_are_never_carved():
    g = MazeGrid(15, 9)
    carve_maze(g, random.Random(3))
    for x, y in path_cells(g):
        assert not g.is_border(x, y)
        assert x % 2 == 1 or y % 2 == 1


def test_same_seed_same_maze():
    a, b = MazeGrid(21, 21), MazeGrid(21, 21)
    carve_maze(a, random.Random(42))
    carve_maze(b, random.Random(42))
    assert a.as_matrix() == b.as_matrix()


def test_generator_steps_end_with_done():
    g = MazeGrid(7, 7)
    states = list(gen_dfs_backtracker(g, random.Random(1)))
    assert states[0]["current"] == (1, 1)
    assert states[-1]["done"] is True
    assert not any(s["done"] for s in states[:-1])
    carved = [s["carved"] for s in states if s["carved"]]
    # 3x3 rooms form a tree of 8 links
    assert len(carved) == 8
    for (ax, ay), (bx, by) in carved:
        assert abs(ax - bx) + abs(ay - by) == 2


def test_tiny_grid_only_carves_the_start_room():
    g = MazeGrid(3, 3)
    assert carve_maze(g, random.Random(0)) == 0
    assert path_cells(g) == {(1, 1)}
