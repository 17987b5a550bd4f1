"""
Maze generation - randomized depth-first backtracker
Carves a perfect maze over the odd-coordinate rooms of a MazeGrid
"""

import logging
import random

from utils.constants import CARVE_DIRS, START_POS

logger = logging.getLogger(__name__)


def unvisited_neighbors(grid, x, y):
    """Rooms two steps away that are strictly inside the border and not carved yet"""
    res = []
    for dx, dy in CARVE_DIRS:
        nx, ny = x + dx, y + dy
        if 0 < nx < grid.width - 1 and 0 < ny < grid.height - 1 and not grid.is_visited(nx, ny):
            res.append((nx, ny))
    return res


# ========== GENERATOR: DFS BACKTRACKER ==========

def gen_dfs_backtracker(grid, rng=None):
    """Depth-First Search with backtracking - animated generator"""
    rng = rng or random

    sx, sy = START_POS
    grid.mark_path(sx, sy)
    stack = [(sx, sy)]

    yield {"grid": grid, "current": (sx, sy), "carved": None, "done": False}

    while stack:
        cx, cy = stack[-1]
        neighbors = unvisited_neighbors(grid, cx, cy)

        if neighbors:
            nx, ny = rng.choice(neighbors)
            wx, wy = cx + (nx - cx) // 2, cy + (ny - cy) // 2
            grid.mark_path(wx, wy)
            grid.mark_path(nx, ny)
            stack.append((nx, ny))

            yield {"grid": grid, "current": (nx, ny), "carved": ((cx, cy), (nx, ny)), "done": False}
        else:
            stack.pop()
            yield {"grid": grid, "current": (cx, cy), "carved": None, "done": False}

    yield {"grid": grid, "current": (sx, sy), "carved": None, "done": True}


def carve_maze(grid, rng=None):
    """
    Carve the whole maze at once

    Args:
        grid: MazeGrid filled with walls
        rng: random.Random-like source (defaults to the random module)

    Returns:
        Number of links carved (each link opens one wall and one room)
    """
    links = 0
    for state in gen_dfs_backtracker(grid, rng):
        if state["carved"] is not None:
            links += 1
    logger.debug("carved %dx%d maze with %d links", grid.width, grid.height, links)
    return links
