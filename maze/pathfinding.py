"""
Pathfinding over a MazeGrid - A* routes, BFS reachability, route helpers
"""

import heapq
import logging
from collections import deque
from itertools import count

from maze.errors import UnreachableGoalError
from utils.constants import DIRS, TRAVERSABLE_TYPES, CELL_TREASURE_FOUND
from utils.helpers import is_adjacent

logger = logging.getLogger(__name__)


def is_traversable(cell_type, include_found=False):
    """Check if a cell type can be walked through"""
    if cell_type in TRAVERSABLE_TYPES:
        return True
    return include_found and cell_type == CELL_TREASURE_FOUND


def neighbors_open(grid, x, y, include_found=False):
    """Get list of traversable neighbor cells"""
    res = []
    for dx, dy in DIRS:
        nx, ny = x + dx, y + dy
        if grid.in_bounds(nx, ny) and is_traversable(grid.cell_type(nx, ny), include_found):
            res.append((nx, ny))
    return res


def reconstruct_path(prev, goal):
    """Reconstruct path from prev dictionary"""
    path = []
    cur = goal
    while cur is not None:
        path.append(cur)
        cur = prev[cur]
    path.reverse()
    return path


def manhattan(a, b):
    """Manhattan distance heuristic"""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def astar_shortest_path(grid, start, goal, include_found=False):
    """
    A* shortest path finder

    Args:
        grid: MazeGrid to search
        start: (x, y) start position
        goal: (x, y) goal position
        include_found: Also walk through treasure-found cells

    Returns:
        List of positions from start to goal (both inclusive),
        or None if the goal cannot be reached
    """
    start = tuple(start)
    goal = tuple(goal)
    if start == goal:
        return [start]

    # Push order breaks f-score ties, so the first-found node wins
    order = count()
    open_heap = [(manhattan(start, goal), next(order), start)]

    prev = {start: None}
    g_score = {start: 0}
    closed = set()

    while open_heap:
        _, _, cur = heapq.heappop(open_heap)
        if cur in closed:
            continue
        closed.add(cur)

        if cur == goal:
            return reconstruct_path(prev, goal)

        tentative_g = g_score[cur] + 1
        for nxt in neighbors_open(grid, cur[0], cur[1], include_found):
            if nxt in closed:
                continue
            if tentative_g < g_score.get(nxt, 10**9):
                g_score[nxt] = tentative_g
                prev[nxt] = cur
                heapq.heappush(open_heap, (tentative_g + manhattan(nxt, goal), next(order), nxt))

    logger.debug("no route from %s to %s", start, goal)
    return None


def find_route(grid, start, goal, include_found=False):
    """Like astar_shortest_path, but raises UnreachableGoalError instead of returning None"""
    route = astar_shortest_path(grid, start, goal, include_found)
    if route is None:
        raise UnreachableGoalError(tuple(start), tuple(goal))
    return route


def bfs_distances(grid, start, include_found=False):
    """Step distance from start to every reachable traversable cell"""
    start = tuple(start)
    dist = {start: 0}
    q = deque([start])

    while q:
        x, y = q.popleft()
        for n in neighbors_open(grid, x, y, include_found):
            if n not in dist:
                dist[n] = dist[(x, y)] + 1
                q.append(n)
    return dist


# ========== ROUTES ==========

def join_routes(first, second):
    """Concatenate two routes sharing their joint position"""
    if not first:
        return list(second)
    if not second:
        return list(first)
    if first[-1] != second[0]:
        raise ValueError(f"routes do not meet: {first[-1]} != {second[0]}")
    return list(first) + list(second[1:])


def is_contiguous(route):
    """Every consecutive pair of positions is 4-adjacent"""
    return all(is_adjacent(a, b) for a, b in zip(route, route[1:]))
