"""
Content placement - treasure, exit, optimal route and waypoints
Runs once on a freshly carved maze
"""

import logging
import random

from maze.difficulty import MazeConfig
from maze.errors import ConfigurationError, UnreachableGoalError
from maze.hints import GOOD_HINTS, BAD_HINTS
from maze.pathfinding import astar_shortest_path, find_route, join_routes, manhattan
from utils.constants import (
    CELL_PATH, CELL_START, CELL_EXIT, CELL_TREASURE_HIDDEN, CELL_WAYPOINT,
    START_POS
)

logger = logging.getLogger(__name__)


class Waypoint:
    """
    Marked cell that shows a one-time hint when first stepped on
    Good waypoints sit on the optimal route, bad ones lead astray
    """
    def __init__(self, pos, hint, is_good, used=False):
        self.pos = tuple(pos)
        self.hint = hint
        self.is_good = is_good
        self.used = used

    def trigger(self):
        """Use the waypoint; returns its hint the first time, None afterwards"""
        if self.used:
            return None
        self.used = True
        return self.hint

    def __repr__(self):
        kind = "good" if self.is_good else "bad"
        return f"Waypoint({self.pos}, {kind}, used={self.used})"


class Furnishing:
    """Everything placed on a maze after carving"""
    def __init__(self, start, treasure, exit_pos, route=None, waypoints=None):
        self.start = start
        self.treasure = treasure
        self.exit = exit_pos
        self.route = route or []
        self.waypoints = waypoints or []

    @property
    def good_waypoints(self):
        return [w for w in self.waypoints if w.is_good]

    @property
    def bad_waypoints(self):
        return [w for w in self.waypoints if not w.is_good]

    def __repr__(self):
        return (f"Furnishing(treasure={self.treasure}, exit={self.exit}, "
                f"route={len(self.route)}, waypoints={len(self.waypoints)})")


# ========== TREASURE / EXIT ==========

def pick_far_cell(cells, origin, exclude=()):
    """Cell farthest from origin by Manhattan distance; first one wins ties"""
    best = None
    max_dist = 0
    for cell in cells:
        if cell in exclude:
            continue
        dist = manhattan(cell, origin)
        if dist > max_dist:
            max_dist = dist
            best = cell
    return best


def find_exit(grid, window):
    """
    Path cell closest to the far corner, searched inside a window

    Returns:
        (x, y) or None if the window holds no path cell
    """
    x0 = max(1, grid.width - window)
    y0 = max(1, grid.height - window)

    candidates = [
        (x, y)
        for y in range(y0, grid.height - 1)
        for x in range(x0, grid.width - 1)
        if grid.cell_type(x, y) == CELL_PATH
    ]
    if not candidates:
        return None
    return min(candidates, key=lambda c: (grid.width - 1 - c[0]) + (grid.height - 1 - c[1]))


def build_full_route(grid, start, treasure, exit_pos):
    """start -> treasure -> exit, the treasure appearing once"""
    to_treasure = find_route(grid, start, treasure)
    to_exit = find_route(grid, treasure, exit_pos)
    return join_routes(to_treasure, to_exit)


# ========== WAYPOINTS ==========

def place_good_waypoints(grid, route, count, rng):
    """
    Guiding waypoints at evenly spaced route indices

    Indices landing on either end of the route, or on a cell that is not a
    plain path (start, treasure, exit), are skipped
    """
    waypoints = []
    length = len(route)
    for k in range(1, count + 1):
        index = length * k // (count + 1)
        if index <= 0 or index >= length - 1:
            continue
        x, y = route[index]
        if grid.cell_type(x, y) != CELL_PATH:
            continue
        grid.set_type(x, y, CELL_WAYPOINT)
        waypoints.append(Waypoint((x, y), rng.choice(GOOD_HINTS), is_good=True))
    return waypoints


def place_bad_waypoints(grid, route, count, rng):
    """Misleading waypoints on path cells off the route, sampled without replacement"""
    on_route = set(route)
    candidates = [pos for pos in grid.iter_positions(CELL_PATH) if pos not in on_route]

    waypoints = []
    for x, y in rng.sample(candidates, min(count, len(candidates))):
        grid.set_type(x, y, CELL_WAYPOINT)
        waypoints.append(Waypoint((x, y), rng.choice(BAD_HINTS), is_good=False))
    return waypoints


# ========== ENTRY POINT ==========

def place_content(grid, rng=None, config=None):
    """
    Furnish a carved maze

    Args:
        grid: Carved MazeGrid
        rng: random.Random-like source (defaults to the random module)
        config: MazeConfig (defaults apply when None)

    Returns:
        Furnishing. Its route and waypoints stay empty when no optimal
        route can be computed.

    Raises:
        ConfigurationError: if the maze is too small to hold the content
    """
    rng = rng or random
    config = config or MazeConfig()
    start = START_POS

    path_cells = list(grid.iter_positions(CELL_PATH))
    if len(path_cells) < config.min_path_cells:
        raise ConfigurationError(
            f"{grid.width}x{grid.height} maze has {len(path_cells)} path cells, "
            f"needs {config.min_path_cells}"
        )

    treasure = pick_far_cell(path_cells, start)

    exit_pos = find_exit(grid, config.exit_window)
    if exit_pos is None:
        raise ConfigurationError(f"no path cell near the far corner of {grid.width}x{grid.height} maze")

    # Midpoint of the start->exit route keeps the treasure on a walkable route
    route = astar_shortest_path(grid, start, exit_pos)
    if route and len(route) > 2:
        treasure = route[len(route) // 2]

    if treasure in (start, exit_pos):
        treasure = pick_far_cell(path_cells, start, exclude=(start, exit_pos))
    if treasure is None:
        raise ConfigurationError("no cell left for the treasure")

    grid.set_type(*exit_pos, CELL_EXIT)
    grid.set_type(*treasure, CELL_TREASURE_HIDDEN)
    grid.set_type(*start, CELL_START)
    furnishing = Furnishing(start, treasure, exit_pos)

    try:
        furnishing.route = build_full_route(grid, start, treasure, exit_pos)
    except UnreachableGoalError as exc:
        logger.warning("optimal route unavailable, waypoints skipped: %s", exc)
        return furnishing

    furnishing.waypoints = (
        place_good_waypoints(grid, furnishing.route, config.good_waypoints, rng)
        + place_bad_waypoints(grid, furnishing.route, config.bad_waypoints, rng)
    )
    logger.debug("placed %r", furnishing)
    return furnishing
