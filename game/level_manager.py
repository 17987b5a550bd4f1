"""
Level - one carved and furnished maze
"""

import logging
import random

from maze.difficulty import MazeConfig
from maze.errors import ConfigurationError
from maze.generator import gen_dfs_backtracker, carve_maze
from maze.maze_core import MazeGrid, normalize_size
from maze.pathfinding import bfs_distances
from maze.placement import place_content
from utils.constants import (
    CELL_WALL, CELL_PATH, CELL_TREASURE_HIDDEN, CELL_TREASURE_FOUND, START_POS
)

logger = logging.getLogger(__name__)


class Level:
    """
    Represents a single maze and its content
    """
    def __init__(self, width, height, config=None, rng=None):
        """
        Args:
            width: Requested width (even values become odd)
            height: Requested height (even values become odd)
            config: MazeConfig with placement settings
            rng: random.Random-like source

        Raises:
            ConfigurationError: if the size cannot hold a maze at all
        """
        self.config = config or MazeConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.width, self.height = normalize_size(width, height)

        self.grid = MazeGrid(self.width, self.height)
        self.start_pos = START_POS
        self.furnishing = None
        self.setup_error = None
        self.links = 0

        # Generation state
        self.generating = False
        self.generation_complete = False

    def generate_maze(self, animated=False):
        """
        Carve the maze and place its content

        Args:
            animated: If True, returns generator for animated generation

        Returns:
            Generator if animated=True, None otherwise
        """
        if animated:
            self.generating = True
            return gen_dfs_backtracker(self.grid, self.rng)

        self.links = carve_maze(self.grid, self.rng)
        self._furnish()
        self.generation_complete = True
        return None

    def finalize_generation(self):
        """Place content after an animated generation has been drained"""
        self.links = (self.grid.count(CELL_PATH) - 1) // 2
        self._furnish()
        self.generation_complete = True
        self.generating = False

    def _furnish(self):
        try:
            self.furnishing = place_content(self.grid, self.rng, self.config)
        except ConfigurationError as exc:
            logger.warning("maze left unfurnished: %s", exc)
            self.setup_error = exc
            return

        reachable = bfs_distances(self.grid, self.start_pos)
        if len(reachable) != self.grid.width * self.grid.height - self.grid.count(CELL_WALL):
            logger.warning("%r: some open cells are unreachable from the start", self)

    @property
    def is_playable(self):
        return self.furnishing is not None and self.furnishing.exit is not None

    @property
    def treasure_pos(self):
        return self.furnishing.treasure if self.furnishing else None

    @property
    def exit_pos(self):
        return self.furnishing.exit if self.furnishing else None

    @property
    def optimal_route(self):
        return list(self.furnishing.route) if self.furnishing else []

    @property
    def waypoints(self):
        return self.furnishing.waypoints if self.furnishing else []

    def reset(self):
        """Restore the content for another run on the same maze"""
        if not self.furnishing:
            return
        tx, ty = self.furnishing.treasure
        if self.grid.cell_type(tx, ty) == CELL_TREASURE_FOUND:
            self.grid.set_type(tx, ty, CELL_TREASURE_HIDDEN)
        for waypoint in self.furnishing.waypoints:
            waypoint.used = False

    def __repr__(self):
        return f"Level(size={self.width}x{self.height})"
