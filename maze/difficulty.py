"""
Maze configurations for Maze'Lott
Defines the generation settings and a few size presets
"""

from utils.constants import (
    DEFAULT_WIDTH, DEFAULT_HEIGHT,
    GOOD_WAYPOINT_COUNT, BAD_WAYPOINT_COUNT,
    EXIT_WINDOW, MIN_PATH_CELLS, MESSAGE_DURATION_MS
)


class MazeConfig:
    """Configuration for maze generation and play"""
    def __init__(self, **kwargs):
        # Maze dimensions (even values are bumped to odd at generation)
        self.width = kwargs.get('width', DEFAULT_WIDTH)
        self.height = kwargs.get('height', DEFAULT_HEIGHT)

        # Waypoints
        self.good_waypoints = kwargs.get('good_waypoints', GOOD_WAYPOINT_COUNT)
        self.bad_waypoints = kwargs.get('bad_waypoints', BAD_WAYPOINT_COUNT)

        # Exit search window, counted back from the far corner
        self.exit_window = kwargs.get('exit_window', EXIT_WINDOW)

        # Below this many path cells the maze stays unfurnished
        self.min_path_cells = kwargs.get('min_path_cells', MIN_PATH_CELLS)

        # Advisory messages
        self.message_duration_ms = kwargs.get('message_duration_ms', MESSAGE_DURATION_MS)

        # Stepping back onto a declined treasure offers it again
        self.reoffer_declined_treasure = kwargs.get('reoffer_declined_treasure', False)

        # Random seed (None = system entropy)
        self.seed = kwargs.get('seed', None)

    def copy(self, **overrides):
        """New config with some fields replaced"""
        values = dict(vars(self))
        values.update(overrides)
        return MazeConfig(**values)

    def __repr__(self):
        return f"MazeConfig({self.width}x{self.height}, seed={self.seed})"


# ========== SIZE PRESETS ==========

PRESET_SMALL = MazeConfig(width=11, height=11)
PRESET_MEDIUM = MazeConfig(width=21, height=21)
PRESET_LARGE = MazeConfig(width=31, height=31)

MAZE_PRESETS = {
    'small': PRESET_SMALL,
    'medium': PRESET_MEDIUM,
    'large': PRESET_LARGE,
}


def get_maze_config(name='medium', **overrides):
    """
    Get configuration for a preset

    Args:
        name: Preset name ('small', 'medium', 'large')
        **overrides: Fields to replace on the preset

    Returns:
        MazeConfig object (unknown names fall back to medium)
    """
    return MAZE_PRESETS.get(name, PRESET_MEDIUM).copy(**overrides)


def larger_preset(width, height):
    """
    Smallest preset strictly bigger than a maze in both dimensions

    Returns:
        MazeConfig, or None when no preset is bigger
    """
    bigger = [c for c in MAZE_PRESETS.values() if c.width > width and c.height > height]
    if not bigger:
        return None
    return min(bigger, key=lambda c: c.width * c.height)
