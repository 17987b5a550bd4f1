"""
Global constants for Maze'Lott
"""

# Screen settings
CELL_SIZE = 25
FPS = 60

# HUD panel height
PANEL_H = 110

# Cell types
CELL_WALL = "wall"
CELL_PATH = "path"
CELL_START = "start"
CELL_EXIT = "exit"
CELL_TREASURE_HIDDEN = "treasure-hidden"
CELL_TREASURE_FOUND = "treasure-found"
CELL_WAYPOINT = "waypoint"

CELL_TYPES = (
    CELL_WALL,
    CELL_PATH,
    CELL_START,
    CELL_EXIT,
    CELL_TREASURE_HIDDEN,
    CELL_TREASURE_FOUND,
    CELL_WAYPOINT,
)

# Integer codes used by grid snapshots (numpy arrays)
CELL_CODES = {cell_type: code for code, cell_type in enumerate(CELL_TYPES)}

# Cells the player and the pathfinder may step on
TRAVERSABLE_TYPES = frozenset((
    CELL_PATH,
    CELL_START,
    CELL_TREASURE_HIDDEN,
    CELL_WAYPOINT,
    CELL_EXIT,
))

# Start room of every maze
START_POS = (1, 1)

# Direction vectors (one grid step)
DIRS = [
    (0, -1),    # up
    (1, 0),     # right
    (0, 1),     # down
    (-1, 0),    # left
]

# Carving jumps two cells so walls sit between rooms
CARVE_DIRS = [(dx * 2, dy * 2) for dx, dy in DIRS]

DIRECTION_NAMES = {
    "up": (0, -1),
    "right": (1, 0),
    "down": (0, 1),
    "left": (-1, 0),
}

# Maze sizes
MIN_MAZE_SIZE = 3
DEFAULT_WIDTH = 21
DEFAULT_HEIGHT = 21

# Content placement
GOOD_WAYPOINT_COUNT = 3
BAD_WAYPOINT_COUNT = 2
EXIT_WINDOW = 6
MIN_PATH_CELLS = 5

# Timing (milliseconds)
MESSAGE_DURATION_MS = 4000
WIN_SCREEN_DELAY_MS = 1500
PLAYER_MOVE_COOLDOWN_MS = 90
