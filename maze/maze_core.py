"""
Core maze grid - cell storage, bounds checks and snapshots
"""

import numpy as np

from maze.errors import ConfigurationError
from utils.constants import CELL_WALL, CELL_PATH, CELL_CODES, MIN_MAZE_SIZE
from utils.helpers import make_odd


class Cell:
    """Single maze cell: its type and the carve-time visited flag"""
    def __init__(self, type=CELL_WALL, visited=False):
        self.type = type
        self.visited = visited

    def __eq__(self, other):
        if not isinstance(other, Cell):
            return NotImplemented
        return self.type == other.type and self.visited == other.visited

    def __repr__(self):
        return f"Cell({self.type!r}, visited={self.visited})"


def normalize_size(width, height):
    """
    Force maze dimensions to odd values

    Args:
        width: Requested width in cells
        height: Requested height in cells

    Returns:
        (width, height) tuple, each bumped to the next odd value if even

    Raises:
        ConfigurationError: if a dimension cannot hold the start room
    """
    if width < MIN_MAZE_SIZE or height < MIN_MAZE_SIZE:
        raise ConfigurationError(
            f"maze must be at least {MIN_MAZE_SIZE}x{MIN_MAZE_SIZE}, got {width}x{height}"
        )
    return make_odd(width), make_odd(height)


class MazeGrid:
    """
    Maze grid with cell-based representation
    Every cell starts as a wall; carving turns cells into paths
    """
    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.cells = [[Cell() for _ in range(width)] for _ in range(height)]

    def in_bounds(self, x, y):
        """Check if coordinates are within grid bounds"""
        return 0 <= x < self.width and 0 <= y < self.height

    def is_border(self, x, y):
        """Check if coordinates lie on the outer wall ring"""
        return x in (0, self.width - 1) or y in (0, self.height - 1)

    def get(self, x, y):
        """Get the cell at (x, y)"""
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return self.cells[y][x]

    def cell_type(self, x, y):
        return self.get(x, y).type

    def set_type(self, x, y, cell_type):
        self.get(x, y).type = cell_type

    def mark_path(self, x, y):
        """Carve a cell: path type, visited"""
        cell = self.get(x, y)
        cell.type = CELL_PATH
        cell.visited = True

    def is_visited(self, x, y):
        return self.get(x, y).visited

    def iter_positions(self, cell_type=None):
        """Yield interior positions in row-major order, optionally filtered by type"""
        for y in range(1, self.height - 1):
            for x in range(1, self.width - 1):
                if cell_type is None or self.cells[y][x].type == cell_type:
                    yield (x, y)

    def count(self, cell_type):
        """Count cells of a type over the whole grid"""
        return sum(1 for row in self.cells for cell in row if cell.type == cell_type)

    def find(self, cell_type):
        """All positions holding a cell type"""
        return [
            (x, y)
            for y, row in enumerate(self.cells)
            for x, cell in enumerate(row)
            if cell.type == cell_type
        ]

    def as_matrix(self):
        """Cell types as a list of rows"""
        return [[cell.type for cell in row] for row in self.cells]

    def as_array(self):
        """
        Cell types as integer codes

        Returns:
            numpy int8 array of shape (height, width), values from CELL_CODES
        """
        arr = np.empty((self.height, self.width), dtype=np.int8)
        for y, row in enumerate(self.cells):
            arr[y] = [CELL_CODES[cell.type] for cell in row]
        return arr

    @classmethod
    def from_rows(cls, rows, legend=None):
        """
        Build a grid from strings, mostly for fixtures

        Args:
            rows: List of equal-length strings
            legend: Mapping char -> cell type (default '#' wall, '.' path)
        """
        legend = legend or {"#": CELL_WALL, ".": CELL_PATH}
        grid = cls(len(rows[0]), len(rows))
        for y, line in enumerate(rows):
            for x, ch in enumerate(line):
                grid.cells[y][x] = Cell(legend[ch], legend[ch] != CELL_WALL)
        return grid

    def __repr__(self):
        return f"MazeGrid({self.width}x{self.height})"
