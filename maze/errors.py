"""
Errors raised by the maze core
"""


class MazeError(Exception):
    """Base class for maze core errors"""


class ConfigurationError(MazeError):
    """Maze dimensions cannot hold the required content"""


class UnreachableGoalError(MazeError):
    """No route exists between two positions"""

    def __init__(self, start, goal):
        self.start = start
        self.goal = goal
        super().__init__(f"no route from {start} to {goal}")
