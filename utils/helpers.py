"""
Helper utility functions for Maze'Lott
"""


def make_odd(value):
    """Bump even sizes to the next odd value"""
    return value + 1 if value % 2 == 0 else value


def manhattan_distance(x1, y1, x2, y2):
    """Calculate Manhattan distance between two points"""
    return abs(x2 - x1) + abs(y2 - y1)


def is_adjacent(a, b):
    """True if two positions are one orthogonal step apart"""
    return manhattan_distance(a[0], a[1], b[0], b[1]) == 1


def format_position(pos):
    """Format (x, y) for the HUD"""
    if pos is None:
        return "-"
    return f"({pos[0]}, {pos[1]})"
