"""
Color palette for Maze'Lott
"""

# Background colors
COLOR_BG = (30, 22, 18)           # Main background
COLOR_PANEL_BG = (20, 14, 10)     # Panel background
COLOR_MENU_OVERLAY = (0, 0, 0, 170)

# UI colors
COLOR_TEXT = (210, 180, 140)      # Normal text
COLOR_TEXT_HIGHLIGHT = (255, 230, 160)
COLOR_TEXT_DIM = (150, 130, 110)
COLOR_MESSAGE_BG = (101, 67, 33)
COLOR_MESSAGE_BORDER = (139, 69, 19)

# Cell colors
COLOR_WALL = (62, 39, 35)
COLOR_PATH = (222, 196, 150)
COLOR_START = (120, 160, 220)
COLOR_EXIT = (60, 200, 120)
COLOR_TREASURE_FOUND = (255, 200, 40)
COLOR_WAYPOINT = (190, 120, 220)

# Entity colors
COLOR_PLAYER = (220, 40, 40)
COLOR_VISITED_CELL = (200, 170, 120)
COLOR_OPTIMAL_PATH = (255, 105, 180, 150)

# Overworld colors
COLOR_MAP_BG = (90, 120, 70)
COLOR_MARKER = (200, 200, 220)
COLOR_MARKER_VISITED = (110, 110, 120)
COLOR_ENTRANCE = (255, 215, 0)
