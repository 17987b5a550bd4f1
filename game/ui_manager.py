"""
UI Manager - draws the overworld, the maze and the HUD
Reads session state only; never changes it
"""

import numpy as np
import pygame
import pygame.surfarray

from game.overworld import ENTRANCE_COORDS
from maze import hints
from utils.constants import (
    CELL_TYPES, CELL_WALL, CELL_PATH, CELL_START, CELL_EXIT,
    CELL_TREASURE_HIDDEN, CELL_TREASURE_FOUND, CELL_WAYPOINT
)
from utils.colors import (
    COLOR_BG, COLOR_PANEL_BG, COLOR_MENU_OVERLAY,
    COLOR_TEXT, COLOR_TEXT_HIGHLIGHT, COLOR_TEXT_DIM,
    COLOR_MESSAGE_BG, COLOR_MESSAGE_BORDER,
    COLOR_WALL, COLOR_PATH, COLOR_START, COLOR_EXIT,
    COLOR_TREASURE_FOUND, COLOR_WAYPOINT,
    COLOR_PLAYER, COLOR_VISITED_CELL, COLOR_OPTIMAL_PATH,
    COLOR_MAP_BG, COLOR_MARKER, COLOR_MARKER_VISITED, COLOR_ENTRANCE
)
from utils.helpers import format_position

CELL_COLORS = {
    CELL_WALL: COLOR_WALL,
    CELL_PATH: COLOR_PATH,
    CELL_START: COLOR_START,
    CELL_EXIT: COLOR_EXIT,
    # A hidden treasure looks like any other path cell
    CELL_TREASURE_HIDDEN: COLOR_PATH,
    CELL_TREASURE_FOUND: COLOR_TREASURE_FOUND,
    CELL_WAYPOINT: COLOR_WAYPOINT,
}

# Row i holds the color of cell code i
PALETTE = np.array([CELL_COLORS[t] for t in CELL_TYPES], dtype=np.uint8)

MARKER_RADIUS = 14


def cells_to_rgb(cells):
    """
    Map a (height, width) code array to a (width, height, 3) RGB frame

    surfarray indexes pixels as [x][y], hence the transpose
    """
    return np.ascontiguousarray(PALETTE[cells].transpose(1, 0, 2))


class UIManager:
    """
    Manages all UI rendering
    """
    def __init__(self):
        self.font_small = None
        self.font_medium = None
        self.font_large = None
        self._init_fonts()

    def _init_fonts(self):
        """Initialize fonts"""
        pygame.font.init()
        self.font_small = pygame.font.SysFont("consolas", 14)
        self.font_medium = pygame.font.SysFont("consolas", 18)
        self.font_large = pygame.font.SysFont("consolas", 32, bold=True)

    # ========== MAZE ==========

    def draw_maze(self, screen, session, cell_size, show_route=False):
        """
        Draw the maze, trail, optional route overlay and the player

        Args:
            screen: Pygame screen
            session: MazeSession
            cell_size: Cell size in pixels
            show_route: Overlay the optimal route
        """
        screen.fill(COLOR_BG)
        grid = session.grid
        if grid is None:
            return

        frame = cells_to_rgb(grid.as_array())
        surface = pygame.surfarray.make_surface(frame)
        surface = pygame.transform.scale(surface, (grid.width * cell_size, grid.height * cell_size))
        screen.blit(surface, (0, 0))

        for x, y in session.state.visited:
            self._draw_cell(screen, x, y, cell_size, COLOR_VISITED_CELL, pad=cell_size // 3)

        if show_route and session.optimal_route:
            overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
            for x, y in session.optimal_route:
                pygame.draw.rect(overlay, COLOR_OPTIMAL_PATH, (x * cell_size, y * cell_size, cell_size, cell_size))
            screen.blit(overlay, (0, 0))

        px, py = session.player_pos
        self._draw_cell(screen, px, py, cell_size, COLOR_PLAYER, pad=4)

    def _draw_cell(self, screen, x, y, cell_size, color, pad=4):
        """Draw filled cell"""
        rect = (x * cell_size + pad, y * cell_size + pad, cell_size - pad * 2, cell_size - pad * 2)
        pygame.draw.rect(screen, color, rect, border_radius=4)

    # ========== HUD ==========

    def draw_hud(self, screen, session, panel_y, screen_w, panel_h):
        """Draw the stats panel under the maze"""
        pygame.draw.rect(screen, COLOR_PANEL_BG, (0, panel_y, screen_w, panel_h))

        lines = [
            f"Position: {format_position(session.player_pos)}  Steps: {session.steps}  "
            f"Waypoints: {session.waypoints_crossed}",
            f"Treasure: {session.treasure_status()}",
            f"Status: {session.game_status()}",
            "Arrows/WASD/click: move | O: route | R: reset | N: new maze | Esc: quit",
        ]
        for i, line in enumerate(lines):
            color = COLOR_TEXT_DIM if i == len(lines) - 1 else COLOR_TEXT
            font = self.font_small if i == len(lines) - 1 else self.font_medium
            screen.blit(font.render(line, True, color), (10, panel_y + 8 + i * 24))

    def draw_message(self, screen, text):
        """Draw the transient message banner"""
        if not text:
            return
        surf = self.font_medium.render(text, True, COLOR_TEXT_HIGHLIGHT)
        screen_w, screen_h = screen.get_size()
        box = surf.get_rect(center=(screen_w // 2, screen_h // 2)).inflate(30, 20)
        pygame.draw.rect(screen, COLOR_MESSAGE_BG, box, border_radius=12)
        pygame.draw.rect(screen, COLOR_MESSAGE_BORDER, box, width=2, border_radius=12)
        screen.blit(surf, surf.get_rect(center=box.center))

    def draw_treasure_prompt(self, screen):
        """Ask whether to pick the treasure up"""
        self._draw_overlay(screen)
        screen_w, screen_h = screen.get_size()
        title = self.font_medium.render(hints.TREASURE_OFFER, True, COLOR_TEXT_HIGHLIGHT)
        sub = self.font_small.render("Y / Enter: take it    N / Backspace: leave it", True, COLOR_TEXT)
        screen.blit(title, title.get_rect(center=(screen_w // 2, screen_h // 2 - 15)))
        screen.blit(sub, sub.get_rect(center=(screen_w // 2, screen_h // 2 + 15)))

    def draw_game_over(self, screen, session):
        """Final screen after a win"""
        self._draw_overlay(screen)
        screen_w, screen_h = screen.get_size()
        lines = [
            (self.font_large, hints.VICTORY),
            (self.font_medium, f"Steps: {session.steps}"),
            (self.font_medium, f"Waypoints crossed: {session.waypoints_crossed}"),
            (self.font_small, "N: new maze | R: replay | Esc: quit"),
        ]
        y = screen_h // 2 - 60
        for font, text in lines:
            surf = font.render(text, True, COLOR_TEXT_HIGHLIGHT)
            screen.blit(surf, surf.get_rect(center=(screen_w // 2, y)))
            y += 40

    def draw_setup_error(self, screen, error):
        """Explain why the maze is not playable"""
        screen.fill(COLOR_BG)
        screen_w, screen_h = screen.get_size()
        for i, text in enumerate(("Maze too small to hide anything.", str(error), "N: try a bigger maze")):
            surf = self.font_medium.render(text, True, COLOR_TEXT)
            screen.blit(surf, surf.get_rect(center=(screen_w // 2, screen_h // 2 - 30 + i * 30)))

    def _draw_overlay(self, screen):
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        overlay.fill(COLOR_MENU_OVERLAY)
        screen.blit(overlay, (0, 0))

    # ========== OVERWORLD ==========

    def draw_overworld(self, screen, overworld):
        """Draw the kingdom map with its markers and the maze entrance"""
        screen.fill(COLOR_MAP_BG)
        for marker in overworld.markers:
            color = COLOR_MARKER_VISITED if marker.visited else COLOR_MARKER
            pygame.draw.circle(screen, color, marker.feature.coords, MARKER_RADIUS)
            label = self.font_small.render(marker.feature.name, True, COLOR_TEXT_HIGHLIGHT)
            screen.blit(label, label.get_rect(midtop=(marker.feature.coords[0], marker.feature.coords[1] + 16)))

        if overworld.entrance_open:
            pygame.draw.circle(screen, COLOR_ENTRANCE, ENTRANCE_COORDS, MARKER_RADIUS + 4)
            label = self.font_small.render("Maze'Lott", True, COLOR_TEXT_HIGHLIGHT)
            screen.blit(label, label.get_rect(midtop=(ENTRANCE_COORDS[0], ENTRANCE_COORDS[1] + 20)))

        title = self.font_medium.render(
            f"Waypoints found: {overworld.visited_count}/{len(overworld.markers)}", True, COLOR_TEXT_HIGHLIGHT
        )
        screen.blit(title, (10, 10))
