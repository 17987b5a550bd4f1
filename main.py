"""
Maze'Lott - find the hidden treasure and get out
pygame front-end over the maze core
"""

import argparse
import logging
import random

import pygame

from game.overworld import Overworld, ENTRANCE_COORDS
from game.session import MazeSession
from game.ui_manager import UIManager, MARKER_RADIUS
from maze import hints
from maze.difficulty import get_maze_config, MAZE_PRESETS
from maze.errors import ConfigurationError
from utils.constants import CELL_SIZE, FPS, PANEL_H, PLAYER_MOVE_COOLDOWN_MS, WIN_SCREEN_DELAY_MS

GAME_TITLE = "Maze'Lott"

OVERWORLD_SIZE = (720, 560)

MODE_OVERWORLD = "overworld"
MODE_MAZE = "maze"

MOVE_KEYS = {
    pygame.K_UP: "up", pygame.K_w: "up",
    pygame.K_RIGHT: "right", pygame.K_d: "right",
    pygame.K_DOWN: "down", pygame.K_s: "down",
    pygame.K_LEFT: "left", pygame.K_a: "left",
}

logger = logging.getLogger(__name__)


def _hit(point, center, radius):
    return (point[0] - center[0]) ** 2 + (point[1] - center[1]) ** 2 <= radius ** 2


class MazeGame:
    """
    Main game class
    """
    def __init__(self, config, skip_overworld=False):
        pygame.init()
        pygame.display.set_caption(GAME_TITLE)

        self.config = config
        self.rng = random.Random(config.seed)
        self.session = MazeSession(config, self.rng)
        self.overworld = Overworld(self.rng)
        self.ui_manager = UIManager()

        self.screen = None
        self.screen_w, self.screen_h = OVERWORLD_SIZE
        self.clock = pygame.time.Clock()
        self.running = True

        self.mode = MODE_OVERWORLD
        self.show_route = False
        self.last_move_time = 0
        self.won_at = None

        if skip_overworld:
            self._start_maze()
        else:
            self._create_screen(*OVERWORLD_SIZE)

    def _create_screen(self, width, height):
        self.screen_w, self.screen_h = width, height
        self.screen = pygame.display.set_mode((width, height))

    def _start_maze(self):
        """Generate a fresh maze and size the window for it"""
        try:
            level = self.session.new_bigger_maze()
        except ConfigurationError as exc:
            print(f"Cannot build maze: {exc}")
            self.running = False
            return
        self.mode = MODE_MAZE
        self.show_route = False
        self.won_at = None
        self._create_screen(max(level.width * CELL_SIZE, 640), level.height * CELL_SIZE + PANEL_H)
        print(f"New maze {level.width}x{level.height}")

    # ========== EVENTS ==========

    def handle_events(self):
        now = pygame.time.get_ticks()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event.key, now)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self._handle_click(event.pos, now)

    def _handle_keydown(self, key, now):
        if key == pygame.K_ESCAPE:
            self.running = False
            return
        if self.mode == MODE_OVERWORLD:
            if key in (pygame.K_RETURN, pygame.K_SPACE) and self.overworld.entrance_open:
                self._start_maze()
            return

        if self.session.treasure_pending:
            if key in (pygame.K_y, pygame.K_RETURN):
                self.session.confirm_treasure(True, now)
            elif key in (pygame.K_n, pygame.K_BACKSPACE):
                self.session.confirm_treasure(False, now)
            return

        if key == pygame.K_n:
            self._start_maze()
        elif key == pygame.K_r:
            self.session.reset()
            self.won_at = None
        elif key == pygame.K_o:
            self.show_route = not self.show_route

    def _handle_click(self, pos, now):
        if self.mode == MODE_OVERWORLD:
            self._handle_overworld_click(pos, now)
            return
        x, y = pos[0] // CELL_SIZE, pos[1] // CELL_SIZE
        self.session.move_to(x, y, now)

    def _handle_overworld_click(self, pos, now):
        if self.overworld.entrance_open and _hit(pos, ENTRANCE_COORDS, MARKER_RADIUS + 4):
            self._start_maze()
            return
        for index, marker in enumerate(self.overworld.markers):
            if _hit(pos, marker.feature.coords, MARKER_RADIUS):
                text = self.overworld.visit(index)
                if text:
                    self.session.messages.post(text, now)
                if self.overworld.entrance_open:
                    self.session.messages.post(hints.ENTRANCE_OPEN, now)
                return

    # ========== UPDATE ==========

    def update(self):
        if self.mode != MODE_MAZE or self.session.treasure_pending:
            return
        now = pygame.time.get_ticks()
        if self.session.game_won:
            if self.won_at is None:
                self.won_at = now
            return
        if now - self.last_move_time < PLAYER_MOVE_COOLDOWN_MS:
            return

        keys = pygame.key.get_pressed()
        for key, direction in MOVE_KEYS.items():
            if keys[key]:
                if self.session.move(direction, now):
                    self.last_move_time = now
                break

    # ========== RENDER ==========

    def render(self):
        now = pygame.time.get_ticks()
        if self.mode == MODE_OVERWORLD:
            self.ui_manager.draw_overworld(self.screen, self.overworld)
        elif self.session.setup_error is not None:
            self.ui_manager.draw_setup_error(self.screen, self.session.setup_error)
        else:
            maze_h = self.session.grid.height * CELL_SIZE
            self.ui_manager.draw_maze(self.screen, self.session, CELL_SIZE, self.show_route)
            self.ui_manager.draw_hud(self.screen, self.session, maze_h, self.screen_w, PANEL_H)
            if self.session.treasure_pending:
                self.ui_manager.draw_treasure_prompt(self.screen)
            elif self.won_at is not None and now - self.won_at >= WIN_SCREEN_DELAY_MS:
                self.ui_manager.draw_game_over(self.screen, self.session)

        self.ui_manager.draw_message(self.screen, self.session.message(now))
        pygame.display.flip()

    def run(self):
        while self.running:
            self.clock.tick(FPS)
            self.handle_events()
            self.update()
            if self.running:
                self.render()
        pygame.quit()
        print("Game closed.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=GAME_TITLE)
    parser.add_argument("--preset", choices=sorted(MAZE_PRESETS), default="medium")
    parser.add_argument("--width", type=int, default=None, help="maze width in cells (even values become odd)")
    parser.add_argument("--height", type=int, default=None, help="maze height in cells (even values become odd)")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--skip-overworld", action="store_true", help="go straight into the maze")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    overrides = {"seed": args.seed}
    if args.width is not None:
        overrides["width"] = args.width
    if args.height is not None:
        overrides["height"] = args.height
    config = get_maze_config(args.preset, **overrides)
    logger.debug("starting with %r", config)

    MazeGame(config, skip_overworld=args.skip_overworld).run()


if __name__ == "__main__":
    main()
