"""
Maze session - the object a front-end owns and talks to
Ties a Level, its GameState and the message board together
"""

import logging
import random

from game.game_state import GameState, Phase
from game.level_manager import Level
from game.messages import MessageBoard
from maze import hints
from maze.difficulty import MazeConfig, larger_preset

logger = logging.getLogger(__name__)


class MazeSession:
    """
    One player's game: current maze, progress and messages
    """
    def __init__(self, config=None, rng=None):
        """
        Args:
            config: MazeConfig (default sizes and placement settings)
            rng: random.Random-like source; seeded from config.seed if omitted
        """
        self.config = config or MazeConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.level = None
        self.state = GameState(reoffer_declined_treasure=self.config.reoffer_declined_treasure)
        self.messages = MessageBoard(self.config.message_duration_ms)

    # ---- Commands ----
    def new_maze(self, width=None, height=None):
        """
        Generate a fresh maze and restart progress

        Returns:
            The new Level (check is_playable / setup_error)

        Raises:
            ConfigurationError: if the size cannot hold a maze at all
        """
        width = self.config.width if width is None else width
        height = self.config.height if height is None else height

        level = Level(width, height, self.config, self.rng)
        level.generate_maze()
        self._start(level)
        return level

    def new_bigger_maze(self):
        """
        Regenerate after a maze was too small to furnish

        Steps up to the smallest preset bigger than the current maze; a
        playable current maze is regenerated at its own size
        """
        if self.level is None:
            return self.new_maze()
        if self.level.is_playable:
            return self.new_maze(self.level.width, self.level.height)
        preset = larger_preset(self.level.width, self.level.height)
        if preset is None:
            return self.new_maze()
        logger.info("maze %r too small, stepping up to %dx%d", self.level, preset.width, preset.height)
        return self.new_maze(preset.width, preset.height)

    def start_level(self, level):
        """Play a level generated elsewhere (e.g. animated by the front-end)"""
        self._start(level)

    def _start(self, level):
        self.level = level
        self.messages.clear()
        if level.is_playable:
            self.state.attach(level.grid, level.waypoints, level.start_pos)
        else:
            # Unfurnished maze: nothing to play, the front-end asks for a bigger size
            self.state.detach()
        logger.info("new maze %r, playable=%s", level, level.is_playable)

    def reset(self):
        """Restart the current maze without regenerating it"""
        if self.level is not None:
            self.level.reset()
        self.state.reset()
        self.messages.clear()

    def move_to(self, x, y, now_ms=0):
        """Move onto a target cell (must be adjacent)"""
        return self._after_move(self.state.attempt_move(x, y), now_ms)

    def move(self, direction, now_ms=0):
        """Move by direction name"""
        return self._after_move(self.state.move(direction), now_ms)

    def step(self, dx, dy, now_ms=0):
        """Move by delta"""
        return self._after_move(self.state.step(dx, dy), now_ms)

    def _after_move(self, result, now_ms):
        if not result:
            return result
        if result.hint:
            self.messages.post(result.hint, now_ms)
        if result.won:
            self.messages.post(hints.VICTORY, now_ms)
        return result

    def confirm_treasure(self, accept, now_ms=0):
        """Answer the pending treasure offer"""
        if not self.state.confirm_treasure(accept):
            return False
        self.messages.post(hints.TREASURE_TAKEN if accept else hints.TREASURE_LEFT, now_ms)
        return True

    # ---- Queries ----
    @property
    def grid(self):
        return self.level.grid if self.level else None

    @property
    def phase(self):
        return self.state.phase

    @property
    def player_pos(self):
        return self.state.player_pos

    @property
    def steps(self):
        return self.state.steps

    @property
    def waypoints_crossed(self):
        return self.state.waypoints_crossed

    @property
    def has_treasure(self):
        return self.state.has_treasure

    @property
    def game_won(self):
        return self.state.game_won

    @property
    def treasure_pending(self):
        return self.state.treasure_pending

    @property
    def last_hint(self):
        return self.state.last_hint

    @property
    def optimal_route(self):
        return self.level.optimal_route if self.level else []

    @property
    def setup_error(self):
        return self.level.setup_error if self.level else None

    def message(self, now_ms):
        return self.messages.current(now_ms)

    def treasure_status(self):
        return hints.STATUS_TREASURE_HELD if self.has_treasure else hints.STATUS_TREASURE_HIDDEN

    def game_status(self):
        return hints.STATUS_WON if self.phase == Phase.WON else hints.STATUS_PLAYING

    def snapshot(self):
        """All observable state in one dict"""
        return {
            "cells": self.grid.as_array() if self.grid else None,
            "player_pos": self.player_pos,
            "steps": self.steps,
            "waypoints_crossed": self.waypoints_crossed,
            "has_treasure": self.has_treasure,
            "game_won": self.game_won,
            "phase": self.phase.name,
            "optimal_route": self.optimal_route,
            "last_hint": self.last_hint,
            "visited": set(self.state.visited),
        }

    def __repr__(self):
        return f"MazeSession(level={self.level}, state={self.state})"
