"""
Game State Machine - player progress through a furnished maze
"""

import logging
from enum import Enum, auto

from utils.constants import (
    CELL_WALL, CELL_WAYPOINT, CELL_TREASURE_HIDDEN, CELL_TREASURE_FOUND, CELL_EXIT,
    DIRECTION_NAMES, START_POS
)
from utils.helpers import is_adjacent

logger = logging.getLogger(__name__)


class Phase(Enum):
    """Game phases"""
    IDLE = auto()               # no maze yet
    PLAYING = auto()
    TREASURE_OFFERED = auto()   # waiting for confirm_treasure()
    TREASURE_HELD = auto()
    WON = auto()


class MoveResult:
    """Outcome of one move request"""
    def __init__(self, accepted=False, position=None, hint=None, treasure_offered=False, won=False):
        self.accepted = accepted
        self.position = position
        self.hint = hint
        self.treasure_offered = treasure_offered
        self.won = won

    def __bool__(self):
        return self.accepted

    def __repr__(self):
        return (f"MoveResult(accepted={self.accepted}, position={self.position}, "
                f"hint={self.hint!r}, treasure_offered={self.treasure_offered}, won={self.won})")


class GameState:
    """
    Tracks the player inside one maze

    Moves are only accepted onto a 4-adjacent, in-bounds, non-wall cell.
    Anything else is silently ignored, never raised.
    """
    def __init__(self, reoffer_declined_treasure=False):
        self.reoffer_declined_treasure = reoffer_declined_treasure

        self.grid = None
        self.waypoints = []
        self.start = START_POS

        self.phase = Phase.IDLE
        self._reset_progress()

    def _reset_progress(self):
        self.player_pos = self.start
        self.steps = 0
        self.waypoints_crossed = 0
        self.has_treasure = False
        self.game_won = False
        self.visited = set()
        self.last_hint = None

    # ---- Lifecycle ----
    def attach(self, grid, waypoints, start=START_POS):
        """
        Start playing a maze

        Args:
            grid: Furnished MazeGrid
            waypoints: Waypoint records placed on the grid
            start: Player spawn position
        """
        self.grid = grid
        self.waypoints = waypoints
        self.start = tuple(start)
        self.reset()

    def detach(self):
        """Forget the current maze and go back to idle"""
        self.grid = None
        self.waypoints = []
        self.start = START_POS
        self.reset()

    def reset(self):
        """Back to the spawn with zeroed counters; the maze itself is kept"""
        self._reset_progress()
        self.transition_to(Phase.PLAYING if self.grid is not None else Phase.IDLE)

    def transition_to(self, new_phase):
        """Move to a new phase"""
        if new_phase != self.phase:
            logger.debug("phase %s -> %s", self.phase.name, new_phase.name)
        self.phase = new_phase

    # ---- Moves ----
    def can_move(self):
        """Check if move requests are processed right now"""
        return self.phase in (Phase.PLAYING, Phase.TREASURE_HELD)

    def attempt_move(self, x, y):
        """
        Try to move the player onto (x, y)

        Returns:
            MoveResult; falsy when the move was ignored
        """
        if not self.can_move():
            logger.debug("move to (%d, %d) ignored in phase %s", x, y, self.phase.name)
            return MoveResult()
        if not self.grid.in_bounds(x, y) or not is_adjacent(self.player_pos, (x, y)):
            return MoveResult()

        cell_type = self.grid.cell_type(x, y)
        if cell_type == CELL_WALL:
            return MoveResult()

        self.player_pos = (x, y)
        self.steps += 1
        self.visited.add((x, y))
        self.last_hint = None
        result = MoveResult(accepted=True, position=(x, y))

        if cell_type == CELL_WAYPOINT:
            result.hint = self._trigger_waypoint(x, y)

        if cell_type == CELL_TREASURE_HIDDEN and not self.has_treasure:
            self.grid.set_type(x, y, CELL_TREASURE_FOUND)
            self._offer_treasure(result)
        elif cell_type == CELL_TREASURE_FOUND and not self.has_treasure and self.reoffer_declined_treasure:
            self._offer_treasure(result)
        elif cell_type == CELL_EXIT and self.has_treasure:
            self.game_won = True
            self.transition_to(Phase.WON)
            result.won = True

        return result

    def step(self, dx, dy):
        """Move by a directional delta"""
        x, y = self.player_pos
        return self.attempt_move(x + dx, y + dy)

    def move(self, direction):
        """Move by direction name ('up', 'right', 'down', 'left')"""
        delta = DIRECTION_NAMES.get(direction)
        if delta is None:
            return MoveResult()
        return self.step(*delta)

    def _trigger_waypoint(self, x, y):
        for waypoint in self.waypoints:
            if waypoint.pos == (x, y) and not waypoint.used:
                self.last_hint = waypoint.trigger()
                self.waypoints_crossed += 1
                return self.last_hint
        return None

    def _offer_treasure(self, result):
        result.treasure_offered = True
        self.transition_to(Phase.TREASURE_OFFERED)

    # ---- Treasure ----
    def confirm_treasure(self, accept):
        """
        Answer a pending treasure offer

        Args:
            accept: True to pick the treasure up, False to leave it

        Returns:
            True if an offer was pending and has been resolved
        """
        if self.phase != Phase.TREASURE_OFFERED:
            return False
        if accept:
            self.has_treasure = True
            self.transition_to(Phase.TREASURE_HELD)
        else:
            logger.info("treasure at %s declined", self.player_pos)
            self.transition_to(Phase.PLAYING)
        return True

    @property
    def treasure_pending(self):
        return self.phase == Phase.TREASURE_OFFERED

    def __repr__(self):
        return (f"GameState(phase={self.phase.name}, pos={self.player_pos}, "
                f"steps={self.steps}, waypoints={self.waypoints_crossed})")
