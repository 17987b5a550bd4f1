import random

import numpy as np
import pytest

from game.game_state import Phase
from game.level_manager import Level
from game.session import MazeSession
from maze import hints
from maze.difficulty import MazeConfig, get_maze_config
from maze.errors import ConfigurationError
from utils.constants import (
    CELL_CODES, CELL_EXIT, CELL_START, CELL_TREASURE_FOUND, CELL_TREASURE_HIDDEN
)


def make_session(seed=7, **kwargs):
    return MazeSession(MazeConfig(seed=seed, **kwargs), random.Random(seed))


def play_route(session, now_ms=0):
    for x, y in session.optimal_route[1:]:
        result = session.move_to(x, y, now_ms)
        assert result
        if result.treasure_offered:
            assert session.confirm_treasure(True, now_ms)
    return session


def test_new_maze_is_furnished():
    session = make_session()
    level = session.new_maze(7, 7)
    grid = session.grid
    assert (grid.width, grid.height) == (7, 7)
    assert grid.cell_type(1, 1) == CELL_START
    assert grid.count(CELL_EXIT) == 1
    assert grid.count(CELL_TREASURE_HIDDEN) == 1
    assert level.is_playable
    assert session.setup_error is None
    assert session.phase == Phase.PLAYING
    assert session.player_pos == (1, 1)


def test_even_size_becomes_odd():
    session = make_session()
    session.new_maze(8, 10)
    assert (session.grid.width, session.grid.height) == (9, 11)


def test_size_below_minimum_raises():
    with pytest.raises(ConfigurationError):
        make_session().new_maze(2, 2)


@pytest.mark.parametrize("width,height", [(3, 3), (5, 3)])
def test_too_small_to_furnish(width, height):
    session = make_session()
    level = session.new_maze(width, height)
    assert not level.is_playable
    assert isinstance(session.setup_error, ConfigurationError)
    assert session.phase == Phase.IDLE
    assert session.optimal_route == []
    assert not session.move("right")


def test_full_playthrough_wins():
    session = make_session()
    session.new_maze(7, 7)
    route = session.optimal_route
    assert len(route) >= 3

    play_route(session, now_ms=100)
    assert session.game_won
    assert session.has_treasure
    assert session.phase == Phase.WON
    assert session.player_pos == route[-1]
    assert session.steps == len(route) - 1
    assert session.waypoints_crossed == len(session.level.furnishing.good_waypoints)
    assert session.message(100) == hints.VICTORY
    assert session.game_status() == hints.STATUS_WON
    assert session.treasure_status() == hints.STATUS_TREASURE_HELD


@pytest.mark.parametrize("preset", ["small", "medium", "large"])
def test_playthrough_on_presets(preset):
    config = get_maze_config(preset, seed=3)
    session = MazeSession(config)
    session.new_maze()
    play_route(session)
    assert session.game_won


def test_reset_replays_the_same_maze():
    session = make_session()
    session.new_maze(11, 11)
    before = session.grid.as_matrix()
    treasure = session.level.treasure_pos

    play_route(session)
    assert session.grid.cell_type(*treasure) == CELL_TREASURE_FOUND

    session.reset()
    assert session.grid.as_matrix() == before
    assert session.steps == 0
    assert not session.game_won
    assert session.message(0) is None

    play_route(session)
    assert session.game_won


def test_declined_treasure_message():
    session = make_session()
    session.new_maze(7, 7)
    treasure = session.level.treasure_pos
    for x, y in session.optimal_route[1:]:
        session.move_to(x, y, 50)
        if (x, y) == treasure:
            break
    assert session.treasure_pending
    session.confirm_treasure(False, 60)
    assert session.message(60) == hints.TREASURE_LEFT
    assert session.treasure_status() == hints.STATUS_TREASURE_HIDDEN
    assert session.game_status() == hints.STATUS_PLAYING


def test_messages_expire():
    session = make_session(message_duration_ms=1000)
    session.new_maze(7, 7)
    play_route(session, now_ms=500)
    assert session.message(1499) == hints.VICTORY
    assert session.message(1500) is None


def test_snapshot():
    session = make_session()
    session.new_maze(9, 9)
    snap = session.snapshot()
    cells = snap["cells"]
    assert isinstance(cells, np.ndarray)
    assert cells.shape == (9, 9)
    assert (cells == CELL_CODES[CELL_EXIT]).sum() == 1
    assert cells[1, 1] == CELL_CODES[CELL_START]
    assert snap["player_pos"] == (1, 1)
    assert snap["phase"] == "PLAYING"
    assert snap["optimal_route"] == session.optimal_route


def test_animated_generation_matches_instant():
    instant = Level(11, 11, rng=random.Random(5))
    instant.generate_maze()

    animated = Level(11, 11, rng=random.Random(5))
    for _ in animated.generate_maze(animated=True):
        pass
    animated.finalize_generation()

    assert animated.grid.as_matrix() == instant.grid.as_matrix()
    assert animated.links == instant.links
    assert animated.generation_complete and not animated.generating

    session = make_session()
    session.start_level(animated)
    play_route(session)
    assert session.game_won


def test_new_bigger_maze_steps_up_from_an_unfurnished_maze():
    session = make_session()
    session.new_maze(3, 3)
    assert session.setup_error is not None

    level = session.new_bigger_maze()
    assert (level.width, level.height) == (11, 11)
    assert level.is_playable
    assert session.setup_error is None
    assert session.phase == Phase.PLAYING


def test_new_bigger_maze_keeps_a_playable_size():
    session = make_session()
    session.new_maze(9, 7)
    level = session.new_bigger_maze()
    assert (level.width, level.height) == (9, 7)
    assert level.is_playable


def test_rejected_move_through_session_is_fresh():
    session = make_session()
    session.new_maze(7, 7)
    first = session.move_to(0, 0)
    first.accepted = True
    assert not session.move_to(0, 0)
