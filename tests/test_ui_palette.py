import numpy as np

from game.ui_manager import CELL_COLORS, cells_to_rgb
from utils.constants import CELL_CODES, CELL_PATH, CELL_TREASURE_HIDDEN, CELL_WALL


def test_frame_is_transposed_for_surfarray():
    cells = np.full((3, 5), CELL_CODES[CELL_WALL], dtype=np.int8)
    cells[1, 4] = CELL_CODES[CELL_PATH]
    frame = cells_to_rgb(cells)
    assert frame.shape == (5, 3, 3)
    assert tuple(frame[4, 1]) == CELL_COLORS[CELL_PATH]
    assert tuple(frame[0, 0]) == CELL_COLORS[CELL_WALL]


def test_hidden_treasure_looks_like_path():
    cells = np.array([[CELL_CODES[CELL_TREASURE_HIDDEN], CELL_CODES[CELL_PATH]]], dtype=np.int8)
    frame = cells_to_rgb(cells)
    assert (frame[0, 0] == frame[1, 0]).all()
