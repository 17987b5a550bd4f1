from utils.helpers import format_position, is_adjacent, make_odd, manhattan_distance


def test_make_odd():
    assert make_odd(4) == 5
    assert make_odd(7) == 7


def test_adjacency_is_orthogonal_only():
    assert is_adjacent((1, 1), (1, 2))
    assert is_adjacent((2, 1), (1, 1))
    assert not is_adjacent((1, 1), (2, 2))
    assert not is_adjacent((1, 1), (1, 1))
    assert manhattan_distance(1, 1, 4, 3) == 5


def test_format_position():
    assert format_position((3, 7)) == "(3, 7)"
    assert format_position(None) == "-"
