from game.messages import MessageBoard


def test_message_shows_until_it_expires():
    board = MessageBoard(4000)
    assert board.current(0) is None
    board.post("hello", 1000)
    assert board.current(1000) == "hello"
    assert board.current(4999) == "hello"
    assert board.current(5000) is None


def test_new_message_replaces_old():
    board = MessageBoard(4000)
    board.post("first", 0)
    board.post("second", 100, duration_ms=50)
    assert board.current(120) == "second"
    assert board.current(150) is None


def test_clear():
    board = MessageBoard()
    board.post("x", 0)
    board.clear()
    assert board.current(0) is None
