import pytest

from tictactoe import Cell, GameAlreadyComplete, GameSession, InvalidMove, Mark

DIAGONAL_SETUP = [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2), (2, 1), (2, 0)]
DRAW_GAME = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def _all_outcomes(moves, engine_side):
    """Outcomes reachable when the engine plays `engine_side` against every opponent line."""
    session = GameSession.from_moves(moves)
    if session.is_completed():
        return {session.winner()}
    if session.current_player == engine_side:
        return _all_outcomes(moves + [session.best_move()], engine_side)
    outcomes = set()
    for move in session.available_moves():
        outcomes |= _all_outcomes(moves + [move], engine_side)
    return outcomes


def test_new_session():
    session = GameSession()
    assert session.current_player == Mark.X
    assert not session.is_completed()
    assert session.winner() is None
    assert len(session.available_moves()) == 9


def test_perform_move_alternates_players():
    session = GameSession()
    session.perform_move(Cell(1, 1))
    assert session.board.get(Cell(1, 1)) == Mark.X
    assert session.current_player == Mark.O
    session.perform_move(Cell(0, 0))
    assert session.board.get(Cell(0, 0)) == Mark.O
    assert session.current_player == Mark.X
    assert session.moves == [Cell(1, 1), Cell(0, 0)]


def test_is_valid_move_bounds_and_occupancy():
    session = GameSession.from_moves([(1, 1)])
    assert session.is_valid_move(Cell(0, 0))
    assert not session.is_valid_move(Cell(1, 1))
    assert not session.is_valid_move(Cell(3, 0))
    assert not session.is_valid_move(Cell(0, 3))
    assert not session.is_valid_move(Cell(-1, 0))
    assert not session.is_valid_move(Cell(0, -1))


def test_occupied_cell_raises_and_leaves_board_unchanged():
    session = GameSession.from_moves([(1, 1), (0, 0)])
    before = session.board.key()
    with pytest.raises(InvalidMove) as excinfo:
        session.perform_move(Cell(1, 1))
    assert excinfo.value.cell == Cell(1, 1)
    assert session.board.key() == before
    assert session.current_player == Mark.X
    assert len(session.moves) == 2


def test_out_of_bounds_raises():
    session = GameSession()
    with pytest.raises(InvalidMove):
        session.perform_move(Cell(3, 3))
    with pytest.raises(ValueError):
        session.perform_move(Cell(-1, 2))


def test_diagonal_win_scenario():
    session = GameSession.from_moves(DIAGONAL_SETUP)
    assert session.board.key() == "XOXOXOOX."
    assert session.current_player == Mark.X
    assert not session.is_completed()

    session.perform_move(Cell(2, 2))
    assert session.winner() == Mark.X
    assert session.is_completed()


def test_best_move_on_empty_board():
    session = GameSession()
    assert session.best_move() == Cell(0, 0)
    assert session.board.key() == "." * 9


def test_o_completes_two_in_a_row():
    session = GameSession.from_moves([(0, 0), (1, 0), (0, 1), (1, 1), (2, 0)])
    assert session.current_player == Mark.O
    move = session.best_move()
    assert move == Cell(1, 2)
    session.perform_move(move)
    assert session.winner() == Mark.O


def test_best_move_on_full_board_raises():
    session = GameSession.from_moves(DRAW_GAME)
    assert session.is_completed()
    assert session.winner() is None
    with pytest.raises(GameAlreadyComplete):
        session.best_move()


def test_best_move_does_not_mutate_board():
    session = GameSession.from_moves([(0, 0), (1, 1)])
    before = session.board.key()
    session.best_move()
    assert session.board.key() == before
    assert session.current_player == Mark.X


def test_cache_persists_across_calls():
    session = GameSession.from_moves([(0, 0)])
    session.best_move()
    size = session.engine.cache_size()
    assert size > 0
    session.perform_move(session.best_move())
    session.best_move()
    assert session.engine.cache_size() == size


def test_self_play_is_a_draw():
    session = GameSession()
    while not session.is_completed():
        session.perform_move(session.best_move())
    assert session.winner() is None
    assert session.board.is_full()


def test_identical_sequences_identical_scores():
    a = GameSession()
    b = GameSession()
    while not a.is_completed():
        assert a.scored_moves() == b.scored_moves()
        move = a.best_move()
        a.perform_move(move)
        b.perform_move(move)


def test_cache_clearing_does_not_change_moves():
    kept = GameSession.from_moves([(0, 1)])
    cleared = GameSession.from_moves([(0, 1)])
    while not kept.is_completed():
        cleared.clear_cache()
        move = kept.best_move()
        assert cleared.best_move() == move
        kept.perform_move(move)
        cleared.perform_move(move)
    assert kept.board == cleared.board


def test_engine_as_x_never_loses():
    assert Mark.O not in _all_outcomes([], Mark.X)


def test_engine_as_o_never_loses():
    outcomes = set()
    for first in GameSession().available_moves():
        outcomes |= _all_outcomes([first], Mark.O)
    assert Mark.X not in outcomes


def test_from_board_infers_side_to_move():
    played = GameSession.from_moves([(0, 0), (1, 1), (2, 2)])
    session = GameSession.from_board(played.board)
    assert session.current_player == Mark.O
    assert session.board == played.board
    assert session.board is not played.board
    assert session.best_move() == played.best_move()
