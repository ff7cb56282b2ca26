"""
Tests for the GameEngine state machine.
"""

import random
import threading

import pytest

from conftest import ScriptedRandom
from tictactoe.logic.engine import GameEngine
from tictactoe.logic.game_state import GameStatus, Player, WINNING_LINES

# Human X and AI O alternate to fill X O X / X O O / O X X - no line
DRAW_SEQUENCE = [0, 1, 2, 4, 3, 5, 7, 6, 8]


def assert_invariants(engine: GameEngine):
    status = engine.get_status()
    winner = engine.get_winner()
    line = engine.get_winning_line()
    board = engine.get_board()

    if status == GameStatus.WON:
        assert winner is not None
        assert line in WINNING_LINES
        assert all(board[i] == winner for i in line)
    elif status == GameStatus.DRAWN:
        assert winner is None
        assert line == ()
        assert all(cell is not None for cell in board)
    else:
        assert winner is None
        assert line == ()


# ==================== CONSTRUCTION / RESET ====================

def test_new_engine_starts_clean(engine):
    assert engine.get_board() == [None] * 9
    assert engine.get_status() == GameStatus.IN_PROGRESS
    assert engine.get_winner() is None
    assert engine.get_winning_line() == ()
    assert engine.get_ai_player() == Player.O
    assert engine.get_current_player() == Player.X
    assert engine.get_moves() == []


def test_starting_player_comes_from_rng():
    assert GameEngine(rng=ScriptedRandom([0])).get_current_player() == Player.X
    assert GameEngine(rng=ScriptedRandom([1])).get_current_player() == Player.O


def test_default_ai_mark_is_o():
    assert GameEngine().get_ai_player() == Player.O


def test_reset_mid_game_clears_everything(scripted_random):
    engine = GameEngine(rng=scripted_random([0, 1]))
    assert engine.make_move(4)
    assert engine.make_move(0)

    engine.reset()

    assert engine.get_board() == [None] * 9
    assert engine.get_status() == GameStatus.IN_PROGRESS
    assert engine.get_winner() is None
    assert engine.get_winning_line() == ()
    assert engine.get_moves() == []
    # Second draw from the script picks O
    assert engine.get_current_player() == Player.O


def test_reset_redraws_starting_player():
    engine = GameEngine(rng=random.Random(7))
    starters = set()
    for _ in range(50):
        engine.reset()
        starters.add(engine.get_current_player())
    assert starters == {Player.X, Player.O}


def test_reset_after_game_over(engine):
    for index in DRAW_SEQUENCE:
        assert engine.make_move(index)
    assert engine.get_status() == GameStatus.DRAWN

    engine.reset()

    assert engine.get_status() == GameStatus.IN_PROGRESS
    assert engine.make_move(0)


# ==================== MAKE MOVE ====================

def test_accepted_move_places_mark_and_switches_player(engine):
    assert engine.make_move(4)
    assert engine.get_board()[4] == Player.X
    assert engine.get_current_player() == Player.O
    assert engine.get_moves()[0].index == 4
    assert_invariants(engine)


@pytest.mark.parametrize("index", [-1, 9, 9999])
def test_off_board_move_is_a_no_op(engine, index):
    before = engine.get_state()
    assert not engine.make_move(index)
    assert engine.get_state() == before


def test_occupied_cell_is_a_no_op(engine):
    assert engine.make_move(0)
    before = engine.get_state()

    assert not engine.make_move(0)

    assert engine.get_state() == before
    assert engine.get_current_player() == Player.O


def test_players_alternate(engine):
    expected = Player.X
    for index in [0, 4, 8, 1]:
        assert engine.get_current_player() == expected
        assert engine.make_move(index)
        expected = expected.opposite()
        assert_invariants(engine)
    assert engine.get_current_player() == expected


def test_win_stops_the_game(engine):
    # X: 0, 1, 2 / O: 3, 4
    for index in [0, 3, 1, 4, 2]:
        assert engine.make_move(index)

    assert engine.get_status() == GameStatus.WON
    assert engine.get_winner() == Player.X
    assert engine.get_winning_line() == (0, 1, 2)
    # The winning move does not hand the turn over
    assert engine.get_current_player() == Player.X
    assert not engine.is_ai_turn()
    assert_invariants(engine)


def test_board_frozen_after_win(engine):
    for index in [0, 3, 1, 4, 2]:
        engine.make_move(index)
    before = engine.get_state()

    for index in [5, 6, 7, 8, 0, -1, 9]:
        assert not engine.make_move(index)

    assert engine.get_state() == before


def test_full_board_without_line_is_a_draw(engine):
    for index in DRAW_SEQUENCE[:-1]:
        assert engine.make_move(index)
        assert engine.get_status() == GameStatus.IN_PROGRESS

    assert engine.make_move(DRAW_SEQUENCE[-1])

    assert engine.get_status() == GameStatus.DRAWN
    assert engine.get_winner() is None
    assert engine.get_winning_line() == ()
    # X made the last move and stays current
    assert engine.get_current_player() == Player.X
    assert_invariants(engine)
    assert not engine.make_move(0)


def test_win_on_last_cell_is_a_win_not_a_draw(engine):
    # X O X / O X O / O X X  - X completes 0-4-8 on the 9th move
    for index in [0, 1, 2, 3, 4, 5, 7, 6, 8]:
        assert engine.make_move(index)

    assert engine.get_status() == GameStatus.WON
    assert engine.get_winner() == Player.X
    assert engine.get_winning_line() == (0, 4, 8)


# ==================== AI MOVES ====================

def test_ai_move_refused_on_human_turn(engine):
    assert not engine.is_ai_turn()
    assert not engine.make_ai_move()
    assert engine.get_board() == [None] * 9


def test_ai_turn_right_after_reset_when_ai_starts(ai_first_engine):
    assert ai_first_engine.is_ai_turn()
    assert ai_first_engine.make_ai_move()
    assert not ai_first_engine.is_ai_turn()
    assert ai_first_engine.get_current_player() == Player.X
    assert sum(cell is not None for cell in ai_first_engine.get_board()) == 1


def test_ai_blocks_human_threat(engine):
    # X at 0 and 1, O somewhere harmless
    assert engine.make_move(0)
    assert engine.make_move(8)
    assert engine.make_move(1)

    assert engine.is_ai_turn()
    assert engine.make_ai_move()

    assert engine.get_board()[2] == Player.O


def test_ai_takes_win(engine):
    # O at 3 and 4, X scattered
    for index in [0, 3, 8, 4, 2]:
        assert engine.make_move(index)
    # X threatens 1 (row 0) and 5 (col 2); O can win at 5
    assert engine.make_ai_move()

    assert engine.get_status() == GameStatus.WON
    assert engine.get_winner() == Player.O
    assert engine.get_winning_line() == (3, 4, 5)


def test_ai_move_refused_after_game_over(engine):
    for index in DRAW_SEQUENCE:
        engine.make_move(index)
    assert not engine.make_ai_move()


def test_ai_plays_whole_game_against_itself():
    engine = GameEngine(ai_player=Player.O, rng=random.Random(3))
    human = random.Random(5)
    while engine.get_status() == GameStatus.IN_PROGRESS:
        if engine.is_ai_turn():
            assert engine.make_ai_move()
        else:
            assert engine.make_move(human.choice(engine.get_empty_cells()))
        assert_invariants(engine)
    assert len(engine.get_moves()) <= 9


# ==================== PLAY TURN ====================

def test_play_turn_applies_human_and_ai_moves(engine):
    assert engine.play_turn(4)

    board = engine.get_board()
    assert board[4] == Player.X
    assert board.count(Player.O) == 1
    assert engine.get_current_player() == Player.X


def test_play_turn_rejected_move_changes_nothing(engine):
    assert engine.play_turn(4)
    before = engine.get_state()
    assert not engine.play_turn(4)
    assert engine.get_state() == before


def test_play_turn_from_many_threads_keeps_state_consistent():
    engine = GameEngine(ai_player=Player.O, rng=ScriptedRandom())
    barrier = threading.Barrier(9)

    def worker(index):
        barrier.wait()
        engine.play_turn(index)

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(9)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert_invariants(engine)
    board = engine.get_board()
    # Human and AI always moved in pairs, except a game-ending human move
    x_count, o_count = board.count(Player.X), board.count(Player.O)
    assert x_count - o_count in (0, 1)


# ==================== QUERIES ====================

def test_queries_return_copies(engine):
    for index in [0, 3, 1, 4, 2]:
        engine.make_move(index)

    board = engine.get_board()
    board[8] = Player.O
    board.clear()
    moves = engine.get_moves()
    moves.clear()
    state = engine.get_state()
    state.board[8] = Player.O

    assert engine.get_board()[8] is None
    assert len(engine.get_moves()) == 5
    assert isinstance(engine.get_winning_line(), tuple)


def test_get_empty_cells(engine):
    engine.make_move(0)
    engine.make_move(4)
    assert engine.get_empty_cells() == [1, 2, 3, 5, 6, 7, 8]


def test_readers_never_see_half_a_turn(engine):
    # While the AI is choosing its reply, a second thread asks whose turn it is
    seen = {}
    reader_started = threading.Event()
    select_move = engine._ai.select_move

    def read_state():
        reader_started.set()
        seen["player"] = engine.get_current_player()
        seen["ai_turn"] = engine.is_ai_turn()
        seen["status"] = engine.get_status()
        seen["winner"] = engine.get_winner()
        seen["line"] = engine.get_winning_line()

    reader = threading.Thread(target=read_state)

    def slow_select_move(board):
        reader.start()
        reader_started.wait()
        # The reader must stay blocked until the reply has landed
        reader.join(timeout=0.2)
        assert reader.is_alive()
        return select_move(board)

    engine._ai.select_move = slow_select_move
    assert engine.play_turn(4)
    reader.join()

    assert seen["player"] == Player.X
    assert seen["ai_turn"] is False
    assert seen["status"] == GameStatus.IN_PROGRESS
    assert seen["winner"] is None
    assert seen["line"] == ()


def test_make_move_accepts_numpy_integers(engine):
    np = pytest.importorskip("numpy")

    assert engine.make_move(np.int64(4))

    assert engine.get_board()[4] == Player.X
    assert type(engine.get_moves()[0].index) is int
    assert not engine.make_move(np.int64(4))
