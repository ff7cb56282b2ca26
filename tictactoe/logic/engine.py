"""
Game engine for TicTacToe vs AI.

Owns the one mutable GameState and exposes:
- commands: reset(), make_move(), make_ai_move(), play_turn()
- queries: get_board(), get_current_player(), get_status(), ...

Front-ends (Tkinter window, console) only ever talk to the engine
through these methods.
"""

import logging
import random
import threading
from typing import List, NamedTuple, Optional, Tuple

from ..config import GameConfig
from .ai_player import AIPlayer
from .game_state import Board, GameState, GameStatus, Move, Player
from .move_validator import MoveValidator, to_cell_index
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class Transition(NamedTuple):
    """Everything a single accepted move changes besides the board."""
    status: GameStatus
    winner: Optional[Player]
    winning_line: Optional[Tuple[int, int, int]]
    next_player: Player


class GameEngine:
    """
    Runs one human-vs-AI game at a time.

    The engine is meant to be driven by a single front-end. Every command
    holds an internal lock, and play_turn() keeps it across the human move
    and the AI reply so other threads never see one without the other.
    """

    def __init__(
        self,
        ai_player: Player = Player(GameConfig.AI_MARK),
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the engine and start a fresh game.

        Args:
            ai_player: Which mark the AI plays.
            rng: Random source for the starting player and the AI's
                random moves. Pass a seeded random.Random in tests.
        """
        self._rng = rng if rng is not None else random.Random()
        self._ai_player = ai_player
        self._ai = AIPlayer(ai_player, rng=self._rng)
        self._validator = MoveValidator()
        self._win_checker = WinChecker()
        self._lock = threading.RLock()
        self._state = self._new_state()

    def _new_state(self) -> GameState:
        starting_player = self._rng.choice([Player.X, Player.O])
        return GameState(current_player=starting_player, ai_player=self._ai_player)

    # ==================== COMMANDS ====================

    def reset(self):
        """Throw away the current game and start a new one."""
        with self._lock:
            self._state = self._new_state()
            logger.info(
                "New game: %s starts (AI plays %s)",
                self._state.current_player.value,
                self._ai_player.value
            )

    def _transition(self, board: Board, mover: Player) -> Transition:
        """Work out the game status after `mover` has played on `board`."""
        winner, line = self._win_checker.check_winner(board)
        if winner is not None:
            return Transition(GameStatus.WON, winner, line, mover)

        if self._win_checker.check_draw(board):
            return Transition(GameStatus.DRAWN, None, None, mover)

        return Transition(GameStatus.IN_PROGRESS, None, None, mover.opposite())

    def make_move(self, index: int) -> bool:
        """
        Place the current player's mark at `index`.

        Args:
            index: Cell to play (0-8).

        Returns:
            True if the move was made, False if it was rejected
            (off the board, cell taken, or game over). A rejected
            move changes nothing.
        """
        with self._lock:
            result = self._validator.validate_move(self._state, index)
            if not result.is_valid:
                logger.debug("Rejected move %r: %s", index, result.error_message)
                return False

            state = self._state
            index = to_cell_index(index)
            mover = state.current_player

            state.board[index] = mover
            state.moves.append(Move(player=mover, index=index, move_number=len(state.moves)))

            transition = self._transition(state.board, mover)
            state.status = transition.status
            state.winner = transition.winner
            state.winning_line = transition.winning_line
            state.current_player = transition.next_player

            if transition.status == GameStatus.WON:
                logger.info("%s wins on line %s", mover.value, transition.winning_line)
            elif transition.status == GameStatus.DRAWN:
                logger.info("Game drawn")

            return True

    def make_ai_move(self) -> bool:
        """
        Let the AI play if it is its turn.

        Returns:
            True if the AI made a move, False otherwise.
        """
        with self._lock:
            if not self.is_ai_turn():
                return False

            move = self._ai.select_move(self._state.board)
            if move is None:
                logger.warning("AI found no move on a game still in progress")
                return False

            return self.make_move(move)

    def play_turn(self, index: int) -> bool:
        """
        Play a human move and, if accepted, the AI's reply, atomically.

        Args:
            index: Cell the human plays (0-8).

        Returns:
            True if the human move was accepted.
        """
        with self._lock:
            if not self.make_move(index):
                return False

            self.make_ai_move()
            return True

    # ==================== QUERIES ====================

    def get_board(self) -> Board:
        """Copy of the 9-cell board."""
        with self._lock:
            return list(self._state.board)

    def get_current_player(self) -> Player:
        with self._lock:
            return self._state.current_player

    def get_status(self) -> GameStatus:
        with self._lock:
            return self._state.status

    def get_winner(self) -> Optional[Player]:
        with self._lock:
            return self._state.winner

    def get_winning_line(self) -> Tuple[int, ...]:
        """The 3 winning indices, or an empty tuple if nobody has won."""
        with self._lock:
            line = self._state.winning_line
        return tuple(line) if line is not None else ()

    def get_ai_player(self) -> Player:
        return self._ai_player

    def is_ai_turn(self) -> bool:
        """True while the game is running and the AI is to move."""
        with self._lock:
            state = self._state
            return state.status == GameStatus.IN_PROGRESS and state.current_player == self._ai_player

    def get_moves(self) -> List[Move]:
        """Copy of the move history."""
        with self._lock:
            return list(self._state.moves)

    def get_empty_cells(self) -> List[int]:
        with self._lock:
            return self._state.get_empty_cells()

    def get_state(self) -> GameState:
        """Deep copy of the whole game state."""
        with self._lock:
            return self._state.copy()
