"""
AI player for TicTacToe vs AI.
Picks moves with a simple human-like heuristic.
"""

import logging
import random
from typing import Optional

from .game_state import Board, Player, get_empty_cells
from .win_checker import WinChecker

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe like a casual human.

    Rules, in order:
    1. Win now if a single move completes a line
    2. Otherwise block the opponent's winning move
    3. Otherwise play a random empty cell

    It only looks one move ahead, so it can be beaten with a fork.
    """

    def __init__(self, player: Player = Player.O, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which mark the AI plays (default: O)
            rng: Random source for the fallback move. Pass a seeded
                random.Random to make games reproducible.
        """
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.win_checker = WinChecker()

    def find_winning_move(self, board: Board, player: Player) -> Optional[int]:
        """
        Find a cell that wins the game for `player` right away.

        Args:
            board: The 9-cell board.
            player: Whose win to look for.

        Returns:
            Lowest winning index, or None if there is none.
        """
        for index in get_empty_cells(board):
            # Try the move on a copy
            test_board = list(board)
            test_board[index] = player

            winner, _ = self.win_checker.check_winner(test_board)
            if winner == player:
                return index

        return None

    def select_move(self, board: Board) -> Optional[int]:
        """
        Choose the AI's next move.

        Args:
            board: The 9-cell board.

        Returns:
            Index of the chosen cell, or None if the board is full.
        """
        empty_cells = get_empty_cells(board)

        if not empty_cells:
            return None

        # 1. Take the win
        winning_move = self.find_winning_move(board, self.player)
        if winning_move is not None:
            logger.debug("AI %s takes the win at %d", self.player.value, winning_move)
            return winning_move

        # 2. Block the opponent
        blocking_move = self.find_winning_move(board, self.player.opposite())
        if blocking_move is not None:
            logger.debug("AI %s blocks at %d", self.player.value, blocking_move)
            return blocking_move

        # 3. Anything goes
        move = self.rng.choice(empty_cells)
        logger.debug("AI %s plays randomly at %d", self.player.value, move)
        return move
