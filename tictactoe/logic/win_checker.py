"""
Win checker for TicTacToe vs AI.
Checks if a player has won or if the game is a draw.
"""

from typing import Optional, Tuple
from .game_state import Board, Player, WINNING_LINES


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)

    Works on a bare board so it can be used on hypothetical
    positions as well as the live game.
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(
        self,
        board: Board
    ) -> Tuple[Optional[Player], Optional[Tuple[int, int, int]]]:
        """
        Check if there's a winner.

        If several lines are complete (only possible on a board that
        could not come from legal play) the first one in WINNING_LINES
        wins.

        Args:
            board: The 9-cell board.

        Returns:
            (winner, winning_line), or (None, None) if no winner yet.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return winner, line

        return None, None

    def _check_line(
        self,
        board: Board,
        line: Tuple[int, int, int]
    ) -> Optional[Player]:
        """Return the mark filling the whole line, or None."""
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return board[a]
        return None

    def is_full(self, board: Board) -> bool:
        """True when no cell is empty."""
        return all(cell is not None for cell in board)

    def check_draw(self, board: Board) -> bool:
        """
        Check if the game is a draw.

        A draw occurs when all cells are filled AND there is no winner.
        """
        winner, _ = self.check_winner(board)
        if winner is not None:
            return False

        return self.is_full(board)
