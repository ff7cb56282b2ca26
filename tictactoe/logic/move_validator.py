"""
Move validator for TicTacToe vs AI.
Validates that moves follow the rules.
"""

import operator
from typing import Optional
from dataclasses import dataclass

from ..config import GameConfig
from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def to_cell_index(index) -> Optional[int]:
    """
    Convert an integer-like value (int, numpy integer, ...) to a plain int.

    Returns None for anything that is not an integer, bool included.
    """
    if isinstance(index, bool):
        return None
    try:
        return operator.index(index)
    except TypeError:
        return None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be a cell on the board (0-8)
    2. Game must not be over
    3. Can only place on empty cells
    """

    def validate_move(self, game_state: GameState, index) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if index is on the board
        cell = to_cell_index(index)
        if cell is None or not 0 <= cell < GameConfig.NUM_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be 0-{GameConfig.NUM_CELLS - 1}."
            )

        # Check if game is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        occupant = game_state.board[cell]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {cell} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

